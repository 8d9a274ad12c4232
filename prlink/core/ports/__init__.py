from prlink.core.ports.logger import Logger
from prlink.core.ports.pr_updater import PRUpdater

__all__ = [
    "Logger",
    "PRUpdater",
]
