from prlink.infra.logging.console import ConsoleLogger
from prlink.infra.logging.github_actions import GitHubActionsLogger
from prlink.infra.logging.logfire import LogfireLogger, configure_logfire

__all__ = [
    "ConsoleLogger",
    "GitHubActionsLogger",
    "LogfireLogger",
    "configure_logfire",
]
