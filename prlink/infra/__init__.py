from prlink.infra.github import (
    GitHubClient,
    GitHubPRUpdater,
    load_pull_request_event,
)
from prlink.infra.logging import (
    ConsoleLogger,
    GitHubActionsLogger,
    LogfireLogger,
    configure_logfire,
)

__all__ = [
    'GitHubClient',
    'GitHubPRUpdater',
    'load_pull_request_event',
    'ConsoleLogger',
    'GitHubActionsLogger',
    'LogfireLogger',
    'configure_logfire',
]
