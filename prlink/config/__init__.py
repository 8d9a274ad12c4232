from prlink.config.settings import (
    GitHubSettings,
    LinkSettings,
    LoggingSettings,
    Settings,
    load_settings,
)

__all__ = [
    'Settings',
    'GitHubSettings',
    'LinkSettings',
    'LoggingSettings',
    'load_settings',
]
