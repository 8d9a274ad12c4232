from prlink.core.exceptions.errors import (
    ConfigurationError,
    PatternError,
    PRLinkError,
    TicketNotFoundError,
    UpdateRejectedError,
)

__all__ = [
    "PRLinkError",
    "ConfigurationError",
    "PatternError",
    "TicketNotFoundError",
    "UpdateRejectedError",
]
