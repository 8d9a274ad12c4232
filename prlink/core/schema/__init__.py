from prlink.core.schema.outcome import RunOutcome, RunStatus
from prlink.core.schema.pr import (
    PullRequestSnapshot,
    TicketMatch,
    TicketSource,
    UpdateRequest,
)

__all__ = [
    "PullRequestSnapshot",
    "TicketMatch",
    "TicketSource",
    "UpdateRequest",
    "RunOutcome",
    "RunStatus",
]
