from dataclasses import dataclass
from enum import Enum
from typing import Optional

from prlink.core.schema.pr import UpdateRequest


class RunStatus(Enum):
    SKIPPED = "skipped"
    EXEMPT = "exempt"
    INVALID_CONFIG = "invalid_config"
    NO_OP = "no_op"
    UPDATED = "updated"
    UPDATE_REJECTED = "update_rejected"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class RunOutcome:
    status: RunStatus
    message: Optional[str] = None
    request: Optional[UpdateRequest] = None

    @property
    def failed(self) -> bool:
        return self.status is RunStatus.FAILED
