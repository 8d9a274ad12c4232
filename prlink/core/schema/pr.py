from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


@dataclass(frozen=True, slots=True)
class PullRequestSnapshot:
    number: int
    branch_name: str
    title: str
    body: str
    owner: str
    repo: str


class TicketSource(Enum):
    BRANCH = "branch"
    TITLE = "title"


@dataclass(frozen=True, slots=True)
class TicketMatch:
    token: str
    source: TicketSource


@dataclass(frozen=True, slots=True)
class UpdateRequest:
    owner: str
    repo: str
    number: int
    title: Optional[str] = None
    body: Optional[str] = None

    @property
    def has_changes(self) -> bool:
        return self.title is not None or self.body is not None

    def changes(self) -> Dict[str, Any]:
        fields: Dict[str, Any] = {}
        if self.title is not None:
            fields["title"] = self.title
        if self.body is not None:
            fields["body"] = self.body
        return fields
