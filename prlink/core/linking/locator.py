from typing import Optional

from prlink.core.linking.pattern import RegexPattern
from prlink.core.schema.pr import TicketMatch, TicketSource


class TicketLocator:
    """Finds the ticket token in the branch name, falling back to the title.

    The branch always wins when both match; there is no scoring between the
    two sources. A branch match that is empty still ends the search, and the
    run is treated as having no ticket.
    """

    def __init__(
        self,
        ticket_pattern: RegexPattern,
        exception_pattern: Optional[RegexPattern] = None,
    ) -> None:
        self._ticket_pattern = ticket_pattern
        self._exception_pattern = exception_pattern

    def locate(self, branch_name: str, title: str) -> Optional[TicketMatch]:
        candidates = (
            (TicketSource.BRANCH, branch_name),
            (TicketSource.TITLE, title),
        )
        for source, text in candidates:
            token = self._ticket_pattern.first_match(text or "")
            if token is None:
                continue
            if not token:
                return None
            return TicketMatch(token=token, source=source)
        return None

    def is_exempt(self, branch_name: str) -> bool:
        if self._exception_pattern is None:
            return False
        return self._exception_pattern.test(branch_name or "")
