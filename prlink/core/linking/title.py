from typing import Optional

from prlink.core.linking.pattern import RegexPattern
from prlink.core.schema.pr import TicketMatch

TICKET_PLACEHOLDER = "<Number>"
DEFAULT_PREFIX_FORMAT = f"{TICKET_PLACEHOLDER} - "


class TitleComposer:
    def __init__(
        self,
        ticket_pattern: RegexPattern,
        cleanup_pattern: Optional[RegexPattern] = None,
        prefix_format: str = DEFAULT_PREFIX_FORMAT,
    ) -> None:
        self._ticket_pattern = ticket_pattern
        self._cleanup_pattern = cleanup_pattern
        self._prefix_format = prefix_format

    def compose(self, current_title: str, match: TicketMatch) -> Optional[str]:
        """Return the prefixed title, or None when the title should stay as is."""
        current_title = current_title or ""
        prefix = self.render_prefix(match.token)
        # The rendered prefix is checked on the raw title too: a cleanup
        # pattern may strip it, and the title must still settle.
        if current_title.startswith(prefix):
            return None
        title = self.clean(current_title)
        # Clean first, then check: a title that already carries a ticket is
        # never rewritten, even when cleanup would have changed it.
        if self._ticket_pattern.test(title):
            return None
        if title.startswith(prefix):
            return None
        new_title = f"{prefix}{title}"
        if new_title == current_title:
            return None
        return new_title

    def clean(self, title: str) -> str:
        if self._cleanup_pattern is None:
            return title
        return self._cleanup_pattern.remove(title)

    def render_prefix(self, token: str) -> str:
        return self._prefix_format.replace(TICKET_PLACEHOLDER, token)
