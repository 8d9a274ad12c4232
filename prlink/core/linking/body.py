import re
from typing import Optional

from prlink.core.schema.pr import TicketMatch

DEFAULT_BASE_URL = "https://app.forecast.it/project"
DEFAULT_LINK_LABEL = "Forecast ticket"
BLOCK_SEPARATOR = "\n\n"


def normalize_project_id(project_id: str, prefix: str = "") -> str:
    if prefix and not project_id.startswith(prefix):
        return f"{prefix}{project_id}"
    return project_id


def build_ticket_url(base_url: str, project_id: str, token: str) -> str:
    return f"{base_url.rstrip('/')}/{project_id}/ticket/{token}"


def build_link_block(link_label: str, url: str) -> str:
    return f"**[{link_label}]({url})**"


class BodyMerger:
    """Places a single ticket link block in the pull request description.

    With a placeholder configured and present, its first occurrence becomes
    the block. Otherwise a block at the very start of the body (plus one
    blank line) is replaced, or a new block is prepended. When a placeholder
    is configured but already consumed, the block it left behind is updated
    in place wherever it sits, mid-line included, so repeated runs settle on
    the same text.
    """

    def __init__(
        self,
        project_id: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        link_label: str = DEFAULT_LINK_LABEL,
        placeholder: Optional[str] = None,
        project_id_prefix: str = "",
    ) -> None:
        self._project_id = normalize_project_id(project_id, project_id_prefix)
        self._base_url = base_url
        self._link_label = link_label
        self._placeholder = placeholder or None
        label = re.escape(link_label)
        self._leading_block = re.compile(
            rf"\A\*\*\[{label}\][^\r\n]*(?:\r?\n|\Z)(?:\r?\n)?"
        )
        self._inline_block = re.compile(rf"\*\*\[{label}\]\([^\s)]*\)\*\*")

    @property
    def project_id(self) -> str:
        return self._project_id

    def link_block(self, token: str) -> str:
        url = build_ticket_url(self._base_url, self._project_id, token)
        return build_link_block(self._link_label, url)

    def merge(self, current_body: str, match: TicketMatch) -> Optional[str]:
        body = current_body or ""
        block = self.link_block(match.token)
        if self._placeholder is not None and self._placeholder in body:
            new_body = body.replace(self._placeholder, block, 1)
        elif self._placeholder is not None:
            new_body = self._replace_inline(body, block)
        else:
            new_body = self._replace_leading(body, block)
        # Compare text, not whether a block was found: replacing a block with
        # itself is not a change.
        if new_body == body:
            return None
        return new_body

    def _replace_leading(self, body: str, block: str) -> str:
        existing = self._leading_block.match(body)
        if existing is None:
            return f"{block}{BLOCK_SEPARATOR}{body}"
        return f"{block}{BLOCK_SEPARATOR}{body[existing.end():]}"

    def _replace_inline(self, body: str, block: str) -> str:
        existing = self._inline_block.search(body)
        if existing is None:
            return self._replace_leading(body, block)
        return f"{body[:existing.start()]}{block}{body[existing.end():]}"
