from prlink.core.linking.body import (
    DEFAULT_BASE_URL,
    DEFAULT_LINK_LABEL,
    BodyMerger,
    build_link_block,
    build_ticket_url,
    normalize_project_id,
)
from prlink.core.linking.locator import TicketLocator
from prlink.core.linking.options import LinkOptions, build_link_options
from prlink.core.linking.pattern import RegexPattern, compile_optional
from prlink.core.linking.title import (
    DEFAULT_PREFIX_FORMAT,
    TICKET_PLACEHOLDER,
    TitleComposer,
)

__all__ = [
    "RegexPattern",
    "compile_optional",
    "TicketLocator",
    "TitleComposer",
    "TICKET_PLACEHOLDER",
    "DEFAULT_PREFIX_FORMAT",
    "BodyMerger",
    "DEFAULT_BASE_URL",
    "DEFAULT_LINK_LABEL",
    "build_link_block",
    "build_ticket_url",
    "normalize_project_id",
    "LinkOptions",
    "build_link_options",
]
