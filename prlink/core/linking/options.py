from dataclasses import dataclass
from typing import Optional

from prlink.config.settings import (
    INPUT_FORECAST_PROJECT_ID,
    INPUT_TICKET_REGEX,
    LinkSettings,
)
from prlink.core.exceptions import ConfigurationError
from prlink.core.linking.body import DEFAULT_LINK_LABEL, BodyMerger
from prlink.core.linking.locator import TicketLocator
from prlink.core.linking.pattern import RegexPattern, compile_optional
from prlink.core.linking.title import TitleComposer


@dataclass(frozen=True, slots=True)
class LinkOptions:
    project_id: str
    project_id_prefix: str
    ticket_pattern: RegexPattern
    exception_pattern: Optional[RegexPattern]
    cleanup_pattern: Optional[RegexPattern]
    base_url: str
    placeholder: Optional[str]
    title_format: str
    link_label: str = DEFAULT_LINK_LABEL

    def locator(self) -> TicketLocator:
        return TicketLocator(self.ticket_pattern, self.exception_pattern)

    def title_composer(self) -> TitleComposer:
        return TitleComposer(
            self.ticket_pattern,
            self.cleanup_pattern,
            prefix_format=self.title_format,
        )

    def body_merger(self) -> BodyMerger:
        return BodyMerger(
            self.project_id,
            base_url=self.base_url,
            link_label=self.link_label,
            placeholder=self.placeholder,
            project_id_prefix=self.project_id_prefix,
        )


def build_link_options(settings: LinkSettings) -> LinkOptions:
    """Validate required inputs, then compile every pattern once.

    Raises ConfigurationError listing all missing inputs together, or
    PatternError for a source or flag set that does not compile.
    """
    required = (
        (INPUT_FORECAST_PROJECT_ID, settings.project_id),
        (INPUT_TICKET_REGEX, settings.ticket_regex),
    )
    missing = [name for name, value in required if not value]
    if missing:
        raise ConfigurationError(missing)

    return LinkOptions(
        project_id=settings.project_id,
        project_id_prefix=settings.project_id_prefix,
        ticket_pattern=RegexPattern.compile(
            settings.ticket_regex, settings.ticket_regex_flags
        ),
        exception_pattern=compile_optional(
            settings.exception_regex, settings.exception_regex_flags
        ),
        cleanup_pattern=compile_optional(
            settings.clean_title_regex, settings.clean_title_regex_flags
        ),
        base_url=settings.base_url,
        placeholder=settings.link_placeholder or None,
        title_format=settings.title_format,
    )
