import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_TICKET_REGEX = r"^[TP]\d+"
DEFAULT_TICKET_REGEX_FLAGS = "i"
DEFAULT_FORECAST_BASE_URL = "https://app.forecast.it/project"
DEFAULT_TITLE_FORMAT = "<Number> - "
DEFAULT_GITHUB_API_URL = "https://api.github.com"

INPUT_GITHUB_TOKEN = "github-token"
INPUT_FORECAST_PROJECT_ID = "forecast-project-id"
INPUT_FORECAST_PROJECT_ID_PREFIX = "forecast-project-id-prefix"
INPUT_TICKET_REGEX = "ticket-regex"
INPUT_TICKET_REGEX_FLAGS = "ticket-regex-flags"
INPUT_EXCEPTION_REGEX = "exception-regex"
INPUT_EXCEPTION_REGEX_FLAGS = "exception-regex-flags"
INPUT_CLEAN_TITLE_REGEX = "clean-title-regex"
INPUT_CLEAN_TITLE_REGEX_FLAGS = "clean-title-regex-flags"
INPUT_FORECAST_BASE_URL = "forecast-base-url"
INPUT_LINK_PLACEHOLDER = "link-placeholder"
INPUT_TITLE_FORMAT = "title-format"


@dataclass(frozen=True, slots=True)
class GitHubSettings:
    token: str
    api_url: str
    event_path: Optional[str]
    repository: Optional[str]


@dataclass(frozen=True, slots=True)
class LinkSettings:
    project_id: str
    project_id_prefix: str
    ticket_regex: str
    ticket_regex_flags: str
    exception_regex: str
    exception_regex_flags: str
    clean_title_regex: str
    clean_title_regex_flags: str
    base_url: str
    link_placeholder: str
    title_format: str


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    backend: str
    name: str
    level: str
    logfire_token: Optional[str]


@dataclass(frozen=True, slots=True)
class Settings:
    github: GitHubSettings
    link: LinkSettings
    logging: LoggingSettings


def load_settings() -> Settings:
    from dotenv import load_dotenv

    load_dotenv()

    github_token = _get_input(INPUT_GITHUB_TOKEN)
    api_url = _ge_env_or_default("GITHUB_API_URL", DEFAULT_GITHUB_API_URL)
    event_path = _ge_env_or_default("GITHUB_EVENT_PATH")
    repository = _ge_env_or_default("GITHUB_REPOSITORY")

    logging_backend = _ge_env_or_default("PRLINK_LOGGER_BACKEND", "github").lower()
    logging_name = _ge_env_or_default("PRLINK_LOGGER_NAME", "prlink")
    logging_level = _ge_env_or_default("PRLINK_LOG_LEVEL", "INFO").upper()
    logfire_token = _ge_env_or_default("PRLINK_LOGFIRE_TOKEN")

    # Empty flags fall back to the default as well, unlike the other inputs.
    ticket_regex_flags = (
        _get_input(INPUT_TICKET_REGEX_FLAGS) or DEFAULT_TICKET_REGEX_FLAGS
    )

    return Settings(
        github=GitHubSettings(
            token=github_token,
            api_url=api_url,
            event_path=event_path,
            repository=repository,
        ),
        link=LinkSettings(
            project_id=_get_input(INPUT_FORECAST_PROJECT_ID),
            project_id_prefix=_get_input(INPUT_FORECAST_PROJECT_ID_PREFIX),
            ticket_regex=_get_input(INPUT_TICKET_REGEX, DEFAULT_TICKET_REGEX),
            ticket_regex_flags=ticket_regex_flags,
            exception_regex=_get_input(INPUT_EXCEPTION_REGEX),
            exception_regex_flags=_get_input(INPUT_EXCEPTION_REGEX_FLAGS),
            clean_title_regex=_get_input(INPUT_CLEAN_TITLE_REGEX),
            clean_title_regex_flags=_get_input(INPUT_CLEAN_TITLE_REGEX_FLAGS),
            base_url=_get_input(INPUT_FORECAST_BASE_URL, DEFAULT_FORECAST_BASE_URL),
            link_placeholder=_get_input(INPUT_LINK_PLACEHOLDER),
            title_format=_get_input(INPUT_TITLE_FORMAT, DEFAULT_TITLE_FORMAT),
        ),
        logging=LoggingSettings(
            backend=logging_backend,
            name=logging_name,
            level=logging_level,
            logfire_token=logfire_token,
        ),
    )


def input_env_name(name: str) -> str:
    return f"INPUT_{name.replace(' ', '_').upper()}"


def _get_input(name: str, default: str = "") -> str:
    # Unset falls back to the default; an explicitly empty input stays empty.
    value = os.getenv(input_env_name(name))
    if value is None:
        return default
    return value.strip()


def _ge_env_or_default(name: str, default: any = None) -> str:
    value = os.getenv(name)
    if not value:
        return default
    return value
