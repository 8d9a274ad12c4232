import sys

from prlink.config import Settings, load_settings
from prlink.config.settings import INPUT_GITHUB_TOKEN
from prlink.core.exceptions import ConfigurationError
from prlink.core.jobs import LinkTicketJob, describe_failure
from prlink.core.ports.logger import Logger
from prlink.core.schema.outcome import RunOutcome
from prlink.infra import (
    ConsoleLogger,
    GitHubActionsLogger,
    GitHubClient,
    GitHubPRUpdater,
    LogfireLogger,
    configure_logfire,
    load_pull_request_event,
)


def main() -> None:
    settings = load_settings()
    try:
        logger = _build_logger(settings)
    except (RuntimeError, ValueError) as error:
        # No configured logger yet; annotations still reach the run.
        GitHubActionsLogger().error(describe_failure(error))
        sys.exit(1)

    try:
        snapshot = load_pull_request_event(
            settings.github.event_path,
            settings.github.repository,
        )
    except (OSError, ValueError) as error:
        logger.error(describe_failure(error))
        sys.exit(1)

    if snapshot is not None and not settings.github.token:
        logger.error(ConfigurationError([INPUT_GITHUB_TOKEN]).message)
        sys.exit(0)

    with GitHubClient(settings.github.token, settings.github.api_url) as github_client:
        job = LinkTicketJob(
            logger=logger,
            settings=settings.link,
            pr_updater=GitHubPRUpdater(github_client),
        )
        outcome = job.run(snapshot)
    sys.exit(exit_code_for(outcome))


def exit_code_for(outcome: RunOutcome) -> int:
    return 1 if outcome.failed else 0


def _build_logger(settings: Settings) -> Logger:
    context = {}
    if settings.github.repository:
        context['repository'] = settings.github.repository

    if settings.logging.backend == 'github':
        return GitHubActionsLogger()
    if settings.logging.backend == 'console':
        return ConsoleLogger(
            settings.logging.name,
            settings.logging.level,
            **context,
        )
    if settings.logging.backend == 'logfire':
        if not settings.logging.logfire_token:
            raise ValueError(
                'Logfire backend selected but PRLINK_LOGFIRE_TOKEN is not set'
            )
        configure_logfire(settings.logging.logfire_token, settings.logging.name)
        return LogfireLogger(settings.logging.name, **context)
    raise ValueError(f'Unknown logging backend {settings.logging.backend}')


if __name__ == '__main__':
    main()
