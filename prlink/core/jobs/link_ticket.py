from typing import Optional

from prlink.config.settings import LinkSettings
from prlink.core.exceptions import (
    ConfigurationError,
    TicketNotFoundError,
    UpdateRejectedError,
)
from prlink.core.jobs.base import BaseJob
from prlink.core.linking.options import build_link_options
from prlink.core.ports.logger import Logger
from prlink.core.ports.pr_updater import PRUpdater
from prlink.core.schema.outcome import RunOutcome, RunStatus
from prlink.core.schema.pr import PullRequestSnapshot, UpdateRequest


class LinkTicketJob(BaseJob):
    """Tags a pull request with its ticket and links it to Forecast.

    Only the fields whose new value differs from the current one are sent,
    and nothing is sent when neither changed.
    """

    def __init__(
        self,
        logger: Logger,
        settings: LinkSettings,
        pr_updater: PRUpdater,
    ) -> None:
        super().__init__(logger)
        self._settings = settings
        self._pr_updater = pr_updater

    def execute(self, snapshot: Optional[PullRequestSnapshot]) -> RunOutcome:
        if snapshot is None:
            return RunOutcome(RunStatus.SKIPPED)

        try:
            options = build_link_options(self._settings)
        except ConfigurationError as error:
            self._logger.error(error.message)
            return RunOutcome(RunStatus.INVALID_CONFIG, message=error.message)

        locator = options.locator()
        match = locator.locate(snapshot.branch_name, snapshot.title)
        if match is None:
            if locator.is_exempt(snapshot.branch_name):
                self._logger.info(
                    "Branch is exempt from ticket linking",
                    branch=snapshot.branch_name,
                )
                return RunOutcome(RunStatus.EXEMPT)
            raise TicketNotFoundError(str(options.ticket_pattern))

        self._logger.info(
            "Located ticket",
            token=match.token,
            source=match.source.value,
        )
        request = UpdateRequest(
            owner=snapshot.owner,
            repo=snapshot.repo,
            number=snapshot.number,
            title=options.title_composer().compose(snapshot.title, match),
            body=options.body_merger().merge(snapshot.body, match),
        )
        if not request.has_changes:
            self._logger.info(
                "Pull request is already linked",
                pr_number=snapshot.number,
            )
            return RunOutcome(RunStatus.NO_OP, request=request)

        try:
            self._pr_updater.update(request)
        except UpdateRejectedError as error:
            message = f"Updating the pull request has failed with {error.status}"
            self._logger.error(message)
            return RunOutcome(
                RunStatus.UPDATE_REJECTED,
                message=message,
                request=request,
            )

        self._logger.info(
            "Updated pull request",
            pr_number=snapshot.number,
            fields=sorted(request.changes()),
        )
        return RunOutcome(RunStatus.UPDATED, request=request)
