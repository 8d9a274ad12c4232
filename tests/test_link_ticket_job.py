from dataclasses import replace

import pytest

from prlink.core.exceptions import UpdateRejectedError
from prlink.core.jobs import LinkTicketJob, describe_failure
from prlink.core.schema.outcome import RunStatus
from prlink.core.schema.pr import UpdateRequest
from tests.fakes import FakeLogger, FakePRUpdater
from tests.settings import get_test_link_settings

LINK = "**[Forecast ticket](https://app.forecast.it/project/12345/ticket/ABC-123)**"


def _make_job(
    logger: FakeLogger,
    pr_updater: FakePRUpdater,
    **overrides: str,
) -> LinkTicketJob:
    return LinkTicketJob(
        logger=logger,
        settings=get_test_link_settings(**overrides),
        pr_updater=pr_updater,
    )


class TestLinkTicketJobWithoutPullRequest:
    def test_returns_early_without_processing(self, logger, pr_updater) -> None:
        job = _make_job(logger, pr_updater, project_id="")

        outcome = job.run(None)

        assert outcome.status is RunStatus.SKIPPED
        assert pr_updater.requests == []
        assert logger.messages("error") == []


class TestLinkTicketJobMissingInputs:
    def test_errors_when_project_id_missing(self, logger, pr_updater, snapshot) -> None:
        job = _make_job(logger, pr_updater, project_id="")

        outcome = job.run(snapshot)

        assert outcome.status is RunStatus.INVALID_CONFIG
        assert outcome.failed is False
        assert logger.messages("error") == [
            "Missing required input: forecast-project-id"
        ]
        assert pr_updater.requests == []

    def test_errors_when_ticket_regex_missing(self, logger, pr_updater, snapshot) -> None:
        job = _make_job(logger, pr_updater, ticket_regex="")

        job.run(snapshot)

        assert logger.messages("error") == ["Missing required input: ticket-regex"]
        assert pr_updater.requests == []

    def test_reports_multiple_missing_inputs_together(
        self, logger, pr_updater, snapshot
    ) -> None:
        job = _make_job(logger, pr_updater, project_id="", ticket_regex="")

        job.run(snapshot)

        assert logger.messages("error") == [
            "Missing required inputs: forecast-project-id, ticket-regex"
        ]
        assert pr_updater.requests == []

    def test_invalid_pattern_fails_before_update(self, logger, pr_updater, snapshot) -> None:
        job = _make_job(logger, pr_updater, clean_title_regex="[WIP")

        outcome = job.run(snapshot)

        assert outcome.status is RunStatus.FAILED
        assert outcome.message.startswith("Invalid regular expression: /[WIP/")
        assert pr_updater.requests == []


class TestLinkTicketJobTicketInBranch:
    def test_updates_title_and_body(self, logger, pr_updater, snapshot) -> None:
        job = _make_job(logger, pr_updater, exception_regex="^dependabot/")

        outcome = job.run(snapshot)

        assert outcome.status is RunStatus.UPDATED
        assert pr_updater.requests == [
            UpdateRequest(
                owner="testowner",
                repo="testrepo",
                number=123,
                title="ABC-123 - Fix bug in authentication",
                body=f"{LINK}\n\nThis PR fixes a critical bug",
            )
        ]

    def test_omits_title_when_ticket_already_present(
        self, logger, pr_updater, snapshot
    ) -> None:
        job = _make_job(logger, pr_updater)

        job.run(replace(snapshot, title="ABC-123 - Fix bug"))

        (request,) = pr_updater.requests
        assert request.changes() == {"body": f"{LINK}\n\nThis PR fixes a critical bug"}

    def test_cleans_title_before_adding_ticket(self, logger, pr_updater, snapshot) -> None:
        job = _make_job(
            logger,
            pr_updater,
            clean_title_regex=r"\[WIP\]\s*",
            clean_title_regex_flags="i",
        )

        job.run(replace(snapshot, title="[WIP] Fix bug in authentication"))

        (request,) = pr_updater.requests
        assert request.title == "ABC-123 - Fix bug in authentication"

    def test_updates_existing_link_in_body(self, logger, pr_updater, snapshot) -> None:
        job = _make_job(logger, pr_updater)
        old_body = (
            "**[Forecast ticket](https://app.forecast.it/project/12345/ticket/OLD-999)**"
            "\n\nThis PR fixes a critical bug"
        )

        job.run(replace(snapshot, body=old_body))

        (request,) = pr_updater.requests
        assert request.body == f"{LINK}\n\nThis PR fixes a critical bug"

    def test_omits_body_when_link_already_correct(
        self, logger, pr_updater, snapshot
    ) -> None:
        job = _make_job(logger, pr_updater)

        job.run(replace(snapshot, body=f"{LINK}\n\nThis PR fixes a critical bug"))

        (request,) = pr_updater.requests
        assert request.changes() == {"title": "ABC-123 - Fix bug in authentication"}

    def test_uses_placeholder_and_project_prefix(
        self, logger, pr_updater, snapshot
    ) -> None:
        job = _make_job(
            logger,
            pr_updater,
            project_id_prefix="P",
            link_placeholder="<!-- forecast -->",
            title_format="[<Number>] ",
        )

        job.run(replace(snapshot, body="Ticket: <!-- forecast -->"))

        (request,) = pr_updater.requests
        assert request.title == "[ABC-123] Fix bug in authentication"
        assert request.body == (
            "Ticket: **[Forecast ticket]"
            "(https://app.forecast.it/project/P12345/ticket/ABC-123)**"
        )

    def test_rerun_after_mid_line_placeholder_is_no_op(
        self, logger, pr_updater, snapshot
    ) -> None:
        job = _make_job(
            logger,
            pr_updater,
            project_id_prefix="P",
            link_placeholder="<!-- forecast -->",
            title_format="[<Number>] ",
        )
        job.run(replace(snapshot, body="Ticket: <!-- forecast -->"))
        (request,) = pr_updater.requests

        outcome = job.run(replace(snapshot, title=request.title, body=request.body))

        assert outcome.status is RunStatus.NO_OP
        assert len(pr_updater.requests) == 1


class TestLinkTicketJobTicketInTitle:
    def test_extracts_ticket_from_title_and_updates_body(
        self, logger, pr_updater, snapshot
    ) -> None:
        job = _make_job(logger, pr_updater)

        job.run(
            replace(
                snapshot,
                branch_name="feature/new-feature",
                title="ABC-456 - Add new feature",
            )
        )

        (request,) = pr_updater.requests
        assert request.title is None
        assert request.body == (
            "**[Forecast ticket](https://app.forecast.it/project/12345/ticket/ABC-456)**"
            "\n\nThis PR fixes a critical bug"
        )


class TestLinkTicketJobNoTicket:
    def test_fails_without_exception_match(self, logger, pr_updater, snapshot) -> None:
        job = _make_job(logger, pr_updater, exception_regex="^dependabot/")

        outcome = job.run(
            replace(snapshot, branch_name="feature/new-feature", title="Add new feature")
        )

        message = "Neither current branch nor title start with a Forecast ticket /^ABC-\\d+/i."
        assert outcome.status is RunStatus.FAILED
        assert outcome.message == message
        assert logger.messages("error") == [message]
        assert pr_updater.requests == []

    def test_fails_without_exception_pattern(self, logger, pr_updater, snapshot) -> None:
        job = _make_job(logger, pr_updater)

        outcome = job.run(
            replace(snapshot, branch_name="feature/new-feature", title="Add new feature")
        )

        assert outcome.failed is True

    def test_exempt_branch_ends_quietly(self, logger, pr_updater, snapshot) -> None:
        job = _make_job(logger, pr_updater, exception_regex="^dependabot/")

        outcome = job.run(
            replace(
                snapshot,
                branch_name="dependabot/npm_and_yarn/lodash-4.17.21",
                title="Bump lodash from 4.17.20 to 4.17.21",
            )
        )

        assert outcome.status is RunStatus.EXEMPT
        assert outcome.failed is False
        assert logger.messages("error") == []
        assert pr_updater.requests == []

    def test_exception_pattern_flags_apply(self, logger, pr_updater, snapshot) -> None:
        job = _make_job(
            logger,
            pr_updater,
            exception_regex="^DEPENDABOT/",
            exception_regex_flags="i",
        )

        outcome = job.run(
            replace(
                snapshot,
                branch_name="dependabot/npm_and_yarn/lodash-4.17.21",
                title="Bump lodash",
            )
        )

        assert outcome.status is RunStatus.EXEMPT
        assert pr_updater.requests == []


class TestLinkTicketJobUpdateFailure:
    def test_logs_rejected_update_without_failing(self, logger, snapshot) -> None:
        pr_updater = FakePRUpdater(error=UpdateRejectedError("Forbidden", 403))
        job = _make_job(logger, pr_updater)

        outcome = job.run(snapshot)

        assert outcome.status is RunStatus.UPDATE_REJECTED
        assert outcome.failed is False
        assert logger.messages("error") == [
            "Updating the pull request has failed with 403"
        ]
        assert len(pr_updater.requests) == 1

    def test_unexpected_error_is_reported_as_failure(self, logger, snapshot) -> None:
        pr_updater = FakePRUpdater(error=RuntimeError("Test error"))
        job = _make_job(logger, pr_updater)

        outcome = job.run(snapshot)

        assert outcome.status is RunStatus.FAILED
        assert outcome.message == "Test error"
        assert logger.messages("error") == ["Test error"]


class TestLinkTicketJobNothingToUpdate:
    def test_does_not_call_update(self, logger, pr_updater, snapshot) -> None:
        job = _make_job(logger, pr_updater)

        outcome = job.run(
            replace(
                snapshot,
                title="ABC-123 - Fix bug in authentication",
                body=f"{LINK}\n\nThis PR fixes a critical bug",
            )
        )

        assert outcome.status is RunStatus.NO_OP
        assert pr_updater.requests == []

    def test_second_run_on_updated_pull_request_is_no_op(
        self, logger, pr_updater, snapshot
    ) -> None:
        job = _make_job(logger, pr_updater, clean_title_regex=r"\[WIP\]\s*")
        job.run(replace(snapshot, title="[WIP] Fix bug in authentication"))
        (request,) = pr_updater.requests

        outcome = job.run(replace(snapshot, title=request.title, body=request.body))

        assert outcome.status is RunStatus.NO_OP
        assert len(pr_updater.requests) == 1


class TestDescribeFailure:
    def test_uses_exception_text(self) -> None:
        assert describe_failure(ValueError("Test error")) == "Test error"

    def test_passes_strings_through(self) -> None:
        assert describe_failure("String error") == "String error"

    @pytest.mark.parametrize("value", [{"unknown": "error"}, None, 42])
    def test_other_values_become_empty(self, value) -> None:
        assert describe_failure(value) == ""
