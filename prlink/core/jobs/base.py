from abc import ABC, abstractmethod
from typing import Optional, final

from prlink.core.ports.logger import Logger
from prlink.core.schema.outcome import RunOutcome, RunStatus
from prlink.core.schema.pr import PullRequestSnapshot


def describe_failure(error: object) -> str:
    if isinstance(error, BaseException):
        return str(error)
    if isinstance(error, str):
        return error
    return ""


class BaseJob(ABC):
    def __init__(self, logger: Logger) -> None:
        self._logger = logger

    @final
    def run(self, snapshot: Optional[PullRequestSnapshot]) -> RunOutcome:
        job_name = self.__class__.__name__
        self._logger.debug("Job starting", job=job_name)
        try:
            outcome = self.execute(snapshot)
        except Exception as error:  # noqa: BLE001
            outcome = self.handle_failure(error)
        self._logger.debug(
            "Job stopping",
            job=job_name,
            status=outcome.status.value,
        )
        return outcome

    @abstractmethod
    def execute(self, snapshot: Optional[PullRequestSnapshot]) -> RunOutcome: ...

    def handle_failure(self, error: object) -> RunOutcome:
        message = describe_failure(error)
        self._logger.error(message)
        return RunOutcome(RunStatus.FAILED, message=message)
