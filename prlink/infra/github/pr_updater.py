from github import GithubException

from prlink.core.exceptions import UpdateRejectedError
from prlink.core.ports.pr_updater import PRUpdater
from prlink.core.schema.pr import UpdateRequest
from prlink.infra.github.client import GitHubClient


class GitHubPRUpdater(PRUpdater):
    def __init__(self, client: GitHubClient) -> None:
        self._client = client

    def update(self, request: UpdateRequest) -> None:
        changes = request.changes()
        if not changes:
            return
        resource = f"{request.owner}/{request.repo}#{request.number}"
        try:
            repo = self._client.get_repo(request.owner, request.repo)
            pull = repo.get_pull(request.number)
            pull.edit(**changes)
        except GithubException as error:
            self._translate_exception(
                "Failed to update pull request",
                error,
                resource=resource,
            )

    def _translate_exception(
        self,
        message: str,
        error: GithubException,
        resource: str | None = None,
    ) -> None:
        status = getattr(error, "status", None)
        if resource:
            message = f"{message} {resource}"
        raise UpdateRejectedError(message, status) from error
