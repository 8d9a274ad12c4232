import json
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple

from prlink.core.schema.pr import PullRequestSnapshot


def load_pull_request_event(
    event_path: Optional[str],
    repository: Optional[str] = None,
) -> Optional[PullRequestSnapshot]:
    """Read the triggering event written by the Actions runner.

    Returns None when there is no event file or the event does not carry a
    pull request.
    """
    if not event_path:
        return None
    path = Path(event_path)
    if not path.exists():
        return None
    payload = json.loads(path.read_text(encoding="utf-8"))
    return snapshot_from_payload(payload, repository)


def snapshot_from_payload(
    payload: Mapping[str, Any],
    repository: Optional[str] = None,
) -> Optional[PullRequestSnapshot]:
    pull_request = payload.get("pull_request")
    if not pull_request:
        return None
    owner, repo = _split_repository(payload, repository)
    head = pull_request.get("head") or {}
    return PullRequestSnapshot(
        number=int(pull_request["number"]),
        branch_name=head.get("ref") or "",
        title=pull_request.get("title") or "",
        body=pull_request.get("body") or "",
        owner=owner,
        repo=repo,
    )


def _split_repository(
    payload: Mapping[str, Any],
    repository: Optional[str],
) -> Tuple[str, str]:
    if repository:
        owner, _, repo = repository.partition("/")
        if owner and repo:
            return owner, repo
    repo_payload = payload.get("repository") or {}
    owner_payload = repo_payload.get("owner") or {}
    owner = owner_payload.get("login")
    repo = repo_payload.get("name")
    if not owner or not repo:
        raise ValueError(
            "A GITHUB_REPOSITORY environment variable like 'owner/repo' is required"
        )
    return owner, repo
