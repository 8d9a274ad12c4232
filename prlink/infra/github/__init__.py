from prlink.infra.github.client import GitHubClient
from prlink.infra.github.event import load_pull_request_event, snapshot_from_payload
from prlink.infra.github.pr_updater import GitHubPRUpdater

__all__ = [
    "GitHubClient",
    "GitHubPRUpdater",
    "load_pull_request_event",
    "snapshot_from_payload",
]
