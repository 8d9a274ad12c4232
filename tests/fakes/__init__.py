from tests.fakes.github import (
    FakeGitHubClient,
    FakePullRequest,
    FakeRepository,
)
from tests.fakes.logger import FakeLogger
from tests.fakes.pr_updater import FakePRUpdater

__all__ = [
    "FakeGitHubClient",
    "FakeLogger",
    "FakePRUpdater",
    "FakePullRequest",
    "FakeRepository",
]
