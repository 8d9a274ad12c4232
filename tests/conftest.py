import pytest

from prlink.core.schema.pr import PullRequestSnapshot
from tests.fakes import FakeLogger, FakePRUpdater
from tests.settings import get_test_settings


@pytest.fixture
def test_settings():
    return get_test_settings()


@pytest.fixture
def logger():
    return FakeLogger()


@pytest.fixture
def pr_updater():
    return FakePRUpdater()


@pytest.fixture
def snapshot():
    return PullRequestSnapshot(
        number=123,
        branch_name="ABC-123-fix-auth-bug",
        title="Fix bug in authentication",
        body="This PR fixes a critical bug",
        owner="testowner",
        repo="testrepo",
    )
