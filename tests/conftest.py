"""Pytest fixtures for git-branch-explorer tests"""
import tempfile
from pathlib import Path
import pytest
import git

from git_branch_explorer.config import Config
from git_branch_explorer.core.session import BranchSessionController
from git_branch_explorer.exceptions import InvalidBranchNameError
from git_branch_explorer.models.branch import Branch, HeadRef
from git_branch_explorer.services.backend import VersionControlBackend, tracking_refspec


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeBackend(VersionControlBackend):
    """In-memory backend that records every call.

    Set ``*_error`` attributes to make the matching operation fail, and
    ``hooks[<method name>]`` to run a callable when the method is entered.
    """

    def __init__(self, branches=("main", "dev"), head="main", clean=True):
        self.branches = [
            b if isinstance(b, Branch) else Branch.from_name(b) for b in branches
        ]
        self.head = HeadRef(name=head)
        self.clean = clean
        self.calls = []
        self.hooks = {}
        self.checked_out = []
        self.fetched_refspecs = []
        self.list_error = None
        self.head_error = None
        self.clean_error = None
        self.checkout_error = None
        self.fetch_error = None
        self.closed = False

    def _enter(self, method, error=None):
        self.calls.append(method)
        if method in self.hooks:
            self.hooks[method]()
        if error is not None:
            raise error

    def list_local_branches(self):
        self._enter("list_local_branches", self.list_error)
        return list(self.branches)

    def current_head(self):
        self._enter("current_head", self.head_error)
        return self.head

    def is_working_tree_clean(self):
        self._enter("is_working_tree_clean", self.clean_error)
        return self.clean

    def checkout(self, branch):
        self._enter("checkout", self.checkout_error)
        if branch.name is None:
            raise InvalidBranchNameError("checkout")
        self.checked_out.append(branch.name)
        self.head = HeadRef(name=branch.name)

    def fetch_remote_for(self, branch):
        self._enter("fetch_remote_for", self.fetch_error)
        if branch.name is None:
            raise InvalidBranchNameError("fetch")
        self.fetched_refspecs.append(tracking_refspec(branch.name))

    def close(self):
        self.closed = True

    def call_count(self, method):
        return self.calls.count(method)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fake_backend():
    """Backend with branches main and dev, HEAD on main, clean tree."""
    return FakeBackend()


@pytest.fixture
def make_backend():
    """Factory for backends with custom branches and state."""
    return FakeBackend


@pytest.fixture
def make_controller(clock):
    """Factory that builds a controller on the fake clock."""
    def _make(backend, **config_overrides):
        config = Config(**config_overrides)
        return BranchSessionController(backend, config, clock=clock)
    return _make


def _configure_user(repo):
    writer = repo.config_writer()
    writer.set_value("user", "name", "Test User")
    writer.set_value("user", "email", "test@example.com")
    writer.release()


def _commit_file(repo, name, content, message):
    path = Path(repo.working_dir) / name
    path.write_text(content)
    repo.index.add([name])
    return repo.index.commit(message)


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with one commit on main."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)
    _configure_user(repo)
    _commit_file(repo, "README.md", "# Test Repository\n", "Initial commit")

    # Rename master to main if needed
    repo.git.branch('-M', 'main')

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_branches(git_repo):
    """Repository with main, dev and feature/login; main is checked out."""
    repo = git_repo

    repo.git.checkout('-b', 'dev')
    _commit_file(repo, "dev.txt", "Dev content\n", "Add dev work")

    repo.git.checkout('main')
    repo.git.checkout('-b', 'feature/login')
    _commit_file(repo, "login.txt", "Login content\n", "Add login")

    repo.git.checkout('main')

    yield repo


@pytest.fixture
def git_repo_with_origin(git_repo_with_branches, temp_dir):
    """Repository whose branches are pushed to a bare 'origin' remote.

    Yields (repo, upstream clone) so tests can publish new commits and tags
    to origin from the clone.
    """
    repo = git_repo_with_branches
    origin_path = temp_dir / "origin.git"
    git.Repo.init(origin_path, bare=True).close()

    repo.create_remote('origin', str(origin_path))
    repo.git.push('origin', 'main', 'dev')

    upstream = git.Repo.clone_from(str(origin_path), str(temp_dir / "upstream"))
    _configure_user(upstream)
    upstream.git.checkout('dev')

    yield repo, upstream

    upstream.close()


@pytest.fixture
def commit_file():
    """Helper to commit a file in a repository."""
    return _commit_file
