"""Shared fixtures for sumit tests."""

import tempfile
from pathlib import Path

import pytest
from git import Repo


def commit_file(repo: Repo, name: str, content: str, message: str) -> str:
    """Write a file, commit it and return the commit hash."""
    path = Path(repo.working_tree_dir) / name
    path.write_text(content)
    repo.index.add([name])
    return repo.index.commit(message).hexsha


@pytest.fixture
def empty_git_repo():
    """Create a temporary git repository with no commits."""
    with tempfile.TemporaryDirectory() as temp_dir:
        repo = Repo.init(temp_dir)

        # Configure git user for testing
        with repo.config_writer() as config:
            config.set_value("user", "name", "Test User")
            config.set_value("user", "email", "test@example.com")

        yield repo
        repo.close()


@pytest.fixture
def temp_git_repo(empty_git_repo):
    """Create a temporary git repository with three commits."""
    repo = empty_git_repo
    commit_file(repo, "README.md", "# Widget\n", "Initial commit")
    commit_file(repo, "widget.py", "def widget():\n    pass\n", "Add feature")
    commit_file(
        repo, "widget.py", "def widget():\n    return 1\n", "Fix bug\n\ndetails"
    )
    return repo
