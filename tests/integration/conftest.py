from __future__ import annotations

from pathlib import Path

import pytest

from helpers import git


@pytest.fixture(autouse=True)
def isolated_git_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep user and system git config out of the tests, and stop discovery at tmp_path."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Build Bot")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "build@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Build Bot")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "build@example.com")
    for key in ("BUILDREV_GIT_EXECUTABLE", "BUILDREV_DIRECTIVE_PREFIX", "BUILDREV_REVISION_FILE"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def empty_repo(tmp_path: Path) -> Path:
    repo = tmp_path / "empty"
    repo.mkdir()
    git(repo, "init", "-q")
    return repo


@pytest.fixture()
def repo(tmp_path: Path) -> Path:
    """A repository with one commit and awkwardly named tracked files."""
    repo = tmp_path / "repo"
    repo.mkdir()
    git(repo, "init", "-q")
    git(repo, "config", "commit.gpgsign", "false")
    git(repo, "config", "tag.gpgsign", "false")

    (repo / "README.md").write_text("hello\n", encoding="utf-8")
    (repo / "dir with space").mkdir()
    (repo / "dir with space" / "file name.txt").write_text("spaces\n", encoding="utf-8")
    (repo / "-leading.txt").write_text("dash\n", encoding="utf-8")

    git(repo, "add", "-A")
    git(repo, "commit", "-q", "-m", "Initial commit")
    return repo


@pytest.fixture()
def outside(tmp_path: Path) -> Path:
    plain = tmp_path / "plain"
    plain.mkdir()
    return plain
