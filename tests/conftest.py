"""Shared fixtures: throw-away git repositories with an isolated git config."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

COMMIT_DATE = "Mon Jan 11 11:50:59 2016 -0800"


def git(repo: Path, *args: str) -> str:
    """Run git in ``repo`` for test setup and return its stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=str(repo),
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


def commit(repo: Path, message: str) -> None:
    git(repo, "commit", "-q", "--allow-empty", "-m", message)


@pytest.fixture
def git_env(tmp_path, monkeypatch):
    """Keep user and system git configuration out of the tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    for name in ("GIT_DIR", "GIT_WORK_TREE", "GIT_INDEX_FILE", "GIT_CONFIG_GLOBAL"):
        monkeypatch.delenv(name, raising=False)
    for role in ("AUTHOR", "COMMITTER"):
        monkeypatch.setenv(f"GIT_{role}_NAME", "Test User")
        monkeypatch.setenv(f"GIT_{role}_EMAIL", "test@example.com")
        monkeypatch.setenv(f"GIT_{role}_DATE", COMMIT_DATE)
    return tmp_path


@pytest.fixture
def repo(git_env):
    """A repository on branch ``main`` with one tracked file and one commit."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    root = git_env / "repo"
    root.mkdir()
    # Loose refs are only guaranteed with the files backend
    git(root, "-c", "init.defaultRefFormat=files", "init", "-q")
    git(root, "symbolic-ref", "HEAD", "refs/heads/main")
    (root / "README").write_text("hello\n", encoding="utf-8")
    git(root, "add", "README")
    git(root, "commit", "-q", "-m", "Initial commit")
    return root
