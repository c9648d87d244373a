"""Tests for the command line interface."""

from __future__ import annotations

import json

import pytest

from conftest import COMMIT_DATE, git
from gitstamp.__main__ import main


def test_default_output(repo, capsys):
    assert main([str(repo)]) == 0

    out = capsys.readouterr().out.splitlines()
    commit = git(repo, "rev-parse", "HEAD").strip()
    assert f"hash: {commit}" in out
    assert "branch: main" in out
    assert "dirty: no" in out
    assert f"date: {COMMIT_DATE}" in out
    assert "count: 1" in out
    assert any(line.startswith("watched: ") and line.endswith("main") for line in out)


def test_json_output(repo, capsys):
    assert main([str(repo), "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["branch"] == "main"
    assert data["commit_count"] == 1
    assert data["is_dirty"] is False
    assert isinstance(data["watched_files"], list)


def test_describe_output(repo, capsys):
    (repo / "untracked.txt").write_text("x\n", encoding="utf-8")

    assert main([str(repo), "--describe"]) == 0

    line = capsys.readouterr().out.strip()
    assert line.startswith("main@")
    assert line.endswith("(1 commits in HEAD) (uncommitted files present)")


def test_write_option(repo, tmp_path, capsys):
    target = tmp_path / "out" / "_build_info.py"

    assert main([str(repo), "--write", str(target)]) == 0

    assert "BRANCH = 'main'" in target.read_text(encoding="utf-8")


def test_outside_repository(repo, git_env, capsys):
    plain = git_env / "plain"
    plain.mkdir()

    assert main([str(plain)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("gitstamp: `git rev-parse --show-toplevel` failed")


def test_json_and_describe_are_exclusive(repo):
    with pytest.raises(SystemExit):
        main([str(repo), "--json", "--describe"])
