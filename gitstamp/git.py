"""Thin wrapper around the git command line."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence, Union

from .constants import GitConstants
from .errors import GitRunFailed

logger = logging.getLogger(__name__)


def run_git(
    cwd: Union[str, Path],
    args: Sequence[str],
    git_executable: str = GitConstants.GIT_EXECUTABLE,
) -> str:
    """Run git in ``cwd`` and return everything it printed on stdout.

    Args:
        cwd: Working directory for the git process.
        args: Arguments passed after the executable name.
        git_executable: Name or path of the git binary.

    Returns:
        The captured standard output.

    Raises:
        GitRunFailed: If git exits non-zero or cannot be started.
    """
    args = tuple(args)
    logger.debug(f"Running git {' '.join(args)} in {cwd}")
    try:
        result = subprocess.run(
            [git_executable, *args],
            cwd=str(cwd),
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as e:
        # git missing from PATH, or cwd does not exist
        raise GitRunFailed(
            Path(cwd), args, GitConstants.SPAWN_FAILURE_RETURNCODE, "", str(e)
        ) from e

    if result.returncode != 0:
        raise GitRunFailed(
            Path(cwd), args, result.returncode, result.stdout or "", result.stderr or ""
        )
    return result.stdout or ""


def first_line(output: str) -> str:
    """Return ``output`` up to (not including) the first newline."""
    return output.split("\n", 1)[0]
