"""Find the root directory of the repository containing a path."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from .constants import GitConstants
from .git import first_line, run_git


def locate_root(
    start_path: Union[str, Path],
    git_executable: str = GitConstants.GIT_EXECUTABLE,
) -> Path:
    """Return the directory holding ``.git`` for the repository around ``start_path``.

    Raises:
        GitRunFailed: If ``start_path`` is not inside a repository or git
            cannot be run there.
    """
    output = run_git(start_path, GitConstants.TOPLEVEL_ARGS, git_executable)
    return Path(os.path.normpath(first_line(output)))
