"""Exceptions raised while inspecting a git repository.

Every failure surfaces as one of the three concrete subclasses of
:class:`GitStampError`, each carrying enough context (paths, arguments,
raw output) to build a useful diagnostic without asking git again.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Tuple


class GitStampError(Exception):
    """Base class for all gitstamp failures."""


class CouldNotReadFile(GitStampError):
    """A ``.git`` metadata file exists but could not be read."""

    def __init__(self, path: Path, error: OSError):
        self.path = Path(path)
        self.error = error
        super().__init__(f"Could not read {self.path}: {error}")


class InvalidCommitCount(GitStampError):
    """``git rev-list --count`` printed something that is not an integer."""

    def __init__(self, root: Path, raw: str):
        self.root = Path(root)
        self.raw = raw
        super().__init__(f"Invalid commit count {raw!r} reported for repository {self.root}")


class GitRunFailed(GitStampError):
    """A git invocation exited with a non-zero status."""

    def __init__(
        self,
        cwd: Path,
        args: Sequence[str],
        returncode: int,
        stdout: str,
        stderr: str,
    ):
        self.cwd = Path(cwd)
        self.git_args: Tuple[str, ...] = tuple(args)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(self._format_message())

    @property
    def command(self) -> str:
        """The failed command line, for display."""
        return " ".join(("git",) + self.git_args)

    def _format_message(self) -> str:
        message = f"`{self.command}` failed in {self.cwd} with exit code {self.returncode}"
        detail: Optional[str] = self.stderr.strip() or self.stdout.strip() or None
        if detail:
            message += f": {detail}"
        return message
