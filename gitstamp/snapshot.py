"""The repository state captured by a single collection run."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple

from .constants import GitConstants


@dataclass(frozen=True)
class RepositorySnapshot:
    """Point-in-time facts about a git checkout.

    ``watched_files`` lists the files under ``.git`` whose modification
    should invalidate the snapshot. It is metadata for build caches, so it
    takes no part in equality or hashing.
    """

    commit_hash: str
    branch: str
    is_dirty: bool
    commit_date: str
    commit_count: int
    watched_files: Tuple[Path, ...] = field(default=(), compare=False)

    @property
    def short_hash(self) -> str:
        return self.commit_hash[:GitConstants.SHORT_HASH_LENGTH]

    @property
    def is_detached(self) -> bool:
        return self.branch == GitConstants.DETACHED_BRANCH

    def describe(self) -> str:
        """One-line summary suitable for ``--version`` output or panic messages.

        Example: ``main@2ae047b... (Mon Jan 11 11:50:59 2016 -0800) (14 commits in HEAD)``
        """
        text = (
            f"{self.branch}@{self.commit_hash} ({self.commit_date})"
            f" ({self.commit_count} commits in HEAD)"
        )
        if self.is_dirty:
            text += " (uncommitted files present)"
        return text

    def to_dict(self) -> Dict[str, Any]:
        return {
            "commit_hash": self.commit_hash,
            "branch": self.branch,
            "is_dirty": self.is_dirty,
            "commit_date": self.commit_date,
            "commit_count": self.commit_count,
            "watched_files": [str(path) for path in self.watched_files],
        }
