"""Collect a :class:`RepositorySnapshot` from a repository root."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Tuple, Union

from .constants import GitConstants
from .errors import CouldNotReadFile, InvalidCommitCount
from .git import first_line, run_git
from .locator import locate_root
from .snapshot import RepositorySnapshot

logger = logging.getLogger(__name__)

_COUNT_PATTERN = re.compile(r"[0-9]+")


class RepoInfoCollector:
    """Runs the fixed sequence of git queries that make up a snapshot.

    The collector keeps no state between calls; every :meth:`collect`
    re-reads the ``.git`` metadata and re-runs git.
    """

    def __init__(self, git_executable: str = GitConstants.GIT_EXECUTABLE):
        self.git_executable = git_executable

    def watched_files(self, root: Union[str, Path]) -> Tuple[Path, ...]:
        """Return the ``.git`` files a snapshot of ``root`` depends on.

        Order is fixed: the ref HEAD points at (or HEAD itself when
        detached), then ``index``, then ``packed-refs``. Each entry is
        present only if the file exists.

        Raises:
            CouldNotReadFile: If HEAD exists but cannot be read.
        """
        git_dir = Path(root) / GitConstants.GIT_DIR
        head = git_dir / GitConstants.HEAD_FILE
        index = git_dir / GitConstants.INDEX_FILE
        packed_refs = git_dir / GitConstants.PACKED_REFS_FILE

        files: List[Path] = []
        try:
            content = head.read_bytes()
        except (FileNotFoundError, NotADirectoryError):
            content = None
        except OSError as e:
            raise CouldNotReadFile(head, e) from e

        if content is not None:
            prefix = GitConstants.SYMBOLIC_REF_PREFIX
            if content.startswith(prefix):
                # Loose ref; absent when the branch only lives in packed-refs
                ref_name = first_line(content[len(prefix):].decode("utf-8", errors="replace")).strip()
                if ref_name and (git_dir / ref_name).is_file():
                    files.append(git_dir / ref_name)
            else:
                # Detached HEAD holds the hash itself
                files.append(head)

        if index.is_file():
            files.append(index)
        if packed_refs.is_file():
            files.append(packed_refs)
        return tuple(files)

    def collect(self, root: Union[str, Path]) -> RepositorySnapshot:
        """Capture the current state of the repository rooted at ``root``.

        Raises:
            CouldNotReadFile: If ``.git/HEAD`` exists but is unreadable.
            GitRunFailed: On the first git query that fails.
            InvalidCommitCount: If the commit count is not an integer.
        """
        root = Path(root)
        watched = self.watched_files(root)

        commit_hash = self._query(root, GitConstants.HASH_ARGS)
        branch = self._query(root, GitConstants.BRANCH_ARGS)
        is_dirty = bool(self._query(root, GitConstants.STATUS_ARGS).strip())
        commit_count = self._parse_count(root, self._query(root, GitConstants.COUNT_ARGS))
        commit_date = self._query(root, GitConstants.DATE_ARGS)

        snapshot = RepositorySnapshot(
            commit_hash=commit_hash,
            branch=branch,
            is_dirty=is_dirty,
            commit_date=commit_date,
            commit_count=commit_count,
            watched_files=watched,
        )
        logger.debug(f"Collected {snapshot.describe()} from {root}")
        return snapshot

    def _query(self, root: Path, args: Tuple[str, ...]) -> str:
        # Only the first line is meaningful; anything after it is ignored
        return first_line(run_git(root, args, self.git_executable))

    @staticmethod
    def _parse_count(root: Path, raw: str) -> int:
        if not _COUNT_PATTERN.fullmatch(raw.strip()):
            raise InvalidCommitCount(root, raw)
        return int(raw.strip())


_default_collector = RepoInfoCollector()


def collect(root: Union[str, Path]) -> RepositorySnapshot:
    """Collect a snapshot of the repository rooted at ``root``."""
    return _default_collector.collect(root)


def collect_from_working_directory() -> RepositorySnapshot:
    """Locate the repository around the current directory and collect it."""
    return _default_collector.collect(locate_root("."))
