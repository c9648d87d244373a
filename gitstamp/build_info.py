"""Generate and read back ``_build_info.py`` style modules.

A build step writes the snapshot as literal constants into a module inside
the target package, so the installed program can report where it was built
from without git being present at run time::

    from mypkg import _build_info
    from gitstamp.build_info import snapshot_from_module

    print(snapshot_from_module(_build_info).describe())
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import ModuleType
from typing import Union

from .snapshot import RepositorySnapshot

logger = logging.getLogger(__name__)

HEADER = "# Auto-generated at build time by gitstamp. Do not edit.\n"


def render_build_info(snapshot: RepositorySnapshot) -> str:
    """Return Python source assigning each snapshot field to a constant."""
    watched = "".join(f"    {str(path)!r},\n" for path in snapshot.watched_files)
    return (
        HEADER
        + f"COMMIT = {snapshot.commit_hash!r}\n"
        + f"BRANCH = {snapshot.branch!r}\n"
        + f"DIRTY = {snapshot.is_dirty!r}\n"
        + f"COMMIT_DATE = {snapshot.commit_date!r}\n"
        + f"COMMIT_COUNT = {snapshot.commit_count!r}\n"
        + f"WATCHED_FILES = (\n{watched})\n"
    )


def write_build_info(target: Union[str, Path], snapshot: RepositorySnapshot) -> bool:
    """Write the generated module to ``target``.

    Args:
        target: Path of the module to write. Parent directories are created.
        snapshot: The snapshot to embed.

    Returns:
        True if the file was (re)written, False if it already had this content.
    """
    target_path = Path(target)
    content = render_build_info(snapshot)

    try:
        if target_path.read_text(encoding="utf-8") == content:
            logger.debug(f"{target_path} is up to date")
            return False
    except FileNotFoundError:
        pass

    target_path.parent.mkdir(parents=True, exist_ok=True)
    target_path.write_text(content, encoding="utf-8")
    logger.debug(f"Wrote build info to {target_path}")
    return True


def snapshot_from_module(module: ModuleType) -> RepositorySnapshot:
    """Rebuild a snapshot from an imported generated module."""
    return RepositorySnapshot(
        commit_hash=module.COMMIT,
        branch=module.BRANCH,
        is_dirty=module.DIRTY,
        commit_date=module.COMMIT_DATE,
        commit_count=module.COMMIT_COUNT,
        watched_files=tuple(Path(path) for path in getattr(module, "WATCHED_FILES", ())),
    )
