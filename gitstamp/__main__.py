"""gitstamp CLI entry point.

Allows running via `python -m gitstamp` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .build_info import write_build_info
from .collector import RepoInfoCollector
from .constants import GitConstants
from .errors import GitStampError
from .locator import locate_root
from .snapshot import RepositorySnapshot


def _package_version() -> str:
    try:
        return importlib.metadata.version("gitstamp")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gitstamp",
        description="Print the state of the git repository containing PATH.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=Path("."),
        help="Any path inside the repository (defaults to the current directory).",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Print the snapshot as JSON.")
    output.add_argument(
        "--describe",
        action="store_true",
        help="Print a one-line summary such as main@<hash> (<date>) (14 commits in HEAD).",
    )
    parser.add_argument(
        "--write",
        type=Path,
        default=None,
        metavar="TARGET",
        help="Also write the snapshot as a Python module of constants to TARGET.",
    )
    parser.add_argument(
        "--git",
        default=GitConstants.GIT_EXECUTABLE,
        help="git executable to run (default: %(default)s).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log git invocations.")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_package_version()}")
    return parser


def _format_fields(snapshot: RepositorySnapshot) -> str:
    lines = [
        f"hash: {snapshot.commit_hash}",
        f"branch: {snapshot.branch}",
        f"dirty: {'yes' if snapshot.is_dirty else 'no'}",
        f"date: {snapshot.commit_date}",
        f"count: {snapshot.commit_count}",
    ]
    lines.extend(f"watched: {path}" for path in snapshot.watched_files)
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        root = locate_root(args.path, args.git)
        snapshot = RepoInfoCollector(args.git).collect(root)
    except GitStampError as e:
        print(f"gitstamp: {e}", file=sys.stderr)
        return 1

    if args.write is not None:
        write_build_info(args.write, snapshot)

    if args.json:
        print(json.dumps(snapshot.to_dict(), indent=2))
    elif args.describe:
        print(snapshot.describe())
    else:
        print(_format_fields(snapshot))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
