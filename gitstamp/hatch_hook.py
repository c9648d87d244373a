"""Hatchling build hook that embeds repository state into a package.

Enable it in the consuming project's ``pyproject.toml``::

    [build-system]
    requires = ["hatchling", "gitstamp"]
    build-backend = "hatchling.build"

    [tool.hatch.build.hooks.gitstamp]
    path = "mypkg/_build_info.py"
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from hatchling.builders.hooks.plugin.interface import BuildHookInterface
from hatchling.plugin import hookimpl

from .build_info import write_build_info
from .collector import RepoInfoCollector
from .constants import GitConstants
from .locator import locate_root

logger = logging.getLogger(__name__)


class GitStampBuildHook(BuildHookInterface):
    """Build hook that writes the generated build info module."""

    PLUGIN_NAME = "gitstamp"

    def initialize(self, version: str, build_data: dict[str, Any]) -> None:
        """Collect the repository state and add the generated file to artifacts."""
        relative_target = self.config.get("path")
        if not relative_target:
            raise ValueError(
                "Option `path` must be set in [tool.hatch.build.hooks.gitstamp]"
            )

        project_root = Path(self.root)
        search_path = project_root / self.config.get("search-path", ".")
        git_executable = self.config.get("git", GitConstants.GIT_EXECUTABLE)

        # Errors propagate so that the build fails instead of shipping stale data
        repo_root = locate_root(search_path, git_executable)
        snapshot = RepoInfoCollector(git_executable).collect(repo_root)

        target_path = project_root / relative_target
        write_build_info(target_path, snapshot)
        for watched in snapshot.watched_files:
            logger.debug(f"{relative_target} depends on {watched}")

        build_data.setdefault("artifacts", []).append(Path(relative_target).as_posix())


@hookimpl
def hatch_register_build_hook():
    return GitStampBuildHook
