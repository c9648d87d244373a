"""gitstamp - Capture git repository state for embedding into builds."""

from .collector import RepoInfoCollector, collect, collect_from_working_directory
from .errors import CouldNotReadFile, GitRunFailed, GitStampError, InvalidCommitCount
from .locator import locate_root
from .snapshot import RepositorySnapshot

__all__ = [
    'RepositorySnapshot',
    'RepoInfoCollector',
    'locate_root',
    'collect',
    'collect_from_working_directory',
    'GitStampError',
    'CouldNotReadFile',
    'InvalidCommitCount',
    'GitRunFailed',
]
