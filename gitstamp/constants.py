"""Constants and configuration for gitstamp."""

class GitConstants:
    """Central configuration constants for repository inspection."""
    
    # External tool
    GIT_EXECUTABLE = "git"
    SPAWN_FAILURE_RETURNCODE = 127  # Reported when git could not be started at all
    
    # Repository layout (relative to the repository root)
    GIT_DIR = ".git"
    HEAD_FILE = "HEAD"
    INDEX_FILE = "index"
    PACKED_REFS_FILE = "packed-refs"
    SYMBOLIC_REF_PREFIX = b"ref: "  # HEAD content when it points at a branch
    
    # Queries
    TOPLEVEL_ARGS = ("rev-parse", "--show-toplevel")
    HASH_ARGS = ("rev-parse", "HEAD")
    BRANCH_ARGS = ("rev-parse", "--abbrev-ref", "HEAD")
    STATUS_ARGS = ("status", "--porcelain")
    COUNT_ARGS = ("rev-list", "HEAD", "--count")
    DATE_ARGS = ("log", "HEAD", "-1", "--format=%cd")
    
    # Presentation
    SHORT_HASH_LENGTH = 7
    DETACHED_BRANCH = "HEAD"  # What --abbrev-ref reports for a detached HEAD
