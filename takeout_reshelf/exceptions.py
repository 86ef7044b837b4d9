"""
Custom exception hierarchy for the takeout reshelver.

Every error carries the path that produced it in its message and chains the
underlying OSError. None of them are recovered inside the pipeline; the first
one raised ends the run.
"""


class ReshelfError(Exception):
    """Base exception for all reshelver errors."""
    pass


class DirectoryReadError(ReshelfError):
    """Raised when a source directory cannot be listed."""
    pass


class FileHashError(ReshelfError):
    """Raised when file hashing fails."""
    pass


class FileOperationError(ReshelfError):
    """Raised when creating a directory or moving a file fails."""
    pass


class LinkingError(ReshelfError):
    """Raised when an album symlink cannot be created."""
    pass


class ExternalToolError(ReshelfError):
    """Raised when the metadata tool is missing or exits non-zero."""
    pass
