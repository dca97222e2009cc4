"""Terminal failures raised while ranking files."""

from __future__ import annotations


class CompareError(Exception):
    """Base class for failures that abort a whole comparison."""

    code = "COMPARE_FAILED"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingFileError(CompareError):
    """Raised when a path is missing and the policy forbids missing files."""

    code = "MISSING_FILE"

    def __init__(self, path: str) -> None:
        super().__init__(f"file '{path}' not found")
        self.path = path


class EmptyResultError(CompareError):
    """Raised when no candidates remain to compare."""

    code = "EMPTY_RESULT"

    def __init__(self) -> None:
        super().__init__("no files left to compare")


class FileAccessError(CompareError):
    """Raised when an existing path cannot be stat'ed or read."""

    code = "FILE_ACCESS"

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot access '{path}': {reason}")
        self.path = path
        self.reason = reason
