"""Ranking engine package."""

from .content import ContentComparer, files_equal, sha256_file
from .engine import (
    apply_missing_policy,
    compare_paths,
    project_output,
    rank_entries,
    resolve_entries,
    resolve_entry,
)
from .errors import CompareError, EmptyResultError, FileAccessError, MissingFileError
from .models import Entry, RankResult

__all__ = [
    "CompareError",
    "ContentComparer",
    "EmptyResultError",
    "Entry",
    "FileAccessError",
    "MissingFileError",
    "RankResult",
    "apply_missing_policy",
    "compare_paths",
    "files_equal",
    "project_output",
    "rank_entries",
    "resolve_entries",
    "resolve_entry",
    "sha256_file",
]
