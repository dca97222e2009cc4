"""Deterministic selection of the most (or least) recently modified file."""

from __future__ import annotations

import os
import stat
from collections.abc import Callable, Iterable, Iterator, Sequence

from fcmp.compare.content import ContentComparer
from fcmp.compare.errors import EmptyResultError, FileAccessError, MissingFileError
from fcmp.compare.models import Entry, RankResult
from fcmp.config import CompareConfig

StatPath = Callable[[str], os.stat_result]

_MISSING_BELOW = -1
_PRESENT = 0
_MISSING_ABOVE = 1


def resolve_entry(index: int, path: str, stat_path: StatPath = os.stat) -> Entry:
    """Stat one path; nonexistent paths become missing entries."""
    try:
        result = stat_path(path)
    except (FileNotFoundError, NotADirectoryError):
        return Entry(original_index=index, path=path, mtime_ns=None, size=None, is_file=False)
    except OSError as error:
        raise FileAccessError(path, error.strerror or str(error)) from error
    return Entry(
        original_index=index,
        path=path,
        mtime_ns=result.st_mtime_ns,
        size=result.st_size,
        is_file=stat.S_ISREG(result.st_mode),
    )


def resolve_entries(paths: Iterable[str], stat_path: StatPath = os.stat) -> Iterator[Entry]:
    """Lazily resolve entries in input order."""
    for index, path in enumerate(paths):
        yield resolve_entry(index, path, stat_path)


def apply_missing_policy(entries: Iterable[Entry], missing_policy: str) -> list[Entry]:
    """Drop or reject missing entries according to policy.

    Under ``error`` the first missing entry aborts before later paths are
    resolved.
    """
    kept: list[Entry] = []
    for entry in entries:
        if entry.is_missing:
            if missing_policy == "error":
                raise MissingFileError(entry.path)
            if missing_policy == "ignore":
                continue
        kept.append(entry)
    return kept


def time_key(entry: Entry, missing_policy: str) -> tuple[int, int]:
    """Return the ordering key; missing entries sort below or above all files."""
    if entry.mtime_ns is None:
        rank = _MISSING_ABOVE if missing_policy == "newest" else _MISSING_BELOW
        return (rank, 0)
    return (_PRESENT, entry.mtime_ns)


def rank_entries(
    entries: Sequence[Entry],
    config: CompareConfig,
    comparer: ContentComparer | None = None,
) -> RankResult:
    """Scan entries left to right keeping the first best entry."""
    if not entries:
        raise EmptyResultError()
    if comparer is None:
        comparer = ContentComparer(config.diff_method)

    best = entries[0]
    best_key = time_key(best, config.missing_policy)
    folded: list[int] = []
    ambiguous: list[int] = []
    for candidate in entries[1:]:
        key = time_key(candidate, config.missing_policy)
        if key == best_key:
            if not config.diff_mode:
                continue
            if comparer.same_content(best, candidate):
                folded.append(candidate.original_index)
            else:
                ambiguous.append(candidate.original_index)
            continue
        better = key < best_key if config.reverse else key > best_key
        if better:
            best = candidate
            best_key = key
            folded = []
            ambiguous = []
    return RankResult(winner=best, folded=tuple(folded), ambiguous=tuple(ambiguous))


def compare_paths(
    paths: Iterable[str],
    config: CompareConfig,
    stat_path: StatPath = os.stat,
    comparer: ContentComparer | None = None,
) -> RankResult:
    """Resolve, filter and rank paths in one deterministic pass."""
    candidates = apply_missing_policy(resolve_entries(paths, stat_path), config.missing_policy)
    return rank_entries(candidates, config, comparer)


def project_output(entry: Entry, output_mode: str) -> str | int:
    """Return the entry path or its input position."""
    if output_mode == "index":
        return entry.original_index
    return entry.path

