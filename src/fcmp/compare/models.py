"""Typed models for one ranking pass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Entry:
    """One input path with its resolved filesystem status.

    A missing path has neither ``mtime_ns`` nor ``size``. ``is_file`` is False
    for directories and other non-regular paths.
    """

    original_index: int
    path: str
    mtime_ns: int | None
    size: int | None
    is_file: bool = True

    @property
    def is_missing(self) -> bool:
        """Return True when the path did not exist at evaluation time."""
        return self.mtime_ns is None


@dataclass(slots=True, frozen=True)
class RankResult:
    """Winning entry plus the indices that tied with it."""

    winner: Entry
    folded: tuple[int, ...]
    ambiguous: tuple[int, ...]

