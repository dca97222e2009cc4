"""Content equality checks used to fold timestamp ties."""

from __future__ import annotations

import hashlib
import subprocess
from collections.abc import Callable
from pathlib import Path

from fcmp.compare.errors import FileAccessError
from fcmp.compare.models import Entry
from fcmp.config import DEFAULT_DIFF_METHOD, DIFF_METHODS

_CHUNK_BYTES = 1024 * 128

COMPARE_COMMANDS: dict[str, tuple[str, ...]] = {
    "cmp": ("cmp", "-s"),
    "diff": ("diff",),
}

RunCommand = Callable[..., subprocess.CompletedProcess]


def sha256_file(path: Path) -> str:
    """Compute SHA-256 hash in deterministic chunked reads."""
    digest = hashlib.sha256()
    try:
        with path.open("rb") as handle:
            while True:
                chunk = handle.read(_CHUNK_BYTES)
                if not chunk:
                    break
                digest.update(chunk)
    except OSError as error:
        raise FileAccessError(str(path), _reason(error)) from error
    return digest.hexdigest()


def files_equal(first: Path, second: Path) -> bool:
    """Compare two files byte for byte, stopping at the first difference."""
    try:
        with first.open("rb") as handle_a, second.open("rb") as handle_b:
            while True:
                chunk_a = handle_a.read(_CHUNK_BYTES)
                chunk_b = handle_b.read(_CHUNK_BYTES)
                if chunk_a != chunk_b:
                    return False
                if not chunk_a:
                    return True
    except OSError as error:
        failed = error.filename if error.filename is not None else first
        raise FileAccessError(str(failed), _reason(error)) from error


def command_reports_equal(
    command: tuple[str, ...],
    first: Path,
    second: Path,
    run: RunCommand = subprocess.run,
) -> bool:
    """Run a POSIX compare command; exit 0 means equal, 1 means different."""
    argv = [*command, str(first), str(second)]
    try:
        completed = run(
            argv,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError as error:
        reason = f"could not run '{command[0]}': {_reason(error)}"
        raise FileAccessError(str(first), reason) from error
    if completed.returncode == 0:
        return True
    if completed.returncode == 1:
        return False
    raise FileAccessError(
        str(first),
        f"'{command[0]}' exited with status {completed.returncode} comparing '{second}'",
    )


class ContentComparer:
    """Memoized pairwise content equality over ranked entries.

    Nothing is read until ``same_content`` is asked about a pair, and each
    file digest or pair verdict is computed at most once.
    """

    def __init__(self, method: str = DEFAULT_DIFF_METHOD, run: RunCommand = subprocess.run) -> None:
        if method not in DIFF_METHODS:
            raise ValueError(f"Unknown diff method: {method}")
        self._method = method
        self._run = run
        self._digests: dict[int, str] = {}
        self._verdicts: dict[tuple[int, int], bool] = {}
        self._files_read = 0
        self._comparisons = 0

    @property
    def files_read(self) -> int:
        """Return how many file reads (or compare subprocess operands) occurred."""
        return self._files_read

    @property
    def comparisons(self) -> int:
        """Return how many pairs needed an actual content check."""
        return self._comparisons

    def fingerprint(self, entry: Entry) -> str:
        """Return the memoized SHA-256 digest for a present entry."""
        cached = self._digests.get(entry.original_index)
        if cached is not None:
            return cached
        digest = sha256_file(Path(entry.path))
        self._files_read += 1
        self._digests[entry.original_index] = digest
        return digest

    def same_content(self, first: Entry, second: Entry) -> bool:
        """Return True when both entries hold identical content.

        Directories and other non-regular paths have no content to read and
        never compare equal to anything present.
        """
        if first.is_missing or second.is_missing:
            return first.is_missing and second.is_missing
        if not (first.is_file and second.is_file):
            return False
        key = (
            min(first.original_index, second.original_index),
            max(first.original_index, second.original_index),
        )
        cached = self._verdicts.get(key)
        if cached is not None:
            return cached
        if first.size != second.size:
            verdict = False
        else:
            self._comparisons += 1
            verdict = self._compare(first, second)
        self._verdicts[key] = verdict
        return verdict

    def _compare(self, first: Entry, second: Entry) -> bool:
        if self._method == "digest":
            return self.fingerprint(first) == self.fingerprint(second)
        self._files_read += 2
        if self._method == "internal":
            return files_equal(Path(first.path), Path(second.path))
        return command_reports_equal(
            COMPARE_COMMANDS[self._method],
            Path(first.path),
            Path(second.path),
            run=self._run,
        )


def _reason(error: OSError) -> str:
    return error.strerror or str(error)
