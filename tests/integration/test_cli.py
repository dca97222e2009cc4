from __future__ import annotations

import os
from pathlib import Path

import pytest

from fcmp import __version__
from fcmp.cli import main

BASE_NS = 1_700_000_000 * 1_000_000_000


def _write(path: Path, text: str, seconds: int) -> str:
    path.write_text(text, encoding="utf-8")
    mtime_ns = BASE_NS + seconds * 1_000_000_000
    os.utime(path, ns=(mtime_ns, mtime_ns))
    return str(path)


def test_prints_most_recent_path(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    older = _write(tmp_path / "old.txt", "a", 1)
    newer = _write(tmp_path / "new.txt", "b", 2)

    exit_code = main([older, newer])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out == f"{newer}\n"
    assert captured.err == ""


def test_reverse_and_index_flags(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    older = _write(tmp_path / "old.txt", "a", 1)
    newer = _write(tmp_path / "new.txt", "b", 2)

    exit_code = main(["-r", "-i", newer, older])

    assert exit_code == 0
    assert capsys.readouterr().out == "1\n"


def test_missing_policy_is_case_insensitive(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    present = _write(tmp_path / "a.txt", "a", 5)
    absent = str(tmp_path / "b.txt")

    exit_code = main(["--missing", "NEWEST", present, absent])

    assert exit_code == 0
    assert capsys.readouterr().out == f"{absent}\n"


def test_missing_error_policy_exits_non_zero(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    present = _write(tmp_path / "a.txt", "a", 5)
    absent = str(tmp_path / "b.txt")

    exit_code = main(["-m", "error", present, absent])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert captured.err == f"fcmp: error: file '{absent}' not found\n"


def test_all_ignored_exits_non_zero(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["-m", "ignore", str(tmp_path / "x"), str(tmp_path / "y")])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.err == "fcmp: error: no files left to compare\n"


def test_no_paths_prints_nothing(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main([])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out == ""
    assert captured.err == ""


def test_diff_mode_warns_about_ambiguous_ties(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    first = _write(tmp_path / "a.txt", "x", 5)
    second = _write(tmp_path / "b.txt", "y", 5)
    third = _write(tmp_path / "c.txt", "x", 5)

    exit_code = main(["--diff", first, second, third])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out == f"{first}\n"
    assert captured.err.splitlines() == [
        f"fcmp: warning: '{second}' has the same modification time as '{first}' "
        "but different content"
    ]


def test_invalid_missing_value_is_a_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--missing", "promote", "a.txt"])

    assert excinfo.value.code == 2
    assert "--missing" in capsys.readouterr().err


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["-V"])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == f"fcmp {__version__}"


def test_unknown_option_prints_nothing_on_stdout(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    present = _write(tmp_path / "a.txt", "a", 1)

    with pytest.raises(SystemExit) as excinfo:
        main([present, "--log-file", str(tmp_path / "run.log")])

    captured = capsys.readouterr()
    assert excinfo.value.code == 2
    assert captured.out == ""
    assert not (tmp_path / "run.log").exists()


def test_diff_mode_tie_between_directories_keeps_first(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    mtime_ns = BASE_NS + 7 * 1_000_000_000
    for directory in (first, second):
        os.utime(directory, ns=(mtime_ns, mtime_ns))

    exit_code = main(["-d", "-i", str(first), str(second)])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out == "0\n"
    assert "fcmp: error" not in captured.err
