"""Command line entrypoint for fcmp."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from fcmp import __version__
from fcmp.compare import CompareError, RankResult, compare_paths, project_output
from fcmp.config import (
    DIFF_METHODS,
    MISSING_POLICIES,
    CliOverrides,
    CompareConfig,
    load_effective_config,
)


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for the fcmp command."""
    parser = argparse.ArgumentParser(
        prog="fcmp",
        description="Print the most recently modified of the given files.",
    )
    parser.add_argument("paths", nargs="*", metavar="PATHS", help="File paths to compare.")
    parser.add_argument(
        "-r",
        "--reverse",
        action="store_true",
        default=None,
        help="Select the least recently modified file instead.",
    )
    parser.add_argument(
        "-i",
        "--index",
        action="store_true",
        default=None,
        help="Print the index of the selected file rather than its path.",
    )
    parser.add_argument(
        "-d",
        "--diff",
        action="store_true",
        default=None,
        help="Consider files with the same modification time and content as equal.",
    )
    parser.add_argument(
        "-m",
        "--missing",
        type=str.lower,
        choices=MISSING_POLICIES,
        default=None,
        metavar="MODE",
        help="How to treat missing files: oldest (default), newest, ignore or error.",
    )
    parser.add_argument(
        "--diff-method",
        type=str.lower,
        choices=DIFF_METHODS,
        default=None,
        help="Content check used by --diff (default: digest).",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(paths: list[str], config: CompareConfig, out_stream: TextIO, err_stream: TextIO) -> int:
    """Rank paths, write the winner or the error, and return the exit code."""
    try:
        result = compare_paths(paths, config)
    except CompareError as error:
        err_stream.write(f"fcmp: error: {error.message}\n")
        return 1
    for warning in _ambiguity_warnings(paths, result):
        err_stream.write(f"fcmp: warning: {warning}\n")
    out_stream.write(f"{project_output(result.winner, config.output_mode)}\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for the fcmp process."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    overrides = CliOverrides(
        diff_mode=args.diff,
        missing_policy=args.missing,
        reverse=args.reverse,
        output_mode="index" if args.index else None,
        diff_method=args.diff_method,
    )
    config = load_effective_config(overrides)

    # Nothing to compare is not an error.
    if not args.paths:
        return 0
    return run(args.paths, config, out_stream=sys.stdout, err_stream=sys.stderr)


def _ambiguity_warnings(paths: list[str], result: RankResult) -> list[str]:
    winner = result.winner
    return [
        f"'{paths[index]}' has the same modification time as '{winner.path}' "
        "but different content"
        for index in result.ambiguous
    ]


if __name__ == "__main__":
    raise SystemExit(main())
