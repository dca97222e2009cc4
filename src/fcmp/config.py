"""Comparison configuration and deterministic merge order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

MISSING_POLICIES: Final[tuple[str, ...]] = ("oldest", "newest", "ignore", "error")
OUTPUT_MODES: Final[tuple[str, ...]] = ("path", "index")
DIFF_METHODS: Final[tuple[str, ...]] = ("digest", "internal", "cmp", "diff")

DEFAULT_MISSING_POLICY = "oldest"
DEFAULT_OUTPUT_MODE = "path"
DEFAULT_DIFF_METHOD = "digest"


@dataclass(slots=True, frozen=True)
class CompareConfig:
    """Fully merged settings for one comparison run."""

    diff_mode: bool = False
    missing_policy: str = DEFAULT_MISSING_POLICY
    reverse: bool = False
    output_mode: str = DEFAULT_OUTPUT_MODE
    diff_method: str = DEFAULT_DIFF_METHOD


@dataclass(slots=True, frozen=True)
class CliOverrides:
    """Optional command line values applied at highest precedence."""

    diff_mode: bool | None = None
    missing_policy: str | None = None
    reverse: bool | None = None
    output_mode: str | None = None
    diff_method: str | None = None


def default_config() -> CompareConfig:
    """Build the default comparison config."""
    return CompareConfig()


def parse_missing_policy(value: object) -> str:
    """Parse a missing-file policy name, ignoring case."""
    return _parse_choice(value, "missing_policy", MISSING_POLICIES)


def parse_output_mode(value: object) -> str:
    """Parse an output mode name, ignoring case."""
    return _parse_choice(value, "output_mode", OUTPUT_MODES)


def parse_diff_method(value: object) -> str:
    """Parse a content comparison method name, ignoring case."""
    return _parse_choice(value, "diff_method", DIFF_METHODS)


def apply_cli_overrides(config: CompareConfig, overrides: CliOverrides) -> CompareConfig:
    """Apply command line overrides on top of a base config."""
    missing_policy = config.missing_policy
    if overrides.missing_policy is not None:
        missing_policy = parse_missing_policy(overrides.missing_policy)
    output_mode = config.output_mode
    if overrides.output_mode is not None:
        output_mode = parse_output_mode(overrides.output_mode)
    diff_method = config.diff_method
    if overrides.diff_method is not None:
        diff_method = parse_diff_method(overrides.diff_method)
    return CompareConfig(
        diff_mode=_optional_bool(overrides.diff_mode, "diff_mode", config.diff_mode),
        missing_policy=missing_policy,
        reverse=_optional_bool(overrides.reverse, "reverse", config.reverse),
        output_mode=output_mode,
        diff_method=diff_method,
    )


def load_effective_config(overrides: CliOverrides | None = None) -> CompareConfig:
    """Load effective config using merge order defaults -> overrides."""
    return apply_cli_overrides(default_config(), overrides or CliOverrides())


def _parse_choice(value: object, name: str, choices: tuple[str, ...]) -> str:
    if not isinstance(value, str):
        raise ValueError(f"Config field '{name}' must be a string.")
    normalized = value.strip().lower()
    if normalized not in choices:
        allowed = ", ".join(choices)
        raise ValueError(f"Config field '{name}' must be one of: {allowed}.")
    return normalized


def _optional_bool(value: object, name: str, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValueError(f"Config field '{name}' must be a boolean.")
    return value
