"""Resolve `LintOptions` from `vixlint.toml` or `pyproject.toml`."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from pathlib import Path
import tomllib
from typing import Any, Final

from vixlint.lint import SIMPLE_STATEMENT_KINDS, IndentStyle, LintOptions, known_rule_ids

logger = logging.getLogger(__name__)

VIXLINT_TOML: Final[str] = "vixlint.toml"
PYPROJECT_TOML: Final[str] = "pyproject.toml"
CONFIG_KEYS: Final[frozenset[str]] = frozenset(
    {"indent-width", "indent-style", "select", "ignore", "single-line-if-statements"}
)


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read or holds invalid settings."""


def find_config_file(start: Path | None = None) -> Path | None:
    """Search `start` and its parents for `vixlint.toml`, then a pyproject with `[tool.vixlint]`."""
    directory = (start if start is not None else Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        dedicated = candidate_dir / VIXLINT_TOML
        if dedicated.is_file():
            return dedicated
        pyproject = candidate_dir / PYPROJECT_TOML
        if pyproject.is_file() and _has_tool_table(pyproject):
            return pyproject
    return None


def read_config_table(path: Path) -> dict[str, Any]:
    data = _load_toml(path)
    if path.name == PYPROJECT_TOML:
        table = data.get("tool", {}).get("vixlint", {})
    else:
        table = data.get("vixlint", data)
    if not isinstance(table, dict):
        raise ConfigError(f"{path}: vixlint settings must be a table")
    return table


def load_lint_options(path: Path | None = None, *, start: Path | None = None) -> LintOptions:
    """Load options from `path`, or from the nearest config file; defaults when none exists."""
    config_path = path if path is not None else find_config_file(start)
    if config_path is None:
        logger.debug("No vixlint configuration found; using defaults")
        return LintOptions()
    logger.debug("Loading vixlint configuration from %s", config_path)
    table = read_config_table(config_path)
    try:
        return options_from_mapping(table)
    except ConfigError as exc:
        raise ConfigError(f"{config_path}: {exc}") from exc


def options_from_mapping(data: Mapping[str, Any]) -> LintOptions:
    normalized = {key.replace("_", "-"): value for key, value in data.items()}
    unknown = sorted(set(normalized) - CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"unknown option(s): {', '.join(unknown)}")

    settings: dict[str, Any] = {}
    if "indent-width" in normalized:
        width = normalized["indent-width"]
        if isinstance(width, bool) or not isinstance(width, int) or width < 1:
            raise ConfigError(f"indent-width must be a positive integer, got {width!r}")
        settings["indent_width"] = width
    if "indent-style" in normalized:
        style = normalized["indent-style"]
        try:
            settings["indent_style"] = IndentStyle(style)
        except ValueError:
            allowed = ", ".join(member.value for member in IndentStyle)
            raise ConfigError(f"indent-style must be one of {allowed}, got {style!r}") from None
    if "select" in normalized:
        settings["enabled_rules"] = _rule_ids(normalized["select"], "select")
    if "ignore" in normalized:
        settings["disabled_rules"] = _rule_ids(normalized["ignore"], "ignore")
    if "single-line-if-statements" in normalized:
        kinds = _string_set(normalized["single-line-if-statements"], "single-line-if-statements")
        unknown_kinds = sorted(kinds - SIMPLE_STATEMENT_KINDS)
        if unknown_kinds:
            raise ConfigError(f"single-line-if-statements has unknown kind(s): {', '.join(unknown_kinds)}")
        settings["single_line_if_statements"] = kinds
    return LintOptions(**settings)


def parse_rule_ids(values: list[str] | tuple[str, ...], option: str) -> frozenset[str]:
    """Validate rule ids given on the command line or in a config file."""
    return _rule_ids(list(values), option)


def _rule_ids(value: Any, option: str) -> frozenset[str]:
    ids = _string_set(value, option)
    unknown = sorted(ids - known_rule_ids())
    if unknown:
        raise ConfigError(f"{option} has unknown rule id(s): {', '.join(unknown)}")
    return ids


def _string_set(value: Any, option: str) -> frozenset[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{option} must be a list of strings")
    return frozenset(value)


def _has_tool_table(pyproject: Path) -> bool:
    try:
        data = _load_toml(pyproject)
    except ConfigError:
        logger.debug("Skipping unreadable %s during config discovery", pyproject)
        return False
    return "vixlint" in data.get("tool", {})


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"{path}: cannot read configuration: {exc.strerror or exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: invalid TOML: {exc}") from exc
