import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from eqcheck.core.errors import ConfigError
from eqcheck.core.expression_lang.parser import DEFAULT_MAX_DEPTH, check_max_depth
from eqcheck.core.ir.expressions import DEFAULT_ABS_TOL, DEFAULT_REL_TOL

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "eqcheck.toml"


@dataclass
class CheckConfig:
    """Tolerances used when comparing the two sides of an equation."""

    rel_tol: float = DEFAULT_REL_TOL
    abs_tol: float = DEFAULT_ABS_TOL


@dataclass
class ParserConfig:
    """Parser limits."""

    max_depth: int = DEFAULT_MAX_DEPTH  # nested parentheses and unary minus


@dataclass
class EqcheckConfig:
    """
    Settings read from eqcheck.toml.

    Example eqcheck.toml:

        [check]
        rel_tol = 1e-9
        abs_tol = 1e-12

        [parser]
        max_depth = 50
    """

    check: CheckConfig = field(default_factory=CheckConfig)
    parser: ParserConfig = field(default_factory=ParserConfig)


def find_config(start: Path) -> Path | None:
    """Find eqcheck.toml in start or the nearest parent directory that has one."""
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path) -> EqcheckConfig:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise ConfigError(f"{path} is not UTF-8 text: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    check_data = _table(data, "check", path)
    parser_data = _table(data, "parser", path)

    check_config = CheckConfig(
        rel_tol=_tolerance(check_data, "rel_tol", DEFAULT_REL_TOL, path),
        abs_tol=_tolerance(check_data, "abs_tol", DEFAULT_ABS_TOL, path),
    )

    max_depth = parser_data.get("max_depth", DEFAULT_MAX_DEPTH)
    if isinstance(max_depth, bool) or not isinstance(max_depth, int):
        raise ConfigError(f"{path}: parser.max_depth must be an integer, got {max_depth!r}")
    try:
        check_max_depth(max_depth)
    except ValueError as e:
        raise ConfigError(f"{path}: parser.{e}") from e
    parser_config = ParserConfig(max_depth=max_depth)

    logger.debug(f"Loaded config from {path}: {check_config}, {parser_config}")
    return EqcheckConfig(check=check_config, parser=parser_config)


def _table(data: dict[str, Any], name: str, path: Path) -> dict[str, Any]:
    table = data.get(name, {})
    if not isinstance(table, dict):
        raise ConfigError(f"{path}: [{name}] must be a table")
    return table


def _tolerance(table: dict[str, Any], key: str, default: float, path: Path) -> float:
    value = table.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
        raise ConfigError(f"{path}: check.{key} must be a non-negative number, got {value!r}")
    return float(value)
