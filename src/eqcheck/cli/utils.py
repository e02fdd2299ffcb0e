"""
eqcheck CLI Utilities.

Shared utility functions used across CLI modules.
"""

import logging
import platform
from pathlib import Path

import typer

from eqcheck.core.config import EqcheckConfig, find_config, load_config
from eqcheck.core.errors import ConfigError

logger = logging.getLogger(__name__)


def get_version() -> str:
    """Get eqcheck version from pyproject.toml or package metadata."""
    from eqcheck._version import get_version as _get_version

    return _get_version()


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"eqcheck version {get_version()}")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def resolve_config(config_path: Path | None) -> EqcheckConfig:
    """Load an explicit config file, else the nearest eqcheck.toml, else defaults."""
    path = config_path or find_config(Path.cwd())
    if path is None:
        logger.debug("No eqcheck.toml found, using defaults")
        return EqcheckConfig()

    try:
        return load_config(path)
    except (ConfigError, OSError) as e:
        typer.echo(f"Error loading config: {e}", err=True)
        raise typer.Exit(code=2)
