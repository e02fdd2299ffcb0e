"""
eqcheck CLI Package.

- check.py: check and eval commands
- utils.py: version, logging and config helpers

Usage:
    eqcheck check "1 + 1 = 2" "2^3^2 = 64"
    eqcheck check --file equations.txt
    eqcheck eval "(1 + 1) * 5"
"""

import sys
from pathlib import Path

import typer

from eqcheck.cli.check import check_command, eval_command
from eqcheck.cli.utils import (
    configure_logging,
    get_version,
    resolve_config,
    version_callback,
)

app = typer.Typer(
    help="eqcheck – check whether arithmetic equations hold",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log parsing and evaluation details",
    ),
    config: Path | None = typer.Option(  # noqa: B008
        None,
        "--config",
        "-c",
        help="Path to eqcheck.toml (default: nearest one above the current directory)",
    ),
) -> None:
    """eqcheck CLI main callback for global options."""
    configure_logging(verbose)
    ctx.obj = resolve_config(config)


app.command(name="check")(check_command)
app.command(name="eval")(eval_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["app", "main", "get_version", "version_callback"]


if __name__ == "__main__":
    main(sys.argv[1:])
