"""
Equation commands for eqcheck CLI.

- check: parse equations and report whether each one holds
- eval: print the value of a single expression
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from eqcheck.cli_ui import console, print_error, print_summary, print_verdict
from eqcheck.core.config import EqcheckConfig
from eqcheck.core.errors import ParseError
from eqcheck.core.expression_lang import evaluate, parse_equation, parse_expression
from eqcheck.core.ir import Number

logger = logging.getLogger(__name__)

EXIT_INCORRECT = 1
EXIT_INVALID = 2


def _read_equations(path: Path) -> list[tuple[str, str]]:
    """Read (origin, equation) pairs, one equation per line.

    Blank lines and lines starting with '#' are skipped. A path of '-'
    reads standard input.
    """
    if str(path) == "-":
        text = typer.get_text_stream("stdin").read()
        name = "<stdin>"
    else:
        text = path.read_text(encoding="utf-8")
        name = str(path)

    equations: list[tuple[str, str]] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        equations.append((f"{name}:{lineno}", line))
    return equations


def check_command(
    ctx: typer.Context,
    equations: list[str] | None = typer.Argument(  # noqa: B008
        None,
        help="Equations such as '1 + 1 = 2' (quote each one)",
    ),
    file: Path | None = typer.Option(  # noqa: B008
        None,
        "--file",
        "-f",
        help="Read one equation per line from a file ('-' for stdin)",
    ),
    summary: bool = typer.Option(
        False,
        "--summary",
        "-s",
        help="Print a table of verdict counts at the end",
    ),
) -> None:
    """
    Check whether equations hold.

    Exit code is 0 when every equation is correct, 1 when any is incorrect,
    and 2 when any fails to parse.
    """
    config: EqcheckConfig = ctx.obj

    inputs = [(f"argument {i}", text) for i, text in enumerate(equations or [], start=1)]
    if file is not None:
        try:
            inputs.extend(_read_equations(file))
        except (OSError, UnicodeDecodeError) as e:
            typer.echo(f"Error reading {file}: {e}", err=True)
            raise typer.Exit(code=EXIT_INVALID)

    if not inputs:
        typer.echo("No equations given. Pass them as arguments or with --file.", err=True)
        raise typer.Exit(code=EXIT_INVALID)

    correct = incorrect = invalid = 0
    for origin, text in inputs:
        try:
            equation = parse_equation(text, max_depth=config.parser.max_depth)
        except ParseError as e:
            invalid += 1
            print_error(f"{origin}: {e}")
            continue

        verdict = equation.is_correct(rel_tol=config.check.rel_tol, abs_tol=config.check.abs_tol)
        if verdict:
            correct += 1
        else:
            incorrect += 1
            left, right = equation.evaluate()
            logger.debug(f"{origin}: left side is {left!r}, right side is {right!r}")
        print_verdict(str(equation), verdict)

    if summary:
        print_summary(correct, incorrect, invalid)

    if invalid:
        raise typer.Exit(code=EXIT_INVALID)
    if incorrect:
        raise typer.Exit(code=EXIT_INCORRECT)


def eval_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Expression such as '2^3^2'"),
) -> None:
    """Print the value of an arithmetic expression."""
    config: EqcheckConfig = ctx.obj

    try:
        expr, rest = parse_expression(expression, max_depth=config.parser.max_depth)
    except ParseError as e:
        print_error(str(e))
        raise typer.Exit(code=EXIT_INVALID)

    if rest:
        print_error(f"Unexpected trailing input: {rest!r}")
        raise typer.Exit(code=EXIT_INVALID)

    console.print(str(Number(value=evaluate(expr))), highlight=False)
