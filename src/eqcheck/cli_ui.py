"""
Rich output helpers for the eqcheck CLI.

Provides styled verdict lines and status messages.
"""

from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

console = Console()
err_console = Console(stderr=True)

# Style definitions
STYLES = {
    "title": Style(color="bright_cyan", bold=True),
    "correct": Style(color="green", bold=True),
    "incorrect": Style(color="red", bold=True),
    "error": Style(color="red", bold=True),
}

CORRECT_MARK = "✔"
INCORRECT_MARK = "❌"


def print_verdict(equation: str, correct: bool) -> None:
    """Print an equation followed by its verdict mark."""
    line = Text(f"{equation} ")
    if correct:
        line.append(CORRECT_MARK, style=STYLES["correct"])
    else:
        line.append(INCORRECT_MARK, style=STYLES["incorrect"])
    console.print(line, soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(Text(f"✗ {message}", style=STYLES["error"]), soft_wrap=True)


def print_summary(correct: int, incorrect: int, invalid: int) -> None:
    """Print a one-row table of verdict counts."""
    table = Table(show_header=True, header_style=STYLES["title"])
    table.add_column("correct", justify="right")
    table.add_column("incorrect", justify="right")
    table.add_column("invalid", justify="right")
    table.add_row(str(correct), str(incorrect), str(invalid))
    console.print(table)
