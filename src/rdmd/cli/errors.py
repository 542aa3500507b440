"""
Standardized error handling and exit codes for the rdmd CLI.

Core errors carry no presentation; this module turns them into consistent
messages with actionable guidance and standardized exit codes.
"""

from enum import IntEnum

from rich.console import Console
from rich.markup import escape

from rdmd.core.errors import (
    DuplicateOutputDirError,
    DuplicateOutputFileError,
    InvalidPathError,
    MissingProgramError,
    RdmdError,
    UnrecognizedOptionError,
    UnsupportedOptionError,
)

console = Console(stderr=True)


class ExitCode(IntEnum):
    """Standard exit codes for rdmd CLI operations."""

    SUCCESS = 0
    """Operation completed successfully."""

    GENERAL_ERROR = 1
    """Generic error, including invalid configuration."""

    USER_ERROR = 2
    """Bad command line (actionable by user)."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it

    Example:
        >>> print_error(
        ...     "Output file specified more than once",
        ...     solution="keep a single -of<file> flag",
        ... )
    """
    console.print(f"[red]Error:[/red] {escape(problem)}", highlight=False)

    if reason:
        console.print(f"[dim]{escape(reason)}[/dim]", highlight=False)

    if solution:
        console.print(f"[cyan]→ Try:[/cyan] {escape(solution)}", highlight=False)


def _solution_for(error: RdmdError) -> str:
    """Suggest a fix for a core error."""
    if isinstance(error, (DuplicateOutputFileError, DuplicateOutputDirError)):
        return "pass -of/-od at most once each"
    if isinstance(error, (UnrecognizedOptionError, UnsupportedOptionError)):
        return "use -of<file>, -od<dir> or -op"
    if isinstance(error, InvalidPathError):
        return "pass an existing directory, e.g. --tmpdir=/tmp/rdmd"
    if isinstance(error, MissingProgramError):
        return "rdmd [options] program.d [program args], or rdmd --eval=<code>"
    return "rdmd --help"


def print_rdmd_error(error: RdmdError) -> None:
    """Print a core error with a suggested fix."""
    print_error(str(error), solution=_solution_for(error))
