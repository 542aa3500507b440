"""
rdmd CLI - Main application entry point.

rdmd's command line cannot be described by an option table: flags before
the program belong to rdmd (or pass through to the compiler), everything
after it belongs to the program. The Typer command therefore takes the
arguments unparsed and hands them to the core parser.
"""

import logging
import sys

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rdmd import __version__
from rdmd.cli.argv import preprocess_argv
from rdmd.cli.errors import ExitCode, print_error, print_rdmd_error
from rdmd.core.args import ParsedArgs, parse_command_line
from rdmd.core.config import load_config
from rdmd.core.errors import RdmdError
from rdmd.core.jobs import BuildJob, resolve_job

logger = logging.getLogger(__name__)

MAN_URL = "https://dlang.org/rdmd.html"

USAGE = (
    "Usage: rdmd [RDMD AND DMD OPTIONS...] program [PROGRAM OPTIONS...]\n"
    "Builds (with dependents) and runs a D program.\n"
    f"See {MAN_URL} for the full list of options."
)

app = typer.Typer(
    name="rdmd",
    help="Build and run single-file D programs",
    add_completion=False,
)

# Unknown options are kept; cli_main also prefixes "--" so nothing is consumed
_PASSTHROUGH_SETTINGS = {
    "help_option_names": [],
    "allow_extra_args": True,
    "ignore_unknown_options": True,
    "allow_interspersed_args": False,
}

console = Console()


def _configure_logging(chatty: bool) -> None:
    """
    Configure logging for a launcher run.

    Args:
        chatty: If True, enable DEBUG level logging
    """
    level = logging.DEBUG if chatty else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        stream=sys.stderr,
    )


def _render_job(job: BuildJob) -> Table:
    """Render a resolved build job as a two-column table."""
    table = Table(title="rdmd build job", show_header=False, title_justify="left")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value")

    def _join(values: tuple[str, ...]) -> str:
        return escape(" ".join(values)) if values else "[dim]-[/dim]"

    table.add_row("compiler", escape(job.compiler))
    table.add_row("temp dir", escape(job.temp_dir))
    if job.program is not None:
        table.add_row("program", escape(job.program))
        table.add_row("program args", _join(job.program_args))
    else:
        table.add_row("eval", _join(job.eval_snippets))
        table.add_row("loop", _join(job.loop_snippets))
    table.add_row("compiler flags", _join(job.compiler_flags))
    table.add_row("executable", escape(job.exe) if job.exe else "[dim](in temp dir)[/dim]")
    table.add_row("preserve output paths", "yes" if job.preserve_output_paths else "no")
    table.add_row("exclusions", _join(job.exclusions))
    table.add_row("extra files", _join(job.extra_files))

    modes = [
        name
        for name, enabled in (
            ("build-only", job.build_only),
            ("dry-run", job.dry_run),
            ("force", job.force),
            ("main", job.add_stub_main),
            ("makedepend", job.make_depend),
        )
        if enabled
    ]
    table.add_row("modes", _join(tuple(modes)))
    if job.make_dep_file:
        table.add_row("makedepfile", escape(job.make_dep_file))
    return table


@app.command(name="rdmd", context_settings=_PASSTHROUGH_SETTINGS)
def main(ctx: typer.Context) -> None:
    """
    Build and run a D program, rebuilding it only when needed.

    Options before the program are rdmd options or are passed to the
    compiler; everything after it is passed to the program.
    """
    argv = [ctx.info_name or "rdmd", *ctx.args]

    try:
        parsed: ParsedArgs = parse_command_line(argv)
    except RdmdError as e:
        print_rdmd_error(e)
        raise typer.Exit(ExitCode.USER_ERROR)

    _configure_logging(parsed.verbose)

    if parsed.help:
        console.print(USAGE, markup=False, highlight=False)
        console.print(f"[dim]rdmd version {__version__}[/dim]")
        raise typer.Exit(ExitCode.SUCCESS)

    if parsed.man:
        console.print(f"Documentation: {MAN_URL}")
        raise typer.Exit(ExitCode.SUCCESS)

    try:
        config = load_config()
    except ValidationError as e:
        print_error("Invalid rdmd configuration", reason=str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    try:
        job = resolve_job(parsed, config)
    except RdmdError as e:
        print_rdmd_error(e)
        raise typer.Exit(ExitCode.USER_ERROR)

    logger.debug("temp dir: %s", job.temp_dir)
    logger.debug("compiler: %s", job.compiler)

    console.print(_render_job(job))


def cli_main() -> None:
    """
    Main CLI entry point.

    Preprocesses sys.argv so every token reaches the core parser, then
    invokes the Typer app.
    """
    sys.argv[1:] = preprocess_argv(sys.argv[1:])
    app(prog_name="rdmd")


__all__ = ["app", "cli_main"]
