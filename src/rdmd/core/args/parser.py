"""
Launcher flag parsing.

Walks the flags that precede the program path and threads a ``ParsedArgs``
value through each occurrence. Flags rdmd does not know are passed through
to the compiler in their original order, so ``rdmd -O -inline prog.d``
builds with ``-O -inline``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from rdmd.core.args.argv import expand_shebang, split_program_args
from rdmd.core.args.models import ParsedArgs
from rdmd.core.args.output import parse_output_option
from rdmd.core.errors import MissingOptionValueError

# Boolean flags and the ParsedArgs field each one sets
_SWITCHES = {
    "--build-only": "build_only",
    "--chatty": "verbose",
    "--dry-run": "dry_run",
    "--force": "force",
    "--help": "help",
    "--man": "man",
    "--main": "add_stub_main",
    "--makedepend": "make_depend",
}

# Single-valued flags (``--name=value``)
_VALUE_OPTIONS = {
    "--compiler": "compiler",
    "--makedepfile": "make_dep_file",
    "--tmpdir": "user_temp_dir",
}

# Repeatable flags, appended in order
_LIST_OPTIONS = {
    "--eval": "eval_snippets",
    "--loop": "loop_snippets",
    "--extra-file": "extra_files",
}

# Package filters, kept in one sequence so later flags override earlier ones
_PACKAGE_FILTERS = {
    "--exclude": "exclude",
    "--include": "include",
}

# Ends rdmd's own flags; the rest go to the compiler as written
_END_OF_OPTIONS = "--"


def _append(state: ParsedArgs, field: str, value: object) -> ParsedArgs:
    return replace(state, **{field: (*getattr(state, field), value)})


def parse_launcher_flags(
    flags: Sequence[str], state: ParsedArgs | None = None
) -> ParsedArgs:
    """
    Parse the launcher flags that precede the program path.

    A bare ``--`` stops flag parsing: everything after it is passed to the
    compiler unchanged and the ``--`` itself is dropped.

    Args:
        flags: Arguments between the invocation name and the program path
        state: Starting state (defaults to an empty ParsedArgs)

    Returns:
        ParsedArgs with every flag applied

    Raises:
        MissingOptionValueError: If a value-taking flag has no ``=value``
        ArgumentError: Any error from ``-o`` parsing
    """
    if state is None:
        state = ParsedArgs()

    i = 0
    while i < len(flags):
        arg = flags[i]
        i += 1

        if arg == _END_OF_OPTIONS:
            state = replace(
                state, compiler_flags=(*state.compiler_flags, *flags[i:])
            )
            break

        if arg in _SWITCHES:
            state = replace(state, **{_SWITCHES[arg]: True})
            continue

        name, sep, value = arg.partition("=")

        if name in _VALUE_OPTIONS:
            if not sep:
                raise MissingOptionValueError(name)
            state = replace(state, **{_VALUE_OPTIONS[name]: value})
            continue

        if name in _PACKAGE_FILTERS:
            if not sep:
                raise MissingOptionValueError(name)
            state = _append(state, "package_filters", (_PACKAGE_FILTERS[name], value))
            continue

        if name in _LIST_OPTIONS:
            if not sep:
                # ``--eval code`` is the one flag that takes its value separately
                if name != "--eval" or i >= len(flags):
                    raise MissingOptionValueError(name)
                value = flags[i]
                i += 1
            state = _append(state, _LIST_OPTIONS[name], value)
            continue

        if arg.startswith("-o") and not arg.startswith("--"):
            output = parse_output_option(state.output, "o", arg[2:])
            state = replace(state, output=output)
            continue

        state = _append(state, "compiler_flags", arg)

    return state


def parse_command_line(argv: Sequence[str]) -> ParsedArgs:
    """
    Parse a full process argument vector.

    Applies shebang expansion, locates the program boundary, parses the
    launcher flags before it, and records the program and its arguments.

    Args:
        argv: Process arguments, index 0 being the invocation name

    Returns:
        Fully parsed arguments

    Raises:
        ArgumentError: On any malformed launcher flag or an empty ``argv``

    Example:
        >>> args = parse_command_line(["rdmd", "-odbin", "-O", "app.d", "x"])
        >>> args.output_dir, args.compiler_flags, args.program, args.program_args
        ('bin', ('-O',), 'app.d', ('x',))
    """
    expanded = expand_shebang(argv)
    flags, program, program_args = split_program_args(expanded)
    state = parse_launcher_flags(flags)
    return replace(state, program=program, program_args=tuple(program_args))


__all__ = [
    "parse_command_line",
    "parse_launcher_flags",
]
