"""
Argv preprocessing for the launcher command line.

Two passes run before any flag is interpreted:
- ``rdmd "--shebang -O -release" prog.d`` → ``rdmd -O -release prog.d``
- the program boundary splits launcher flags from ``prog.d`` and its own
  arguments
"""

from __future__ import annotations

from collections.abc import Sequence

from rdmd.core.errors import EmptyArgumentsError

_SHEBANG_PREFIXES = ("--shebang ", "--shebang=")

# Arguments with these endings go to the linker, never name the program
_OBJECT_EXTENSIONS = (".obj", ".o", ".lib", ".a", ".def", ".map", ".res")

_EVAL_FLAG = "--eval"


def expand_shebang(argv: Sequence[str]) -> list[str]:
    """Expand a combined ``--shebang`` argument into separate arguments.

    A shebang line passes all of its options to the interpreter as one
    argument, so ``#!/usr/bin/env rdmd --shebang -O`` arrives as
    ``["rdmd", "--shebang -O", "prog.d"]``. Only index 1 is inspected.

    Args:
        argv: Full process arguments, index 0 being the invocation name

    Returns:
        A new list: ``argv`` unchanged if index 1 holds no ``--shebang``
        prefix, otherwise with that argument replaced by its
        whitespace-split remainder
    """
    if len(argv) > 1 and argv[1].startswith(_SHEBANG_PREFIXES):
        rest = argv[1][len("--shebang ") :]
        return [argv[0], *rest.split(), *argv[2:]]
    return list(argv)


def find_program_boundary(argv: Sequence[str]) -> int | None:
    """Find the index of the program path.

    Scans left to right from index 1 and returns the first argument that is
    not a flag (``-``/``@`` prefix), not an object-like file, and not the
    value of a preceding ``--eval``.

    Args:
        argv: Shebang-expanded arguments, index 0 being the invocation name

    Returns:
        Index of the program path, or None if no argument qualifies

    Raises:
        EmptyArgumentsError: If ``argv`` is empty
    """
    if not argv:
        raise EmptyArgumentsError()

    for i in range(1, len(argv)):
        arg = argv[i]
        if arg.startswith(("-", "@")):
            continue
        if arg.endswith(_OBJECT_EXTENSIONS):
            continue
        if argv[i - 1] == _EVAL_FLAG:
            continue
        return i
    return None


def split_program_args(argv: Sequence[str]) -> tuple[list[str], str, list[str]]:
    """Split arguments into launcher flags, program path and program arguments.

    Returns:
        ``(launcher_flags, program, program_args)``; ``program`` is empty and
        ``program_args`` is empty when no program was found

    Raises:
        EmptyArgumentsError: If ``argv`` is empty
    """
    boundary = find_program_boundary(argv)
    if boundary is None:
        return list(argv[1:]), "", []
    return list(argv[1:boundary]), argv[boundary], list(argv[boundary + 1 :])


__all__ = [
    "expand_shebang",
    "find_program_boundary",
    "split_program_args",
]
