"""
Compound ``-o`` flag parsing.

``-o`` takes an attached value selecting one of several behaviours:

    -of<path>, -of=<path>   executable output file (once only)
    -od<dir>,  -od=<dir>    output directory (once only)
    -op                     preserve source paths for outputs (repeatable)
    -o-                     reserved, rejected
"""

from __future__ import annotations

from dataclasses import replace

from rdmd.core.args.models import OutputOptions
from rdmd.core.errors import (
    DuplicateOutputDirError,
    DuplicateOutputFileError,
    EmptyOptionValueError,
    InvalidOptionError,
    UnrecognizedOptionError,
    UnsupportedOptionError,
)


def _strip_selector(value: str) -> str:
    """Drop the ``f``/``d`` selector and one optional ``=``."""
    rest = value[1:]
    if rest.startswith("="):
        rest = rest[1:]
    return rest


def parse_output_option(state: OutputOptions, flag: str, value: str) -> OutputOptions:
    """
    Apply one ``-o`` occurrence to the output destinations.

    The ``f``/``d`` prefix checks come first, so ``p`` and ``-`` only match
    as the whole value: ``-opbar`` and ``-o-foo`` are unrecognized.

    Args:
        state: Destinations accumulated so far
        flag: Flag name without the dash; must be ``"o"``
        value: Characters attached after the flag letter

    Returns:
        Updated destinations; ``state`` itself is never modified

    Raises:
        InvalidOptionError: If ``flag`` is not ``"o"``
        EmptyOptionValueError: If ``value`` is empty
        DuplicateOutputFileError: On a second ``-of``
        DuplicateOutputDirError: On a second ``-od``
        UnsupportedOptionError: For ``-o-``
        UnrecognizedOptionError: For any other value

    Examples:
        >>> parse_output_option(OutputOptions(), "o", "f=app").output_file
        'app'
        >>> parse_output_option(OutputOptions(), "o", "p").preserve_output_paths
        True
    """
    if flag != "o":
        raise InvalidOptionError(flag)

    if not value:
        raise EmptyOptionValueError(flag)

    if value.startswith("f"):
        path = _strip_selector(value)
        if state.output_file:
            raise DuplicateOutputFileError(state.output_file, path)
        return replace(state, output_file=path)

    if value.startswith("d"):
        path = _strip_selector(value)
        if state.output_dir:
            raise DuplicateOutputDirError(state.output_dir, path)
        return replace(state, output_dir=path)

    if value == "-":
        raise UnsupportedOptionError(f"-{flag}{value}")

    if value == "p":
        return replace(state, preserve_output_paths=True)

    raise UnrecognizedOptionError(f"-{flag}{value}")


__all__ = ["parse_output_option"]
