"""
Error types raised by the rdmd launcher core.

Every error here is raised synchronously from an input contract violation
or an ambient configuration problem. None are retried. The CLI layer turns
them into diagnostics and exit codes; the core never prints or exits.
"""

from __future__ import annotations


class RdmdError(Exception):
    """Base exception for rdmd launcher errors."""


# =============================================================================
# Argument parsing errors
# =============================================================================


class ArgumentError(RdmdError):
    """Base exception for command-line argument errors."""


class EmptyArgumentsError(ArgumentError):
    """Program boundary scan invoked on an empty argument vector."""

    def __init__(self) -> None:
        super().__init__("Argument vector is empty; expected at least the invocation name")


class InvalidOptionError(ArgumentError):
    """Output-option parser invoked for a flag other than ``-o``."""

    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"Invalid option '-{flag}': expected '-o'")


class EmptyOptionValueError(ArgumentError):
    """``-o`` given without an attached value."""

    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"Option '-{flag}' requires a value (e.g. -of<file>, -od<dir>, -op)")


class DuplicateOutputFileError(ArgumentError):
    """A second ``-of`` after one was already accepted."""

    def __init__(self, existing: str, value: str) -> None:
        self.existing = existing
        self.value = value
        super().__init__(
            f"Output file specified more than once: '{existing}' and '{value}'"
        )


class DuplicateOutputDirError(ArgumentError):
    """A second ``-od`` after one was already accepted."""

    def __init__(self, existing: str, value: str) -> None:
        self.existing = existing
        self.value = value
        super().__init__(
            f"Output directory specified more than once: '{existing}' and '{value}'"
        )


class UnsupportedOptionError(ArgumentError):
    """The reserved ``-o-`` spelling."""

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f"Option '{option}' is not supported")


class UnrecognizedOptionError(ArgumentError):
    """A ``-o`` value that matches none of ``f``, ``d``, ``p`` or ``-``."""

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f"Unrecognized option '{option}'")


class MissingOptionValueError(ArgumentError):
    """A value-taking launcher flag given without ``=value``."""

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f"Option '{option}' requires a value: use {option}=<value>")


class MissingProgramError(ArgumentError):
    """No program path and nothing to evaluate."""

    def __init__(self) -> None:
        super().__init__("No program specified")


# =============================================================================
# Build parameter resolution errors
# =============================================================================


class ResolutionError(RdmdError):
    """Base exception for build parameter resolution errors."""


class InvalidPathError(ResolutionError):
    """A user-supplied path that is not syntactically valid."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Specified tempdir is not a valid path: '{path}'")


__all__ = [
    "RdmdError",
    "ArgumentError",
    "EmptyArgumentsError",
    "InvalidOptionError",
    "EmptyOptionValueError",
    "DuplicateOutputFileError",
    "DuplicateOutputDirError",
    "UnsupportedOptionError",
    "UnrecognizedOptionError",
    "MissingOptionValueError",
    "MissingProgramError",
    "ResolutionError",
    "InvalidPathError",
]
