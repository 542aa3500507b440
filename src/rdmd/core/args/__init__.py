"""
Command-line parsing for the rdmd launcher.

Modules:
    argv: Shebang expansion and program boundary detection
    output: Compound ``-o`` flag parsing
    parser: Launcher flag walker producing ParsedArgs
    models: Data models (ParsedArgs, OutputOptions)

Example Usage:
    >>> from rdmd.core.args import parse_command_line
    >>> args = parse_command_line(["rdmd", "--shebang -O -op", "hello.d"])
    >>> args.compiler_flags, args.preserve_output_paths, args.program
    (('-O',), True, 'hello.d')
"""

from rdmd.core.args.argv import (
    expand_shebang,
    find_program_boundary,
    split_program_args,
)
from rdmd.core.args.models import OutputOptions, ParsedArgs
from rdmd.core.args.output import parse_output_option
from rdmd.core.args.parser import parse_command_line, parse_launcher_flags

__all__ = [
    # Argv
    "expand_shebang",
    "find_program_boundary",
    "split_program_args",
    # Parsing
    "parse_output_option",
    "parse_launcher_flags",
    "parse_command_line",
    # Models
    "OutputOptions",
    "ParsedArgs",
]
