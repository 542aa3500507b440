"""
Data models for launcher argument parsing.

Parsing threads these frozen values through each flag occurrence with
``dataclasses.replace``; once parsing is finished the result never changes.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OutputOptions:
    """
    Destinations selected by compound ``-o`` flags.

    Attributes:
        output_file: Executable path from ``-of`` (empty when not given)
        output_dir: Output directory from ``-od`` (empty when not given)
        preserve_output_paths: Set by ``-op``; keep source paths for outputs
    """

    output_file: str = ""
    output_dir: str = ""
    preserve_output_paths: bool = False


@dataclass(frozen=True)
class ParsedArgs:
    """
    Everything rdmd learned from its command line.

    Attributes:
        verbose: ``--chatty``; report each step to stderr
        build_only: ``--build-only``; build but do not run
        dry_run: ``--dry-run``; show commands without running them
        force: ``--force``; rebuild even when up to date
        help: ``--help``
        man: ``--man``
        add_stub_main: ``--main``; add a stub ``main`` to the program
        make_depend: ``--makedepend``; print dependencies in make format
        compiler: ``--compiler`` override (empty when not given)
        user_temp_dir: ``--tmpdir`` (empty when not given)
        make_dep_file: ``--makedepfile`` target (empty when not given)
        program: Target program path (empty when absent)
        output: Destinations from ``-o`` flags
        compiler_flags: Unrecognized launcher flags, passed to the compiler
        eval_snippets: ``--eval`` code, in order
        loop_snippets: ``--loop`` code, in order
        package_filters: ``--exclude``/``--include`` patterns in command-line
            order, as ``("exclude", pattern)`` or ``("include", pattern)``
        extra_files: ``--extra-file`` paths
        program_args: Arguments after the program path
    """

    verbose: bool = False
    build_only: bool = False
    dry_run: bool = False
    force: bool = False
    help: bool = False
    man: bool = False
    add_stub_main: bool = False
    make_depend: bool = False

    compiler: str = ""
    user_temp_dir: str = ""
    make_dep_file: str = ""
    program: str = ""

    output: OutputOptions = OutputOptions()

    compiler_flags: tuple[str, ...] = ()
    eval_snippets: tuple[str, ...] = ()
    loop_snippets: tuple[str, ...] = ()
    package_filters: tuple[tuple[str, str], ...] = ()
    extra_files: tuple[str, ...] = ()
    program_args: tuple[str, ...] = ()

    @property
    def output_file(self) -> str:
        return self.output.output_file

    @property
    def output_dir(self) -> str:
        return self.output.output_dir

    @property
    def preserve_output_paths(self) -> bool:
        return self.output.preserve_output_paths

    @property
    def exclusions(self) -> tuple[str, ...]:
        return tuple(p for action, p in self.package_filters if action == "exclude")

    @property
    def inclusions(self) -> tuple[str, ...]:
        return tuple(p for action, p in self.package_filters if action == "include")

    @property
    def has_code_to_evaluate(self) -> bool:
        """Whether ``--eval`` or ``--loop`` supplied code to run."""
        return bool(self.eval_snippets or self.loop_snippets)


__all__ = [
    "OutputOptions",
    "ParsedArgs",
]
