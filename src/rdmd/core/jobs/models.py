"""
Data models for rdmd build jobs.

Defines the settings derived once from the command line and configuration,
and the resolved job handed to the build step.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuildSettings:
    """
    Process-wide build settings.

    Built once at startup from configured defaults plus parsed arguments,
    then passed explicitly to every step that needs it.

    Attributes:
        chatty: Report each step to stderr
        build_only: Build the program but do not run it
        dry_run: Show what would run without running it
        force: Rebuild even when outputs are up to date
        preserve_output_paths: Keep source paths for output files
        exe: Output path for the generated executable (empty for default)
        user_temp_dir: Temp directory given with --tmpdir (empty for default)
        exclusions: Package patterns never rebuilt from source
        extra_files: Extra source or object files to include
        compiler: Compiler given with --compiler (empty when not given)
        default_compiler: Configured compiler name used when ``compiler``
            is empty; never empty itself
    """

    chatty: bool = False
    build_only: bool = False
    dry_run: bool = False
    force: bool = False
    preserve_output_paths: bool = False
    exe: str = ""
    user_temp_dir: str = ""
    exclusions: tuple[str, ...] = ()
    extra_files: tuple[str, ...] = ()
    compiler: str = ""
    default_compiler: str = "dmd"


@dataclass(frozen=True)
class BuildJob:
    """
    Resolved parameters of one build.

    Attributes:
        compiler: Compiler path or name to invoke
        temp_dir: Directory for intermediate build outputs
        program: Program source path, or None when evaluating code
        program_args: Arguments for the built program
        compiler_flags: Flags passed through to the compiler
        exe: Executable output path, or None to use the temp directory
        output_dir: Output directory from -od (empty when not given)
        preserve_output_paths: Keep source paths for output files
        exclusions: Package patterns never rebuilt from source
        extra_files: Extra source or object files to include
        eval_snippets: Code from --eval
        loop_snippets: Code from --loop
        build_only: Build but do not run
        dry_run: Show commands without running them
        force: Rebuild even when up to date
        add_stub_main: Add a stub main function
        make_depend: Print dependencies in make format
        make_dep_file: File to write make dependencies to
    """

    compiler: str
    temp_dir: str
    program: str | None = None
    program_args: tuple[str, ...] = ()
    compiler_flags: tuple[str, ...] = ()
    exe: str | None = None
    output_dir: str = ""
    preserve_output_paths: bool = False
    exclusions: tuple[str, ...] = ()
    extra_files: tuple[str, ...] = ()
    eval_snippets: tuple[str, ...] = ()
    loop_snippets: tuple[str, ...] = ()
    build_only: bool = False
    dry_run: bool = False
    force: bool = False
    add_stub_main: bool = False
    make_depend: bool = False
    make_dep_file: str = ""

    @property
    def evaluates_code(self) -> bool:
        """Whether the job builds from --eval/--loop code rather than a file."""
        return self.program is None


__all__ = [
    "BuildSettings",
    "BuildJob",
]
