"""
Build parameter resolution.

Turns parsed arguments plus configured defaults into the settings and
job parameters of an rdmd build: where intermediate files go and which
compiler to run.
"""

from __future__ import annotations

import os
from pathlib import Path

from rdmd.core.args.models import ParsedArgs
from rdmd.core.config.models import RdmdConfig
from rdmd.core.errors import InvalidPathError, MissingProgramError
from rdmd.core.jobs import platform
from rdmd.core.jobs.models import BuildJob, BuildSettings
from rdmd.core.jobs.platform import TempDirStrategy

_SOURCE_EXTENSION = ".d"


def output_executable(parsed: ParsedArgs) -> str:
    """
    Compute the executable output path requested on the command line.

    ``-of`` wins. Otherwise ``-od`` places the executable, named after the
    program source, in the output directory.

    Returns:
        The output path, or an empty string when rdmd should choose
    """
    if parsed.output_file:
        return parsed.output_file
    if parsed.output_dir and parsed.program:
        name = os.path.basename(parsed.program)
        if name.endswith(_SOURCE_EXTENSION):
            name = name[: -len(_SOURCE_EXTENSION)]
        if os.name == "nt":
            name += ".exe"
        return os.path.join(parsed.output_dir, name)
    return ""


def build_settings(parsed: ParsedArgs, config: RdmdConfig) -> BuildSettings:
    """
    Build the process-wide settings from configuration and parsed arguments.

    Exclusions start from the configured defaults; each ``--exclude`` adds a
    pattern and each ``--include`` drops it, in command-line order, so
    ``--include=std --exclude=std`` leaves ``std`` excluded.

    Args:
        parsed: Parsed command line
        config: Configured defaults

    Returns:
        Settings for this run
    """
    exclusions = list(config.default_exclusions)
    for action, pattern in parsed.package_filters:
        if action == "include":
            exclusions = [p for p in exclusions if p != pattern]
        else:
            exclusions.append(pattern)

    return BuildSettings(
        chatty=parsed.verbose,
        build_only=parsed.build_only,
        dry_run=parsed.dry_run,
        force=parsed.force,
        preserve_output_paths=parsed.preserve_output_paths,
        exe=output_executable(parsed),
        user_temp_dir=parsed.user_temp_dir,
        exclusions=tuple(exclusions),
        extra_files=parsed.extra_files,
        compiler=parsed.compiler,
        default_compiler=config.default_compiler,
    )


def resolve_temp_dir(
    settings: BuildSettings, strategy: TempDirStrategy | None = None
) -> str:
    """
    Calculate the temporary directory for a build job.

    Args:
        settings: Build settings
        strategy: Default temp directory strategy (detected when None)

    Returns:
        ``settings.user_temp_dir`` verbatim when given, otherwise the
        platform default; always a valid path

    Raises:
        InvalidPathError: If the user temp directory is not a valid path
    """
    if settings.user_temp_dir:
        if not platform.is_valid_path(settings.user_temp_dir):
            raise InvalidPathError(settings.user_temp_dir)
        return settings.user_temp_dir

    if strategy is None:
        strategy = platform.detect_temp_dir_strategy()
    result = strategy.default_temp_dir()
    assert platform.is_valid_path(result), f"invalid default temp dir: {result!r}"
    return result


def resolve_compiler(settings: BuildSettings, exe_path: Path | None = None) -> str:
    """
    Calculate the compiler to invoke for a build job.

    An explicit --compiler is trusted as-is. Otherwise a default compiler
    sitting next to the rdmd executable takes precedence over whatever the
    executable search path would find.

    Args:
        settings: Build settings
        exe_path: Path of the running launcher (detected when None)

    Returns:
        Path to or name of the compiler

    Examples:
        >>> resolve_compiler(BuildSettings(compiler="ldc2"))
        'ldc2'
    """
    if settings.compiler:
        return settings.compiler

    if exe_path is None:
        exe_path = platform.this_exe_path()

    candidate = exe_path.parent / settings.default_compiler
    if platform.exists_as_file(candidate):
        return str(candidate)

    return settings.default_compiler


def resolve_job(
    parsed: ParsedArgs,
    config: RdmdConfig,
    *,
    strategy: TempDirStrategy | None = None,
    exe_path: Path | None = None,
) -> BuildJob:
    """
    Resolve every parameter of a build job.

    Args:
        parsed: Parsed command line
        config: Configured defaults
        strategy: Default temp directory strategy (detected when None)
        exe_path: Path of the running launcher (detected when None)

    Returns:
        The resolved build job

    Raises:
        MissingProgramError: If there is no program and no code to evaluate
        InvalidPathError: If --tmpdir is not a valid path
    """
    if not parsed.program and not parsed.has_code_to_evaluate:
        raise MissingProgramError()

    settings = build_settings(parsed, config)

    return BuildJob(
        compiler=resolve_compiler(settings, exe_path=exe_path),
        temp_dir=resolve_temp_dir(settings, strategy=strategy),
        program=parsed.program or None,
        program_args=parsed.program_args,
        compiler_flags=parsed.compiler_flags,
        exe=settings.exe or None,
        output_dir=parsed.output_dir,
        preserve_output_paths=settings.preserve_output_paths,
        exclusions=settings.exclusions,
        extra_files=settings.extra_files,
        eval_snippets=parsed.eval_snippets,
        loop_snippets=parsed.loop_snippets,
        build_only=settings.build_only,
        dry_run=settings.dry_run,
        force=settings.force,
        add_stub_main=parsed.add_stub_main,
        make_depend=parsed.make_depend,
        make_dep_file=parsed.make_dep_file,
    )


__all__ = [
    "build_settings",
    "output_executable",
    "resolve_compiler",
    "resolve_job",
    "resolve_temp_dir",
]
