"""Tests for the rdmd CLI."""

import json
import sys

import pytest
from typer.testing import CliRunner

from rdmd.cli import app, cli_main
from rdmd.cli.argv import preprocess_argv
from rdmd.cli.errors import ExitCode

runner = CliRunner()


def invoke(args: list[str]):
    """Run the app on arguments preprocessed the way cli_main does."""
    return runner.invoke(app, preprocess_argv(args))


class TestResolvedJob:
    """Successful runs print the resolved build job."""

    def test_program_job(self) -> None:
        result = invoke(["-O", "-op", "app.d", "first"])
        assert result.exit_code == ExitCode.SUCCESS
        assert "rdmd build job" in result.output
        assert "app.d" in result.output
        assert "first" in result.output
        assert "-O" in result.output

    def test_default_compiler(self) -> None:
        result = invoke(["app.d"])
        assert result.exit_code == ExitCode.SUCCESS
        assert "dmd" in result.output

    def test_compiler_override(self) -> None:
        result = invoke(["--compiler=ldc2", "app.d"])
        assert result.exit_code == ExitCode.SUCCESS
        assert "ldc2" in result.output

    def test_user_tmpdir(self) -> None:
        result = invoke(["--tmpdir=mytmp", "app.d"])
        assert result.exit_code == ExitCode.SUCCESS
        assert "mytmp" in result.output

    def test_shebang_invocation(self) -> None:
        result = invoke(["--shebang -O --build-only", "script.d", "arg"])
        assert result.exit_code == ExitCode.SUCCESS
        assert "script.d" in result.output
        assert "build-only" in result.output

    def test_program_flags_not_parsed(self) -> None:
        """Flags after the program belong to the program."""
        result = invoke(["app.d", "--help", "-o-"])
        assert result.exit_code == ExitCode.SUCCESS
        assert "Usage" not in result.output

    def test_eval_without_program(self) -> None:
        result = invoke(["--eval", "writeln(42);"])
        assert result.exit_code == ExitCode.SUCCESS
        assert "writeln(42);" in result.output

    def test_double_dash_reaches_parser(self) -> None:
        result = invoke(["-O", "--", "--chatty", "app.d"])
        assert result.exit_code == ExitCode.SUCCESS
        assert "--chatty" in result.output

    def test_later_exclude_restores_package(self) -> None:
        result = invoke(["--include=std", "--exclude=std", "app.d"])
        assert result.exit_code == ExitCode.SUCCESS
        assert "etc core std" in result.output

    def test_configured_compiler(self, user_config_dir) -> None:
        (user_config_dir / "config.json").write_text(
            json.dumps({"default_compiler": "gdmd"})
        )
        result = invoke(["app.d"])
        assert result.exit_code == ExitCode.SUCCESS
        assert "gdmd" in result.output


class TestInformational:
    """--help and --man exit early."""

    def test_help(self) -> None:
        result = invoke(["--help"])
        assert result.exit_code == ExitCode.SUCCESS
        assert "Usage: rdmd" in result.output

    def test_help_without_program(self) -> None:
        result = invoke(["--chatty", "--help"])
        assert result.exit_code == ExitCode.SUCCESS

    def test_man(self) -> None:
        result = invoke(["--man"])
        assert result.exit_code == ExitCode.SUCCESS
        assert "dlang.org" in result.output


class TestErrors:
    """Core errors become messages and exit code 2."""

    def test_duplicate_output_file(self) -> None:
        result = invoke(["-ofa", "-of=b", "app.d"])
        assert result.exit_code == ExitCode.USER_ERROR
        assert "Error:" in result.output
        assert "more than once" in result.output

    def test_duplicate_output_dir(self) -> None:
        result = invoke(["-oda", "-odb", "app.d"])
        assert result.exit_code == ExitCode.USER_ERROR
        assert "more than once" in result.output

    def test_reserved_output_option(self) -> None:
        result = invoke(["-o-", "app.d"])
        assert result.exit_code == ExitCode.USER_ERROR
        assert "not supported" in result.output

    def test_unrecognized_output_option(self) -> None:
        result = invoke(["-opbar", "app.d"])
        assert result.exit_code == ExitCode.USER_ERROR
        assert "Unrecognized option" in result.output

    def test_invalid_tmpdir(self) -> None:
        result = invoke(["--tmpdir= ", "app.d"])
        assert result.exit_code == ExitCode.USER_ERROR
        assert "not a valid path" in result.output

    def test_missing_value(self) -> None:
        result = invoke(["--compiler", "app.d"])
        assert result.exit_code == ExitCode.USER_ERROR
        assert "requires a value" in result.output

    def test_no_program(self) -> None:
        result = invoke(["-O"])
        assert result.exit_code == ExitCode.USER_ERROR
        assert "No program specified" in result.output

    def test_invalid_config(self, user_config_dir) -> None:
        (user_config_dir / "config.json").write_text(
            json.dumps({"default_compiler": ""})
        )
        result = invoke(["app.d"])
        assert result.exit_code == ExitCode.GENERAL_ERROR
        assert "Invalid rdmd configuration" in result.output


class TestCliMain:
    """The console entry point preprocesses sys.argv."""

    def test_double_dash_kept(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr(sys, "argv", ["rdmd", "-O", "--", "-g", "app.d"])
        with pytest.raises(SystemExit) as exc_info:
            cli_main()
        assert exc_info.value.code == ExitCode.SUCCESS
        output = capsys.readouterr().out
        assert "-O -g" in output
        assert "app.d" in output


class TestPreprocessArgv:
    """Tests for preprocess_argv."""

    def test_prefixes_end_of_options(self) -> None:
        assert preprocess_argv(["-O", "--", "app.d"]) == ["--", "-O", "--", "app.d"]

    def test_empty(self) -> None:
        assert preprocess_argv([]) == ["--"]
