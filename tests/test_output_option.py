"""Tests for compound -o flag parsing."""

import pytest

from rdmd.core.args.models import OutputOptions
from rdmd.core.args.output import parse_output_option
from rdmd.core.errors import (
    ArgumentError,
    DuplicateOutputDirError,
    DuplicateOutputFileError,
    EmptyOptionValueError,
    InvalidOptionError,
    UnrecognizedOptionError,
    UnsupportedOptionError,
)


class TestValidation:
    """Flag name and empty value checks run before dispatch."""

    def test_wrong_flag_name(self) -> None:
        with pytest.raises(InvalidOptionError) as exc_info:
            parse_output_option(OutputOptions(), "x", "fapp")
        assert exc_info.value.flag == "x"

    def test_wrong_flag_checked_before_empty_value(self) -> None:
        with pytest.raises(InvalidOptionError):
            parse_output_option(OutputOptions(), "q", "")

    def test_empty_value(self) -> None:
        with pytest.raises(EmptyOptionValueError):
            parse_output_option(OutputOptions(), "o", "")

    def test_errors_are_argument_errors(self) -> None:
        with pytest.raises(ArgumentError):
            parse_output_option(OutputOptions(), "o", "zzz")


class TestPreserveOutputPaths:
    """-op is an exact match and repeatable."""

    def test_sets_flag_only(self) -> None:
        result = parse_output_option(OutputOptions(), "o", "p")
        assert result.preserve_output_paths is True
        assert result.output_file == ""
        assert result.output_dir == ""

    def test_repeatable(self) -> None:
        state = parse_output_option(OutputOptions(), "o", "p")
        state = parse_output_option(state, "o", "p")
        assert state == OutputOptions(preserve_output_paths=True)

    def test_prefix_is_not_a_match(self) -> None:
        with pytest.raises(UnrecognizedOptionError) as exc_info:
            parse_output_option(OutputOptions(), "o", "pbar")
        assert exc_info.value.option == "-opbar"


class TestOutputDir:
    """-od sets the output directory once."""

    def test_attached(self) -> None:
        result = parse_output_option(OutputOptions(), "o", "dfranklymydir")
        assert result.output_dir == "franklymydir"
        assert result.output_file == ""
        assert result.preserve_output_paths is False

    def test_equals(self) -> None:
        result = parse_output_option(OutputOptions(), "o", "d=ordoi")
        assert result.output_dir == "ordoi"

    def test_only_one_equals_stripped(self) -> None:
        result = parse_output_option(OutputOptions(), "o", "d==odd")
        assert result.output_dir == "=odd"

    def test_duplicate_rejected_and_state_kept(self) -> None:
        state = parse_output_option(OutputOptions(), "o", "dfranklymydir")
        with pytest.raises(DuplicateOutputDirError) as exc_info:
            parse_output_option(state, "o", "dwhatever")
        assert exc_info.value.existing == "franklymydir"
        assert state.output_dir == "franklymydir"

    def test_duplicate_rejected_even_when_identical(self) -> None:
        state = parse_output_option(OutputOptions(), "o", "dsame")
        with pytest.raises(DuplicateOutputDirError):
            parse_output_option(state, "o", "d=same")


class TestOutputFile:
    """-of sets the output file once."""

    def test_attached(self) -> None:
        result = parse_output_option(OutputOptions(), "o", "fmyexe")
        assert result.output_file == "myexe"

    def test_equals(self) -> None:
        result = parse_output_option(OutputOptions(), "o", "f=oryetanother")
        assert result.output_file == "oryetanother"

    def test_duplicate_rejected(self) -> None:
        state = parse_output_option(OutputOptions(), "o", "fone")
        with pytest.raises(DuplicateOutputFileError):
            parse_output_option(state, "o", "f=two")
        assert state.output_file == "one"

    def test_file_and_dir_are_independent(self) -> None:
        state = parse_output_option(OutputOptions(), "o", "fapp")
        state = parse_output_option(state, "o", "dbin")
        state = parse_output_option(state, "o", "p")
        assert state == OutputOptions(
            output_file="app", output_dir="bin", preserve_output_paths=True
        )

    def test_input_state_not_modified(self) -> None:
        original = OutputOptions()
        parse_output_option(original, "o", "fapp")
        assert original.output_file == ""


class TestReservedAndUnknown:
    """-o- is reserved; anything else is unrecognized."""

    def test_dash_unsupported(self) -> None:
        with pytest.raises(UnsupportedOptionError) as exc_info:
            parse_output_option(OutputOptions(), "o", "-")
        assert exc_info.value.option == "-o-"

    def test_dash_prefix_unrecognized(self) -> None:
        with pytest.raises(UnrecognizedOptionError):
            parse_output_option(OutputOptions(), "o", "-foo")

    @pytest.mark.parametrize("value", ["x", "P", "F", "q=1"])
    def test_unrecognized(self, value: str) -> None:
        with pytest.raises(UnrecognizedOptionError):
            parse_output_option(OutputOptions(), "o", value)
