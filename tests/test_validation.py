"""Tests for flaskgen.cli._validation — validate_args, validate_name."""

import pytest

from flaskgen.cli._errors import InvalidNameError, UsageError
from flaskgen.cli._validation import MAX_NAME_LENGTH, validate_args, validate_name


class TestValidateArgs:
    def test_single_argument_returned(self):
        assert validate_args(["my-app"]) == "my-app"

    def test_none_raises(self):
        with pytest.raises(UsageError, match="flaskgen <project_name>"):
            validate_args(None)

    def test_empty_raises(self):
        with pytest.raises(UsageError):
            validate_args([])

    def test_two_arguments_raise(self):
        with pytest.raises(UsageError, match="Example"):
            validate_args(["one", "two"])

    def test_exit_code_is_one(self):
        with pytest.raises(UsageError) as excinfo:
            validate_args([])
        assert excinfo.value.exit_code == 1


class TestValidateName:
    @pytest.mark.parametrize(
        "name",
        ["my-app", "my_app", "App42", "x", "-leading", "_private", "ALL-CAPS_123"],
    )
    def test_valid_names_returned_unchanged(self, name):
        assert validate_name(name) == name

    @pytest.mark.parametrize(
        "name",
        ["", "bad name", "name!", "naïve", "a/b", "..", ".", "app.v2", "tab\tname"],
    )
    def test_invalid_names_raise(self, name):
        with pytest.raises(InvalidNameError, match="letters, numbers"):
            validate_name(name)

    def test_trailing_newline_not_accepted(self):
        # A search-style match with "$" would accept "app\n".
        with pytest.raises(InvalidNameError):
            validate_name("app\n")

    def test_max_length_accepted(self):
        name = "a" * MAX_NAME_LENGTH
        assert validate_name(name) == name

    def test_too_long_rejected(self):
        with pytest.raises(InvalidNameError, match="at most"):
            validate_name("a" * (MAX_NAME_LENGTH + 1))
