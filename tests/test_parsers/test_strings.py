import pytest

from argmerge.exceptions import ValueRequiredError
from argmerge.parser import parse_arguments


def test_string_returns_given_value():
    defaults = {"input": "n/a"}
    assert parse_arguments(["--input=dream comes true"], defaults)["input"] == "dream comes true"
    assert parse_arguments(["--input="], defaults)["input"] == ""
    assert parse_arguments(["--input=a=b"], defaults)["input"] == "a=b"


def test_string_no_prefix_clears_matching_value():
    defaults = {"input": "n/a"}
    assert parse_arguments(["--no-input"], defaults)["input"] == ""
    assert parse_arguments(["--no-input=n/a"], defaults)["input"] == ""
    assert parse_arguments(["--no-input=xxx"], defaults)["input"] == "n/a"


def test_string_no_prefix_compares_with_current_value():
    defaults = {"input": "n/a"}
    args = parse_arguments(["--input=other", "--no-input=other"], defaults)
    assert args["input"] == ""
    args = parse_arguments(["--input=other", "--no-input=n/a"], defaults)
    assert args["input"] == "other"


def test_string_without_value_raises():
    with pytest.raises(ValueRequiredError, match='"--input" to have a value'):
        parse_arguments(["--input"], {"input": "n/a"})


def test_string_rightmost_wins():
    args = parse_arguments(["--input=a", "--input=b"], {"input": ""})
    assert args["input"] == "b"
