import pytest

from argmerge.exceptions import AliasTargetError, ParserConfigError
from argmerge.parser import ParseOptions, parse_arguments


def test_alias_long_spelling():
    args = parse_arguments(
        ["--simulate"], {"dryRun": False}, {"aliases": {"simulate": "dryRun"}}
    )
    assert args["dryRun"] is True


def test_alias_negated_spelling():
    args = parse_arguments(
        ["--no-simulate"], {"dryRun": True}, {"aliases": {"simulate": "dryRun"}}
    )
    assert args["dryRun"] is False


def test_negating_alias():
    options = {"aliases": {"quiet": "!verbose"}}
    assert parse_arguments(["--quiet"], {"verbose": True}, options)["verbose"] is False
    assert parse_arguments(["--no-quiet"], {"verbose": False}, options)["verbose"] is True


def test_alias_for_string_field():
    args = parse_arguments(["-o=out.txt"], {"output": ""}, {"aliases": {"o": "output"}})
    assert args["output"] == "out.txt"


def test_alias_written_with_dashes():
    args = parse_arguments(["-d"], {"dryRun": False}, {"aliases": {"-d": "dryRun"}})
    assert args["dryRun"] is True


def test_alias_pairs():
    options = ParseOptions(aliases=[("d", "dryRun"), ("d", "debug")])
    args = parse_arguments(["-d"], {"dryRun": False, "debug": False}, options)
    assert args["dryRun"] is True
    assert args["debug"] is False


def test_alias_never_overrides_default_spelling():
    args = parse_arguments(
        ["-v"], {"v": False, "verbose": False}, {"aliases": {"v": "verbose"}}
    )
    assert args["v"] is True
    assert args["verbose"] is False


def test_alias_to_unknown_field_fails_before_scanning():
    with pytest.raises(AliasTargetError):
        parse_arguments(["--ghost"], {"dryRun": False}, {"aliases": {"d": "dry-run"}})


def test_invalid_options_shape():
    with pytest.raises(ParserConfigError):
        parse_arguments([], {"a": False}, {"aliases": [("a",)]})
