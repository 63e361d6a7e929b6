import pytest

from argmerge.exceptions import AliasTargetError, UnknownExclusiveFieldError
from argmerge.parser import FieldKind, NameTableBuilder, kebab_case
from argmerge.parser.names import build_name_table, is_dash_only, spellings


@pytest.mark.parametrize(
    "text, expected",
    [
        ("dryRun", "dry-run"),
        ("dry-run", "dry-run"),
        ("dry_run", "dry-run"),
        ("DryRun", "dry-run"),
        ("HTTPServer", "http-server"),
        ("noDryRun", "no-dry-run"),
        ("v", "v"),
        ("", ""),
    ],
)
def test_kebab_case(text, expected):
    assert kebab_case(text) == expected


@pytest.mark.parametrize("token", ["-", "--", "---", "-----"])
def test_is_dash_only(token):
    assert is_dash_only(token)


@pytest.mark.parametrize("token", ["", "-v", "--x", "data.yml", "--="])
def test_is_not_dash_only(token):
    assert not is_dash_only(token)


def test_spellings_for_long_name():
    assert spellings("dryRun") == [("--dry-run", False), ("--no-dry-run", True)]


def test_spellings_for_negated_name():
    assert spellings("noDryRun") == [("--no-dry-run", False), ("--dry-run", True)]


def test_spellings_for_single_character():
    assert spellings("v") == [("-v", False), ("--v", False), ("--no-v", True)]


def test_table_maps_every_spelling():
    table = build_name_table({"dryRun": FieldKind.BOOLEAN, "v": FieldKind.BOOLEAN})
    assert table.get("--dry-run").field == "dryRun"
    assert table.get("--dry-run").negated is False
    assert table.get("--no-dry-run").negated is True
    assert table.get("-v").field == "v"
    assert "--ghost" not in table
    assert len(table) == 5


def test_affirmative_spelling_wins_over_complement():
    table = build_name_table({"dryRun": FieldKind.BOOLEAN, "noDryRun": FieldKind.BOOLEAN})
    assert table.get("--dry-run").field == "dryRun"
    assert table.get("--dry-run").negated is False
    assert table.get("--no-dry-run").field == "noDryRun"
    assert table.get("--no-dry-run").negated is False


def test_table_is_read_only():
    table = build_name_table({"dryRun": FieldKind.BOOLEAN})
    with pytest.raises(TypeError):
        table.entries["--x"] = table.get("--dry-run")


def test_builder_aliases_do_not_override_defaults():
    kinds = {"debug": FieldKind.BOOLEAN, "dryRun": FieldKind.BOOLEAN}
    table = NameTableBuilder(kinds).add_defaults().add_aliases({"debug": "dryRun"}).build()
    assert table.get("--debug").field == "debug"


def test_builder_negated_alias_flips_pair():
    kinds = {"verbose": FieldKind.BOOLEAN}
    table = NameTableBuilder(kinds).add_defaults().add_aliases({"quiet": "!verbose"}).build()
    assert table.get("--quiet").field == "verbose"
    assert table.get("--quiet").negated is True
    assert table.get("--no-quiet").negated is False


def test_builder_rejects_unknown_alias_target():
    with pytest.raises(AliasTargetError, match='"q" to refer to a known option but got "!ghost"'):
        build_name_table({"verbose": FieldKind.BOOLEAN}, {"q": "!ghost"})


def test_builder_rejects_unknown_exclusive_field():
    with pytest.raises(UnknownExclusiveFieldError):
        build_name_table({"a": FieldKind.BOOLEAN}, exclusives=[["a", "ghost"]])
