from pathlib import Path

import pytest

from argmerge.config import ArgumentSchema, load_schema
from argmerge.exceptions import AliasTargetError, SchemaLoadError
from argmerge.parser import ParseOptions

YAML_SCHEMA = """\
defaults:
  dryRun: false
  count: 0
  input: "n/a"
  tag: []
aliases:
  d: dryRun
  q: "!dryRun"
exclusives:
  - [dryRun, input]
"""

TOML_SCHEMA = """\
exclusives = [["dryRun", "input"]]

[defaults]
dryRun = false
count = 0
input = "n/a"
tag = []

[aliases]
d = "dryRun"
"""


def test_load_yaml_schema(tmp_path):
    path = tmp_path / "argmerge.yaml"
    path.write_text(YAML_SCHEMA, encoding="UTF-8")
    schema = load_schema(path)
    assert schema.defaults == {"dryRun": False, "count": 0, "input": "n/a", "tag": []}
    assert schema.options.aliases == {"d": "dryRun", "q": "!dryRun"}
    assert schema.options.exclusives == [["dryRun", "input"]]
    assert schema.source == path


def test_load_toml_schema(tmp_path):
    path = tmp_path / "argmerge.toml"
    path.write_text(TOML_SCHEMA, encoding="UTF-8")
    schema = load_schema(str(path))
    assert schema.defaults["input"] == "n/a"
    assert schema.options.aliases == {"d": "dryRun"}


def test_schema_parse(tmp_path):
    path = tmp_path / "argmerge.yaml"
    path.write_text(YAML_SCHEMA, encoding="UTF-8")
    args = load_schema(path).parse(["-d", "--tag=a", "file.txt", "--count=2"])
    assert args["dryRun"] is True
    assert args["tag"] == ["a"]
    assert args["count"] == 2
    assert list(args) == ["file.txt"]


def test_empty_schema_file(tmp_path):
    path = tmp_path / "argmerge.yaml"
    path.write_text("", encoding="UTF-8")
    schema = load_schema(path)
    assert schema.defaults == {}
    assert schema.options == ParseOptions()


def test_missing_schema_file(tmp_path):
    with pytest.raises(SchemaLoadError, match="No such schema file"):
        load_schema(tmp_path / "missing.yaml")


def test_unsupported_schema_format(tmp_path):
    path = tmp_path / "argmerge.json"
    path.write_text("{}", encoding="UTF-8")
    with pytest.raises(SchemaLoadError, match="Unsupported schema format: .json"):
        load_schema(path)


def test_schema_must_be_mapping(tmp_path):
    path = tmp_path / "argmerge.yaml"
    path.write_text("- dryRun\n", encoding="UTF-8")
    with pytest.raises(SchemaLoadError, match="must contain a mapping"):
        load_schema(path)


def test_schema_rejects_unsupported_default(tmp_path):
    path = tmp_path / "argmerge.yaml"
    path.write_text("defaults:\n  when: {a: 1}\n", encoding="UTF-8")
    with pytest.raises(SchemaLoadError, match="when"):
        load_schema(path)


def test_schema_rejects_malformed_yaml(tmp_path):
    path = tmp_path / "argmerge.yaml"
    path.write_text("defaults: [unclosed\n", encoding="UTF-8")
    with pytest.raises(SchemaLoadError, match="Could not parse"):
        load_schema(path)


def test_schema_alias_targets_checked_on_parse(tmp_path):
    path = tmp_path / "argmerge.yaml"
    path.write_text("defaults:\n  dryRun: false\naliases:\n  d: ghost\n", encoding="UTF-8")
    schema = load_schema(path)
    with pytest.raises(AliasTargetError):
        schema.parse([])


def test_load_schema_rejects_non_path():
    with pytest.raises(TypeError):
        load_schema(42)


def test_argument_schema_defaults():
    schema = ArgumentSchema(defaults={"x": False})
    assert schema.options == ParseOptions()
    assert schema.parse(["--x"])["x"] is True
    assert isinstance(schema.source, (Path, type(None)))
