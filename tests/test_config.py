import pytest
import yaml

from semtag.config import DEFAULT_CONFIG_PATH, SemtagConfig, load_config
from semtag.resolver import DEFAULT_AUTO_THRESHOLD
from semtag.semver import Scope


def test_defaults_when_file_missing(tmp_path):
    config = load_config(root=str(tmp_path))
    assert config == SemtagConfig()
    assert config.version.prefix == "v"
    assert config.scope.default is Scope.AUTO
    assert config.scope.auto_threshold == DEFAULT_AUTO_THRESHOLD
    assert config.tag.remote == "origin"
    assert config.tag.push


def test_explicit_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.yaml"))


def test_load_from_root(tmp_path):
    (tmp_path / DEFAULT_CONFIG_PATH).write_text(
        """
version:
  prefix: ""
  plain: true
scope:
  default: patch
  auto_threshold: 25
tag:
  remote: upstream
  push: false
  default_branch: trunk
"""
    )
    config = load_config(root=str(tmp_path))

    assert config.version.prefix == ""
    assert config.version.plain
    assert config.scope.default is Scope.PATCH
    assert config.scope.auto_threshold == 25.0
    assert config.tag.remote == "upstream"
    assert not config.tag.push
    assert config.tag.default_branch == "trunk"


def test_partial_sections(tmp_path):
    path = tmp_path / "semtag.yaml"
    path.write_text("tag:\n  push: false\n")
    config = load_config(str(path))
    assert not config.tag.push
    assert config.tag.remote == "origin"
    assert config.version.prefix == "v"


def test_empty_file(tmp_path):
    path = tmp_path / "semtag.yaml"
    path.write_text("# nothing here\n")
    assert load_config(str(path)) == SemtagConfig()


def test_not_a_mapping(tmp_path):
    path = tmp_path / "semtag.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_invalid_yaml(tmp_path):
    path = tmp_path / "semtag.yaml"
    path.write_text("version: [unclosed\n")
    with pytest.raises(yaml.YAMLError):
        load_config(str(path))


def test_invalid_scope():
    with pytest.raises(ValueError, match="Invalid default scope"):
        SemtagConfig.from_dict({"scope": {"default": "huge"}})


def test_invalid_threshold():
    with pytest.raises(ValueError, match="auto_threshold"):
        SemtagConfig.from_dict({"scope": {"auto_threshold": "lots"}})


def test_section_must_be_mapping():
    with pytest.raises(ValueError, match="must be a mapping"):
        SemtagConfig.from_dict({"tag": "origin"})


def test_unknown_section_is_ignored(caplog):
    config = SemtagConfig.from_dict({"changelog": {"enabled": True}})
    assert config == SemtagConfig()
    assert "changelog" in caplog.text
