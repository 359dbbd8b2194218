"""Tests for config loading and discovery."""

import pytest

from petfinder.config import DEFAULT_CONFIG_TOML, Config, _deep_merge, _find_project_root


def test_defaults_without_config_file(tmp_path):
    config = Config.load(tmp_path)
    assert config.show_welcome is True
    assert config.search_types == ["dog", "cat"]
    assert config.adopt_all_matches is True
    assert config.log_level == "WARNING"


def test_user_file_overrides_defaults(tmp_path):
    config_dir = tmp_path / ".petfinder"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text(
        '[shelter]\nadopt_all_matches = false\n\n[logging]\nlevel = "debug"\n'
    )
    config = Config.load(tmp_path)
    assert config.adopt_all_matches is False
    assert config.log_level == "DEBUG"
    # Untouched sections keep their defaults
    assert config.search_types == ["dog", "cat"]


def test_default_toml_matches_defaults(tmp_path):
    config_dir = tmp_path / ".petfinder"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text(DEFAULT_CONFIG_TOML)
    assert Config.load(tmp_path)._data == Config.load(tmp_path / "missing")._data


def test_malformed_toml_raises(tmp_path):
    from petfinder.config import tomllib

    config_dir = tmp_path / ".petfinder"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text("[shelter\n")
    with pytest.raises(tomllib.TOMLDecodeError):
        Config.load(tmp_path)


def test_deep_merge_does_not_mutate_base():
    base = {"a": {"b": 1, "c": 2}}
    merged = _deep_merge(base, {"a": {"b": 5}})
    assert merged == {"a": {"b": 5, "c": 2}}
    assert base == {"a": {"b": 1, "c": 2}}


def test_find_project_root_walks_up(tmp_path):
    (tmp_path / ".petfinder").mkdir()
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert _find_project_root(nested) == tmp_path.resolve()


def test_search_types_string_is_wrapped_in_list(tmp_path):
    config_dir = tmp_path / ".petfinder"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text('[session]\nsearch_types = "bird"\n')
    assert Config.load(tmp_path).search_types == ["bird"]
