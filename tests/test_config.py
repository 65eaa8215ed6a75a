import tomllib

import pytest

from rgsskit.config import BehaviourConfig, Config, FilesystemConfig, GraphicsConfig


def test_defaults():
    config = Config()
    assert config.fs.game_dir == "."
    assert config.graphics.force_downlevel is False
    assert config.graphics.vsync is True
    assert config.behaviour.abort_on_panic is False


def test_empty_text_gives_defaults():
    assert Config.from_toml("") == Config()


def test_partial_section_keeps_other_defaults():
    config = Config.from_toml("[graphics]\nvsync = false\n")
    assert config.graphics == GraphicsConfig(force_downlevel=False, vsync=False)
    assert config.fs == FilesystemConfig()
    assert config.behaviour == BehaviourConfig()


def test_all_values():
    text = (
        '[fs]\ngame_dir = "games/one"\n'
        "[graphics]\nforce_downlevel = true\nvsync = false\n"
        "[behaviour]\nabort_on_panic = true\n"
    )
    config = Config.from_toml(text)
    assert config.fs.game_dir == "games/one"
    assert config.graphics.force_downlevel is True
    assert config.graphics.vsync is False
    assert config.behaviour.abort_on_panic is True


def test_unknown_keys_are_ignored():
    config = Config.from_toml("[fs]\nother = 1\n[extra]\nx = 2\n")
    assert config == Config()


def test_invalid_toml_raises():
    with pytest.raises(tomllib.TOMLDecodeError):
        Config.from_toml("[fs\n")


def test_wrong_type_raises():
    with pytest.raises(ValueError):
        Config.from_toml("[graphics]\nvsync = 1\n")


def test_section_not_table_raises():
    with pytest.raises(ValueError):
        Config.from_toml('fs = "x"\n')


def test_load_missing_file_gives_defaults(tmp_path):
    assert Config.load(tmp_path / "absent.toml") == Config()


def test_load_reads_file(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[behaviour]\nabort_on_panic = true\n", encoding="utf-8")
    assert Config.load(path).behaviour.abort_on_panic is True


def test_load_invalid_file_raises(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("not = = valid", encoding="utf-8")
    with pytest.raises(ValueError):
        Config.load(path)