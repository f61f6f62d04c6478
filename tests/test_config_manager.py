import pytest

from Algebra import config_manager


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setattr(config_manager, "config_json", path)
    return path


def test_missing_config_file_gives_defaults(config_file):
    assert config_manager.load_setting_value("all") == config_manager.DEFAULT_SETTINGS


def test_broken_config_file_gives_defaults(config_file):
    config_file.write_text("{not json", encoding="utf-8")

    assert config_manager.load_setting_value("prompt") == ">>> "


def test_saved_settings_are_merged_with_defaults(config_file):
    saved = config_manager.save_setting({"darkmode": True, "prompt": "? "})

    assert saved == {"darkmode": True, "prompt": "? "}
    assert config_manager.load_setting_value("darkmode") is True
    assert config_manager.load_setting_value("prompt") == "? "
    assert config_manager.load_setting_value("debug") is False


def test_unknown_key_returns_zero(config_file):
    assert config_manager.load_setting_value("no_such_setting") == 0


def test_save_into_missing_directory_returns_empty_dict(tmp_path, monkeypatch):
    monkeypatch.setattr(config_manager, "config_json", tmp_path / "missing" / "config.json")

    assert config_manager.save_setting({"darkmode": True}) == {}


def test_every_setting_has_a_description():
    descriptions = config_manager.load_setting_description("all")

    assert set(descriptions) == set(config_manager.DEFAULT_SETTINGS)


def test_missing_ui_strings_gives_empty_descriptions(tmp_path, monkeypatch):
    monkeypatch.setattr(config_manager, "ui_strings", tmp_path / "ui_strings.json")

    assert config_manager.load_setting_description("darkmode") == ""
    assert config_manager.load_setting_description("all") == {}
