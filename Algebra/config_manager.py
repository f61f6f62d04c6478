# config_manager.py
import json
from pathlib import Path

config_json = Path(__file__).resolve().parent.parent / "config.json"
ui_strings = Path(__file__).resolve().parent.parent / "ui_strings.json"


# Used for keys missing from config.json (and for a missing / broken file)
DEFAULT_SETTINGS = {
    "darkmode": False,
    "show_equation": True,
    "copy_result": False,
    "debug": False,
    "prompt": ">>> ",
}


def load_setting_value(key_value):
    try:
        with open(config_json, 'r', encoding='utf-8') as f:
            settings_dict = json.load(f)

    except (FileNotFoundError, json.JSONDecodeError):
        settings_dict = {}

    settings_dict = {**DEFAULT_SETTINGS, **settings_dict}

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def load_setting_description(key_value):
    try:
        with open(ui_strings, 'r', encoding='utf-8') as f:
            settings_dict = json.load(f)

    except (FileNotFoundError, json.JSONDecodeError):
        return "" if key_value != "all" else {}

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, "")


def save_setting(settings_dict):
    try:
        with open(config_json, 'w', encoding='utf-8') as f:
            json.dump(settings_dict, f, indent=4)
            return settings_dict

    except OSError:
        return {}
