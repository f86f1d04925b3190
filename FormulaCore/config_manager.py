# config_manager.py
import os
import json
import logging
from pathlib import Path

from . import error as E

logger = logging.getLogger(__name__)

# Shipped with the package; read only
config_json = Path(__file__).resolve().parent / "config.json"

# Used for every key the settings file does not provide
DEFAULT_SETTINGS = {
    "decimal_places": 2,
    "max_nesting_depth": 100,
    "debug": False,
}


def config_path():
    """Settings file location; FORMULA_CONFIG overrides the packaged default."""
    override = os.environ.get("FORMULA_CONFIG")
    if override:
        return Path(override)
    return config_json


def _read_settings():
    path = config_path()
    try:
        with open(path, 'r', encoding= 'utf-8') as f:
            settings_dict = json.load(f)

    except FileNotFoundError:
        logger.debug(E.describe("1000") + str(path))
        return {}
    except json.JSONDecodeError as e:
        logger.warning("Ignoring unreadable settings file %s: %s", path, e)
        return {}

    if not isinstance(settings_dict, dict):
        logger.warning("Ignoring settings file %s: top level is not an object", path)
        return {}
    return settings_dict


def load_setting_value(key_value):
    settings_dict = dict(DEFAULT_SETTINGS)
    settings_dict.update(_read_settings())

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, DEFAULT_SETTINGS.get(key_value))


def load_int_setting(key_value):
    """Read an integer setting, falling back to the default if the stored value is not one."""
    value = load_setting_value(key_value)
    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning(E.describe("5000") + "%s=%r", key_value, value)
        return DEFAULT_SETTINGS[key_value]
    return value
