import json
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_FILE_PATH = REPO_ROOT / 'configs' / 'powerup_settings.json'
CONFIG_FILE_PATH = Path(os.getenv('KART_CONFIG_FILE', DEFAULT_CONFIG_FILE_PATH))


def load_config(path=None):
    """
    Loads the powerup settings file. Returns None when it is missing or unreadable.
    """
    config_path = Path(path) if path else CONFIG_FILE_PATH
    try:
        with open(config_path, 'r') as f:
            config = json.load(f)
        return config
    except FileNotFoundError:
        logger.error("Could not find config file at %s", config_path)
        return None
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Could not parse config file %s: %s", config_path, e)
        return None

# Load the config ONCE when the module is first imported
SETTINGS_CONFIG = load_config()


def get_config(key_path, default=None):
    """
    Safely gets a value from the loaded config using a 'dot.path'.
    Example: get_config('powerups.xml_path')
    """
    if not SETTINGS_CONFIG:
        return default

    try:
        keys = key_path.split('.')
        value = SETTINGS_CONFIG
        for key in keys:
            value = value[key]
        return value
    except (KeyError, TypeError):
        logger.warning("Could not find config key: %s", key_path)
        return default


def resolve_repo_path(value):
    """Relative paths in the settings file are relative to the repository root."""
    path = Path(value)
    if not path.is_absolute():
        path = REPO_ROOT / path
    return path
