"""Pre-DB bootstrap configuration. Zero imports from the rest of the app
except constants.

Stores user preferences that must be known before opening the DB (data folder,
log level). Config lives in ~/.rei/config.json to avoid a bootstrapping problem.
"""
import json
import logging
import os
from pathlib import Path

from utils.constants import DEFAULT_LOG_LEVEL

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".rei"
CONFIG_FILE = CONFIG_DIR / "config.json"


def load_config(config_file: Path = CONFIG_FILE) -> dict:
    """Returns {} on missing or corrupt file — never raises."""
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(config: dict, config_file: Path = CONFIG_FILE) -> None:
    """Creates the config folder if needed; atomic write via .tmp + os.replace()."""
    config_file.parent.mkdir(parents=True, exist_ok=True)
    tmp = config_file.with_suffix(".tmp")
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        os.replace(tmp, config_file)
    except OSError:
        logger.exception("Could not write config file %s", config_file)
        tmp.unlink(missing_ok=True)


def get_data_folder(config_file: Path = CONFIG_FILE) -> str:
    """Return config["data_folder"], falling back to the config directory."""
    return load_config(config_file).get("data_folder") or str(config_file.parent)


def set_data_folder(path: str | None, config_file: Path = CONFIG_FILE) -> None:
    """Update data_folder in config and save."""
    config = load_config(config_file)
    if path is None:
        config.pop("data_folder", None)
    else:
        config["data_folder"] = path
    save_config(config, config_file)


def get_log_level(config_file: Path = CONFIG_FILE) -> str:
    return str(load_config(config_file).get("log_level") or DEFAULT_LOG_LEVEL).upper()
