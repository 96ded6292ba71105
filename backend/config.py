# backend/config.py

import copy
import logging
import os

import yaml

from .errors import ConfigError

DEFAULT_CONFIG_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "config", "game_config.yaml"
)

DEFAULTS = {
    "game": {
        "default_size": 9,
        "default_mines": 10,
        "seed": None,
    },
    "display": {
        "hidden_marker": "X",
        "mine_marker": "M",
    },
    "logging": {
        "level": "WARNING",
    },
    "api": {
        "host": "127.0.0.1",
        "port": 5000,
        "max_size": 100,
    },
}


def load_config(path: str = None) -> dict:
    """
    Load the YAML config at `path` (the bundled config/game_config.yaml by
    default) and merge it section by section over DEFAULTS. A missing file
    leaves the defaults untouched.
    """
    path = path or DEFAULT_CONFIG_PATH
    config = copy.deepcopy(DEFAULTS)

    if not os.path.exists(path):
        return config

    try:
        with open(path, "r") as f:
            loaded = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Could not read config {path}: {e}") from e

    if not isinstance(loaded, dict):
        raise ConfigError(f"Config {path} must be a mapping of sections")

    for section, values in loaded.items():
        if values is None:
            continue
        if not isinstance(values, dict):
            raise ConfigError(f"Section '{section}' in {path} must be a mapping")
        config.setdefault(section, {}).update(values)

    return config


def board_options(config: dict) -> dict:
    """Keyword arguments for Board taken from the display section."""
    display = config.get("display", {})
    return {
        "hidden_marker": str(display.get("hidden_marker", DEFAULTS["display"]["hidden_marker"])),
        "mine_marker": str(display.get("mine_marker", DEFAULTS["display"]["mine_marker"])),
    }


def parse_log_level(level) -> int:
    """Turn a level name such as "debug" into its logging constant."""
    if isinstance(level, int) and not isinstance(level, bool):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ConfigError(f"Unknown logging level {level!r}")
    return value


def configure_logging(level="WARNING"):
    level = parse_log_level(level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
