"""
Configuration loader for YAML-based engine configurations.
"""

import logging
import yaml
from dataclasses import fields
from pathlib import Path
from typing import Any, Optional, Union, get_args, get_origin, get_type_hints

from .game_config import GameConfig, default_config
from ..core.exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)


def _expected_types(hint) -> tuple:
    if get_origin(hint) is Union:
        return get_args(hint)
    return (hint,)


def _check_value(key: str, value: Any, hint) -> Any:
    """Check a YAML value against the GameConfig field it overrides."""
    expected = _expected_types(hint)
    if value is None:
        if type(None) in expected:
            return value
    else:
        types = tuple(t for t in expected if t is not type(None))
        # YAML booleans are ints to isinstance
        if isinstance(value, types) and (bool in types or not isinstance(value, bool)):
            if key == "log_level":
                return _check_log_level(value)
            return value

    names = " or ".join(t.__name__ for t in expected)
    raise InvalidConfigurationError(
        f"Config key '{key}' expects {names}, got {type(value).__name__}: {value!r}")


def _check_log_level(value: str) -> str:
    level = value.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise InvalidConfigurationError(f"Unknown log level: {value!r}")
    return level


def load_config_from_yaml(config_path: str) -> GameConfig:
    """
    Load engine configuration from a YAML file.

    Values are checked against the types of the GameConfig fields. Unknown
    keys are logged and skipped.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        GameConfig instance with values from YAML file

    Raises:
        FileNotFoundError: If the config file doesn't exist
        yaml.YAMLError: If the YAML file is invalid
        InvalidConfigurationError: If a value has the wrong type
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_file, 'r', encoding='utf-8') as f:
        config_dict = yaml.safe_load(f)

    if config_dict is None:
        return GameConfig()
    if not isinstance(config_dict, dict):
        raise InvalidConfigurationError(f"Config file {config_path} must contain a mapping")

    hints = get_type_hints(GameConfig)
    known = {f.name for f in fields(GameConfig)}
    overrides = {}

    for key, value in config_dict.items():
        if key in known:
            overrides[key] = _check_value(key, value, hints[key])
        else:
            logger.warning("Unknown config key '%s' in %s", key, config_path)

    return GameConfig(**overrides)


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load configuration from YAML file or return default.

    Args:
        config_path: Optional path to YAML config file. If None, returns default config.

    Returns:
        GameConfig instance
    """
    if config_path is None:
        return default_config

    return load_config_from_yaml(config_path)
