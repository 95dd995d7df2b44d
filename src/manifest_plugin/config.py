"""Configuration loading for the plugin."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from manifest_plugin.errors import ConfigurationError
from manifest_plugin.models.config import PluginConfig


logger = logging.getLogger(__name__)


def read_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Read a YAML configuration file."""
    config_file = Path(path)
    if not config_file.exists():
        raise ConfigurationError(f"config file not found: {config_file}")

    yaml = YAML(typ="safe")
    try:
        data = yaml.load(config_file.read_text())
    except OSError as e:
        raise ConfigurationError(f"failed to read config file {config_file}: {e}") from e
    except YAMLError as e:
        logger.error(f"Invalid YAML in {config_file}: {e}")
        raise ConfigurationError(f"invalid YAML in config file {config_file}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"config file {config_file} must contain a mapping")
    logger.debug(f"Loaded config file: {config_file}")
    return data


def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge two dictionaries."""
    result = base.copy()
    
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value
            
    return result


def load_config(
    config_file: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> PluginConfig:
    """Build the plugin configuration.

    Values from ``overrides`` (flags and environment) take precedence over
    the config file, which takes precedence over model defaults.
    """
    data: Dict[str, Any] = {}
    if config_file:
        data = read_config_file(config_file)
    if overrides:
        data = merge_dicts(data, overrides)

    try:
        return PluginConfig(**data)
    except ValidationError as e:
        logger.error(f"Invalid plugin config: {e}")
        raise ConfigurationError(f"invalid plugin config: {e}") from e
