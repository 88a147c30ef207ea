# payroll_model/config/loaders.py
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from cerberus import Validator
from pydantic import ValidationError

from .models import EngineConfig

logger = logging.getLogger(__name__)

ENGINE_CONFIG_SCHEMA: Dict[str, Any] = {
    "bruto_factor": {"type": "number", "required": False},
    "default_tuition_increase_pct": {"type": "number", "required": False},
    "revenue_base": {
        "type": "dict",
        "required": False,
        "schema": {
            "enrolled_children": {"type": "integer", "required": False},
            "monthly_tuition": {"type": "number", "required": False},
            "billing_months": {"type": "integer", "required": False},
        },
    },
}


class ConfigLoadError(Exception):
    """Custom exception for errors during config loading."""

    pass


def load_yaml_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Loads configuration data from a YAML file.

    Args:
        config_path: Path pointing to the YAML configuration file.

    Returns:
        A dictionary containing the loaded configuration.

    Raises:
        ConfigLoadError: If the file cannot be found or parsed, or does not
            hold a mapping.
    """
    if not isinstance(config_path, Path):
        config_path = Path(config_path)

    logger.info(f"Attempting to load configuration from: {config_path}")

    if not config_path.is_file():
        logger.error(f"Configuration file not found at path: {config_path}")
        raise ConfigLoadError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.exception(f"Error parsing YAML configuration file {config_path}: {e}")
        raise ConfigLoadError(f"Error parsing YAML file {config_path}") from e
    except OSError as e:
        logger.exception(f"Could not read configuration file {config_path}: {e}")
        raise ConfigLoadError(f"Could not read configuration file {config_path}") from e

    if config_data is None:
        config_data = {}
    if not isinstance(config_data, dict):
        logger.error(f"Configuration file {config_path} did not parse into a dictionary.")
        raise ConfigLoadError(
            f"Invalid configuration format in {config_path}: Expected a dictionary."
        )

    logger.info(f"Successfully loaded configuration from {config_path}")
    return config_data


def load_engine_config(config_path: Union[str, Path]) -> EngineConfig:
    """
    Loads YAML, validates its schema and builds an EngineConfig.
    Keys left out of the file keep their defaults.
    Raises ConfigLoadError on validation errors.
    """
    config_data = load_yaml_config(config_path)

    # 1. Schema validation (unknown keys are rejected)
    v = Validator(ENGINE_CONFIG_SCHEMA)
    if not v.validate(config_data):
        raise ConfigLoadError(f"Config validation failed: {v.errors}")

    # 2. Value validation
    try:
        config = EngineConfig(**config_data)
    except ValidationError as e:
        raise ConfigLoadError(f"Config validation failed: {e}") from e

    logger.debug(f"Engine configuration loaded: {config}")
    return config


__all__ = [
    "ENGINE_CONFIG_SCHEMA",
    "load_yaml_config",
    "load_engine_config",
    "ConfigLoadError",
]
