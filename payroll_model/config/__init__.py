from .loaders import ConfigLoadError, load_engine_config, load_yaml_config
from .models import DEFAULT_CONFIG, EngineConfig, RevenueBase

__all__ = [
    "ConfigLoadError",
    "load_engine_config",
    "load_yaml_config",
    "DEFAULT_CONFIG",
    "EngineConfig",
    "RevenueBase",
]
