"""Configuration management utilities."""

from chesscompat.core.configs.loader import load_compat_config, load_config, save_config
from chesscompat.core.configs.schema import (
    CompatConfig,
    DestsConfig,
    LoggingConfig,
    config_from_dict,
    config_to_dict,
)

__all__ = [
    "CompatConfig",
    "DestsConfig",
    "LoggingConfig",
    "config_from_dict",
    "config_to_dict",
    "load_compat_config",
    "load_config",
    "save_config",
]
