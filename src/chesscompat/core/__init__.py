"""Core translation layer and shared utilities."""

from chesscompat.core.configs import load_compat_config, load_config, save_config
from chesscompat.core.utils.logging import setup_logging

__all__ = ["load_compat_config", "load_config", "save_config", "setup_logging"]
