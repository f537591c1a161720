"""Configuration loading utilities."""

from pathlib import Path
from typing import Any

from loguru import logger
from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException

from chesscompat.core.configs.schema import CompatConfig, config_from_dict, config_to_dict


def load_config(config_path: str | Path, overrides: list[str] | None = None) -> DictConfig:
    """Load a configuration file with optional overrides.

    Args:
        config_path: Path to the YAML configuration file.
        overrides: Optional list of CLI-style overrides (e.g., ["dests.chess960=true"]).

    Returns:
        Merged configuration as a DictConfig.
    """
    config_path = Path(config_path)
    if not config_path.exists():
        msg = f"Config file not found: {config_path}"
        raise FileNotFoundError(msg)

    config = OmegaConf.load(config_path)

    if overrides:
        override_conf = OmegaConf.from_dotlist(overrides)
        config = OmegaConf.merge(config, override_conf)

    logger.debug(f"Loaded config from {config_path}")
    return config


def load_compat_config(
    config_path: str | Path | None = None,
    overrides: list[str] | None = None,
) -> CompatConfig:
    """Load a typed CompatConfig: defaults, then the file, then overrides.

    Args:
        config_path: Optional path to a YAML configuration file.
        overrides: Optional list of CLI-style overrides.

    Returns:
        Validated CompatConfig.

    Raises:
        FileNotFoundError: If config_path does not exist.
        ValueError: If the merged configuration is malformed or invalid.
    """
    try:
        config = OmegaConf.create(config_to_dict(CompatConfig()))
        if config_path is not None:
            config = OmegaConf.merge(config, load_config(config_path))
        if overrides:
            config = OmegaConf.merge(config, OmegaConf.from_dotlist(overrides))
        data = OmegaConf.to_container(config, resolve=True)
    except OmegaConfBaseException as e:
        msg = f"Invalid configuration: {e}"
        raise ValueError(msg) from e

    return config_from_dict(data)


def save_config(config: CompatConfig | DictConfig | dict[str, Any], path: str | Path) -> None:
    """Save a configuration to a YAML file.

    Args:
        config: Configuration to save.
        path: Path to save the configuration to.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if isinstance(config, CompatConfig):
        config = config_to_dict(config)
    if isinstance(config, dict):
        config = OmegaConf.create(config)

    OmegaConf.save(config, path)
