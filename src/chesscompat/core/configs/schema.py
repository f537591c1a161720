"""Strongly-typed configuration schemas for chesscompat.

These dataclasses provide validation, IDE support, and serve as the
single source of truth for all configuration options.
"""

from dataclasses import asdict, dataclass, field, fields
from typing import Any

from chesscompat.core.chess.types import VariantLabel

_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class DestsConfig:
    """Configuration for the chessground destination map."""

    chess960: bool = False  # Skip the two-square castling destinations

    def __post_init__(self) -> None:
        """Validate field types."""
        if not isinstance(self.chess960, bool):
            msg = f"dests.chess960 must be true or false (got {self.chess960!r})"
            raise ValueError(msg)


@dataclass
class LoggingConfig:
    """Configuration for loguru sinks."""

    level: str = "INFO"
    file: str | None = None
    rotation: str = "10 MB"
    retention: str = "1 week"

    def __post_init__(self) -> None:
        """Normalize and validate the log level and file."""
        if not isinstance(self.level, str):
            msg = f"logging.level must be a level name (got {self.level!r})"
            raise ValueError(msg)
        if self.file is not None and not isinstance(self.file, str):
            msg = f"logging.file must be a path (got {self.file!r})"
            raise ValueError(msg)

        self.level = self.level.upper()
        if self.level not in _LOG_LEVELS:
            msg = f"Unknown log level {self.level!r} (expected one of {', '.join(_LOG_LEVELS)})"
            raise ValueError(msg)


@dataclass
class CompatConfig:
    """Top-level configuration combining all sub-configs."""

    variant: str = VariantLabel.STANDARD.value
    dests: DestsConfig = field(default_factory=DestsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self) -> None:
        """Validate the variant label."""
        # Raises ValueError for unknown labels
        VariantLabel(self.variant)

    @property
    def variant_label(self) -> VariantLabel:
        """The configured variant as an enum."""
        return VariantLabel(self.variant)

    @property
    def chess960(self) -> bool:
        """Whether castling is shown as chess960 (explicitly or via the variant)."""
        return self.dests.chess960 or self.variant_label is VariantLabel.CHESS960


def config_from_dict(data: dict[str, Any]) -> CompatConfig:
    """Create CompatConfig from a dictionary (e.g., from OmegaConf).

    Args:
        data: Dictionary with configuration values.

    Returns:
        CompatConfig instance.

    Raises:
        ValueError: On unknown keys, non-mapping sections or invalid values.
    """
    _check_keys(data, {f.name for f in fields(CompatConfig)}, "config")
    return CompatConfig(
        variant=data.get("variant", VariantLabel.STANDARD.value),
        dests=_section(data, "dests", DestsConfig),
        logging=_section(data, "logging", LoggingConfig),
    )


def _section(data: dict[str, Any], name: str, cls: type[Any]) -> Any:
    values = data.get(name)
    if values is None:
        values = {}
    if not isinstance(values, dict):
        msg = f"Config section {name!r} must be a mapping (got {values!r})"
        raise ValueError(msg)
    _check_keys(values, {f.name for f in fields(cls)}, name)
    return cls(**values)


def _check_keys(values: dict[str, Any], allowed: set[str], where: str) -> None:
    unknown = sorted(str(key) for key in values if key not in allowed)
    if unknown:
        msg = f"Unknown {where} key(s): {', '.join(unknown)} (expected {', '.join(sorted(allowed))})"
        raise ValueError(msg)


def config_to_dict(config: CompatConfig) -> dict[str, Any]:
    """Convert CompatConfig to a dictionary for serialization.

    Args:
        config: CompatConfig instance.

    Returns:
        Dictionary representation.
    """
    return asdict(config)
