"""Tests for core utilities."""

from pathlib import Path

import pytest
from loguru import logger

from chesscompat.core.chess import VariantLabel
from chesscompat.core.configs import (
    CompatConfig,
    LoggingConfig,
    config_from_dict,
    config_to_dict,
    load_compat_config,
    load_config,
    save_config,
)
from chesscompat.core.errors import InvalidSquareError
from chesscompat.core.utils import (
    make_square,
    parse_square,
    square_file,
    square_name,
    square_rank,
)
from chesscompat.core.utils.logging import setup_logging

DEFAULT_CONFIG = Path(__file__).resolve().parents[1] / "configs" / "default.yaml"


class TestSquares:
    """Tests for square index and name conversion."""

    @pytest.mark.parametrize(
        ("index", "name"),
        [(0, "a1"), (4, "e1"), (7, "h1"), (12, "e2"), (28, "e4"), (56, "a8"), (63, "h8")],
    )
    def test_square_name(self, index: int, name: str) -> None:
        assert square_name(index) == name
        assert parse_square(name) == index

    def test_bijection(self) -> None:
        names = [square_name(index) for index in range(64)]
        assert len(set(names)) == 64
        assert [parse_square(name) for name in names] == list(range(64))

    def test_file_and_rank(self) -> None:
        assert (square_file(28), square_rank(28)) == (4, 3)
        assert make_square(4, 3) == 28

    def test_parse_is_case_insensitive(self) -> None:
        assert parse_square("E4") == 28

    @pytest.mark.parametrize("index", [-1, 64, 100])
    def test_invalid_index(self, index: int) -> None:
        with pytest.raises(InvalidSquareError):
            square_name(index)

    @pytest.mark.parametrize("name", ["", "e", "e9", "i1", "e44"])
    def test_invalid_name(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square notation"):
            parse_square(name)


class TestConfig:
    """Tests for configuration utilities."""

    def test_load_config_from_file(self, tmp_path: Path) -> None:
        """Test loading a config file."""
        config_file = tmp_path / "test.yaml"
        config_file.write_text("variant: crazyhouse\ndests:\n  chess960: true\n")

        config = load_config(config_file)

        assert config.variant == "crazyhouse"
        assert config.dests.chess960 is True

    def test_load_config_with_overrides(self, tmp_path: Path) -> None:
        """Test loading config with CLI overrides."""
        config_file = tmp_path / "test.yaml"
        config_file.write_text("dests:\n  chess960: false\n")

        config = load_config(config_file, overrides=["dests.chess960=true"])

        assert config.dests.chess960 is True

    def test_load_config_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_save_config(self, tmp_path: Path) -> None:
        """Test saving a config file."""
        config_file = tmp_path / "nested" / "output.yaml"

        save_config(CompatConfig(variant="atomic"), config_file)

        assert config_file.exists()
        loaded = load_config(config_file)
        assert loaded.variant == "atomic"
        assert loaded.logging.level == "INFO"

    def test_default_config_file(self) -> None:
        """The shipped default config matches the schema defaults."""
        config = load_compat_config(DEFAULT_CONFIG)
        assert config == CompatConfig()

    def test_compat_config_defaults_without_file(self) -> None:
        config = load_compat_config()

        assert config.variant_label is VariantLabel.STANDARD
        assert config.chess960 is False

    def test_compat_config_partial_file(self, tmp_path: Path) -> None:
        """Keys missing from the file keep their defaults."""
        config_file = tmp_path / "partial.yaml"
        config_file.write_text("logging:\n  level: debug\n")

        config = load_compat_config(config_file)

        assert config.logging.level == "DEBUG"
        assert config.variant == "standard"
        assert config.dests.chess960 is False

    def test_compat_config_overrides(self) -> None:
        config = load_compat_config(overrides=["variant=threeCheck", "dests.chess960=true"])

        assert config.variant_label is VariantLabel.THREE_CHECK
        assert config.chess960 is True

    def test_chess960_variant_implies_chess960_dests(self) -> None:
        assert CompatConfig(variant="chess960").chess960 is True

    def test_unknown_variant_rejected(self) -> None:
        with pytest.raises(ValueError):
            CompatConfig(variant="bughouse")

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            LoggingConfig(level="chatty")

    def test_dict_round_trip(self) -> None:
        config = config_from_dict({"variant": "horde", "logging": {"level": "warning"}})
        assert config_to_dict(config)["variant"] == "horde"
        assert config_to_dict(config)["logging"]["level"] == "WARNING"


class TestLogging:
    """Tests for loguru setup."""

    def test_file_sink(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "chesscompat.log"

        setup_logging(LoggingConfig(level="debug", file=str(log_file)))
        logger.info("dests computed")

        assert log_file.exists()
        assert "dests computed" in log_file.read_text()

    def test_level_filters_file_sink(self, tmp_path: Path) -> None:
        log_file = tmp_path / "chesscompat.log"

        setup_logging(LoggingConfig(level="WARNING", file=str(log_file)))
        logger.info("hidden")
        logger.warning("shown")

        content = log_file.read_text()
        assert "shown" in content
        assert "hidden" not in content

    def test_defaults_without_config(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No config means INFO and above to stderr."""
        setup_logging()

        logger.debug("hidden")
        logger.info("stderr only")

        err = capsys.readouterr().err
        assert "stderr only" in err
        assert "hidden" not in err


class TestConfigValidation:
    """Malformed configuration is reported as ValueError."""

    def test_unknown_top_level_key(self) -> None:
        with pytest.raises(ValueError, match="Unknown config key"):
            load_compat_config(overrides=["garbage"])

    def test_unknown_section_key(self) -> None:
        with pytest.raises(ValueError, match="Unknown dests key"):
            load_compat_config(overrides=["dests.foo=1"])

    def test_non_string_level(self) -> None:
        with pytest.raises(ValueError, match="logging.level"):
            load_compat_config(overrides=["logging.level=5"])

    def test_non_bool_chess960(self) -> None:
        with pytest.raises(ValueError, match="dests.chess960"):
            config_from_dict({"dests": {"chess960": "sometimes"}})

    def test_section_must_be_mapping(self) -> None:
        with pytest.raises(ValueError, match="must be a mapping"):
            config_from_dict({"logging": "loud"})

    def test_non_mapping_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- standard\n- chess960\n")

        with pytest.raises(ValueError):
            load_compat_config(config_file)
