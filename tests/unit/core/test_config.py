"""Unit tests for UpdirConfig and related functions."""

from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError
from updir.core.config import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    UpdirConfig,
    load_config,
    load_config_or_default,
    save_config,
)
from updir.core.paths import get_config_path


class TestUpdirConfig:
    """Tests for UpdirConfig Pydantic model."""

    def test_default_values(self) -> None:
        """UpdirConfig has correct default values."""
        config = UpdirConfig()

        assert config.confirm is True
        assert config.list_after is True
        assert config.show_hidden is False
        assert config.list_limit is None

    def test_list_limit_bounds(self) -> None:
        """list_limit must be between 1 and 10000."""
        with pytest.raises(ValidationError):
            UpdirConfig(list_limit=0)
        with pytest.raises(ValidationError):
            UpdirConfig(list_limit=10001)

    def test_extra_fields_forbidden(self) -> None:
        """Unknown keys are rejected."""
        with pytest.raises(ValidationError):
            UpdirConfig(colour="blue")  # type: ignore[call-arg]


class TestLoadConfig:
    """Tests for load_config function."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises ConfigNotFoundError."""
        with pytest.raises(ConfigNotFoundError):
            load_config(tmp_path / "config.toml")

    def test_valid_file(self, tmp_path: Path) -> None:
        """Values are read from TOML."""
        path = tmp_path / "config.toml"
        path.write_text("confirm = false\nlist_limit = 25\n")

        config = load_config(path)

        assert config.confirm is False
        assert config.list_limit == 25
        assert config.list_after is True

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML raises ConfigParseError."""
        path = tmp_path / "config.toml"
        path.write_text("confirm = [")

        with pytest.raises(ConfigParseError, match="Invalid TOML"):
            load_config(path)

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Schema violations raise ConfigError."""
        path = tmp_path / "config.toml"
        path.write_text('confirm = "sometimes"\n')

        with pytest.raises(ConfigError, match="Invalid config content"):
            load_config(path)

    def test_default_path(self) -> None:
        """Without a path the XDG config path is used."""
        path = get_config_path()
        path.parent.mkdir(parents=True)
        path.write_text("show_hidden = true\n")

        assert load_config().show_hidden is True


class TestLoadConfigOrDefault:
    """Tests for load_config_or_default function."""

    def test_defaults_when_missing(self, tmp_path: Path) -> None:
        """Missing files give default settings."""
        assert load_config_or_default(tmp_path / "none.toml") == UpdirConfig()

    def test_parse_errors_propagate(self, tmp_path: Path) -> None:
        """Broken files are not silently replaced by defaults."""
        path = tmp_path / "config.toml"
        path.write_text("???")

        with pytest.raises(ConfigParseError):
            load_config_or_default(path)


class TestSaveConfig:
    """Tests for save_config function."""

    def test_round_trip(self, tmp_path: Path) -> None:
        """Saved settings load back unchanged."""
        path = tmp_path / "nested" / "config.toml"
        config = UpdirConfig(confirm=False, list_limit=10)

        saved = save_config(config, path)

        assert saved == path
        assert load_config(path) == config

    def test_none_values_omitted(self, tmp_path: Path) -> None:
        """Unset optional values are not written."""
        path = tmp_path / "config.toml"

        save_config(UpdirConfig(), path)

        assert "list_limit" not in path.read_text()

    def test_write_failure(self, tmp_path: Path) -> None:
        """Write failures raise ConfigError and leave no temp file."""
        path = tmp_path / "config.toml"

        with (
            patch("updir.core.config.os.replace", side_effect=OSError("read-only")),
            pytest.raises(ConfigError, match="Failed to write config"),
        ):
            save_config(UpdirConfig(), path)

        assert list(tmp_path.iterdir()) == []
