"""Tests for pennies.config."""

import stat
import tomllib
from pathlib import Path

import pytest

from pennies.config import (
    create_default_config,
    get_config_path,
    get_unit,
    load_config,
    resolve_config_path,
    save_config,
)


class TestGetConfigPath:
    """Tests for get_config_path."""

    def test_uses_xdg_config_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should put config under XDG_CONFIG_HOME when set."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_config_path() == tmp_path / "pennies" / "config.toml"

    def test_falls_back_to_home_config(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should fall back to ~/.config when XDG_CONFIG_HOME is unset."""
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert get_config_path() == tmp_path / ".config" / "pennies" / "config.toml"

    def test_empty_xdg_config_home_falls_back(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should treat an empty XDG_CONFIG_HOME as unset."""
        monkeypatch.setenv("XDG_CONFIG_HOME", "")
        monkeypatch.setenv("HOME", str(tmp_path))
        assert get_config_path() == tmp_path / ".config" / "pennies" / "config.toml"


class TestResolveConfigPath:
    """Tests for resolve_config_path."""

    def test_explicit_path_wins(self, tmp_path: Path) -> None:
        """Should return the given path unchanged."""
        config_path = tmp_path / "custom.toml"
        assert resolve_config_path(config_path) == config_path

    def test_none_uses_default_location(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should fall back to the XDG location."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert resolve_config_path(None) == tmp_path / "pennies" / "config.toml"

    def test_create_default_config_uses_default_location(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Should write to the XDG location when no path is given."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        written = create_default_config()

        assert written == tmp_path / "pennies" / "config.toml"
        assert load_config() == {"unit": "pence"}


class TestCreateAndLoad:
    """Tests for create_default_config, load_config and save_config."""

    def test_creates_default_config(self, tmp_path: Path) -> None:
        """Should write the default unit."""
        config_path = tmp_path / "nested" / "config.toml"
        create_default_config(config_path)

        assert load_config(config_path) == {"unit": "pence"}

    def test_sets_secure_permissions(self, tmp_path: Path) -> None:
        """Should make the file readable by the owner only."""
        config_path = tmp_path / "config.toml"
        create_default_config(config_path)

        assert stat.S_IMODE(config_path.stat().st_mode) == 0o600

    def test_save_then_load(self, tmp_path: Path) -> None:
        """Should read back what was saved."""
        config_path = tmp_path / "config.toml"
        save_config({"unit": "cents"}, config_path)

        assert load_config(config_path)["unit"] == "cents"

    def test_load_missing_raises(self, tmp_path: Path) -> None:
        """Should raise FileNotFoundError for a missing file."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")

    def test_load_invalid_toml_raises(self, tmp_path: Path) -> None:
        """Should raise TOMLDecodeError for a broken file."""
        config_path = tmp_path / "config.toml"
        config_path.write_text("unit = [")

        with pytest.raises(tomllib.TOMLDecodeError):
            load_config(config_path)


class TestGetUnit:
    """Tests for get_unit."""

    def test_missing_file_defaults_to_pence(self, tmp_path: Path) -> None:
        """Should default to pence without a config file."""
        assert get_unit(tmp_path / "missing.toml") == "pence"

    def test_missing_key_defaults_to_pence(self, tmp_path: Path) -> None:
        """Should default to pence when unit isn't set."""
        config_path = tmp_path / "config.toml"
        save_config({}, config_path)

        assert get_unit(config_path) == "pence"

    def test_configured_unit(self, tmp_path: Path) -> None:
        """Should return the configured unit."""
        config_path = tmp_path / "config.toml"
        save_config({"unit": "cents"}, config_path)

        assert get_unit(config_path) == "cents"
