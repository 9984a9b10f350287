"""Tests for GratuitySettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from gratuityctl.config.settings import GratuitySettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("GRATUITYCTL_CONFIG", "GRATUITYCTL_QUIET", "GRATUITYCTL_DISPLAY__CURRENCY"):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = GratuitySettings.from_cli(cwd=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.display.currency == "AED"
        assert settings.input.clamp_months is True

    def test_frozen(self, tmp_path: Path) -> None:
        settings = GratuitySettings.from_cli(cwd=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "gratuityctl.toml"
        toml.write_text('[display]\ncurrency = "Dhs"\n')
        settings = GratuitySettings.from_cli(cwd=tmp_path)
        assert settings.display.currency == "Dhs"
        assert settings.display.width == 100
        assert settings.config_path == toml

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[input]\nclamp_months = false\n")
        settings = GratuitySettings.from_cli(config_path=str(custom), cwd=tmp_path)
        assert settings.input.clamp_months is False
        assert settings.config_path == custom

    def test_explicit_missing_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = GratuitySettings.from_cli(config_path=str(tmp_path / "missing.toml"))
        assert settings.config_path is None
        assert settings.display.currency == "AED"

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        (tmp_path / "gratuityctl.toml").write_text("[display\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            GratuitySettings.from_cli(cwd=tmp_path)


class TestPriority:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = GratuitySettings.from_cli(cwd=tmp_path, json_output=True, quiet=True)
        assert settings.json_output is True
        assert settings.quiet is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "gratuityctl.toml").write_text("quiet = true\n")
        settings = GratuitySettings.from_cli(cwd=tmp_path, quiet=False)
        assert settings.quiet is False

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GRATUITYCTL_QUIET", "true")
        settings = GratuitySettings.from_cli(cwd=tmp_path)
        assert settings.quiet is True

    def test_nested_env_var_beats_toml(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "gratuityctl.toml").write_text('[display]\ncurrency = "Dhs"\n')
        monkeypatch.setenv("GRATUITYCTL_DISPLAY__CURRENCY", "USD")
        settings = GratuitySettings.from_cli(cwd=tmp_path)
        assert settings.display.currency == "USD"
