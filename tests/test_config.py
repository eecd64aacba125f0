"""Tests for environment configuration."""

from svg2vd.config import Settings


def test_settings_fields():
    assert set(Settings.model_fields) == {
        "svg2vd_log_level",
        "svg2vd_color_mode",
        "svg2vd_element_order",
        "cors_origins",
    }


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("SVG2VD_COLOR_MODE", "legacy")
    monkeypatch.setenv("SVG2VD_ELEMENT_ORDER", "document")
    settings = Settings(_env_file=None)
    assert settings.svg2vd_color_mode == "legacy"
    assert settings.svg2vd_element_order == "document"
