"""Tests for configuration loading."""
import pytest

from config import ConfigError, load_config


def test_loads_supabase_section():
    cfg = load_config({"supabase": {"url": "https://x.supabase.co", "anon_key": "anon"}})

    assert cfg.supabase.url == "https://x.supabase.co"
    assert cfg.supabase.anon_key == "anon"
    assert cfg.ui.date_format == "%d/%m/%Y"
    assert cfg.logging.level == "INFO"


def test_flat_keys_fallback():
    cfg = load_config({"SUPABASE_URL": "https://y.supabase.co", "SUPABASE_ANON_KEY": "k"})
    assert cfg.supabase.url == "https://y.supabase.co"


def test_optional_sections_override_defaults():
    cfg = load_config({
        "supabase": {"url": "u", "anon_key": "k"},
        "ui": {"page_title": "Salon Admin", "date_format": "%Y-%m-%d"},
        "logging": {"level": "debug"},
    })
    assert cfg.ui.page_title == "Salon Admin"
    assert cfg.ui.page_icon == "📅"
    assert cfg.ui.date_format == "%Y-%m-%d"
    assert cfg.logging.level == "DEBUG"


@pytest.mark.parametrize("secrets", [{}, {"supabase": {"url": "u"}}, {"SUPABASE_URL": "u"}])
def test_missing_credentials_raise(secrets):
    with pytest.raises(ConfigError):
        load_config(secrets)
