from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

import streamlit as st


class ConfigError(Exception):
    pass


# ---------------------- DATA CLASSES ----------------------

@dataclass
class SupabaseConfig:
    url: str
    anon_key: str  # anon key only; row-level security decides what each user sees


@dataclass
class UIConfig:
    page_title: str = "Booking Hub"
    page_icon: str = "📅"
    date_format: str = "%d/%m/%Y"


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class AppConfig:
    supabase: SupabaseConfig
    ui: UIConfig = field(default_factory=UIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# ---------------------- LOADING ----------------------

def load_config(secrets: Optional[Mapping[str, Any]] = None) -> AppConfig:
    if secrets is None:
        secrets = st.secrets

    # --- Supabase ---
    # Checks for a [supabase] section first, then falls back to flat keys
    if "supabase" in secrets:
        url = secrets["supabase"].get("url", "")
        anon_key = secrets["supabase"].get("anon_key", "")
    else:
        url = secrets.get("SUPABASE_URL", "")
        anon_key = secrets.get("SUPABASE_ANON_KEY", "")

    if not url or not anon_key:
        raise ConfigError("Supabase url and anon_key must be set in .streamlit/secrets.toml")

    supabase_cfg = SupabaseConfig(url=url, anon_key=anon_key)

    # --- UI ---
    ui_section = secrets.get("ui", {})
    ui_cfg = UIConfig(
        page_title=ui_section.get("page_title", UIConfig.page_title),
        page_icon=ui_section.get("page_icon", UIConfig.page_icon),
        date_format=ui_section.get("date_format", UIConfig.date_format),
    )

    # --- Logging ---
    logging_section = secrets.get("logging", {})
    logging_cfg = LoggingConfig(level=str(logging_section.get("level", "INFO")).upper())

    return AppConfig(
        supabase=supabase_cfg,
        ui=ui_cfg,
        logging=logging_cfg,
    )
