from __future__ import annotations

import sys
import os

# --- Add project root to sys.path ---
current_dir = os.path.dirname(os.path.abspath(__file__))
parent_dir = os.path.dirname(current_dir)
if parent_dir not in sys.path:
    sys.path.insert(0, parent_dir)

import streamlit as st
import structlog

# IMPORTS
from config import ConfigError, load_config
from logging_config import setup_structured_logging
from db.database import get_supabase_client
from session import SessionStore
from navigation import PageScope, current_path, navigate, resolve
from landing import render_demo, render_index
from auth_page import render_auth_page
from dashboard import render_dashboard
from bookings_page import render_bookings
from customers_page import render_customers
from business_directory import render_business_directory
from business_settings import render_business_settings

logger = structlog.get_logger(__name__)

# Routes the app links to but whose pages live elsewhere
EXTERNAL_ROUTES = {
    "business": "Business details",
    "business_new": "Create business",
    "admin_register": "Register user",
    "profile": "Profile",
}


# --- CSS STYLING ---
def inject_custom_css():
    st.markdown("""
    <style>
        /* --- Hide Footer for clean look --- */
        footer {visibility: hidden;}

        /* Tighter cards */
        div[data-testid="stVerticalBlockBorderWrapper"] {
            border-radius: 12px;
        }
    </style>
    """, unsafe_allow_html=True)


def render_sidebar(ctx, store):
    with st.sidebar:
        st.title("Navigation")
        if ctx is not None:
            st.caption(f"Signed in as **{ctx.display_name}**")
            pages = [
                ("📊 Dashboard", "/dashboard"),
                ("📅 Bookings", "/bookings"),
                ("👥 Customers", "/customers"),
                ("🏪 Directory", "/businesses"),
            ]
        else:
            pages = [
                ("🏠 Home", "/"),
                ("🎬 Demo", "/demo"),
                ("🏪 Directory", "/businesses"),
                ("🔐 Sign in", "/auth"),
            ]
        for label, path in pages:
            if st.button(label, key=f"nav-{path}", use_container_width=True):
                navigate(path)

        if ctx is not None:
            st.divider()
            if st.button("Sign out", key="nav-sign-out", use_container_width=True):
                store.sign_out()
                navigate("/auth")


def render_unavailable(title: str):
    st.title(title)
    st.info("This page is not available in this app yet.")
    if st.button("← Back to dashboard"):
        navigate("/dashboard")


def main():
    try:
        cfg = load_config()
    except ConfigError as e:
        st.set_page_config(page_title="Booking Hub", page_icon="📅")
        st.error(str(e))
        st.stop()

    st.set_page_config(
        page_title=cfg.ui.page_title,
        page_icon=cfg.ui.page_icon,
        layout="wide",
        initial_sidebar_state="expanded",
    )
    setup_structured_logging(cfg.logging.level)
    inject_custom_css()

    client = get_supabase_client(cfg.supabase)
    store = SessionStore(client, st.session_state)
    ctx = store.current()

    render_sidebar(ctx, store)

    path = current_path()
    route, params = resolve(path)
    token = PageScope(st.session_state).enter(path)
    logger.debug("page_rendered", route=route, path=path)

    if route == "index":
        render_index()
    elif route == "demo":
        render_demo()
    elif route == "auth":
        render_auth_page(store)
    elif route == "dashboard":
        render_dashboard(client, ctx, token, store)
    elif route == "bookings":
        render_bookings(client, ctx, token, cfg)
    elif route == "customers":
        render_customers(client, ctx, token, cfg)
    elif route == "businesses":
        render_business_directory(client, ctx, token)
    elif route == "business_settings":
        render_business_settings(client, ctx, token, params)
    else:
        render_unavailable(EXTERNAL_ROUTES.get(route, "Not found"))


if __name__ == "__main__":
    main()
