# db/database.py

from supabase import create_client, Client
import streamlit as st


def get_supabase_client(cfg) -> Client:
    """
    Returns a Supabase client cached for the current browser session.
    Uses the anon key so every query runs under the signed-in user's
    row-level security policies.
    """

    if "supabase_client" not in st.session_state:
        st.session_state.supabase_client = create_client(cfg.url, cfg.anon_key)

    return st.session_state.supabase_client
