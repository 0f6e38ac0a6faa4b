import streamlit as st

_ICONS = {
    "success": "✅",
    "error": "⚠️",
    "info": "💡",
}


def notify(kind: str, message: str) -> None:
    """Transient toast; survives an st.rerun() in the same session."""
    st.toast(message, icon=_ICONS.get(kind, "💡"))
