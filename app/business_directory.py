import streamlit as st

from db.errors import DataAccessError, QueryCancelled
from db.repository import search_directory
from navigation import navigate
from notifications import notify

MAX_SERVICES_SHOWN = 3


def format_duration(minutes: int) -> str:
    hours, remaining = divmod(int(minutes), 60)
    if hours == 0:
        return f"{remaining}min"
    if remaining == 0:
        return f"{hours}h"
    return f"{hours}h {remaining}min"


def visible_services(services):
    """(services to show, how many more are hidden)."""
    shown = services[:MAX_SERVICES_SHOWN]
    return shown, len(services) - len(shown)


def format_price(price: float) -> str:
    return f"€{price:.2f}"


def book_path(business_id: str) -> str:
    return f"/business/{business_id}"


def render_business_directory(client, ctx, token):
    """Public listing; works with or without a session."""
    head_left, head_right = st.columns([4, 1])
    head_left.title("🏪 Business Directory")
    if ctx is None and head_right.button("Sign in", key="directory-sign-in"):
        navigate("/auth")

    search_col, button_col = st.columns([4, 1])
    term = search_col.text_input(
        "Search businesses",
        key="directory_search",
        placeholder="Search by name or description...",
        label_visibility="collapsed",
    )
    # Enter in the box and the button both rerun with the current term
    button_col.button("Search", use_container_width=True)

    try:
        with st.spinner("Loading businesses..."):
            businesses = search_directory(client, term, token)
    except QueryCancelled:
        return
    except DataAccessError:
        notify("error", "Search failed")
        businesses = []

    if not businesses:
        st.info("No businesses found.")
        return

    cols = st.columns(3)
    for i, business in enumerate(businesses):
        with cols[i % 3].container(border=True):
            st.subheader(business.name)
            st.caption(business.description or "No description available")

            if business.address:
                st.write(f"📍 {business.address}")
            if business.phone:
                st.write(f"📞 {business.phone}")
            if business.email:
                st.write(f"📧 {business.email}")

            if business.services:
                st.markdown("**Services**")
                shown, extra = visible_services(business.services)
                for service in shown:
                    name_col, price_col = st.columns([3, 1])
                    name_col.write(f"{service.name} · {format_duration(service.duration)}")
                    price_col.write(format_price(service.price))
                if extra > 0:
                    st.caption(f"and {extra} more services...")

            if st.button("📅 Book", key=f"book-{business.id}", use_container_width=True):
                navigate(book_path(business.id))
