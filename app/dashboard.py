import streamlit as st

from db.errors import DataAccessError, QueryCancelled
from db.repository import fetch_owned_businesses
from navigation import navigate, require_session
from notifications import notify


def render_dashboard(client, ctx, token, store):
    ctx = require_session(ctx)

    # --- Header ---
    head_left, head_right = st.columns([4, 1])
    with head_left:
        st.title("📅 Dashboard")
        st.caption(f"Hello, {ctx.display_name}")
    with head_right:
        if st.button("Sign out", key="dashboard-sign-out"):
            store.sign_out()
            navigate("/auth")

    st.write("Manage your businesses, services and bookings from one place.")

    try:
        with st.spinner("Loading your businesses..."):
            businesses = fetch_owned_businesses(client, ctx.user_id, token)
    except QueryCancelled:
        return
    except DataAccessError:
        notify("error", "Could not load your businesses")
        businesses = []

    # --- Quick stats ---
    col1, col2, col3 = st.columns(3)
    col1.metric("My businesses", len(businesses), help="Total registered businesses")
    # Not wired to data yet
    col2.metric("Today's bookings", 0, help="Appointments scheduled for today")
    col3.metric("Customers", 0, help="Registered customers")

    # --- Admin ---
    if ctx.is_admin:
        st.divider()
        st.subheader("🛡️ Administration")
        if st.button("Register user", key="dashboard-admin-register"):
            navigate("/admin/register")

    # --- Businesses ---
    st.divider()
    title_col, new_col = st.columns([4, 1])
    title_col.subheader("My businesses")
    if new_col.button("➕ New business", key="dashboard-new-business"):
        navigate("/business/new")

    if not businesses:
        st.info("You don't have any businesses yet. Create your first one to start taking bookings.")
    else:
        cols = st.columns(3)
        for i, business in enumerate(businesses):
            with cols[i % 3].container(border=True):
                st.markdown(f"**{business.name}**")
                st.caption(business.description or "No description")
                st.write(f"📧 {business.email or '-'}")
                st.write(f"📞 {business.phone or '-'}")
                st.write(f"📍 {business.address or '-'}")
                view_col, settings_col = st.columns(2)
                if view_col.button("View", key=f"view-{business.id}"):
                    navigate(f"/business/{business.id}")
                if settings_col.button("Settings", key=f"settings-{business.id}"):
                    navigate(f"/business/{business.id}/settings")

    # --- Quick actions ---
    st.divider()
    st.subheader("Quick actions")
    a1, a2, a3, a4 = st.columns(4)
    if a1.button("📅 Bookings", use_container_width=True):
        navigate("/bookings")
    if a2.button("👥 Customers", use_container_width=True):
        navigate("/customers")
    if a3.button("🏪 Directory", use_container_width=True):
        navigate("/businesses")
    if a4.button("👤 Profile", use_container_width=True):
        navigate("/profile")
