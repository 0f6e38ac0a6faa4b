import streamlit as st

from navigation import navigate
from session import AuthError


def render_auth_page(store):
    if store.current() is not None:
        navigate("/dashboard")

    st.title("🔐 Sign in")
    st.caption("Use the account your business was registered with.")

    with st.form("sign-in"):
        email = st.text_input("Email", placeholder="email@example.com")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign in", type="primary")

    if not submitted:
        return

    if not email or not password:
        st.error("Email and password are required.")
        return

    try:
        with st.spinner("Signing in..."):
            store.sign_in(email.strip(), password)
    except AuthError as e:
        st.error(f"Could not sign in: {e}")
        return

    navigate("/dashboard")
