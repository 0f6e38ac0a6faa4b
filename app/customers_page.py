from __future__ import annotations

from typing import List

import pandas as pd
import streamlit as st

from contact_links import outreach_message, tel_url, whatsapp_url
from db.errors import DataAccessError, QueryCancelled
from db.models import Customer
from db.repository import fetch_owned_customers
from navigation import navigate, require_session
from notifications import notify


def filter_customers(customers: List[Customer], term: str) -> List[Customer]:
    """Name and email match case-insensitively; phone matches literally."""
    if not term:
        return list(customers)
    needle = term.lower()
    return [
        c for c in customers
        if needle in (c.name or "").lower()
        or needle in (c.email or "").lower()
        or term in (c.phone or "")
    ]


def empty_message(search_term: str) -> str:
    if search_term:
        return "No customers match your search. Try other terms."
    return "You don't have any customers yet."


def customers_frame(customers: List[Customer], date_format: str = "%d/%m/%Y") -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Name": c.name,
                "Email": c.email,
                "Phone": c.phone,
                "Registered": c.created_at.strftime(date_format) if c.created_at else "",
                "Message": whatsapp_url(c.phone, outreach_message(c.name)) if c.phone else None,
                "Call": tel_url(c.phone) if c.phone else None,
            }
            for c in customers
        ],
        columns=["Name", "Email", "Phone", "Registered", "Message", "Call"],
    )


def render_customers(client, ctx, token, cfg):
    ctx = require_session(ctx)

    if st.button("← Back", key="customers-back"):
        navigate("/dashboard")
    st.title("👥 Customers")
    st.caption("Everyone who has booked with one of your businesses")

    try:
        with st.spinner("Loading customers..."):
            customers = fetch_owned_customers(client, ctx.user_id, token)
    except QueryCancelled:
        return
    except DataAccessError:
        notify("error", "Could not load customers")
        customers = []

    search_term = st.text_input("🔍 Search customers", placeholder="Name, email or phone")
    filtered = filter_customers(customers, search_term)

    if not filtered:
        st.info(empty_message(search_term))
        return

    df = customers_frame(filtered, cfg.ui.date_format)
    st.dataframe(
        df,
        use_container_width=True,
        hide_index=True,
        column_config={
            "Message": st.column_config.LinkColumn("Message", display_text="💬 WhatsApp"),
            "Call": st.column_config.LinkColumn("Call", display_text="📞 Call"),
        },
    )

    csv = df.drop(columns=["Message", "Call"]).to_csv(index=False).encode("utf-8")
    st.download_button(
        "📥 Download as CSV",
        csv,
        "customers.csv",
        "text/csv",
        key="download-customers-csv",
    )
