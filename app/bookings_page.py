from __future__ import annotations

from typing import List, Optional, Tuple

import pandas as pd
import plotly.express as px
import streamlit as st

from contact_links import reminder_message, whatsapp_url
from db.errors import DataAccessError, QueryCancelled
from db.models import BOOKING_STATUSES, Booking
from db.repository import fetch_bookings
from navigation import navigate, require_session
from notifications import notify

# Same order as BOOKING_STATUSES
STATUS_BADGES = dict(zip(BOOKING_STATUSES, [
    ("Pending", "secondary"),
    ("Confirmed", "default"),
    ("Cancelled", "destructive"),
    ("Completed", "outline"),
]))

BADGE_ICONS = {
    "default": "🟢",
    "secondary": "🟡",
    "destructive": "🔴",
    "outline": "⚪",
}

COLUMNS = [
    "Customer", "Email", "Phone", "Service", "Price",
    "Date", "Time", "Status", "Business", "Reminder",
]


def status_badge(status: Optional[str]) -> Tuple[str, str]:
    """(label, variant) for a booking status; unknown values render as pending."""
    return STATUS_BADGES.get(status or "", STATUS_BADGES["pending"])


def reminder_link(booking: Booking, date_format: str) -> Optional[str]:
    customer = booking.customer
    if customer is None or not customer.phone:
        return None
    date_str = booking.booking_date.strftime(date_format) if booking.booking_date else ""
    return whatsapp_url(
        customer.phone,
        reminder_message(customer.name, date_str, booking.start_time),
    )


def bookings_frame(bookings: List[Booking], date_format: str = "%d/%m/%Y") -> pd.DataFrame:
    records = []
    for b in bookings:
        label, variant = status_badge(b.status)
        records.append({
            "Customer": b.customer.name if b.customer else "",
            "Email": b.customer.email if b.customer else "",
            "Phone": b.customer.phone if b.customer else "",
            "Service": b.service.name if b.service else "",
            "Price": b.service.price if b.service else None,
            "Date": b.booking_date.strftime(date_format) if b.booking_date else "",
            "Time": f"{b.start_time} - {b.end_time}",
            "Status": f"{BADGE_ICONS[variant]} {label}",
            "Business": b.business.name if b.business else "",
            "Reminder": reminder_link(b, date_format),
        })
    return pd.DataFrame(records, columns=COLUMNS)


def render_bookings(client, ctx, token, cfg):
    ctx = require_session(ctx)

    if st.button("← Back", key="bookings-back"):
        navigate("/dashboard")
    st.title("📅 Bookings")
    st.caption("Manage and review every booking across your businesses")

    try:
        with st.spinner("Loading bookings..."):
            bookings = fetch_bookings(client, ctx.user_id, token)
    except QueryCancelled:
        return
    except DataAccessError:
        notify("error", "Could not load bookings")
        bookings = []

    if not bookings:
        st.info("No bookings yet.")
        return

    df = bookings_frame(bookings, cfg.ui.date_format)

    # --- KPI Metrics ---
    col1, col2, col3 = st.columns(3)
    col1.metric("Total Bookings", len(bookings))
    col2.metric("Confirmed", sum(1 for b in bookings if b.status == "confirmed"))
    col3.metric("Cancelled", sum(1 for b in bookings if b.status == "cancelled"))

    # --- Filters ---
    st.divider()
    statuses = list(df["Status"].unique())
    status_filter = st.multiselect("Filter by Status", options=statuses, default=statuses)
    filtered_df = df[df["Status"].isin(status_filter)] if status_filter else df

    # --- Chart ---
    counts = filtered_df["Status"].value_counts().rename_axis("Status").reset_index(name="Bookings")
    fig = px.bar(counts, x="Status", y="Bookings", title="Bookings by status")
    st.plotly_chart(fig, use_container_width=True)

    # --- Main Data Table ---
    st.dataframe(
        filtered_df,
        use_container_width=True,
        hide_index=True,
        column_config={
            "Price": st.column_config.NumberColumn("Price", format="€%.2f"),
            "Reminder": st.column_config.LinkColumn("Reminder", display_text="💬 WhatsApp"),
        },
    )

    # --- Export ---
    csv = filtered_df.drop(columns=["Reminder"]).to_csv(index=False).encode("utf-8")
    st.download_button(
        "📥 Download as CSV",
        csv,
        "bookings.csv",
        "text/csv",
        key="download-bookings-csv",
    )
