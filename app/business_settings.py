from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, time
from typing import Callable, Dict, Optional

import streamlit as st
import structlog
from email_validator import validate_email as _validate_email, EmailNotValidError

from db.errors import DataAccessError, QueryCancelled
from db.models import DAYS, Business, DayHours, business_hours_to_dict
from db.repository import fetch_business_for_owner, update_business
from navigation import navigate
from notifications import notify
from page_state import PageState, ViewState

logger = structlog.get_logger(__name__)

DAY_LABELS = {
    "monday": "Monday",
    "tuesday": "Tuesday",
    "wednesday": "Wednesday",
    "thursday": "Thursday",
    "friday": "Friday",
    "saturday": "Saturday",
    "sunday": "Sunday",
}


def default_business_hours() -> Dict[str, DayHours]:
    hours = {day: DayHours("09:00", "18:00", False) for day in DAYS[:5]}
    hours["saturday"] = DayHours("09:00", "14:00", False)
    hours["sunday"] = DayHours("09:00", "14:00", True)
    return hours


@dataclass
class SettingsForm:
    name: str = ""
    description: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    timezone: str = ""
    business_hours: Dict[str, DayHours] = field(default_factory=default_business_hours)

    def to_update(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "description": self.description or None,
            "email": self.email,
            "phone": self.phone,
            "address": self.address,
            "timezone": self.timezone,
            "business_hours": business_hours_to_dict(self.business_hours),
        }


def settings_form_from_business(business: Business) -> SettingsForm:
    return SettingsForm(
        name=business.name,
        description=business.description or "",
        email=business.email or "",
        phone=business.phone or "",
        address=business.address or "",
        timezone=business.timezone or "",
        business_hours=business.business_hours or default_business_hours(),
    )


# ----------------- VALIDATORS ------------------------

def validate_email(email: str) -> bool:
    try:
        _validate_email(email, check_deliverability=False)
        return True
    except EmailNotValidError:
        return False


def validate_settings(form: SettingsForm) -> Dict[str, str]:
    errors = {}
    if not form.name.strip():
        errors["name"] = "Name is required"
    if not form.email.strip():
        errors["email"] = "Email is required"
    elif not validate_email(form.email.strip()):
        errors["email"] = "Invalid email"
    if not form.phone.strip():
        errors["phone"] = "Phone is required"
    if not form.address.strip():
        errors["address"] = "Address is required"
    return errors


# ----------------- SAVE ------------------------

def submit_settings(
    client,
    ctx,
    business: Business,
    form: SettingsForm,
    notify: Callable[[str, str], None],
    state: Optional[PageState] = None,
    token=None,
) -> Business:
    """Writes the form back, scoped to the owner.

    Returns the business merged with the submitted fields on success and
    the untouched business on failure.
    """
    state = state or PageState(ViewState.POPULATED)
    state.move_to(ViewState.SAVING)
    payload = form.to_update()

    try:
        update_business(client, business.id, ctx.user_id, payload, token)
    except DataAccessError as e:
        logger.error("business_update_failed", business_id=business.id, error=e.message)
        state.move_to(ViewState.ERROR)
        notify("error", "Could not update the business. Please try again.")
        state.move_to(ViewState.POPULATED)
        return business

    state.move_to(ViewState.SUCCESS)
    notify("success", "Business updated successfully.")
    state.move_to(ViewState.POPULATED)
    return replace(
        business,
        name=form.name,
        description=payload["description"],
        email=form.email,
        phone=form.phone,
        address=form.address,
        timezone=form.timezone,
        business_hours=dict(form.business_hours),
    )


# ----------------- PAGE ------------------------

def _parse_hhmm(value: str, fallback: str) -> time:
    for candidate in (value, fallback):
        try:
            return datetime.strptime(candidate, "%H:%M").time()
        except (TypeError, ValueError):
            continue
    return time(9, 0)


def _field_error(errors: Dict[str, str], name: str) -> None:
    if name in errors:
        st.caption(f":red[{errors[name]}]")


def _load(client, ctx, business_id: str, token):
    state = PageState()
    try:
        business = fetch_business_for_owner(client, business_id, ctx.user_id, token)
    except DataAccessError:
        state.move_to(ViewState.ERROR)
        return None, state
    state.move_to(ViewState.POPULATED if business else ViewState.EMPTY)
    return business, state


def render_business_settings(client, ctx, token, params):
    business_id = params.get("id")
    if ctx is None or not business_id:
        navigate("/dashboard")

    cache_key = f"business_settings:{business_id}"
    cached = st.session_state.get(cache_key)
    if cached is None or cached["token"] != token.id:
        try:
            with st.spinner("Loading settings..."):
                business, state = _load(client, ctx, business_id, token)
        except QueryCancelled:
            return
        if state.status is not ViewState.POPULATED:
            # Missing or not ours: leave quietly
            navigate("/dashboard")
        cached = {"token": token.id, "business": business, "state": state, "errors": {}}
        st.session_state[cache_key] = cached

    business: Business = cached["business"]
    errors: Dict[str, str] = cached["errors"]
    seed = settings_form_from_business(business)

    if st.button("← Back", key="settings-back"):
        navigate(f"/business/{business.id}")
    st.title(f"⚙️ Configure {business.name}")

    with st.form(f"business-settings-{business.id}"):
        st.subheader("Basic information")
        st.caption("The main details of your business")

        name = st.text_input("Business name", value=seed.name, placeholder="Your business name")
        _field_error(errors, "name")
        description = st.text_area(
            "Description",
            value=seed.description,
            placeholder="Describe your business and the services you offer",
            height=90,
        )

        c1, c2 = st.columns(2)
        with c1:
            email = st.text_input("Email", value=seed.email, placeholder="email@example.com")
            _field_error(errors, "email")
        with c2:
            phone = st.text_input("Phone", value=seed.phone, placeholder="+34 123 456 789")
            _field_error(errors, "phone")

        address = st.text_input("Address", value=seed.address, placeholder="Street, number, city, postcode")
        _field_error(errors, "address")
        timezone = st.text_input(
            "Timezone",
            value=seed.timezone,
            placeholder="UTC",
            help="Example: Europe/Madrid, America/Mexico_City",
        )

        st.subheader("🕘 Opening hours")
        hours = {}
        for day in DAYS:
            current = seed.business_hours.get(day) or default_business_hours()[day]
            label_col, closed_col, open_col, close_col = st.columns([2, 1, 2, 2])
            label_col.markdown(f"**{DAY_LABELS[day]}**")
            closed = closed_col.checkbox("Closed", value=current.closed, key=f"{business.id}-{day}-closed")
            opens = open_col.time_input(
                "Opens", value=_parse_hhmm(current.open, "09:00"), step=300,
                key=f"{business.id}-{day}-open",
            )
            closes = close_col.time_input(
                "Closes", value=_parse_hhmm(current.close, "18:00"), step=300,
                key=f"{business.id}-{day}-close",
            )
            hours[day] = DayHours(opens.strftime("%H:%M"), closes.strftime("%H:%M"), closed)

        submitted = st.form_submit_button("💾 Save changes", type="primary")

    if submitted:
        form = SettingsForm(
            name=name.strip(),
            description=description.strip(),
            email=email.strip(),
            phone=phone.strip(),
            address=address.strip(),
            timezone=timezone.strip(),
            business_hours=hours,
        )
        cached["errors"] = validate_settings(form)
        if not cached["errors"]:
            try:
                with st.spinner("Saving..."):
                    cached["business"] = submit_settings(
                        client, ctx, business, form, notify, cached["state"], token
                    )
            except QueryCancelled:
                return
        st.rerun()
