# app/contact_links.py

from __future__ import annotations

from urllib.parse import quote

# Characters JavaScript's encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "-_.!~*'()"

REMINDER_TEMPLATE = "Hi {name}, this is a reminder of your appointment on {date} at {time}. We look forward to seeing you!"
OUTREACH_TEMPLATE = "Hi {name}, how are you? Would you like to book a new appointment?"


def encode_uri_component(text: str) -> str:
    return quote(text, safe=_URI_COMPONENT_SAFE)


def whatsapp_url(phone: str, message: str) -> str:
    digits = phone.replace("+", "")
    return f"https://wa.me/{digits}?text={encode_uri_component(message)}"


def tel_url(phone: str) -> str:
    return f"tel:{phone}"


def reminder_message(name: str, date: str, time: str) -> str:
    return REMINDER_TEMPLATE.format(name=name, date=date, time=time)


def outreach_message(name: str) -> str:
    return OUTREACH_TEMPLATE.format(name=name)
