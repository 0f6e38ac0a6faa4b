# db/models.py
"""
Row shapes for the Supabase tables this app reads. The backend owns the
schema and the row-level security policies; these classes only describe
what the pages consume.

Table: businesses
- id (uuid, PK), user_id (uuid, owner)
- name, description, email, phone, address, timezone (text)
- business_hours (jsonb: {"monday": {"open", "close", "closed"}, ...})
- created_at (timestamptz)

Table: services
- id, business_id (FK → businesses.id)
- name, description, price (numeric), duration (int, minutes), is_active

Table: customers
- id, name, email, phone, created_at

Table: bookings
- id, business_id, service_id, customer_id
- booking_date (date), start_time, end_time (time)
- status (pending | confirmed | cancelled | completed), notes

Table: profiles
- id (= auth user id), full_name, is_admin
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional


DAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

BOOKING_STATUSES = ("pending", "confirmed", "cancelled", "completed")


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def parse_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


# ---------------------- BUSINESS HOURS ----------------------

@dataclass
class DayHours:
    open: str = "09:00"
    close: str = "18:00"
    closed: bool = False

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "DayHours":
        return cls(
            open=row.get("open") or "09:00",
            close=row.get("close") or "18:00",
            closed=row.get("closed") is True,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"open": self.open, "close": self.close, "closed": self.closed}


def business_hours_from_row(raw: Any) -> Optional[Dict[str, DayHours]]:
    """Returns None when the column is empty so callers can fall back to defaults."""
    if not raw or not isinstance(raw, dict):
        return None
    hours = {}
    for day in DAYS:
        if isinstance(raw.get(day), dict):
            hours[day] = DayHours.from_row(raw[day])
    return hours or None


def business_hours_to_dict(hours: Dict[str, DayHours]) -> Dict[str, Dict[str, Any]]:
    return {day: hours[day].to_dict() for day in DAYS if day in hours}


# ---------------------- ENTITIES ----------------------

@dataclass
class Service:
    id: str
    name: str
    business_id: Optional[str] = None
    description: Optional[str] = None
    price: float = 0.0
    duration: int = 0
    is_active: bool = True

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Service":
        return cls(
            id=str(row.get("id", "")),
            name=row.get("name") or "",
            business_id=row.get("business_id"),
            description=row.get("description"),
            price=float(row.get("price") or 0),
            duration=int(row.get("duration") or 0),
            is_active=bool(row.get("is_active", True)),
        )


@dataclass
class Business:
    id: str
    name: str
    description: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    timezone: Optional[str] = None
    business_hours: Optional[Dict[str, DayHours]] = None
    user_id: Optional[str] = None
    created_at: Optional[datetime] = None
    services: List[Service] = field(default_factory=list)

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Business":
        return cls(
            id=str(row.get("id", "")),
            name=row.get("name") or "",
            description=row.get("description"),
            email=row.get("email"),
            phone=row.get("phone"),
            address=row.get("address"),
            timezone=row.get("timezone"),
            business_hours=business_hours_from_row(row.get("business_hours")),
            user_id=row.get("user_id"),
            created_at=parse_timestamp(row.get("created_at")),
            services=[Service.from_row(s) for s in row.get("services") or []],
        )


@dataclass
class Customer:
    id: str
    name: str = ""
    email: str = ""
    phone: str = ""
    created_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Customer":
        return cls(
            id=str(row.get("id", "")),
            name=row.get("name") or "",
            email=row.get("email") or "",
            phone=row.get("phone") or "",
            created_at=parse_timestamp(row.get("created_at")),
        )


@dataclass
class Booking:
    id: str
    booking_date: Optional[date]
    start_time: str = ""
    end_time: str = ""
    status: str = "pending"
    notes: Optional[str] = None
    customer: Optional[Customer] = None
    service: Optional[Service] = None
    business: Optional[Business] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Booking":
        # Embedded relations come back under the related table's name.
        customer = row.get("customers")
        service = row.get("services")
        business = row.get("businesses")
        return cls(
            id=str(row.get("id", "")),
            booking_date=parse_date(row.get("booking_date")),
            start_time=_short_time(row.get("start_time")),
            end_time=_short_time(row.get("end_time")),
            status=row.get("status") or "pending",
            notes=row.get("notes"),
            customer=Customer.from_row(customer) if customer else None,
            service=Service.from_row(service) if service else None,
            business=Business.from_row(business) if business else None,
        )


@dataclass(frozen=True)
class Profile:
    full_name: Optional[str] = None
    is_admin: bool = False

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Profile":
        return cls(full_name=row.get("full_name"), is_admin=row.get("is_admin") is True)


def _short_time(value: Optional[str]) -> str:
    # Postgres `time` columns come back as HH:MM:SS
    if not value:
        return ""
    return value[:5]
