# db/repository.py

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional

import httpx
import structlog
from postgrest.exceptions import APIError

from db.cancellation import CancellationToken
from db.errors import DataAccessError
from db.models import Booking, Business, Customer, Profile

logger = structlog.get_logger(__name__)

# Characters with meaning inside a PostgREST `or=(...)` filter
_OR_FILTER_RESERVED = re.compile(r"[,()]")


def run_query(builder, table: str, token: Optional[CancellationToken] = None) -> List[Dict[str, Any]]:
    """Executes a query builder, honoring the page's cancellation token.

    The token is checked before the request goes out and again before the
    rows are handed back, so a page that was navigated away from never
    receives a late result.
    """
    if token is not None:
        token.raise_if_cancelled()

    try:
        response = builder.execute()
    except APIError as e:
        logger.error(
            "query_failed",
            table=table,
            code=e.code,
            error=e.message,
            details=e.details,
        )
        raise DataAccessError(table, e.message or str(e), e.details) from e
    except httpx.HTTPError as e:
        logger.error("query_transport_failed", table=table, error=str(e))
        raise DataAccessError(table, str(e)) from e

    if token is not None:
        token.raise_if_cancelled()

    data = response.data if response is not None else None
    if data is None:
        return []
    if isinstance(data, dict):
        return [data]
    return data


# --- BUSINESSES -------------------------------------------------------------

def fetch_owned_businesses(client, user_id: str, token: Optional[CancellationToken] = None) -> List[Business]:
    rows = run_query(
        client.table("businesses")
        .select("*")
        .eq("user_id", user_id)
        .order("created_at", desc=True),
        "businesses",
        token,
    )
    return [Business.from_row(r) for r in rows]


def fetch_business_for_owner(
    client, business_id: str, user_id: str, token: Optional[CancellationToken] = None
) -> Optional[Business]:
    """Loads one business only if it belongs to the user; None otherwise."""
    rows = run_query(
        client.table("businesses")
        .select("*")
        .eq("id", business_id)
        .eq("user_id", user_id)
        .limit(1),
        "businesses",
        token,
    )
    if not rows:
        return None
    return Business.from_row(rows[0])


def update_business(
    client,
    business_id: str,
    user_id: str,
    fields: Dict[str, Any],
    token: Optional[CancellationToken] = None,
) -> None:
    run_query(
        client.table("businesses")
        .update(fields)
        .eq("id", business_id)
        .eq("user_id", user_id),
        "businesses",
        token,
    )


def clean_search_term(term: Optional[str]) -> str:
    return _OR_FILTER_RESERVED.sub("", term or "").strip()


def search_directory(client, term: str = "", token: Optional[CancellationToken] = None) -> List[Business]:
    """Public listing of businesses with their services, ordered by name.

    A non-blank term matches name OR description, case-insensitively, on
    the server.
    """
    query = client.table("businesses").select("*, services(*)")

    cleaned = clean_search_term(term)
    if cleaned:
        query = query.or_(f"name.ilike.%{cleaned}%,description.ilike.%{cleaned}%")

    rows = run_query(query.order("name"), "businesses", token)
    return [Business.from_row(r) for r in rows]


# --- BOOKINGS ---------------------------------------------------------------

def fetch_bookings(client, user_id: str, token: Optional[CancellationToken] = None) -> List[Booking]:
    """Bookings of every business the user owns, newest date first.

    Customer, service and business are resolved through embedded joins;
    the inner join on businesses lets the owner filter apply server-side.
    """
    rows = run_query(
        client.table("bookings")
        .select("*, customers(*), services(*), businesses!inner(id, name, user_id)")
        .eq("businesses.user_id", user_id)
        .order("booking_date", desc=True),
        "bookings",
        token,
    )
    return [Booking.from_row(r) for r in rows]


# --- CUSTOMERS --------------------------------------------------------------

def fetch_owned_customers(client, user_id: str, token: Optional[CancellationToken] = None) -> List[Customer]:
    """Customers who have booked with any business the user owns.

    Each step short-circuits to an empty list, so no further queries are
    issued once there is nothing left to look up.
    """
    # 1. Businesses owned by the user
    businesses = run_query(
        client.table("businesses").select("id").eq("user_id", user_id),
        "businesses",
        token,
    )
    business_ids = [b["id"] for b in businesses]
    if not business_ids:
        return []

    # 2. Bookings placed with those businesses
    bookings = run_query(
        client.table("bookings").select("customer_id").in_("business_id", business_ids),
        "bookings",
        token,
    )
    if not bookings:
        return []

    # 3. Distinct customer ids, first-seen order
    customer_ids = list(dict.fromkeys(b["customer_id"] for b in bookings if b.get("customer_id")))
    if not customer_ids:
        return []

    # 4. Customer rows
    rows = run_query(
        client.table("customers")
        .select("*")
        .in_("id", customer_ids)
        .order("created_at", desc=True),
        "customers",
        token,
    )
    return [Customer.from_row(r) for r in rows]


# --- PROFILES ---------------------------------------------------------------

def fetch_profile(client, user_id: str) -> Optional[Profile]:
    rows = run_query(
        client.table("profiles").select("full_name, is_admin").eq("id", user_id).limit(1),
        "profiles",
    )
    if not rows:
        return None
    return Profile.from_row(rows[0])
