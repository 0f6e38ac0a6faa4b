from __future__ import annotations

import re
from typing import Any, Dict, MutableMapping, Optional, Tuple

import streamlit as st
import structlog

from db.cancellation import CancellationToken

logger = structlog.get_logger(__name__)

# Route name -> path pattern. ":id" segments become params.
ROUTES = [
    ("index", "/"),
    ("demo", "/demo"),
    ("auth", "/auth"),
    ("dashboard", "/dashboard"),
    ("bookings", "/bookings"),
    ("customers", "/customers"),
    ("businesses", "/businesses"),
    ("business_new", "/business/new"),
    ("business_settings", "/business/:id/settings"),
    ("business", "/business/:id"),
    ("admin_register", "/admin/register"),
    ("profile", "/profile"),
]


def _compile(pattern: str) -> re.Pattern:
    regex = re.sub(r":(\w+)", r"(?P<\1>[^/]+)", pattern)
    return re.compile(f"^{regex}/?$")


_COMPILED = [(name, _compile(pattern)) for name, pattern in ROUTES]


def resolve(path: Optional[str]) -> Tuple[str, Dict[str, str]]:
    """Maps a path to (route name, params). Unknown paths resolve to the index."""
    path = path or "/"
    for name, regex in _COMPILED:
        match = regex.match(path)
        if match:
            return name, match.groupdict()
    return "index", {}


def current_path() -> str:
    return st.query_params.get("path", "/")


def navigate(path: str) -> None:
    st.query_params["path"] = path
    st.rerun()


def require_session(ctx):
    if ctx is None:
        navigate("/auth")
    return ctx


class PageScope:
    """Hands out one cancellation token per visited page.

    Entering a different path cancels the token of the page being left,
    so queries still in flight for it are dropped instead of applied.
    """

    KEY = "page_scope"

    def __init__(self, state: MutableMapping[str, Any]):
        self._state = state

    def enter(self, path: str) -> CancellationToken:
        previous = self._state.get(self.KEY)
        if previous is not None:
            prev_path, prev_token = previous
            if prev_path == path and not prev_token.cancelled:
                return prev_token
            prev_token.cancel()
            logger.debug("page_left", path=prev_path)

        token = CancellationToken()
        self._state[self.KEY] = (path, token)
        return token
