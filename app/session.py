from __future__ import annotations

from dataclasses import dataclass
from typing import Any, MutableMapping, Optional

import structlog
from supabase import AuthError as BackendAuthError

from db.errors import DataAccessError
from db.models import Profile
from db.repository import fetch_profile

logger = structlog.get_logger(__name__)

SESSION_KEY = "session_context"


class AuthError(Exception):
    pass


@dataclass(frozen=True)
class SessionContext:
    """Who is signed in. Handed to every page explicitly, never read globally."""

    user_id: str
    email: str
    profile: Optional[Profile] = None

    @property
    def is_admin(self) -> bool:
        return self.profile is not None and self.profile.is_admin is True

    @property
    def display_name(self) -> str:
        if self.profile is not None and self.profile.full_name:
            return self.profile.full_name
        return self.email


class SessionStore:
    """Populated at sign-in, cleared at sign-out."""

    def __init__(self, client, state: MutableMapping[str, Any]):
        self._client = client
        self._state = state

    def current(self) -> Optional[SessionContext]:
        return self._state.get(SESSION_KEY)

    def sign_in(self, email: str, password: str) -> SessionContext:
        try:
            response = self._client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except BackendAuthError as e:
            logger.warning("sign_in_failed", email=email, error=str(e))
            raise AuthError(str(e)) from e

        user = getattr(response, "user", None)
        if user is None:
            raise AuthError("Sign-in did not return a user")

        try:
            profile = fetch_profile(self._client, user.id)
        except DataAccessError:
            # Signed in without a profile: no admin shortcuts, email as name
            profile = None

        ctx = SessionContext(user_id=user.id, email=user.email or email, profile=profile)
        self._state[SESSION_KEY] = ctx
        logger.info("signed_in", user_id=ctx.user_id)
        return ctx

    def sign_out(self) -> None:
        ctx = self._state.pop(SESSION_KEY, None)
        try:
            self._client.auth.sign_out()
        except BackendAuthError as e:
            logger.warning("sign_out_failed", error=str(e))
        if ctx is not None:
            logger.info("signed_out", user_id=ctx.user_id)
