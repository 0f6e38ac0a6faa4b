"""Tests for the session context lifecycle."""
from types import SimpleNamespace
from unittest.mock import Mock

import pytest
from supabase import AuthError as BackendAuthError

from db.models import Profile
from fakes import FakeSupabase
from session import SESSION_KEY, AuthError, SessionContext, SessionStore


class _BackendAuthFailure(BackendAuthError):
    def __init__(self, message):
        Exception.__init__(self, message)


def _client(profile_rows=None):
    client = FakeSupabase({"profiles": profile_rows or []})
    client.auth = Mock()
    client.auth.sign_in_with_password.return_value = SimpleNamespace(
        user=SimpleNamespace(id="user-1", email="owner@example.com"),
        session=SimpleNamespace(access_token="token"),
    )
    return client


def test_sign_in_populates_context_with_profile():
    state = {}
    store = SessionStore(_client([{"full_name": "Olivia", "is_admin": True}]), state)

    ctx = store.sign_in("owner@example.com", "secret")

    assert ctx == SessionContext("user-1", "owner@example.com", Profile("Olivia", True))
    assert store.current() is ctx
    assert state[SESSION_KEY] is ctx
    assert ctx.is_admin
    assert ctx.display_name == "Olivia"


def test_sign_in_without_profile_falls_back_to_email():
    store = SessionStore(_client([]), {})

    ctx = store.sign_in("owner@example.com", "secret")

    assert ctx.profile is None
    assert not ctx.is_admin
    assert ctx.display_name == "owner@example.com"


def test_admin_flag_must_be_exactly_true():
    assert not SessionContext("u", "e", Profile("n", False)).is_admin
    assert not SessionContext("u", "e", Profile.from_row({"is_admin": "yes"})).is_admin


def test_sign_in_failure_raises_and_keeps_state_empty():
    client = _client()
    client.auth.sign_in_with_password.side_effect = _BackendAuthFailure("Invalid login credentials")
    store = SessionStore(client, {})

    with pytest.raises(AuthError, match="Invalid login credentials"):
        store.sign_in("owner@example.com", "wrong")
    assert store.current() is None


def test_sign_out_clears_context():
    client = _client()
    store = SessionStore(client, {})
    store.sign_in("owner@example.com", "secret")

    store.sign_out()

    assert store.current() is None
    client.auth.sign_out.assert_called_once()


def test_context_is_read_only():
    ctx = SessionContext("u", "e")
    with pytest.raises(AttributeError):
        ctx.user_id = "other"
