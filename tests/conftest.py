"""Shared test fixtures."""
import pytest
from postgrest.exceptions import APIError

from db.models import Profile
from session import SessionContext
from fakes import FakeSupabase


@pytest.fixture
def fake_client():
    def _create(**responses):
        return FakeSupabase(responses)
    return _create


@pytest.fixture
def owner():
    return SessionContext(user_id="user-1", email="owner@example.com", profile=Profile("Olivia Owner", False))


@pytest.fixture
def api_error():
    def _create(message="permission denied", code="42501"):
        return APIError({"message": message, "code": code, "hint": None, "details": "rls"})
    return _create


@pytest.fixture
def business_row():
    return {
        "id": "biz-1",
        "user_id": "user-1",
        "name": "Luna Salon",
        "description": "Hair and nails",
        "email": "hello@luna.example",
        "phone": "+34123456789",
        "address": "Calle Mayor 1, Madrid",
        "timezone": "Europe/Madrid",
        "business_hours": None,
        "created_at": "2024-03-01T10:00:00+00:00",
    }
