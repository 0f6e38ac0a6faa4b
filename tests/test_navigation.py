"""Tests for route resolution and per-page cancellation."""
import pytest

from navigation import PageScope, resolve


@pytest.mark.parametrize("path,expected", [
    ("/", ("index", {})),
    ("", ("index", {})),
    ("/demo", ("demo", {})),
    ("/auth", ("auth", {})),
    ("/dashboard", ("dashboard", {})),
    ("/bookings/", ("bookings", {})),
    ("/customers", ("customers", {})),
    ("/businesses", ("businesses", {})),
    ("/business/new", ("business_new", {})),
    ("/business/abc-123", ("business", {"id": "abc-123"})),
    ("/business/abc-123/settings", ("business_settings", {"id": "abc-123"})),
    ("/admin/register", ("admin_register", {})),
    ("/profile", ("profile", {})),
    ("/nowhere", ("index", {})),
])
def test_resolve(path, expected):
    assert resolve(path) == expected


class TestPageScope:

    def test_same_page_keeps_token(self):
        scope = PageScope({})
        first = scope.enter("/bookings")
        assert scope.enter("/bookings") is first
        assert not first.cancelled

    def test_leaving_page_cancels_its_token(self):
        state = {}
        scope = PageScope(state)
        bookings = scope.enter("/bookings")

        customers = scope.enter("/customers")

        assert bookings.cancelled
        assert not customers.cancelled
        assert state[PageScope.KEY] == ("/customers", customers)

    def test_returning_to_page_gets_fresh_token(self):
        scope = PageScope({})
        first = scope.enter("/bookings")
        scope.enter("/customers")

        again = scope.enter("/bookings")

        assert again is not first
        assert not again.cancelled
