"""Tests for customer retrieval and search."""
from datetime import datetime

import pytest

from customers_page import customers_frame, empty_message, filter_customers
from db.models import Customer
from db.repository import fetch_owned_customers


@pytest.fixture
def customers():
    return [
        Customer(id="1", name="Juan Pérez", email="JUAN@example.com", phone="+34600111222"),
        Customer(id="2", name="Ana López", email="ana@mail.es", phone="600333444"),
        Customer(id="3", name="Carlos", email="", phone=""),
    ]


class TestFilterCustomers:

    def test_empty_term_keeps_everyone(self, customers):
        assert filter_customers(customers, "") == customers

    def test_name_match_ignores_case(self, customers):
        assert [c.id for c in filter_customers(customers, "juan")] == ["1"]

    def test_email_match_ignores_case(self, customers):
        assert [c.id for c in filter_customers(customers, "MAIL.ES")] == ["2"]

    def test_phone_match_is_literal(self, customers):
        assert [c.id for c in filter_customers(customers, "+34")] == ["1"]
        assert [c.id for c in filter_customers(customers, "333")] == ["2"]

    @pytest.mark.parametrize("term", ["a", "Lo", "example", "600", "zzz", "+", "CARLOS"])
    def test_result_is_the_matching_subset(self, customers, term):
        expected = [
            c for c in customers
            if term.lower() in c.name.lower()
            or term.lower() in c.email.lower()
            or term in c.phone
        ]
        assert filter_customers(customers, term) == expected


class TestFetchOwnedCustomers:

    def test_no_businesses_skips_bookings_query(self, fake_client):
        client = fake_client(businesses=[])

        assert fetch_owned_customers(client, "user-1") == []
        assert client.executed_tables() == ["businesses"]

    def test_no_bookings_skips_customers_query(self, fake_client):
        client = fake_client(businesses=[{"id": "biz-1"}], bookings=[])

        assert fetch_owned_customers(client, "user-1") == []
        assert client.executed_tables() == ["businesses", "bookings"]

    def test_follows_ownership_path(self, fake_client):
        client = fake_client(
            businesses=[{"id": "biz-1"}, {"id": "biz-2"}],
            bookings=[
                {"customer_id": "c-2"},
                {"customer_id": "c-1"},
                {"customer_id": "c-2"},
                {"customer_id": None},
            ],
            customers=[
                {"id": "c-1", "name": "Juan", "email": "j@x.es", "phone": "1",
                 "created_at": "2024-02-01T09:00:00+00:00"},
            ],
        )

        result = fetch_owned_customers(client, "user-1")

        assert [c.name for c in result] == ["Juan"]
        businesses_q, bookings_q, customers_q = client.executed
        assert businesses_q.called("eq") == [(("user_id", "user-1"), {})]
        assert bookings_q.called("in_") == [(("business_id", ["biz-1", "biz-2"]), {})]
        # Deduplicated, nulls dropped, first-seen order
        assert customers_q.called("in_") == [(("id", ["c-2", "c-1"]), {})]
        assert customers_q.called("order") == [(("created_at",), {"desc": True})]


def test_customers_frame_builds_action_links():
    df = customers_frame([
        Customer(id="1", name="Juan", email="j@x.es", phone="+1234567890",
                 created_at=datetime(2024, 2, 1, 9, 0)),
        Customer(id="2", name="NoPhone"),
    ])

    first, second = df.iloc[0], df.iloc[1]
    assert first["Registered"] == "01/02/2024"
    assert first["Message"].startswith("https://wa.me/1234567890?text=Hi%20Juan")
    assert first["Call"] == "tel:+1234567890"
    assert second["Message"] is None
    assert second["Call"] is None


def test_empty_message_without_search():
    assert empty_message("") == "You don't have any customers yet."


def test_empty_message_with_search():
    assert empty_message("zzz") == "No customers match your search. Try other terms."
