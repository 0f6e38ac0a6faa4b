"""Tests for directory formatting helpers."""
import pytest

from business_directory import book_path, format_duration, format_price, visible_services
from navigation import resolve
from db.models import Service


@pytest.mark.parametrize("minutes,expected", [
    (0, "0min"),
    (45, "45min"),
    (60, "1h"),
    (90, "1h 30min"),
    (120, "2h"),
    (135, "2h 15min"),
])
def test_format_duration(minutes, expected):
    assert format_duration(minutes) == expected


def _services(count):
    return [Service(id=str(i), name=f"Service {i}") for i in range(count)]


@pytest.mark.parametrize("count,shown,extra", [
    (0, 0, 0),
    (3, 3, 0),
    (5, 3, 2),
])
def test_visible_services_caps_at_three(count, shown, extra):
    services = _services(count)

    visible, hidden = visible_services(services)

    assert visible == services[:shown]
    assert hidden == extra


@pytest.mark.parametrize("price,expected", [
    (12.5, "€12.50"),
    (1000000, "€1000000.00"),
    (0, "€0.00"),
])
def test_format_price_always_two_decimals(price, expected):
    assert format_price(price) == expected


def test_book_path_opens_business_page():
    assert resolve(book_path("biz-1")) == ("business", {"id": "biz-1"})
