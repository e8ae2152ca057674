from __future__ import annotations

import datetime

import pytest

from utils.formatting import (
    calculate_percentage,
    clean_params,
    format_currency,
    format_date,
    format_duration,
    format_phone_number,
    format_time,
    format_vehicle_reg,
    get_initials,
    is_valid_email,
    is_valid_kenyan_phone,
    is_valid_vehicle_reg,
    normalize_phone_number,
    snake_to_title,
    truncate,
)


@pytest.mark.parametrize("amount, expected", [
    (1500, "KES 1,500"),
    (1499.6, "KES 1,500"),
    (0, "KES 0"),
    (None, "KES 0"),
    (-5, "-KES 5"),
])
def test_format_currency(amount, expected) -> None:
    assert format_currency(amount) == expected


@pytest.mark.parametrize("phone", ["254712345678", "0712345678", "712345678", "0112 345 678"])
def test_kenyan_phone_numbers(phone) -> None:
    assert is_valid_kenyan_phone(phone)
    assert normalize_phone_number(phone).startswith("254")


def test_phone_display() -> None:
    assert format_phone_number("0712345678") == "+254 712 345678"
    assert format_phone_number("254712345678") == "+254 712 345678"
    assert not is_valid_kenyan_phone("0812345678")


def test_vehicle_registration() -> None:
    assert is_valid_vehicle_reg("kaa 123a")
    assert is_valid_vehicle_reg("KBZ456")
    assert not is_valid_vehicle_reg("ABC 123")
    assert format_vehicle_reg("kaa123a") == "KAA 123A"


def test_email() -> None:
    assert is_valid_email("jane@example.com")
    assert not is_valid_email("jane@example")
    assert not is_valid_email("")


def test_dates_and_times() -> None:
    assert format_date("2025-03-05T14:05:00Z") == "Mar 5, 2025"
    assert format_date(datetime.date(2025, 3, 5), include_time=True) == "Mar 5, 2025 12:00 AM"
    assert format_time("2025-03-05T14:05:00") == "2:05 PM"
    assert format_date("not a date") == "Invalid date"
    assert format_time(None) == "Invalid time"


@pytest.mark.parametrize("minutes, expected", [(45, "45 min"), (120, "2 hr"), (90, "1 hr 30 min")])
def test_format_duration(minutes, expected) -> None:
    assert format_duration(minutes) == expected


def test_text_helpers() -> None:
    assert truncate("Premium Wash", 7) == "Premium..."
    assert truncate("Wash", 7) == "Wash"
    assert snake_to_title("in_queue") == "In Queue"
    assert get_initials("Jane Wanjiku Mwangi") == "JW"
    assert calculate_percentage(1, 3) == 33
    assert calculate_percentage(5, 0) == 0


def test_clean_params() -> None:
    assert clean_params({"page": 1, "search": "", "status": None, "low_stock": False}) == {
        "page": 1,
        "low_stock": "false",
    }
    assert clean_params(None) == {}
