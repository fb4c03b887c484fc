"""Tests for booking helpers."""
import re
from datetime import date, time
from types import SimpleNamespace

import pytest

from app.schemas.booking import BookingFormData
from app.services import booking_utils
from tests.conftest import make_table


def test_booking_reference_format():
    reference = booking_utils.generate_booking_reference(date(2025, 6, 1))

    assert re.fullmatch(r"BR-250601-[0-9A-Z]{6}", reference)


def test_booking_references_vary():
    references = {booking_utils.generate_booking_reference(date(2025, 6, 1)) for _ in range(50)}

    assert len(references) > 1


@pytest.mark.parametrize("party, expected_max", [(1, 2), (4, 5), (5, 6), (10, 12), (11, 14)])
def test_optimal_capacity_adds_rounded_up_buffer(party, expected_max):
    assert booking_utils.calculate_optimal_capacity(party) == {"min": party, "max": expected_max}


def test_booking_amount_sums_min_spend():
    tables = [make_table("a", 1, min_spend=15000), make_table("b", 2, min_spend=None)]

    assert booking_utils.calculate_booking_amount(tables) == 15000
    assert booking_utils.calculate_booking_amount([]) == 0


@pytest.mark.parametrize("total, deposit", [(0, 2000), (5000, 2000), (20000, 4000), (12345, 2469)])
def test_deposit_amount(total, deposit):
    assert booking_utils.calculate_deposit_amount(total) == deposit


def test_format_currency():
    assert booking_utils.format_currency(50) == "£0.50"
    assert booking_utils.format_currency(123456) == "£1234.56"


def test_table_suitability_uses_combined_capacity():
    tables = [make_table("a", 1), make_table("b", 2)]  # 2-6 each

    assert booking_utils.are_tables_suitable_for_party(tables, 4)
    assert booking_utils.are_tables_suitable_for_party(tables, 12)
    assert not booking_utils.are_tables_suitable_for_party(tables, 3)
    assert not booking_utils.are_tables_suitable_for_party(tables, 13)
    assert not booking_utils.are_tables_suitable_for_party([], 2)


def test_capacity_info():
    tables = [make_table("a", 1), make_table("b", 2, preferred_capacity=5)]

    assert booking_utils.get_table_capacity_info(tables) == {
        "min_capacity": 4,
        "max_capacity": 12,
        "preferred_capacity": 9,
    }


def test_duration_handles_overnight():
    assert booking_utils.calculate_booking_duration(time(23, 0), time(6, 0)) == 7
    assert booking_utils.calculate_booking_duration(time(20, 0), time(22, 30)) == 2.5


def test_venue_hours_and_events():
    friday, sunday, tuesday = date(2025, 6, 6), date(2025, 6, 8), date(2025, 6, 3)

    assert booking_utils.get_venue_hours(friday) == {"open": "23:00", "close": "06:00", "is_late_night": True}
    assert booking_utils.get_venue_hours(sunday)["close"] == "05:00"
    assert booking_utils.get_venue_hours(tuesday)["is_late_night"] is False
    assert booking_utils.get_event_for_date(friday)["name"] == "La Fiesta"
    assert booking_utils.get_event_for_date(tuesday)["type"] == "private"


def test_contact_validation():
    assert booking_utils.validate_email("a@b.com")
    assert not booking_utils.validate_email("a@b")
    assert booking_utils.validate_phone_number("07700 900123")
    assert booking_utils.validate_phone_number("+447700900123")
    assert not booking_utils.validate_phone_number("12345")
    assert booking_utils.format_phone_number("07700 900123") == "+447700900123"
    assert booking_utils.format_phone_number("44 7700 900123") == "+447700900123"


def make_form(**overrides):
    data = dict(
        venue_id="venue-1",
        customer_name="Sam Jones",
        customer_email="sam@example.com",
        customer_phone="07700900123",
        party_size=4,
        booking_date=date(2025, 6, 6),
        start_time=time(23, 0),
        end_time=time(6, 0),
        selected_tables=["t-1"],
    )
    data.update(overrides)
    return BookingFormData(**data)


def test_valid_form_has_no_errors():
    assert booking_utils.validate_booking_data(make_form(), today=date(2025, 6, 1)) == []


def test_form_too_far_ahead():
    errors = booking_utils.validate_booking_data(
        make_form(booking_date=date(2025, 12, 2)), today=date(2025, 6, 1)
    )

    assert errors == ["Bookings can only be made up to 6 months in advance"]


def test_six_months_ahead_is_allowed_at_month_end():
    errors = booking_utils.validate_booking_data(
        make_form(booking_date=date(2026, 2, 28)), today=date(2025, 8, 31)
    )

    assert errors == []


def test_missing_fields():
    form = SimpleNamespace(
        customer_name="",
        customer_email="",
        customer_phone="",
        party_size=None,
        booking_date=None,
        start_time=None,
        end_time=None,
        selected_tables=[],
    )

    errors = booking_utils.validate_booking_data(form, today=date(2025, 6, 1))

    assert len(errors) == 7


def test_form_phone_must_be_uk_number():
    errors = booking_utils.validate_booking_data(
        make_form(customer_phone="1234567890"), today=date(2025, 6, 1)
    )

    assert errors == ["Valid phone number is required"]
