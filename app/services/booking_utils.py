"""Booking helpers: references, pricing, capacity and form validation.

Amounts are integer pence throughout.
"""
import math
import re
import secrets
import string
from datetime import date, datetime, time as dt_time, timedelta
from typing import Any, Dict, List, Optional, Sequence

REFERENCE_PREFIX = "BR"
REFERENCE_SUFFIX_LENGTH = 6
_REFERENCE_ALPHABET = string.digits + string.ascii_uppercase

DEPOSIT_PERCENT = 20
MINIMUM_DEPOSIT = 2000  # £20
COMFORT_BUFFER_PERCENT = 20

MIN_PARTY_SIZE = 1
MAX_PARTY_SIZE = 25
MAX_ADVANCE_MONTHS = 6

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_UK_PHONE_RE = re.compile(r"^(\+44|0)[1-9]\d{8,9}$")


def generate_booking_reference(booking_date: Optional[date] = None) -> str:
    """
    Build a human-readable booking reference, e.g. ``BR-250601-K3Z9QA``.

    The suffix is random, so references are only probably unique; the store's
    unique constraint is the real guard.
    """
    booking_date = booking_date or date.today()
    suffix = "".join(
        secrets.choice(_REFERENCE_ALPHABET) for _ in range(REFERENCE_SUFFIX_LENGTH)
    )
    return f"{REFERENCE_PREFIX}-{booking_date.strftime('%y%m%d')}-{suffix}"


def calculate_optimal_capacity(party_size: int) -> Dict[str, int]:
    """Comfortable seating range: the party plus a 20% buffer, rounded up."""
    return {
        "min": party_size,
        "max": party_size + math.ceil(party_size * COMFORT_BUFFER_PERCENT / 100),
    }


def calculate_booking_amount(tables: Sequence[Any]) -> int:
    """Total minimum spend across the selected tables."""
    return sum(int(t.min_spend or 0) for t in tables)


def calculate_deposit_amount(total_amount: int) -> int:
    """20% of the total, never less than £20."""
    return max(math.ceil(total_amount * DEPOSIT_PERCENT / 100), MINIMUM_DEPOSIT)


def format_currency(amount_in_pence: int) -> str:
    return f"£{amount_in_pence / 100:.2f}"


def are_tables_suitable_for_party(tables: Sequence[Any], party_size: int) -> bool:
    if not tables:
        return False
    info = get_table_capacity_info(tables)
    return info["min_capacity"] <= party_size <= info["max_capacity"]


def get_table_capacity_info(tables: Sequence[Any]) -> Dict[str, int]:
    return {
        "min_capacity": sum(t.min_capacity for t in tables),
        "max_capacity": sum(t.max_capacity for t in tables),
        "preferred_capacity": sum(t.preferred_capacity for t in tables),
    }


def calculate_booking_duration(start_time: dt_time, end_time: dt_time) -> float:
    """Length of a booking in hours; an end before the start means the next day."""
    start = datetime.combine(date.min, start_time)
    end = datetime.combine(date.min, end_time)
    if end < start:
        end += timedelta(days=1)
    return (end - start).total_seconds() / 3600


def get_venue_hours(day: date) -> Dict[str, Any]:
    """Opening hours by weekday; Friday to Sunday run late."""
    weekday = day.weekday()
    if weekday in (4, 5):  # Friday, Saturday
        return {"open": "23:00", "close": "06:00", "is_late_night": True}
    if weekday == 6:
        return {"open": "23:00", "close": "05:00", "is_late_night": True}
    return {"open": "20:00", "close": "02:00", "is_late_night": False}


_WEEKLY_EVENTS = {
    4: {
        "name": "La Fiesta",
        "description": "Latin music night with R&B upstairs and Reggaeton downstairs",
        "type": "regular",
    },
    5: {
        "name": "Shhh!",
        "description": "Leeds' longest running weekly R&B party",
        "type": "regular",
    },
    6: {
        "name": "Nostalgia",
        "description": "2000s/2010s throwback sessions until 5am",
        "type": "regular",
    },
}

_PRIVATE_HIRE = {
    "name": "Private Hire Available",
    "description": "Perfect for private celebrations and corporate events",
    "type": "private",
}


def get_event_for_date(day: date) -> Dict[str, str]:
    return dict(_WEEKLY_EVENTS.get(day.weekday(), _PRIVATE_HIRE))


def validate_email(email: str) -> bool:
    return bool(email) and bool(_EMAIL_RE.match(email))


def validate_phone_number(phone: str) -> bool:
    """Basic UK number check, ignoring whitespace."""
    return bool(phone) and bool(_UK_PHONE_RE.match(re.sub(r"\s", "", phone)))


def format_phone_number(phone: str) -> str:
    """Normalise a UK number to +44 form where possible."""
    digits = re.sub(r"\D", "", phone)
    if digits.startswith("44"):
        return f"+{digits}"
    if digits.startswith("0"):
        return f"+44{digits[1:]}"
    return phone


def _add_months(day: date, months: int) -> date:
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    # Clamp to the last day of the target month
    next_month = date(year + (month == 12), month % 12 + 1, 1)
    last_day = (next_month - timedelta(days=1)).day
    return date(year, month, min(day.day, last_day))


def validate_booking_data(form, today: Optional[date] = None) -> List[str]:
    """
    Check a booking form before it reaches the store.

    Args:
        form: Object with the BookingFormData attributes
        today: Reference date, defaults to the current date

    Returns:
        List of human-readable problems; empty when the form is valid
    """
    today = today or date.today()
    errors = []

    if not validate_email(form.customer_email or ""):
        errors.append("Valid email address is required")

    if len((form.customer_name or "").strip()) < 2:
        errors.append("Name must be at least 2 characters")

    if not validate_phone_number(form.customer_phone or ""):
        errors.append("Valid phone number is required")

    if not form.booking_date:
        errors.append("Booking date is required")

    if not form.start_time or not form.end_time:
        errors.append("Booking time is required")

    if not form.party_size or not MIN_PARTY_SIZE <= form.party_size <= MAX_PARTY_SIZE:
        errors.append(f"Party size must be between {MIN_PARTY_SIZE} and {MAX_PARTY_SIZE}")

    if not form.selected_tables:
        errors.append("At least one table must be selected")

    if form.booking_date:
        if form.booking_date < today:
            errors.append("Booking date must be in the future")
        elif form.booking_date > _add_months(today, MAX_ADVANCE_MONTHS):
            errors.append(f"Bookings can only be made up to {MAX_ADVANCE_MONTHS} months in advance")

    return errors


def parse_date(value: Optional[str]) -> Optional[date]:
    return date.fromisoformat(value) if value else None


def parse_time(value: Optional[str]) -> Optional[dt_time]:
    return dt_time.fromisoformat(value) if value else None
