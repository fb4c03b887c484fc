"""Booking schemas."""
from datetime import date, time
from typing import Optional, List

from app.schemas.base import CamelModel


class BookingFormData(CamelModel):
    """Customer-submitted booking form."""

    venue_id: str
    customer_name: str = ""
    customer_email: str = ""
    customer_phone: str = ""
    party_size: Optional[int] = None
    booking_date: Optional[date] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    selected_tables: List[str] = []
    special_requests: Optional[str] = None
    occasion: Optional[str] = None


class BookingResult(CamelModel):
    """Outcome of the store's atomic booking function."""

    booking_id: Optional[str] = None
    booking_reference: Optional[str] = None
    total_deposit: int = 0
    success: bool
    error_message: Optional[str] = None


class BookingResponse(CamelModel):
    """Schema for a created booking."""

    booking: BookingResult
    total_amount: int
    deposit_amount: int
