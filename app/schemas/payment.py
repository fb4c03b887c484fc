"""Payment schemas."""
from typing import Optional, List, Union

from pydantic import Field

from app.schemas.base import CamelModel


class BookingData(CamelModel):
    """Booking details attached to a payment intent.

    Every field is optional at the schema level; the gateway decides what is
    required so the caller gets a 400 with a readable message.
    """

    booking_id: Optional[str] = None
    venue_id: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    party_size: Optional[Union[int, str]] = None
    booking_date: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    selected_tables: Optional[Union[List[str], str]] = None
    special_requests: Optional[str] = None


class CreateIntentRequest(CamelModel):
    """Schema for creating a payment intent."""

    amount: Optional[float] = Field(default=None, allow_inf_nan=False)  # minor units (pence)
    currency: Optional[str] = None
    booking_data: Optional[BookingData] = None
    payment_type: Optional[str] = None  # deposit, full


class CreateIntentResponse(CamelModel):
    """Schema for a created payment intent."""

    client_secret: str
    payment_intent_id: str
