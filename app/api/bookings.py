"""Booking endpoints."""
import logging

from fastapi import APIRouter, Depends

from app.api.deps import get_store
from app.core.errors import BookingConflictError, UpstreamError, ValidationError
from app.schemas.booking import BookingFormData, BookingResponse, BookingResult
from app.services.booking_utils import (
    are_tables_suitable_for_party,
    calculate_booking_amount,
    calculate_deposit_amount,
    format_phone_number,
    validate_booking_data,
)
from app.services.venue_store import VenueStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/bookings", tags=["bookings"])


@router.post("", response_model=BookingResponse, status_code=201)
async def create_booking(
    form: BookingFormData,
    store: VenueStore = Depends(get_store),
):
    """
    Book one or more tables.

    Conflict detection happens inside the store's booking function; this
    endpoint validates the form and the table selection first.

    Args:
        form: Booking form
        store: Venue store

    Returns:
        Booking result with the quoted total and deposit
    """
    errors = validate_booking_data(form)
    if errors:
        raise ValidationError("; ".join(errors))

    try:
        tables = await store.list_active_tables(form.venue_id)
    except Exception as e:
        logger.error(f"Error fetching tables for venue {form.venue_id}: {e}")
        raise UpstreamError("Failed to fetch tables") from e

    tables_by_id = {str(t.id): t for t in tables}
    unknown = [table_id for table_id in form.selected_tables if table_id not in tables_by_id]
    if unknown:
        raise ValidationError(f"Unknown tables: {', '.join(unknown)}")

    selected = [tables_by_id[table_id] for table_id in form.selected_tables]
    if not are_tables_suitable_for_party(selected, form.party_size):
        raise ValidationError(f"Selected tables do not suit a party of {form.party_size}")

    total_amount = calculate_booking_amount(selected)
    deposit_amount = calculate_deposit_amount(total_amount)

    try:
        row = await store.create_booking_atomic(
            venue_id=form.venue_id,
            customer_email=form.customer_email,
            customer_phone=format_phone_number(form.customer_phone),
            customer_name=form.customer_name,
            table_ids=form.selected_tables,
            booking_date=form.booking_date,
            start_time=form.start_time,
            end_time=form.end_time,
            party_size=form.party_size,
            special_requests=form.special_requests,
            occasion=form.occasion,
        )
    except Exception as e:
        logger.error(f"Error creating booking for venue {form.venue_id}: {e}")
        raise UpstreamError("Failed to create booking") from e

    if not row:
        raise BookingConflictError()

    booking_id = row.get("booking_id")
    result = BookingResult.model_validate(
        {**row, "booking_id": str(booking_id) if booking_id else None}
    )
    if not result.success:
        raise BookingConflictError(result.error_message)

    logger.info(f"Created booking {result.booking_reference} for venue {form.venue_id}")
    return BookingResponse(
        booking=result,
        total_amount=total_amount,
        deposit_amount=deposit_amount,
    )
