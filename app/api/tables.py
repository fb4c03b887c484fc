"""Table endpoints."""
import logging
from datetime import date, time
from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_availability_service, get_store
from app.core.errors import UpstreamError, ValidationError
from app.schemas.table import (
    CapacitySuggestion,
    EventInfo,
    TableCombination,
    TableCombinationResponse,
    TableCounts,
    TableListResponse,
    TableOut,
    VenueHours,
)
from app.services.availability_service import (
    AvailabilityService,
    BookingWindow,
    count_tables,
)
from app.services.booking_utils import (
    calculate_booking_duration,
    calculate_optimal_capacity,
    get_event_for_date,
    get_venue_hours,
)
from app.services.venue_store import VenueStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tables", tags=["tables"])

Location = Literal["upstairs", "downstairs"]


@router.get("/{venue_id}", response_model=TableListResponse)
async def list_tables(
    venue_id: str,
    booking_date: Optional[date] = Query(default=None, alias="date", description="Booking date"),
    start_time: Optional[time] = Query(default=None, alias="startTime"),
    end_time: Optional[time] = Query(default=None, alias="endTime", description="May be after midnight"),
    location: Optional[Location] = Query(default=None),
    store: VenueStore = Depends(get_store),
    availability: AvailabilityService = Depends(get_availability_service),
):
    """
    List a venue's active tables.

    When date, startTime and endTime are all given, each table is checked for
    that window; otherwise every table is reported as available.

    Args:
        venue_id: Venue ID
        booking_date: Booking date
        start_time: Window start
        end_time: Window end
        location: Optional floor filter

    Returns:
        Tables with availability and aggregate counts
    """
    try:
        tables = await store.list_active_tables(venue_id, location)
    except Exception as e:
        logger.error(f"Error fetching tables for venue {venue_id}: {e}")
        raise UpstreamError("Failed to fetch tables") from e

    window = None
    if booking_date and start_time and end_time:
        window = BookingWindow(booking_date, start_time, end_time)

    annotated = await availability.annotate(tables, window)

    return TableListResponse(
        tables=[TableOut.from_table(t.table, t.is_available) for t in annotated],
        counts=TableCounts(**count_tables(annotated)),
    )


@router.get("/{venue_id}/combinations", response_model=TableCombinationResponse)
async def list_table_combinations(
    venue_id: str,
    booking_date: date = Query(..., alias="date"),
    start_time: time = Query(..., alias="startTime"),
    end_time: time = Query(..., alias="endTime"),
    party_size: int = Query(..., alias="partySize", ge=1, le=25),
    location: Optional[Location] = Query(default=None),
    store: VenueStore = Depends(get_store),
):
    """
    Suggest single tables or table combinations for a party.

    Args:
        venue_id: Venue ID
        booking_date: Booking date
        start_time: Window start
        end_time: Window end
        party_size: Number of guests
        location: Optional floor filter

    Returns:
        Ranked combinations from the store, a comfortable capacity range,
        and the night's hours, event and booking length
    """
    if start_time == end_time:
        raise ValidationError("startTime and endTime must differ")

    try:
        rows = await store.get_optimal_table_combinations(
            venue_id, booking_date, start_time, end_time, party_size, location
        )
    except Exception as e:
        logger.error(f"Error fetching table combinations for venue {venue_id}: {e}")
        raise UpstreamError("Failed to fetch table combinations") from e

    combinations = [
        TableCombination.model_validate(
            {**row, "table_ids": [str(t) for t in row.get("table_ids") or []]}
        )
        for row in rows
    ]

    return TableCombinationResponse(
        party_size=party_size,
        suggested_capacity=CapacitySuggestion(**calculate_optimal_capacity(party_size)),
        duration_hours=calculate_booking_duration(start_time, end_time),
        venue_hours=VenueHours(**get_venue_hours(booking_date)),
        event=EventInfo(**get_event_for_date(booking_date)),
        combinations=combinations,
    )
