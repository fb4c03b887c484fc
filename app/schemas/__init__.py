"""API schemas."""
from app.schemas.venue import (
    VenueCapacity,
    VenueOut,
    VenueResponse,
)
from app.schemas.table import (
    TablePosition,
    TableOut,
    TableCounts,
    TableListResponse,
    TableCombination,
    CapacitySuggestion,
    VenueHours,
    EventInfo,
    TableCombinationResponse,
)
from app.schemas.payment import (
    BookingData,
    CreateIntentRequest,
    CreateIntentResponse,
)
from app.schemas.booking import (
    BookingFormData,
    BookingResult,
    BookingResponse,
)

__all__ = [
    "VenueCapacity",
    "VenueOut",
    "VenueResponse",
    "TablePosition",
    "TableOut",
    "TableCounts",
    "TableListResponse",
    "TableCombination",
    "CapacitySuggestion",
    "VenueHours",
    "EventInfo",
    "TableCombinationResponse",
    "BookingData",
    "CreateIntentRequest",
    "CreateIntentResponse",
    "BookingFormData",
    "BookingResult",
    "BookingResponse",
]
