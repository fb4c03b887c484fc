"""Table schemas."""
from typing import Optional, List

from app.schemas.base import CamelModel


class TablePosition(CamelModel):
    """Floor-plan coordinates."""

    x: float = 0
    y: float = 0


class TableOut(CamelModel):
    """Schema for a table annotated with availability."""

    id: str
    number: str
    display_name: str
    location: str  # upstairs, downstairs
    min_capacity: int
    max_capacity: int
    preferred_capacity: int
    is_premium: bool = False
    is_booth: bool = False
    min_spend: int = 0
    deposit_required: int = 0
    amenities: List[str] = []
    description: Optional[str] = None
    is_available: bool = True
    position: TablePosition

    @classmethod
    def from_table(cls, table, is_available: bool) -> "TableOut":
        return cls(
            id=str(table.id),
            number=str(table.table_number),
            display_name=table.display_name or f"Table {table.table_number}",
            location=table.location,
            min_capacity=table.min_capacity,
            max_capacity=table.max_capacity,
            preferred_capacity=table.preferred_capacity,
            is_premium=bool(table.is_premium),
            is_booth=bool(table.is_booth),
            min_spend=table.min_spend or 0,
            deposit_required=table.deposit_required or 0,
            amenities=table.amenities or [],
            description=table.description,
            is_available=is_available,
            position=TablePosition(
                x=table.floor_position_x or 0,
                y=table.floor_position_y or 0,
            ),
        )


class TableCounts(CamelModel):
    """Aggregate counts over a table list."""

    total: int
    upstairs: int
    downstairs: int
    available: int


class TableListResponse(CamelModel):
    """Schema for the table list endpoint."""

    success: bool = True
    tables: List[TableOut]
    counts: TableCounts


class TableCombination(CamelModel):
    """One or more tables jointly offered for a party."""

    combination_id: int
    table_ids: List[str]
    table_names: List[str] = []
    total_capacity: int
    total_min_spend: int = 0
    total_deposit: int = 0
    is_optimal: bool = False
    combination_type: str = "single"  # single, combination


class CapacitySuggestion(CamelModel):
    """Comfortable seating range for a party."""

    min: int
    max: int


class VenueHours(CamelModel):
    """Opening hours for the requested night."""

    open: str
    close: str
    is_late_night: bool


class EventInfo(CamelModel):
    name: str
    description: str
    type: str  # regular, private


class TableCombinationResponse(CamelModel):
    """Schema for the table combinations endpoint."""

    success: bool = True
    party_size: int
    suggested_capacity: CapacitySuggestion
    duration_hours: float
    venue_hours: VenueHours
    event: EventInfo
    combinations: List[TableCombination]
