"""Venue schemas."""
from pydantic import BaseModel
from typing import Optional, Any


class VenueCapacity(BaseModel):
    """Capacity figures for a venue."""

    total: Optional[int] = None
    main_bar: Optional[int] = None
    private_room: Optional[int] = None


class VenueOut(BaseModel):
    """Public projection of a venue row."""

    id: str
    slug: str
    name: str
    description: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    capacity: VenueCapacity
    opening_hours: Optional[Any] = None
    is_active: bool = True

    @classmethod
    def from_venue(cls, venue) -> "VenueOut":
        return cls(
            id=str(venue.id),
            slug=venue.slug,
            name=venue.name,
            description=venue.description,
            address=venue.address,
            phone=venue.phone,
            email=venue.email,
            capacity=VenueCapacity(
                total=venue.capacity_total,
                main_bar=venue.capacity_main_bar,
                private_room=venue.capacity_private_room,
            ),
            opening_hours=venue.opening_hours,
            is_active=venue.is_active,
        )


class VenueResponse(BaseModel):
    """Schema for the venue endpoint."""

    venue: VenueOut
