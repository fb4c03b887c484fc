"""Database models."""
from app.models.venue import Venue
from app.models.table import VenueTable
from app.models.booking import Booking, TableReservation, Payment

__all__ = ["Venue", "VenueTable", "Booking", "TableReservation", "Payment"]
