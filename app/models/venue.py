"""Venue model."""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, JSON
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base


class Venue(Base):
    """Represents a venue. Read-only from this application."""

    __tablename__ = "venues"

    id = Column(UUID(as_uuid=False), primary_key=True)
    slug = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    address = Column(String, nullable=True)
    city = Column(String, nullable=True)
    postcode = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
    capacity_total = Column(Integer, nullable=True)
    capacity_main_bar = Column(Integer, nullable=True)
    capacity_private_room = Column(Integer, nullable=True)
    amenities = Column(JSON, nullable=True)
    opening_hours = Column(JSON, nullable=True)  # Free-form, e.g. {"friday": {"open": "23:00", "close": "06:00"}}
    settings = Column(JSON, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    tables = relationship("VenueTable", back_populates="venue")
