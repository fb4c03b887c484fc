"""Venue table model."""
from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, DateTime, Float, JSON
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base


class VenueTable(Base):
    """Represents a bookable table at a venue."""

    __tablename__ = "tables"

    id = Column(UUID(as_uuid=False), primary_key=True)
    venue_id = Column(UUID(as_uuid=False), ForeignKey("venues.id", ondelete="CASCADE"), nullable=False, index=True)
    table_number = Column(String, nullable=False)
    display_name = Column(String, nullable=True)
    location = Column(String, nullable=False)  # upstairs, downstairs
    min_capacity = Column(Integer, nullable=False)
    max_capacity = Column(Integer, nullable=False)
    preferred_capacity = Column(Integer, nullable=False)
    is_premium = Column(Boolean, default=False, nullable=False)
    is_booth = Column(Boolean, default=False, nullable=False)
    floor_position_x = Column(Float, nullable=True)
    floor_position_y = Column(Float, nullable=True)
    description = Column(String, nullable=True)
    amenities = Column(JSON, nullable=True)
    images = Column(JSON, nullable=True)
    min_spend = Column(Integer, default=0, nullable=False)  # pence
    deposit_required = Column(Integer, default=0, nullable=False)  # pence
    is_active = Column(Boolean, default=True, nullable=False)
    display_order = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    venue = relationship("Venue", back_populates="tables")
