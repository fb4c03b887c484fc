"""Booking, table reservation and payment models.

Rows here are written only by the payment webhook; everything else in the
booking lifecycle is owned by the store's own functions.
"""
import uuid

from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Date, Time
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base


def _uuid() -> str:
    return str(uuid.uuid4())


class Booking(Base):
    """Represents a confirmed (or failed) booking."""

    __tablename__ = "bookings"

    id = Column(UUID(as_uuid=False), primary_key=True, default=_uuid)
    venue_id = Column(UUID(as_uuid=False), ForeignKey("venues.id"), nullable=False, index=True)
    booking_reference = Column(String, unique=True, nullable=False)
    customer_email = Column(String, nullable=False)
    customer_name = Column(String, nullable=False)
    customer_phone = Column(String, nullable=True)
    party_size = Column(Integer, nullable=False)
    booking_date = Column(Date, nullable=True)
    start_time = Column(Time, nullable=True)
    end_time = Column(Time, nullable=True)
    status = Column(String, nullable=False)  # confirmed, payment_failed, canceled
    payment_status = Column(String, nullable=True)  # deposit_paid, paid_in_full, failed, canceled
    special_requests = Column(String, nullable=True)
    occasion = Column(String, nullable=True)
    total_amount = Column(Integer, nullable=True)
    deposit_amount = Column(Integer, nullable=True)
    stripe_payment_intent_id = Column(String, nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    table_reservations = relationship("TableReservation", back_populates="booking", cascade="all, delete-orphan")


class TableReservation(Base):
    """Links a booking to one of the tables it holds."""

    __tablename__ = "table_reservations"

    id = Column(UUID(as_uuid=False), primary_key=True, default=_uuid)
    booking_id = Column(UUID(as_uuid=False), ForeignKey("bookings.id", ondelete="CASCADE"), nullable=False, index=True)
    table_id = Column(UUID(as_uuid=False), ForeignKey("tables.id"), nullable=False)
    status = Column(String, nullable=False, default="confirmed")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    booking = relationship("Booking", back_populates="table_reservations")


class Payment(Base):
    """Ledger row for a processor payment outcome."""

    __tablename__ = "payments"

    id = Column(UUID(as_uuid=False), primary_key=True, default=_uuid)
    booking_id = Column(UUID(as_uuid=False), ForeignKey("bookings.id"), nullable=True, index=True)
    stripe_payment_intent_id = Column(String, nullable=False, index=True)
    amount = Column(Integer, nullable=False)
    currency = Column(String, nullable=False)
    status = Column(String, nullable=False)  # succeeded, failed
    payment_type = Column(String, nullable=False, default="deposit")
    payment_method = Column(String, nullable=True)
    failure_reason = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
