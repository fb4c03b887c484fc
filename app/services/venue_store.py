"""Venue store.

Reads venues and tables from the managed Postgres database and calls the
database functions that own availability and atomic booking. Each call opens
its own session from the injected factory, so calls can run concurrently.
"""
import logging
from datetime import date, time as dt_time
from typing import List, Optional, Dict, Any

from sqlalchemy import select, text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.models.venue import Venue
from app.models.table import VenueTable
from app.models.booking import Booking, TableReservation, Payment

logger = logging.getLogger(__name__)


class VenueStore:
    """Data access for venues, tables and bookings."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def get_venue_by_slug(self, slug: str) -> Optional[Venue]:
        async with self._session_factory() as session:
            result = await session.execute(select(Venue).where(Venue.slug == slug))
            return result.scalar_one_or_none()

    async def list_active_tables(
        self, venue_id: str, location: Optional[str] = None
    ) -> List[VenueTable]:
        """Active tables for a venue in display order."""
        query = select(VenueTable).where(
            VenueTable.venue_id == venue_id,
            VenueTable.is_active.is_(True),
        )
        if location:
            query = query.where(VenueTable.location == location)
        query = query.order_by(VenueTable.display_order)

        async with self._session_factory() as session:
            result = await session.execute(query)
            return list(result.scalars().all())

    async def check_table_availability(
        self,
        table_id: str,
        booking_date: date,
        start_time: dt_time,
        end_time: dt_time,
    ) -> Optional[bool]:
        """Ask the database whether a table is free for the window."""
        async with self._session_factory() as session:
            result = await session.execute(
                text(
                    "SELECT check_table_availability("
                    "CAST(:table_id AS uuid), :booking_date, :start_time, :end_time)"
                ),
                {
                    "table_id": table_id,
                    "booking_date": booking_date,
                    "start_time": start_time,
                    "end_time": end_time,
                },
            )
            return result.scalar()

    async def get_optimal_table_combinations(
        self,
        venue_id: str,
        booking_date: date,
        start_time: dt_time,
        end_time: dt_time,
        party_size: int,
        location: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        async with self._session_factory() as session:
            result = await session.execute(
                text(
                    "SELECT * FROM get_optimal_table_combinations("
                    "CAST(:venue_id AS uuid), :booking_date, :start_time, :end_time, "
                    ":party_size, :location)"
                ),
                {
                    "venue_id": venue_id,
                    "booking_date": booking_date,
                    "start_time": start_time,
                    "end_time": end_time,
                    "party_size": party_size,
                    "location": location,
                },
            )
            return [dict(row) for row in result.mappings().all()]

    async def create_booking_atomic(
        self,
        venue_id: str,
        customer_email: str,
        customer_phone: str,
        customer_name: str,
        table_ids: List[str],
        booking_date: date,
        start_time: dt_time,
        end_time: dt_time,
        party_size: int,
        special_requests: Optional[str] = None,
        occasion: Optional[str] = None,
        stripe_payment_intent_id: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        """Create a booking through the store's conflict-checking function."""
        async with self._session_factory() as session:
            result = await session.execute(
                text(
                    "SELECT * FROM create_booking_atomic("
                    "p_venue_id => CAST(:venue_id AS uuid), "
                    "p_customer_email => :customer_email, "
                    "p_customer_phone => :customer_phone, "
                    "p_customer_name => :customer_name, "
                    "p_table_ids => CAST(:table_ids AS uuid[]), "
                    "p_booking_date => :booking_date, "
                    "p_start_time => :start_time, "
                    "p_end_time => :end_time, "
                    "p_party_size => :party_size, "
                    "p_special_requests => :special_requests, "
                    "p_occasion => :occasion, "
                    "p_stripe_payment_intent_id => :stripe_payment_intent_id)"
                ),
                {
                    "venue_id": venue_id,
                    "customer_email": customer_email,
                    "customer_phone": customer_phone,
                    "customer_name": customer_name,
                    "table_ids": table_ids,
                    "booking_date": booking_date,
                    "start_time": start_time,
                    "end_time": end_time,
                    "party_size": party_size,
                    "special_requests": special_requests,
                    "occasion": occasion,
                    "stripe_payment_intent_id": stripe_payment_intent_id,
                },
            )
            row = result.mappings().first()
            await session.commit()
            return dict(row) if row else None

    async def record_successful_payment(
        self,
        booking: Booking,
        table_ids: List[str],
        payment: Payment,
    ) -> str:
        """Insert a booking, its table reservations and the payment in one transaction."""
        async with self._session_factory() as session:
            async with session.begin():
                session.add(booking)
                await session.flush()

                for table_id in table_ids:
                    session.add(
                        TableReservation(
                            booking_id=booking.id,
                            table_id=table_id,
                            status="confirmed",
                        )
                    )

                payment.booking_id = booking.id
                session.add(payment)

            logger.info(
                f"Recorded booking {booking.booking_reference} ({booking.id}) "
                f"for payment intent {payment.stripe_payment_intent_id}"
            )
            return booking.id

    async def update_booking_status(
        self, payment_intent_id: str, status: str, payment_status: str
    ) -> Optional[str]:
        """Set the status of the booking tied to a payment intent, if any."""
        async with self._session_factory() as session:
            async with session.begin():
                result = await session.execute(
                    select(Booking).where(Booking.stripe_payment_intent_id == payment_intent_id)
                )
                booking = result.scalar_one_or_none()
                if not booking:
                    return None

                booking.status = status
                booking.payment_status = payment_status
                return booking.id

    async def log_payment(self, payment: Payment) -> None:
        async with self._session_factory() as session:
            async with session.begin():
                session.add(payment)
