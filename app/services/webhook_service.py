"""Stripe webhook processing.

Turns payment intent events into booking, reservation and payment rows.
"""
import logging
from typing import Any, Dict

from app.core.errors import NotFoundError
from app.models.booking import Booking, Payment
from app.services.booking_utils import generate_booking_reference, parse_date, parse_time
from app.services.payment_gateway import PAYMENT_TYPE_DEPOSIT

logger = logging.getLogger(__name__)

DEFAULT_PARTY_SIZE = 2


class WebhookService:
    """Dispatches verified Stripe events to booking updates."""

    def __init__(self, store, default_venue_slug: str):
        self.store = store
        self.default_venue_slug = default_venue_slug
        self._handlers = {
            "payment_intent.succeeded": self.handle_payment_succeeded,
            "payment_intent.payment_failed": self.handle_payment_failed,
            "payment_intent.canceled": self.handle_payment_canceled,
        }

    async def process(self, event: Dict[str, Any]) -> bool:
        """Handle one event. Returns False for event types we ignore."""
        event_type = event.get("type")
        handler = self._handlers.get(event_type)
        if handler is None:
            logger.info(f"Unhandled event type {event_type}")
            return False

        await handler(event["data"]["object"])
        return True

    async def handle_payment_succeeded(self, intent: Dict[str, Any]) -> str:
        logger.info(f"Payment succeeded: {intent['id']}")
        metadata = intent.get("metadata") or {}

        venue_slug = metadata.get("venueId") or self.default_venue_slug
        venue = await self.store.get_venue_by_slug(venue_slug)
        if not venue:
            raise NotFoundError(f"Venue not found: {venue_slug}")

        payment_type = metadata.get("paymentType") or PAYMENT_TYPE_DEPOSIT
        is_deposit = payment_type == PAYMENT_TYPE_DEPOSIT
        booking_date = parse_date(metadata.get("bookingDate"))

        booking = Booking(
            venue_id=venue.id,
            booking_reference=generate_booking_reference(),
            customer_email=metadata.get("customerEmail"),
            customer_name=metadata.get("customerName") or "",
            customer_phone=metadata.get("customerPhone") or None,
            party_size=int(metadata.get("partySize") or DEFAULT_PARTY_SIZE),
            booking_date=booking_date,
            start_time=parse_time(metadata.get("startTime")),
            end_time=parse_time(metadata.get("endTime")),
            status="confirmed",
            payment_status="deposit_paid" if is_deposit else "paid_in_full",
            special_requests=metadata.get("specialRequests") or None,
            total_amount=intent["amount"],
            deposit_amount=intent["amount"] if is_deposit else None,
            stripe_payment_intent_id=intent["id"],
        )
        payment = Payment(
            stripe_payment_intent_id=intent["id"],
            amount=intent["amount"],
            currency=intent["currency"],
            status="succeeded",
            payment_type=payment_type,
            payment_method="card",
        )
        table_ids = [t for t in (metadata.get("selectedTables") or "").split(",") if t]

        booking_id = await self.store.record_successful_payment(booking, table_ids, payment)
        logger.info(
            f"Booking confirmed with payment: booking={booking_id} "
            f"intent={intent['id']} amount={intent['amount']}"
        )
        return booking_id

    async def handle_payment_failed(self, intent: Dict[str, Any]) -> None:
        logger.info(f"Payment failed: {intent['id']}")
        metadata = intent.get("metadata") or {}

        booking_id = await self.store.update_booking_status(
            intent["id"], status="payment_failed", payment_status="failed"
        )
        await self.store.log_payment(
            Payment(
                booking_id=booking_id,
                stripe_payment_intent_id=intent["id"],
                amount=intent["amount"],
                currency=intent["currency"],
                status="failed",
                payment_type=metadata.get("paymentType") or PAYMENT_TYPE_DEPOSIT,
                payment_method="card",
                failure_reason="Payment processing failed",
            )
        )

    async def handle_payment_canceled(self, intent: Dict[str, Any]) -> None:
        logger.info(f"Payment canceled: {intent['id']}")
        await self.store.update_booking_status(
            intent["id"], status="canceled", payment_status="canceled"
        )
