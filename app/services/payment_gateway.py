"""Stripe payment gateway.

Creates payment intents for table bookings and verifies webhook signatures.
The Stripe client is built once at startup and injected; it never retries,
so a failed intent has to be requested again by the caller.
"""
import json
import math
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Optional

import stripe

from app.core.config import Settings
from app.core.errors import PaymentProcessorError, UpstreamError, ValidationError
from app.schemas.payment import BookingData, CreateIntentResponse
from app.services.booking_utils import format_currency

logger = logging.getLogger(__name__)

PAYMENT_TYPE_DEPOSIT = "deposit"
PAYMENT_TYPE_FULL = "full"


def round_minor_units(amount: float) -> int:
    """Round half up to a whole number of minor units."""
    return int(Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def build_metadata(
    booking_data: BookingData,
    payment_type: str,
    default_venue: str,
) -> Dict[str, str]:
    """Flatten booking data into Stripe metadata (string values only)."""
    selected = booking_data.selected_tables
    if isinstance(selected, list):
        selected = ",".join(selected)

    party_size = booking_data.party_size
    customer_name = f"{booking_data.first_name or ''} {booking_data.last_name or ''}".strip()

    return {
        "bookingId": booking_data.booking_id or "pending",
        "venueId": booking_data.venue_id or default_venue,
        "customerEmail": booking_data.email,
        "customerName": customer_name,
        "customerPhone": booking_data.phone or "",
        "partySize": str(party_size) if party_size is not None else "",
        "bookingDate": booking_data.booking_date or "",
        "startTime": booking_data.start_time or "",
        "endTime": booking_data.end_time or "",
        "selectedTables": selected or "",
        "paymentType": payment_type,
        "specialRequests": booking_data.special_requests or "",
    }


class PaymentGateway:
    """Thin wrapper around the Stripe client."""

    def __init__(self, client: Any, settings: Settings):
        self._client = client
        self.settings = settings

    @classmethod
    def from_settings(cls, settings: Settings) -> "PaymentGateway":
        client = stripe.StripeClient(
            settings.STRIPE_SECRET_KEY,
            stripe_version=settings.STRIPE_API_VERSION,
            http_client=stripe.HTTPXClient(),
            max_network_retries=0,
        )
        return cls(client, settings)

    def validate(self, amount: Optional[float], booking_data: Optional[BookingData]) -> None:
        """Reject a request before anything is sent to Stripe."""
        minimum = self.settings.MIN_CHARGE_AMOUNT
        if not amount or not math.isfinite(amount) or amount < minimum:
            raise ValidationError(f"Amount must be at least {format_currency(minimum)}")

        if booking_data is None or not booking_data.email:
            raise ValidationError("Booking data with email is required")

    async def create_intent(
        self,
        amount: Optional[float],
        booking_data: Optional[BookingData],
        currency: Optional[str] = None,
        payment_type: Optional[str] = None,
    ) -> CreateIntentResponse:
        """
        Create a payment intent for a booking.

        Args:
            amount: Charge in minor units; fractions are rounded half up
            booking_data: Booking details; email is required
            currency: ISO currency code, defaults to the configured currency
            payment_type: "deposit" (default) or "full"

        Returns:
            Client secret and intent id

        Raises:
            ValidationError: amount below the minimum or email missing
            PaymentProcessorError: Stripe rejected the request
            UpstreamError: any other failure
        """
        self.validate(amount, booking_data)

        payment_type = payment_type or PAYMENT_TYPE_DEPOSIT
        label = "Deposit for" if payment_type == PAYMENT_TYPE_DEPOSIT else "Full payment for"
        params = {
            "amount": round_minor_units(amount),
            "currency": currency or self.settings.DEFAULT_CURRENCY,
            "automatic_payment_methods": {"enabled": True},
            "metadata": build_metadata(
                booking_data, payment_type, self.settings.DEFAULT_VENUE_SLUG
            ),
            "description": f"{label} table booking at {self.settings.VENUE_DISPLAY_NAME}",
            "receipt_email": booking_data.email,
        }

        try:
            intent = await self._client.v1.payment_intents.create_async(params)
        except stripe.StripeError as e:
            logger.error(f"Stripe rejected payment intent: {e}")
            raise PaymentProcessorError(f"Stripe error: {e.user_message or str(e)}") from e
        except Exception as e:
            logger.exception(f"Payment intent creation failed: {e}")
            raise UpstreamError("Failed to create payment intent") from e

        logger.info(
            f"Created payment intent {intent.id} for {params['amount']} {params['currency']} "
            f"({payment_type})"
        )
        return CreateIntentResponse(client_secret=intent.client_secret, payment_intent_id=intent.id)

    def parse_webhook(self, payload: bytes, signature: Optional[str]) -> Dict[str, Any]:
        """
        Verify a webhook signature and decode the event.

        Raises:
            ValidationError: missing or invalid signature
        """
        if not signature:
            raise ValidationError("No signature provided")

        try:
            body = payload.decode("utf-8")
            stripe.WebhookSignature.verify_header(
                body,
                signature,
                self.settings.STRIPE_WEBHOOK_SECRET,
                tolerance=stripe.Webhook.DEFAULT_TOLERANCE,
            )
        except (UnicodeDecodeError, stripe.SignatureVerificationError) as e:
            logger.warning(f"Webhook signature verification failed: {e}")
            raise ValidationError("Webhook signature verification failed") from e

        return json.loads(body)
