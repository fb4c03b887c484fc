"""Webhook endpoints."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, Request

from app.api.deps import get_payment_gateway, get_webhook_service
from app.core.errors import UpstreamError
from app.services.payment_gateway import PaymentGateway
from app.services.webhook_service import WebhookService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/webhooks", tags=["webhooks"])


@router.post("/stripe")
async def stripe_webhook(
    request: Request,
    stripe_signature: Optional[str] = Header(default=None),
    payments: PaymentGateway = Depends(get_payment_gateway),
    webhooks: WebhookService = Depends(get_webhook_service),
):
    """Receive Stripe payment intent events."""
    payload = await request.body()
    event = payments.parse_webhook(payload, stripe_signature)

    try:
        await webhooks.process(event)
    except Exception as e:
        logger.exception(f"Error processing webhook {event.get('id')}: {e}")
        raise UpstreamError("Webhook processing failed") from e

    return {"received": True}
