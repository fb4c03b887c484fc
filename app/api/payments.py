"""Payment endpoints."""
from fastapi import APIRouter, Depends

from app.api.deps import get_payment_gateway
from app.schemas.payment import CreateIntentRequest, CreateIntentResponse
from app.services.payment_gateway import PaymentGateway

router = APIRouter(prefix="/api/payments", tags=["payments"])


@router.post("/create-intent", response_model=CreateIntentResponse)
async def create_payment_intent(
    body: CreateIntentRequest,
    payments: PaymentGateway = Depends(get_payment_gateway),
):
    """
    Create a Stripe payment intent for a table booking.

    The amount is in pence and must be at least 50. The returned client
    secret is used by the browser to confirm the payment with Stripe.
    """
    return await payments.create_intent(
        amount=body.amount,
        booking_data=body.booking_data,
        currency=body.currency,
        payment_type=body.payment_type,
    )
