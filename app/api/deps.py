"""Request-scoped access to the handles created at startup."""
from fastapi import Depends, Request

from app.core.config import Settings
from app.services.availability_service import AvailabilityService
from app.services.payment_gateway import PaymentGateway
from app.services.venue_store import VenueStore
from app.services.webhook_service import WebhookService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> VenueStore:
    return request.app.state.store


def get_payment_gateway(request: Request) -> PaymentGateway:
    return request.app.state.payments


def get_availability_service(store: VenueStore = Depends(get_store)) -> AvailabilityService:
    return AvailabilityService(store)


def get_webhook_service(
    store: VenueStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> WebhookService:
    return WebhookService(store, settings.DEFAULT_VENUE_SLUG)
