"""Shared fixtures: an in-memory store and a recording Stripe client."""
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.services.payment_gateway import PaymentGateway

VENUE_ID = "venue-1"
WEBHOOK_SECRET = "whsec_test_secret"


def make_venue(**overrides):
    data = dict(
        id=VENUE_ID,
        slug="backroom-leeds",
        name="The Backroom",
        description="Late-night cocktail bar",
        address="1 Call Lane, Leeds",
        phone="0113 000 0000",
        email="hello@example.com",
        capacity_total=500,
        capacity_main_bar=350,
        capacity_private_room=150,
        opening_hours={"friday": {"open": "23:00", "close": "06:00"}},
        is_active=True,
    )
    data.update(overrides)
    return SimpleNamespace(**data)


def make_table(table_id, number, location="upstairs", **overrides):
    data = dict(
        id=table_id,
        venue_id=VENUE_ID,
        table_number=str(number),
        display_name=None,
        location=location,
        min_capacity=2,
        max_capacity=6,
        preferred_capacity=4,
        is_premium=False,
        is_booth=False,
        floor_position_x=None,
        floor_position_y=None,
        description=None,
        amenities=None,
        min_spend=15000,
        deposit_required=5000,
        is_active=True,
        display_order=number,
    )
    data.update(overrides)
    return SimpleNamespace(**data)


class FakeStore:
    """Stands in for VenueStore."""

    def __init__(self, venues=None, tables=None):
        self.venues = {v.slug: v for v in venues or []}
        self.tables = list(tables or [])
        # table_id -> bool, None or an exception to raise
        self.availability = {}
        self.availability_calls = []
        self.venue_error = None
        self.tables_error = None
        self.combinations = []
        self.combination_calls = []
        self.booking_result = {
            "booking_id": "b-1",
            "booking_reference": "BR-250601-ABC123",
            "total_deposit": 5000,
            "success": True,
            "error_message": None,
        }
        self.booking_calls = []
        self.recorded = []
        self.status_updates = []
        self.logged_payments = []

    async def get_venue_by_slug(self, slug):
        if self.venue_error:
            raise self.venue_error
        return self.venues.get(slug)

    async def list_active_tables(self, venue_id, location=None):
        if self.tables_error:
            raise self.tables_error
        tables = [t for t in self.tables if t.venue_id == venue_id and t.is_active]
        if location:
            tables = [t for t in tables if t.location == location]
        return sorted(tables, key=lambda t: t.display_order)

    async def check_table_availability(self, table_id, booking_date, start_time, end_time):
        self.availability_calls.append((table_id, booking_date, start_time, end_time))
        value = self.availability.get(table_id, True)
        if isinstance(value, Exception):
            raise value
        return value

    async def get_optimal_table_combinations(
        self, venue_id, booking_date, start_time, end_time, party_size, location=None
    ):
        self.combination_calls.append((venue_id, booking_date, start_time, end_time, party_size, location))
        return self.combinations

    async def create_booking_atomic(self, **kwargs):
        self.booking_calls.append(kwargs)
        return self.booking_result

    async def record_successful_payment(self, booking, table_ids, payment):
        self.recorded.append((booking, table_ids, payment))
        return "booking-123"

    async def update_booking_status(self, payment_intent_id, status, payment_status):
        self.status_updates.append((payment_intent_id, status, payment_status))
        return "booking-123"

    async def log_payment(self, payment):
        self.logged_payments.append(payment)


class FakePaymentIntents:
    def __init__(self):
        self.calls = []
        self.error = None

    async def create_async(self, params):
        self.calls.append(params)
        if self.error:
            raise self.error
        return SimpleNamespace(id="pi_test_123", client_secret="pi_test_123_secret_abc")


class FakeStripeClient:
    def __init__(self):
        self.v1 = SimpleNamespace(payment_intents=FakePaymentIntents())


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        STRIPE_SECRET_KEY="sk_test_dummy",
        STRIPE_WEBHOOK_SECRET=WEBHOOK_SECRET,
    )


@pytest.fixture
def tables():
    return [
        make_table("t-1", 1, "upstairs", display_name="The Booth", is_booth=True, amenities=["sofa"]),
        make_table("t-2", 2, "upstairs", floor_position_x=120, floor_position_y=40),
        make_table("t-3", 3, "downstairs", min_spend=25000),
    ]


@pytest.fixture
def store(tables):
    return FakeStore(venues=[make_venue()], tables=tables)


@pytest.fixture
def stripe_client():
    return FakeStripeClient()


@pytest.fixture
def payment_intents(stripe_client):
    return stripe_client.v1.payment_intents


@pytest.fixture
def payments(stripe_client, settings):
    return PaymentGateway(stripe_client, settings)


@pytest.fixture
def app(settings, store, payments):
    return create_app(settings=settings, store=store, payment_gateway=payments)


@pytest.fixture
def client(app):
    return TestClient(app)
