"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import bookings, diagnostics, payments, tables, venue, webhooks
from app.core.config import Settings, settings as default_settings
from app.core.database import create_engine, create_session_factory
from app.core.errors import register_error_handlers
from app.services.payment_gateway import PaymentGateway
from app.services.venue_store import VenueStore

# Configure logging
logging.basicConfig(
    level=default_settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[VenueStore] = None,
    payment_gateway: Optional[PaymentGateway] = None,
) -> FastAPI:
    """
    Build the application.

    Handles passed in are used as-is; anything missing is created at startup
    from the settings and released at shutdown.

    Args:
        settings: Application settings
        store: Venue store
        payment_gateway: Payment gateway

    Returns:
        Configured FastAPI app
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        # Startup
        logger.info("Starting table booking API")
        logger.info(f"Debug mode: {settings.DEBUG}")

        engine = None
        if app.state.store is None:
            engine = create_engine(settings)
            app.state.store = VenueStore(create_session_factory(engine))
        if app.state.payments is None:
            app.state.payments = PaymentGateway.from_settings(settings)

        yield

        # Shutdown
        logger.info("Shutting down table booking API")
        if engine is not None:
            await engine.dispose()

    app = FastAPI(
        title="Table Booking API",
        description="Venue tables, availability and booking payments",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.payments = payment_gateway

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Include routers
    app.include_router(venue.router)
    app.include_router(tables.router)
    app.include_router(payments.router)
    app.include_router(bookings.router)
    app.include_router(webhooks.router)
    app.include_router(diagnostics.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
