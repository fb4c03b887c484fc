"""Diagnostic endpoints."""
import logging
from datetime import date, time

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_settings, get_store
from app.core.config import Settings
from app.core.errors import NotFoundError
from app.services.venue_store import VenueStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["diagnostics"])

SAMPLE_START = time(23, 0)
SAMPLE_END = time(6, 0)


@router.get("/test-db")
async def test_db(
    store: VenueStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """
    Check store connectivity.

    Reads the default venue and its tables and runs one availability check
    for tonight's late session.
    """
    try:
        venue = await store.get_venue_by_slug(settings.DEFAULT_VENUE_SLUG)
        if not venue:
            raise NotFoundError(f"Venue not found: {settings.DEFAULT_VENUE_SLUG}")

        tables = await store.list_active_tables(str(venue.id))

        sample_table_id = str(tables[0].id) if tables else None
        is_available = None
        if sample_table_id:
            is_available = await store.check_table_availability(
                sample_table_id, date.today(), SAMPLE_START, SAMPLE_END
            )
    except Exception as e:
        logger.error(f"Database test error: {e!r}")
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "message": "Database connection failed",
                "error": type(e).__name__,
            },
        )

    return {
        "success": True,
        "message": "Database connection successful",
        "data": {
            "venue": {
                "id": str(venue.id),
                "name": venue.name,
                "capacity": venue.capacity_total,
            },
            "tables": {
                "count": len(tables),
                "upstairs": sum(1 for t in tables if t.location == "upstairs"),
                "downstairs": sum(1 for t in tables if t.location == "downstairs"),
            },
            "availability_test": {
                "table_id": sample_table_id,
                "is_available": is_available,
            },
        },
    }
