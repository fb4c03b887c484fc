"""Venue endpoints."""
import logging

from fastapi import APIRouter, Depends

from app.api.deps import get_store
from app.core.errors import NotFoundError, UpstreamError
from app.schemas.venue import VenueOut, VenueResponse
from app.services.venue_store import VenueStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/venue", tags=["venues"])


@router.get("/{slug}", response_model=VenueResponse)
async def get_venue(
    slug: str,
    store: VenueStore = Depends(get_store),
):
    """
    Get a venue by slug.

    Args:
        slug: Venue slug, e.g. "backroom-leeds"
        store: Venue store

    Returns:
        Venue details with nested capacity figures
    """
    try:
        venue = await store.get_venue_by_slug(slug)
    except Exception as e:
        logger.error(f"Error fetching venue {slug}: {e}")
        raise UpstreamError() from e

    if not venue:
        raise NotFoundError("Venue not found")

    return VenueResponse(venue=VenueOut.from_venue(venue))
