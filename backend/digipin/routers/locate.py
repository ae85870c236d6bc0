"""
Locate Endpoint
===============
Resolves share-link query parameters into a map location.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query

from digipin.config import get_settings
from digipin.schemas.code import CellBounds, LocationResponse
from digipin.services.location import navigation_url, resolve_query, share_url

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/locate", tags=["Locate"])


@router.get("", response_model=LocationResponse)
async def locate(
    pin: str | None = Query(default=None, description="DigiPIN, hyphens optional"),
    lat: float | None = Query(default=None),
    lng: float | None = Query(default=None),
    lon: float | None = Query(default=None),
):
    """
    Resolve ``?pin=`` or ``?lat=&lng=`` / ``?lat=&lon=`` to a location.

    A valid ``pin`` takes precedence over coordinates.  Returns 404 when
    nothing resolves to a point inside the DigiPIN region.
    """
    if lng is not None:
        lon = lng

    state = resolve_query(pin=pin, lat=lat, lon=lon)
    if state is None:
        logger.debug("Unresolvable locate query (pin=%r, lat=%s, lon=%s)", pin, lat, lon)
        raise HTTPException(404, "No DigiPIN location for this query")

    return LocationResponse(
        lat=state.lat,
        lon=state.lon,
        code=state.code,
        bounds=CellBounds.model_validate(state.cell),
        zoom=get_settings().locate_zoom,
        share_url=share_url(state.code),
        navigation_url=navigation_url(state),
    )
