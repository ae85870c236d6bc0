"""
Code Endpoints
==============
Encode, decode, validate and format DigiPIN codes, plus the region
descriptor used for initial map framing.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query

from digipin.config import get_settings
from digipin.schemas.code import (
    CellBounds,
    CellResponse,
    DecodeResponse,
    EncodeResponse,
    ErrorDetail,
    FormatResponse,
    LatLon,
    RegionResponse,
    ValidateResponse,
)
from digipin.spatial import (
    REGION_BOUNDS,
    CodeError,
    check_code,
    decode,
    decode_prefix,
    encode,
    format_code,
    normalize_code,
)
from digipin.spatial.codec import CODE_LENGTH

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Codes"])

_MESSAGES = {
    CodeError.OUT_OF_RANGE: "Location is outside the DigiPIN coverage area",
    CodeError.INVALID_LENGTH: "A DigiPIN has exactly 10 symbols",
    CodeError.INVALID_SYMBOL: "A DigiPIN only uses 2-9, C, F, J, K, L, M, P, T",
}


def _reject(error: CodeError) -> HTTPException:
    logger.debug("Rejecting request: %s", error.value)
    detail = ErrorDetail(error=error, message=_MESSAGES[error])
    return HTTPException(422, detail.model_dump(mode="json"))


# ── Encode ────────────────────────────────────────────────────────
@router.get("/codes/encode", response_model=EncodeResponse)
async def encode_point(
    lat: float = Query(description="Latitude in degrees"),
    lon: float = Query(description="Longitude in degrees"),
):
    """Return the code of the ~4 m cell containing ``(lat, lon)``."""
    code = encode(lat, lon)
    if code is None:
        raise _reject(CodeError.OUT_OF_RANGE)

    decoded = decode(code)
    return EncodeResponse(
        code=code,
        lat=lat,
        lon=lon,
        bounds=CellBounds.model_validate(decoded.bounds),
    )


# ── Decode ────────────────────────────────────────────────────────
@router.get("/codes/decode/{code}", response_model=DecodeResponse)
async def decode_code(code: str):
    """Return the centre, bounds and outline of a code's cell."""
    decoded = decode(code)
    if decoded is None:
        raise _reject(check_code(code))

    cell = decoded.bounds
    return DecodeResponse(
        code=format_code(code),
        lat=decoded.lat,
        lon=decoded.lon,
        bounds=CellBounds.model_validate(cell),
        height_m=cell.height_m,
        width_m=cell.width_m,
        geometry=cell.to_geojson(),
    )


# ── Prefix cell ───────────────────────────────────────────────────
@router.get("/codes/cell/{prefix}", response_model=CellResponse)
async def prefix_cell(prefix: str):
    """Return the coarser cell addressed by the first 1-10 symbols."""
    pin = normalize_code(prefix)
    cell = decode_prefix(pin)
    if cell is None:
        if not 0 < len(pin) <= CODE_LENGTH:
            raise _reject(CodeError.INVALID_LENGTH)
        raise _reject(CodeError.INVALID_SYMBOL)

    lat, lon = cell.center
    return CellResponse(
        prefix=pin,
        level=len(pin),
        center=LatLon(lat=lat, lon=lon),
        bounds=CellBounds.model_validate(cell),
        height_m=cell.height_m,
        width_m=cell.width_m,
    )


# ── Validate / format ─────────────────────────────────────────────
@router.get("/codes/validate/{code}", response_model=ValidateResponse)
async def validate_code(code: str):
    """Check length and alphabet only; never fails."""
    error = check_code(code)
    return ValidateResponse(code=code, valid=error is None, error=error)


@router.get("/codes/format/{code}", response_model=FormatResponse)
async def format_display(code: str):
    """Hyphenate a 10-symbol code; other input is echoed back."""
    return FormatResponse(code=format_code(code))


# ── Region descriptor ─────────────────────────────────────────────
@router.get("/region", response_model=RegionResponse)
async def region():
    """Bounding region and default zoom levels for map framing."""
    settings = get_settings()
    center = REGION_BOUNDS["center"]
    return RegionResponse(
        min_lat=REGION_BOUNDS["min_lat"],
        max_lat=REGION_BOUNDS["max_lat"],
        min_lon=REGION_BOUNDS["min_lon"],
        max_lon=REGION_BOUNDS["max_lon"],
        center=LatLon(lat=center["lat"], lon=center["lon"]),
        default_zoom=settings.map_default_zoom,
        min_zoom=settings.map_min_zoom,
        max_zoom=settings.map_max_zoom,
    )
