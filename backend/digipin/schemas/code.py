"""
Pydantic schemas for API request/response serialization.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from digipin.spatial import CodeError


# ═══════════════════════════════════════════════════════════════════
# Geometry
# ═══════════════════════════════════════════════════════════════════
class CellBounds(BaseModel):
    """Rectangle addressed by a code, in degrees."""

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    model_config = {"from_attributes": True}


class LatLon(BaseModel):
    lat: float
    lon: float


# ═══════════════════════════════════════════════════════════════════
# Codec responses
# ═══════════════════════════════════════════════════════════════════
class EncodeResponse(BaseModel):
    """Code for a coordinate, with the cell it falls in."""

    code: str = Field(description="Hyphenated code, XXX-XXX-XXXX")
    lat: float = Field(description="Input latitude")
    lon: float = Field(description="Input longitude")
    bounds: CellBounds


class DecodeResponse(BaseModel):
    """Centre and bounds of a decoded code."""

    code: str = Field(description="Canonical hyphenated code")
    lat: float = Field(description="Cell centre latitude")
    lon: float = Field(description="Cell centre longitude")
    bounds: CellBounds
    height_m: float
    width_m: float
    geometry: dict[str, Any] = Field(
        description="GeoJSON polygon of the cell outline (lon, lat)"
    )


class CellResponse(BaseModel):
    """Cell addressed by a code prefix."""

    prefix: str
    level: int = Field(description="Number of symbols in the prefix (1-10)")
    center: LatLon
    bounds: CellBounds
    height_m: float
    width_m: float


class ValidateResponse(BaseModel):
    code: str
    valid: bool
    error: CodeError | None = None


class FormatResponse(BaseModel):
    code: str


class ErrorDetail(BaseModel):
    error: CodeError
    message: str


# ═══════════════════════════════════════════════════════════════════
# Region descriptor (initial map framing)
# ═══════════════════════════════════════════════════════════════════
class RegionResponse(BaseModel):
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float
    center: LatLon
    default_zoom: int
    min_zoom: int
    max_zoom: int


# ═══════════════════════════════════════════════════════════════════
# Located position (map marker + cell overlay)
# ═══════════════════════════════════════════════════════════════════
class LocationResponse(BaseModel):
    lat: float
    lon: float
    code: str
    bounds: CellBounds
    zoom: int
    share_url: str = Field(description="Link that reopens this location")
    navigation_url: str
