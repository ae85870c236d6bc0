"""Schemas subpackage — Pydantic request/response models."""

from digipin.schemas.code import (
    CellBounds,
    CellResponse,
    DecodeResponse,
    EncodeResponse,
    ErrorDetail,
    FormatResponse,
    LatLon,
    LocationResponse,
    RegionResponse,
    ValidateResponse,
)

__all__ = [
    "CellBounds",
    "CellResponse",
    "DecodeResponse",
    "EncodeResponse",
    "ErrorDetail",
    "FormatResponse",
    "LatLon",
    "LocationResponse",
    "RegionResponse",
    "ValidateResponse",
]
