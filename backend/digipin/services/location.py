"""
Location Service
================
Turns the inputs a map client receives (a clicked point, a searched code,
a shared link's query string) into a single :class:`LocationState`.

Precedence for link queries mirrors the share links this service emits:

1. ``pin`` — a valid code is decoded to its cell centre.
2. ``lat`` + ``lon`` (``lng`` accepted as an alias) — used as-is when
   inside the bounding region.

Anything else resolves to ``None``; the caller decides what to tell the
user.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from urllib.parse import urlencode

from digipin.config import get_settings
from digipin.spatial import Cell, decode, encode, format_code, is_valid_code

logger = logging.getLogger(__name__)

NAVIGATION_BASE_URL = "https://www.google.com/maps/dir/"


@dataclass(frozen=True, slots=True)
class LocationState:
    """
    The point a client is showing, and the code of its cell.

    Raises ``ValueError`` when ``code`` is not a DigiPIN or its cell does
    not contain ``(lat, lon)``.
    """

    lat: float
    lon: float
    code: str
    cell: Cell = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        decoded = decode(self.code)
        if decoded is None:
            raise ValueError(f"{self.code!r} is not a valid DigiPIN")
        if not decoded.bounds.contains_point(self.lat, self.lon):
            raise ValueError(
                f"({self.lat}, {self.lon}) is outside the cell of {self.code}"
            )
        object.__setattr__(self, "cell", decoded.bounds)


def locate_point(lat: float, lon: float) -> LocationState | None:
    """Place a location at an exact coordinate (map click, geolocation)."""
    code = encode(lat, lon)
    if code is None:
        logger.debug("Point (%s, %s) is outside the DigiPIN region", lat, lon)
        return None
    return LocationState(lat=lat, lon=lon, code=code)


def locate_code(code: str) -> LocationState | None:
    """Place a location at the centre of a code's cell (search, ?pin=)."""
    decoded = decode(code)
    if decoded is None:
        logger.debug("Rejected code %r", code)
        return None
    return LocationState(
        lat=decoded.lat, lon=decoded.lon, code=format_code(code)
    )


def resolve_query(
    pin: str | None = None,
    lat: float | None = None,
    lon: float | None = None,
) -> LocationState | None:
    """Resolve link query parameters to a location, ``pin`` first."""
    if pin and is_valid_code(pin):
        logger.debug("Resolving query by pin %s", pin)
        return locate_code(pin)

    if lat is not None and lon is not None:
        logger.debug("Resolving query by coordinate (%s, %s)", lat, lon)
        return locate_point(lat, lon)

    return None


def share_url(code: str, base_url: str | None = None) -> str:
    """Link that reopens ``code``; relative unless a base URL is set."""
    if base_url is None:
        base_url = get_settings().share_base_url
    return f"{base_url}?{urlencode({'pin': format_code(code)})}"


def navigation_url(state: LocationState) -> str:
    """Directions link to the location in Google Maps."""
    query = urlencode({"api": 1, "destination": f"{state.lat},{state.lon}"})
    return f"{NAVIGATION_BASE_URL}?{query}"
