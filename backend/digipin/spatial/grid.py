"""
Grid Geometry
=============
The two fixed tables the codec works over, and the rectangle types it
produces:

1. **Bounding Region** — the lat/lon rectangle covering India and its EEZ.
2. **Symbol Grid**     — the 4×4 anticlockwise-spiral symbol layout used at
                         every subdivision level.
3. **Cell**            — a sub-rectangle addressed by a code or a prefix.

Row 0 of the grid is the *northernmost* band, so row indices grow from
north to south while latitude grows from south to north.

Approximate ground size uses an equirectangular model:

    height_m = Δlat × 111 320
    width_m  = Δlon × 111 320 × cos(lat_center)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from shapely.geometry import Polygon, box, mapping

METRES_PER_DEGREE = 111_320.0


# ── Cell (addressed rectangle) ───────────────────────────────────
@dataclass(frozen=True, slots=True)
class Cell:
    """A rectangle in degrees; x is longitude, y is latitude."""

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    @property
    def lat_span(self) -> float:
        return self.max_lat - self.min_lat

    @property
    def lon_span(self) -> float:
        return self.max_lon - self.min_lon

    @property
    def center(self) -> tuple[float, float]:
        """``(lat, lon)`` midpoint of the rectangle."""
        return (
            (self.min_lat + self.max_lat) / 2,
            (self.min_lon + self.max_lon) / 2,
        )

    @property
    def height_m(self) -> float:
        return self.lat_span * METRES_PER_DEGREE

    @property
    def width_m(self) -> float:
        lat, _ = self.center
        return self.lon_span * METRES_PER_DEGREE * math.cos(math.radians(lat))

    @property
    def area_m2(self) -> float:
        return self.height_m * self.width_m

    def contains_point(self, lat: float, lon: float) -> bool:
        return (
            self.min_lat <= lat <= self.max_lat
            and self.min_lon <= lon <= self.max_lon
        )

    def to_dict(self) -> dict[str, float]:
        return {
            "min_lat": self.min_lat,
            "max_lat": self.max_lat,
            "min_lon": self.min_lon,
            "max_lon": self.max_lon,
        }

    def to_shapely(self) -> Polygon:
        """Return a Shapely box (lon, lat order) for map overlays."""
        return box(self.min_lon, self.min_lat, self.max_lon, self.max_lat)

    def to_wkt(self) -> str:
        return self.to_shapely().wkt

    def to_geojson(self) -> dict[str, Any]:
        """GeoJSON geometry mapping of the cell outline."""
        return mapping(self.to_shapely())


# ── Bounding Region ──────────────────────────────────────────────
REGION = Cell(min_lat=2.5, max_lat=38.5, min_lon=63.5, max_lon=99.5)

REGION_BOUNDS = MappingProxyType(
    {
        "min_lat": REGION.min_lat,
        "max_lat": REGION.max_lat,
        "min_lon": REGION.min_lon,
        "max_lon": REGION.max_lon,
        "center": MappingProxyType(
            {"lat": REGION.center[0], "lon": REGION.center[1]}
        ),
    }
)


# ── Symbol Grid ──────────────────────────────────────────────────
GRID_SIZE = 4

# Anticlockwise spiral; must not be reordered.
DIGIPIN_GRID: tuple[tuple[str, ...], ...] = (
    ("F", "C", "9", "8"),
    ("J", "3", "2", "7"),
    ("K", "4", "5", "6"),
    ("L", "M", "P", "T"),
)

SYMBOL_TO_POSITION = MappingProxyType(
    {
        symbol: (row, col)
        for row, symbols in enumerate(DIGIPIN_GRID)
        for col, symbol in enumerate(symbols)
    }
)

ALPHABET = frozenset(SYMBOL_TO_POSITION)
