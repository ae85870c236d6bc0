"""
Tests for digipin.spatial.grid — region, symbol grid and Cell.
"""
from __future__ import annotations

import math

import pytest
from shapely.geometry import Polygon

from digipin.spatial.grid import (
    ALPHABET,
    DIGIPIN_GRID,
    REGION,
    REGION_BOUNDS,
    SYMBOL_TO_POSITION,
    Cell,
)


# ═══════════════════════════════════════════════════════════════════
# Fixed tables
# ═══════════════════════════════════════════════════════════════════
class TestRegion:
    def test_constants(self):
        assert REGION.min_lat == 2.5
        assert REGION.max_lat == 38.5
        assert REGION.min_lon == 63.5
        assert REGION.max_lon == 99.5

    def test_center(self):
        assert REGION.center == (20.5, 81.5)

    def test_region_bounds_descriptor(self):
        assert REGION_BOUNDS["min_lat"] == 2.5
        assert REGION_BOUNDS["max_lon"] == 99.5
        assert REGION_BOUNDS["center"]["lat"] == 20.5
        assert REGION_BOUNDS["center"]["lon"] == 81.5

    def test_region_bounds_read_only(self):
        with pytest.raises(TypeError):
            REGION_BOUNDS["min_lat"] = 0.0  # type: ignore[index]
        with pytest.raises(TypeError):
            REGION_BOUNDS["center"]["lat"] = 0.0  # type: ignore[index]


class TestSymbolGrid:
    def test_layout(self):
        assert DIGIPIN_GRID == (
            ("F", "C", "9", "8"),
            ("J", "3", "2", "7"),
            ("K", "4", "5", "6"),
            ("L", "M", "P", "T"),
        )

    def test_alphabet(self):
        assert ALPHABET == set("23456789CFJKLMPT")
        assert len(ALPHABET) == 16

    def test_inverse_is_bijective(self):
        assert len(SYMBOL_TO_POSITION) == 16
        for symbol, (row, col) in SYMBOL_TO_POSITION.items():
            assert DIGIPIN_GRID[row][col] == symbol

    @pytest.mark.parametrize("symbol,position", [
        ("F", (0, 0)),
        ("8", (0, 3)),
        ("3", (1, 1)),
        ("5", (2, 2)),
        ("L", (3, 0)),
        ("T", (3, 3)),
    ])
    def test_positions(self, symbol, position):
        assert SYMBOL_TO_POSITION[symbol] == position

    def test_inverse_read_only(self):
        with pytest.raises(TypeError):
            SYMBOL_TO_POSITION["A"] = (0, 0)  # type: ignore[index]


# ═══════════════════════════════════════════════════════════════════
# Cell
# ═══════════════════════════════════════════════════════════════════
class TestCell:
    @pytest.fixture()
    def cell(self) -> Cell:
        return Cell(min_lat=10.0, max_lat=12.0, min_lon=70.0, max_lon=74.0)

    def test_spans(self, cell):
        assert cell.lat_span == 2.0
        assert cell.lon_span == 4.0

    def test_center(self, cell):
        assert cell.center == (11.0, 72.0)

    def test_height_m(self, cell):
        assert math.isclose(cell.height_m, 2 * 111_320.0)

    def test_width_m_scaled_by_latitude(self, cell):
        expected = 4 * 111_320.0 * math.cos(math.radians(11.0))
        assert math.isclose(cell.width_m, expected)
        assert cell.width_m < 4 * 111_320.0

    def test_area_m2(self, cell):
        assert math.isclose(cell.area_m2, cell.height_m * cell.width_m)

    @pytest.mark.parametrize("lat,lon,inside", [
        (11.0, 72.0, True),     # Interior
        (10.0, 70.0, True),     # South-west corner
        (12.0, 74.0, True),     # North-east corner
        (9.99, 72.0, False),    # South
        (12.01, 72.0, False),   # North
        (11.0, 69.99, False),   # West
        (11.0, 74.01, False),   # East
    ])
    def test_contains_point(self, cell, lat, lon, inside):
        assert cell.contains_point(lat, lon) is inside

    def test_to_dict(self, cell):
        assert cell.to_dict() == {
            "min_lat": 10.0, "max_lat": 12.0, "min_lon": 70.0, "max_lon": 74.0,
        }

    def test_to_shapely_is_lon_lat(self, cell):
        poly = cell.to_shapely()
        assert isinstance(poly, Polygon)
        assert poly.bounds == (70.0, 10.0, 74.0, 12.0)

    def test_to_wkt(self, cell):
        assert cell.to_wkt().startswith("POLYGON")

    def test_to_geojson(self, cell):
        geo = cell.to_geojson()
        assert geo["type"] == "Polygon"
        ring = geo["coordinates"][0]
        assert len(ring) == 5
        assert ring[0] == ring[-1]
        assert {pt for pt in ring} == {
            (70.0, 10.0), (74.0, 10.0), (74.0, 12.0), (70.0, 12.0),
        }

    def test_frozen(self, cell):
        with pytest.raises(AttributeError):
            cell.min_lat = 0.0  # type: ignore[misc]
