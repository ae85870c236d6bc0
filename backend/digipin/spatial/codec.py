"""
DigiPIN Codec
=============
Hierarchical 4×4 subdivision of the bounding region, ten levels deep.

Each level splits the working rectangle into 4 latitude bands and
4 longitude columns, picks one sub-cell, and emits its grid symbol:

    row = ⌊(max_lat − lat) / Δlat⌋      (0 = northernmost band)
    col = ⌊(lon − min_lon) / Δlon⌋

After 10 levels each axis is divided by 4¹⁰, giving cells of roughly
3.8 m × 3.8 m.  Encoding and decoding share :func:`narrow`, so a decoded
cell always contains the point that produced its code.

None of these functions raise on bad input; failure is signalled by a
``None`` result (or ``False`` for predicates).
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from digipin.spatial.grid import (
    ALPHABET,
    DIGIPIN_GRID,
    GRID_SIZE,
    REGION,
    SYMBOL_TO_POSITION,
    Cell,
)

CODE_LENGTH = 10
GROUPS = (3, 3, 4)
SEPARATOR = "-"


class CodeError(str, enum.Enum):
    OUT_OF_RANGE = "OUT_OF_RANGE"
    INVALID_LENGTH = "INVALID_LENGTH"
    INVALID_SYMBOL = "INVALID_SYMBOL"


@dataclass(frozen=True, slots=True)
class DecodedCode:
    """Centre point of a decoded cell plus its bounds."""

    lat: float
    lon: float
    bounds: Cell


# ── Shared narrowing ─────────────────────────────────────────────

def narrow(cell: Cell, row: int, col: int) -> Cell:
    """Return the (row, col) sub-cell of ``cell``."""
    lat_div = cell.lat_span / GRID_SIZE
    lon_div = cell.lon_span / GRID_SIZE
    max_lat = cell.max_lat - row * lat_div
    min_lon = cell.min_lon + col * lon_div
    return Cell(
        min_lat=max_lat - lat_div,
        max_lat=max_lat,
        min_lon=min_lon,
        max_lon=min_lon + lon_div,
    )


def _clamp(index: int) -> int:
    return min(GRID_SIZE - 1, max(0, index))


def _locate(cell: Cell, lat: float, lon: float) -> tuple[int, int]:
    lat_div = cell.lat_span / GRID_SIZE
    lon_div = cell.lon_span / GRID_SIZE
    row = math.floor((cell.max_lat - lat) / lat_div)
    col = math.floor((lon - cell.min_lon) / lon_div)
    # Points on a grid line (or on the region edge) can land on index 4.
    return _clamp(row), _clamp(col)


# ── Normalisation / formatting ───────────────────────────────────

def normalize_code(code: str) -> str:
    return code.replace(SEPARATOR, "").upper()


def _hyphenate(pin: str) -> str:
    parts = []
    start = 0
    for size in GROUPS:
        parts.append(pin[start:start + size])
        start += size
    return SEPARATOR.join(parts)


def format_code(raw: str) -> str:
    """
    Hyphenate a code as ``XXX-XXX-XXXX``.

    Input whose normalised form is not 10 characters long is returned
    unchanged.  The alphabet is not checked: this is a display helper.
    """
    pin = normalize_code(raw)
    if len(pin) != CODE_LENGTH:
        return raw
    return _hyphenate(pin)


# ── Validation ───────────────────────────────────────────────────

def is_within_bounds(lat: float, lon: float) -> bool:
    return REGION.contains_point(lat, lon)


def check_code(code: str) -> CodeError | None:
    """Return why ``code`` is not a valid DigiPIN, or ``None`` if it is."""
    pin = normalize_code(code)
    if len(pin) != CODE_LENGTH:
        return CodeError.INVALID_LENGTH
    if not ALPHABET.issuperset(pin):
        return CodeError.INVALID_SYMBOL
    return None


def is_valid_code(code: str) -> bool:
    return check_code(code) is None


# ── Encode / decode ──────────────────────────────────────────────

def encode(lat: float, lon: float) -> str | None:
    """
    Encode a coordinate to a hyphenated 10-symbol code.

    Returns ``None`` when the coordinate lies outside the bounding
    region (bounds are inclusive).
    """
    if not is_within_bounds(lat, lon):
        return None

    cell = REGION
    symbols: list[str] = []
    for _ in range(CODE_LENGTH):
        row, col = _locate(cell, lat, lon)
        symbols.append(DIGIPIN_GRID[row][col])
        cell = narrow(cell, row, col)

    return _hyphenate("".join(symbols))


def _walk(pin: str) -> Cell:
    cell = REGION
    for symbol in pin:
        row, col = SYMBOL_TO_POSITION[symbol]
        cell = narrow(cell, row, col)
    return cell


def decode(code: str) -> DecodedCode | None:
    """
    Decode a code (hyphens optional, any case) to its cell.

    Returns ``None`` for a wrong length or a symbol outside the alphabet.
    """
    if check_code(code) is not None:
        return None

    cell = _walk(normalize_code(code))
    lat, lon = cell.center
    return DecodedCode(lat=lat, lon=lon, bounds=cell)


def decode_prefix(prefix: str) -> Cell | None:
    """Return the cell addressed by the first 1–10 symbols of a code."""
    pin = normalize_code(prefix)
    if not 0 < len(pin) <= CODE_LENGTH:
        return None
    if not ALPHABET.issuperset(pin):
        return None
    return _walk(pin)
