"""Spatial subpackage — the DigiPIN grid tables and codec."""

from digipin.spatial.codec import (
    CodeError,
    DecodedCode,
    check_code,
    decode,
    decode_prefix,
    encode,
    format_code,
    is_valid_code,
    is_within_bounds,
    normalize_code,
)
from digipin.spatial.grid import (
    ALPHABET,
    DIGIPIN_GRID,
    REGION,
    REGION_BOUNDS,
    Cell,
)

__all__ = [
    "ALPHABET",
    "Cell",
    "CodeError",
    "DIGIPIN_GRID",
    "DecodedCode",
    "REGION",
    "REGION_BOUNDS",
    "check_code",
    "decode",
    "decode_prefix",
    "encode",
    "format_code",
    "is_valid_code",
    "is_within_bounds",
    "normalize_code",
]
