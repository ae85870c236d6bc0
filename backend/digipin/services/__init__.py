"""Services subpackage — location resolution for map clients."""

from digipin.services.location import (
    LocationState,
    locate_code,
    locate_point,
    navigation_url,
    resolve_query,
    share_url,
)

__all__ = [
    "LocationState",
    "locate_code",
    "locate_point",
    "navigation_url",
    "resolve_query",
    "share_url",
]
