"""Routers subpackage — HTTP layer for all API endpoints."""

from digipin.routers import codes, locate

__all__ = ["codes", "locate"]
