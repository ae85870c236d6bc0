"""
DigiPIN — FastAPI Application
=============================
Encode coordinates inside India to 10-symbol DigiPIN codes and decode
them back to ~4 m grid cells.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from digipin.config import get_settings
from digipin.routers import codes, locate
from digipin.spatial import decode, encode, format_code

logger = logging.getLogger(__name__)
settings = get_settings()


# ── Reference code self-check ─────────────────────────────────────
def verify_reference_code(code: str) -> None:
    """
    Decode ``code`` and re-encode its centre; the result must be the
    same code.  Raises ``RuntimeError`` otherwise.
    """
    decoded = decode(code)
    if decoded is None:
        raise RuntimeError(f"Reference code {code!r} is not a valid DigiPIN")

    roundtrip = encode(decoded.lat, decoded.lon)
    if roundtrip != format_code(code):
        raise RuntimeError(
            f"Reference code {code!r} re-encodes to {roundtrip!r}; "
            "encode and decode disagree."
        )
    logger.info(
        "Reference code %s -> (%.6f, %.6f) verified",
        roundtrip, decoded.lat, decoded.lon,
    )


# ── Lifespan (startup / shutdown) ─────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
        - Apply the configured log level to the ``digipin`` logger.
        - Verify the codec against the reference code.
    """
    logging.getLogger("digipin").setLevel(settings.log_level.upper())
    logger.info("DigiPIN starting up...")

    verify_reference_code(settings.reference_code)

    yield

    logger.info("DigiPIN shut down.")


# ── App factory ───────────────────────────────────────────────────
def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        description=(
            "DigiPIN geocoding: 10-symbol codes for ~4 m grid cells "
            "covering India and its EEZ."
        ),
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # CORS for map frontends (configurable via DIGIPIN_CORS_ORIGINS).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(codes.router, prefix="/api")
    app.include_router(locate.router, prefix="/api")

    @app.get("/health")
    async def health():
        return {"status": "ok", "service": settings.app_name}

    return app


# ── Module-level app instance (for `uvicorn digipin.main:app`) ───
app = create_app()  # pragma: no cover
