"""FastAPI application: Etsy Listing Sprint Assistant API.

Generates listing packs from product briefs, gates the full export behind a
manual payment-proof step, and records funnel events.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.listing.brief import parse_flag
from src.listing.errors import ListingValidationError, error_code

from . import db, settings
from .payload import normalize_source
from .routers import billing, listings, metrics

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    db.load_state()
    logger.info("%s ready (version %s)", settings.SERVICE_NAME, settings.APP_VERSION)
    yield


app = FastAPI(
    title="Etsy Listing Sprint Assistant API",
    version=settings.APP_VERSION,
    description="Listing pack generation with a manual payment gate",
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# CORS
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["content-type"],
)


@app.middleware("http")
async def no_store(request: Request, call_next):
    response = await call_next(request)
    if response.headers.get("content-type", "").startswith("application/json"):
        response.headers["cache-control"] = "no-store"
    return response


# ---------------------------------------------------------------------------
# Errors: every failure body is {"error": "<code>"}
# ---------------------------------------------------------------------------
@app.exception_handler(ListingValidationError)
async def listing_validation_handler(request: Request, exc: ListingValidationError):
    return JSONResponse(status_code=400, content={"error": error_code(exc)})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": "invalid_request"})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if isinstance(exc.detail, dict):
        return JSONResponse(status_code=exc.status_code, content=exc.detail)
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content={"error": "not_found"})
    return JSONResponse(status_code=exc.status_code, content={"error": "invalid_request"})


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(listings.router, prefix="/api", tags=["listings"])
app.include_router(billing.router, prefix="/api", tags=["billing"])
app.include_router(metrics.router, prefix="/api", tags=["metrics"])


# ---------------------------------------------------------------------------
# Health Check
# ---------------------------------------------------------------------------
@app.get("/api/health")
async def health():
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "version": settings.APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/")
def root(
    request: Request,
    source: Optional[str] = Query(None),
    self_test: Optional[str] = Query(None, alias="selfTest"),
):
    """Landing hit: counted as a ``landing_view`` funnel event."""
    db.record_event(
        "landing_view",
        source=normalize_source(source, "direct"),
        self_test=parse_flag(self_test),
        details={"userAgent": request.headers.get("user-agent") or "unknown"},
    )
    return {"message": "Etsy Listing Sprint Assistant API", "docs": "/docs"}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
