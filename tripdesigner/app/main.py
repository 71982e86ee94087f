"""FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from tripdesigner.app.api.routes.catalog import router as catalog_router
from tripdesigner.app.api.routes.chat import router as chat_router
from tripdesigner.app.api.routes.health import router as health_router
from tripdesigner.app.api.routes.itineraries import router as itineraries_router
from tripdesigner.app.api.routes.metrics import router as metrics_router
from tripdesigner.app.api.routes.reviews import router as reviews_router
from tripdesigner.app.config import get_settings
from tripdesigner.app.db.engine import get_async_engine
from tripdesigner.app.db.seed_catalog import init_database
from tripdesigner.app.planning.errors import NotFoundError, StorageError, ValidationError
from tripdesigner.app.reviews.storage import IMAGES_SUBDIR
from tripdesigner.app.utils.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create tables and seed the catalog on startup."""
    settings = get_settings()
    configure_logging(settings.log_level)
    await init_database(get_async_engine(), seed=settings.seed_catalog)
    logger.info("[startup] database ready")
    yield


app = FastAPI(title="Itinerary Designer API", version="0.1.0", lifespan=lifespan)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error(f"[{request.method} {request.url.path}] storage failure: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content={"detail": str(exc)}
    )


# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(metrics_router, tags=["metrics"])
app.include_router(catalog_router, tags=["catalog"])
app.include_router(itineraries_router, tags=["itineraries"])
app.include_router(chat_router, tags=["chat"])
app.include_router(reviews_router, tags=["reviews"])

# Uploaded review images
app.mount(
    f"/{IMAGES_SUBDIR}",
    StaticFiles(directory=Path(get_settings().upload_dir) / IMAGES_SUBDIR, check_dir=False),
    name="images",
)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Itinerary Designer API", "version": "0.1.0"}
