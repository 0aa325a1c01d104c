"""FastAPI main application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from marketplace.core.config import settings
from marketplace.core.middleware import setup_middleware
from marketplace.core.exceptions import (
    MarketplaceError, ValidationError, AuthenticationError, AuthorizationError,
    ResourceNotFoundError, ResourceConflictError,
)
from marketplace.db.base import Base
from marketplace.db.session import engine
import marketplace.models  # noqa: F401 - register tables for create_all

from marketplace.api.remarks import router as remarks_router
from marketplace.api.bids import router as bids_router
from marketplace.api.projects import router as projects_router
from marketplace.api.catalog import router as catalog_router

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("marketplace")

ERROR_STATUS = {
    ValidationError: 400,
    AuthenticationError: 401,
    AuthorizationError: 403,
    ResourceNotFoundError: 404,
    ResourceConflictError: 409,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Starting %s API", settings.APP_NAME)
    Base.metadata.create_all(bind=engine)
    yield
    logger.info("Shutting down %s API", settings.APP_NAME)


app = FastAPI(
    title=f"{settings.APP_NAME} API",
    description="Freelance marketplace backend",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

setup_middleware(app)


@app.exception_handler(MarketplaceError)
async def marketplace_exception_handler(request: Request, exc: MarketplaceError):
    status_code = next(
        (code for cls, code in ERROR_STATUS.items() if isinstance(exc, cls)), 400,
    )
    content = {"detail": exc.message}
    if isinstance(exc, ValidationError) and exc.field:
        content["field"] = exc.field
    return JSONResponse(status_code=status_code, content=content)


app.include_router(remarks_router, prefix="/api")
app.include_router(bids_router, prefix="/api")
app.include_router(projects_router, prefix="/api")
app.include_router(catalog_router, prefix="/api")


@app.get("/")
async def root():
    return {
        "name": settings.APP_NAME,
        "version": "0.1.0",
        "docs": "/docs",
    }


@app.get("/api/health")
async def health():
    """Quick health check endpoint."""
    return {"status": "ok"}
