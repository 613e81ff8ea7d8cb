# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rolegate import __version__
from rolegate.config import settings
from rolegate.database import SessionLocal
from rolegate.schemas.common import HealthResponse
from rolegate.services import auth_service
from rolegate.services.rbac_seed_service import seed_rbac_data

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    db = SessionLocal()
    try:
        if settings.CLEANUP_EXPIRED_SESSIONS:
            auth_service.cleanup_expired_sessions(db)
        if settings.SEED_DEFAULT_ROLES:
            logger.info("Seeding default roles...")
            seed_rbac_data(db)
    except Exception as e:
        logger.error(f"Startup maintenance failed: {e}")
        raise
    finally:
        db.close()

    yield

    logger.info("Shutting down...")

app = FastAPI(
    title=settings.APP_NAME,
    description="Hierarchical role-based access control service",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


# Import and include API router after it's created
from rolegate.api.v1.router import api_router  # noqa: E402

app.include_router(api_router, prefix="/api/v1")
