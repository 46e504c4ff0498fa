"""FastAPI main application."""

import logging
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.api import models  # noqa: F401  registers tables on Base.metadata
from apps.api.api.health import router as health_router
from apps.api.api.survey import router as survey_router
from apps.api.config import get_settings
from apps.api.core.errors import register_error_handlers
from apps.api.database import Base, engine

API_VERSION = "1.0.0"

settings = get_settings()

# Configure structured logging
structlog.configure(
    processors=[
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.getLevelName(settings.log_level)
    ),
)

logging.basicConfig(level=settings.log_level)
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info("Starting Survey Dashboard API", version=API_VERSION)
    if settings.auto_create_tables:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables ready", tables=sorted(Base.metadata.tables))
    yield
    logger.info("Shutting down Survey Dashboard API")


# Create FastAPI app
app = FastAPI(
    title="Survey Dashboard API",
    description="Customer satisfaction survey collection and reporting",
    version=API_VERSION,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(survey_router, prefix="/api/survey", tags=["Survey"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Survey Dashboard API",
        "version": API_VERSION,
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("apps.api.main:app", host=settings.api_host, port=settings.api_port)
