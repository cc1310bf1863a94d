"""
MarketDesk Backend - FastAPI Application

Main entry point for the backend API.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from marketdesk.core.config import settings
from marketdesk.core.logging_config import setup_logging
from marketdesk.api.v1 import router as api_v1_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    setup_logging()
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")

    yield

    logger.info("Shutting down...")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    MarketDesk Risk & Decision Engine API

    ## Architecture
    - **Risk Engine**: Position sizing, risk/reward, risk-limit validation
    - **Market Analysis**: Institutional trap detection, CPR, breadth bias
    - **Decision Engine**: Agent decision ranking and reasoning text

    ## Core Principles
    - Every calculation is pure and stateless
    - Risk-limit breaches are reported, not raised
    - Market data is supplied by the caller, never fetched here
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware - allow the dashboard dev servers
cors_origins = [
    settings.frontend_url,
    "http://127.0.0.1:5173",
]
# Add any additional origins from settings
if settings.allowed_origins:
    cors_origins.extend([o for o in settings.allowed_origins if o not in cors_origins])

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
    }


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "MarketDesk Backend API",
        "docs": "/docs",
        "health": "/health",
    }
