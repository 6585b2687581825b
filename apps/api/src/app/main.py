"""
Internship Enrollment API - Main Application Entry Point

This module initializes and configures the FastAPI application including:
- Collaborator clients (tabular store, blob store, payment gateway)
- Optional Redis connection for rate limiting
- CORS middleware
- API routing
- Health check endpoints
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import api_router
from app.core.blobs import close_blob_store, init_blob_store
from app.core.config import settings
from app.core.database import close_db, init_db
from app.core.payments import close_payment_gateway, init_payment_gateway
from app.core.redis import close_redis, init_redis
from app.core.tabular import close_tabular_store, init_tabular_store

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """
    Application lifespan manager.

    Collaborator clients are created once here and shared by every request.
    """
    # Startup
    print(f"Starting Internship Enrollment API in {settings.python_env} mode...")

    # Initialize Redis (optional outside production)
    try:
        await init_redis()
        print("[OK] Redis connected")
    except Exception as e:
        print(f"[FAIL] Redis connection failed: {e}")
        if settings.is_production:
            raise

    # Initialize Database (only backs the tabular store when selected)
    if settings.tabular_backend == "database":
        try:
            await init_db()
            print("[OK] Database connected")
        except Exception as e:
            print(f"[FAIL] Database connection failed: {e}")
            raise

    # Initialize collaborator clients - the API cannot serve without them
    init_tabular_store()
    print(f"[OK] Tabular store ready ({settings.tabular_backend})")
    init_blob_store()
    print(f"[OK] Blob store ready ({settings.blob_backend})")
    init_payment_gateway()
    print("[OK] Payment gateway ready")

    yield  # Application runs here

    # Shutdown
    print("Shutting down Internship Enrollment API...")

    close_payment_gateway()
    close_blob_store()
    close_tabular_store()
    await close_redis()
    await close_db()
    print("[OK] Cleanup complete")


app = FastAPI(
    title="Internship Enrollment API",
    description="Screening, approval and paid enrollment for the internship program",
    version="0.1.0",
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
    lifespan=lifespan,
)

app.include_router(api_router)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/", tags=["Root"])
async def root() -> dict[str, str]:
    """Root endpoint - API welcome message."""
    return {
        "message": "Welcome to the Internship Enrollment API",
        "status": "running",
        "environment": settings.python_env,
    }


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint for container orchestration."""
    return {"status": "healthy"}


@app.get("/ready", tags=["Health"])
async def readiness_check() -> dict[str, str]:
    """Readiness check endpoint."""
    return {"status": "ready"}
