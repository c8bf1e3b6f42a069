"""
Inventory Service - Main FastAPI Application
"""
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from sqlalchemy import text
import logging

from inventory_service import __version__
from inventory_service.common_logging import setup_logging
from inventory_service.common_instrumentation import setup_opentelemetry, instrument_fastapi, instrument_sqlalchemy
from inventory_service.api.errors import register_exception_handlers
from inventory_service.api.routes import router
from inventory_service.core.messages import configure_locale
from inventory_service.db import database
from inventory_service.config import settings

# Setup logging
setup_logging(
    service_name=settings.service_name,
    log_level=settings.log_level,
    log_format=settings.log_format,
    environment=settings.environment,
    version=__version__
)
configure_locale(settings.locale)

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events"""
    # Startup
    logger.info(f"Starting {settings.service_name}")
    logger.info(f"Environment: {settings.environment}")

    # Initialize database
    try:
        engine = database.init_database(settings.database_url)
        database.create_tables()
        logger.info("Database initialized successfully")

        # Instrument SQLAlchemy
        if settings.otel_enabled:
            instrument_sqlalchemy(engine)

    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise

    # Initialize OpenTelemetry
    if settings.otel_enabled:
        setup_opentelemetry(
            service_name=settings.otel_service_name or settings.service_name,
            otlp_endpoint=settings.otel_endpoint,
            enabled=settings.otel_enabled,
            environment=settings.environment,
            version=__version__
        )
        logger.info("OpenTelemetry initialized")

    logger.info(f"{settings.service_name} started successfully")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.service_name}")


# Create FastAPI app
app = FastAPI(
    title="Inventory Service",
    description="Warehouse, catalog and order management for a fresh-food distribution network",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Instrument FastAPI with OpenTelemetry
if settings.otel_enabled:
    instrument_fastapi(app)

# Include API routes
app.include_router(router)
register_exception_handlers(app)


@app.get("/health")
async def health_check():
    """Health check endpoint (liveness probe)"""
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": __version__,
        "timestamp": _now()
    }


@app.get("/ready")
def readiness_check():
    """Readiness check endpoint (readiness probe)"""
    try:
        # Test database connection
        db = database.SessionLocal()
        try:
            db.execute(text("SELECT 1"))
        finally:
            db.close()

        return {
            "status": "ready",
            "service": settings.service_name,
            "database": "connected",
            "timestamp": _now()
        }
    except Exception as e:
        logger.error(f"Readiness check failed: {e}")
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "service": settings.service_name,
                "database": "disconnected",
                "error": str(e),
                "timestamp": _now()
            }
        )


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": settings.service_name,
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
        "ready": "/ready"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "inventory_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
