from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import time

from app.core.config import settings
from app.api.v1.api import api_router
from app.services.cube_service import cube_service
from app.utils.error_handlers import register_error_handlers
from app.utils.logging import get_logger

logger = get_logger(__name__)


# Lifespan event handler: run the cube driver for the life of the app
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(
        "Cube driver configuration",
        tick_interval=settings.tick_interval,
        twist_duration=settings.twist_duration,
        shuffle_method=settings.shuffle_method
    )
    cube_service.start()

    yield

    # Shutdown
    await cube_service.stop()
    logger.info(f"Shutting down {settings.app_name}")

# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Combinatorial model of a 3x3x3 twisty cube driven over HTTP",
    openapi_url="/api/openapi.json",
    lifespan=lifespan
)

# Only essential CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# Exception handlers
register_error_handlers(app)

# Health check endpoint
@app.get("/health", tags=["health"])
async def health_check():
    """
    Health check endpoint for monitoring and load balancers.
    """
    return {
        "status": "healthy",
        "version": settings.app_version,
        "timestamp": time.time(),
        "environment": "development" if settings.debug else "production"
    }

# Root endpoint
@app.get("/", tags=["root"])
async def root():
    return "API is running... Visit /docs for documentation"

# Include API routes (single versioned prefix)
app.include_router(api_router, prefix="/api/v1")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
