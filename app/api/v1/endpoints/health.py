from fastapi import APIRouter
from datetime import datetime

from app.core.config import settings
from app.models.schemas import HealthCheck, ErrorResponse
from app.services.cube_service import cube_service
from app.utils.logging import get_logger

logger = get_logger(__name__)
router = APIRouter()


@router.get("",
            response_model=HealthCheck,
            responses={
                500: {"model": ErrorResponse, "description": "Internal server error"}
            })
async def health_check():
    """
    Basic health check endpoint

    Returns service health status, version, and timestamp
    """
    return HealthCheck(
        status="healthy",
        version=settings.app_version,
        timestamp=datetime.utcnow(),
        services={
            "cube": "solved" if cube_service.cube.is_solved() else "scrambled",
            "driver": "running" if cube_service.is_running else "stopped"
        }
    )
