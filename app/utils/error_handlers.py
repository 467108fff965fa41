"""
Standard Error Handlers
======================
Centralized error handling utilities for consistent API responses
"""

from typing import Dict, Any, Optional, List
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
import time
import uuid

from cuber.exceptions import CuberError
from app.utils.logging import get_logger

logger = get_logger(__name__)


class StandardErrorHandler:
    """Standard error handler for consistent API responses"""

    @staticmethod
    def create_error_response(
        status_code: int,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        error_id: Optional[str] = None
    ) -> JSONResponse:
        """Create a standardized error response"""
        content = {
            "detail": message,
            "error_code": error_code or f"error_{status_code}",
            "timestamp": time.time(),
            "error_id": error_id or str(uuid.uuid4())
        }

        if details:
            content["details"] = details

        return JSONResponse(
            status_code=status_code,
            content=content
        )

    @staticmethod
    def create_validation_error_response(
        errors: List[Dict[str, Any]],
        error_id: Optional[str] = None
    ) -> JSONResponse:
        """Create a standardized validation error response"""
        content = {
            "detail": errors,
            "error_code": "validation_error",
            "timestamp": time.time(),
            "error_id": error_id or str(uuid.uuid4())
        }

        return JSONResponse(
            status_code=422,
            content=content
        )

    @staticmethod
    async def handle_http_exception(request: Request, exc: HTTPException) -> JSONResponse:
        """Handle HTTPException with standard format"""
        return StandardErrorHandler.create_error_response(
            status_code=exc.status_code,
            message=str(exc.detail),
            error_code=f"http_{exc.status_code}"
        )

    @staticmethod
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Handle validation errors with standard format"""
        error_details = []
        for error in exc.errors():
            error_details.append({
                "loc": list(error["loc"]),
                "msg": error["msg"],
                "type": error["type"],
            })

        return StandardErrorHandler.create_validation_error_response(error_details)

    @staticmethod
    async def handle_cuber_error(request: Request, exc: CuberError) -> JSONResponse:
        """Handle cube model errors as bad requests"""
        logger.warning(
            "Cube error",
            error_type=exc.error_type,
            message=exc.message,
            path=str(request.url.path)
        )
        return StandardErrorHandler.create_error_response(
            status_code=400,
            message=exc.message,
            error_code=exc.error_type,
            details=exc.details
        )

    @staticmethod
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        """Handle anything else as an internal error"""
        error_id = str(uuid.uuid4())
        logger.error(
            "Internal server error",
            error_id=error_id,
            error=str(exc),
            path=str(request.url.path),
            exc_info=exc
        )
        return StandardErrorHandler.create_error_response(
            status_code=500,
            message="Internal server error",
            error_code="internal_error",
            error_id=error_id
        )


def register_error_handlers(app: FastAPI):
    """Install the standard handlers on an application"""
    app.add_exception_handler(HTTPException, StandardErrorHandler.handle_http_exception)
    app.add_exception_handler(RequestValidationError, StandardErrorHandler.handle_validation_error)
    app.add_exception_handler(CuberError, StandardErrorHandler.handle_cuber_error)
    app.add_exception_handler(Exception, StandardErrorHandler.handle_unexpected_error)


def bad_request_error(message: str = "Bad request") -> HTTPException:
    """Standard 400 Bad Request error"""
    return HTTPException(status_code=400, detail=message)


def internal_server_error(message: str = "Internal server error") -> HTTPException:
    """Standard 500 Internal Server error"""
    return HTTPException(status_code=500, detail=message)
