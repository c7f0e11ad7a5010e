"""Error handling and exception handlers."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger("freezebatch.api")


class APIError(Exception):
    """Base class for API errors."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class NotFoundError(APIError):
    """Recipe (or other resource) not found."""

    def __init__(self, resource: str, identifier: str, valid_ids: Optional[List[str]] = None):
        details: Dict[str, Any] = {"resource": resource, "identifier": identifier}
        if valid_ids is not None:
            details["valid_ids"] = valid_ids
        super().__init__(
            code="NOT_FOUND",
            message=f"{resource} not found: {identifier}",
            status_code=status.HTTP_404_NOT_FOUND,
            details=details
        )


class ValidationError(APIError):
    """Input outside what the calculator accepts."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            code="VALIDATION_ERROR",
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details or {}
        )


def build_error_response(
    request: Request,
    code: str,
    message: str,
    status_code: int,
    details: Optional[Dict[str, Any]] = None
) -> JSONResponse:
    """Build a standardized error response."""
    request_id = getattr(request.state, "request_id", "unknown")

    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "details": details or {}
            },
            "request_id": request_id,
            "timestamp": datetime.now(timezone.utc).isoformat()
        }
    )


def setup_exception_handlers(app: FastAPI):
    """Register exception handlers with the FastAPI app."""

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
        logger.warning(f"API Error: {exc.code} - {exc.message}")
        return build_error_response(
            request=request,
            code=exc.code,
            message=exc.message,
            status_code=exc.status_code,
            details=exc.details
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request,
        exc: RequestValidationError
    ) -> JSONResponse:
        """Handle Pydantic validation errors from request parsing."""
        errors = [
            {
                "field": ".".join(str(loc) for loc in error["loc"]),
                "message": error["msg"],
                "type": error["type"]
            }
            for error in exc.errors()
        ]

        logger.warning(f"Validation Error: {errors}")
        return build_error_response(
            request=request,
            code="VALIDATION_ERROR",
            message="Request validation failed",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"errors": errors}
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unexpected error: {str(exc)}")
        return build_error_response(
            request=request,
            code="INTERNAL_ERROR",
            message="An unexpected error occurred",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={"type": type(exc).__name__}
        )
