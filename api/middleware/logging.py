"""Request logging middleware."""

import logging
import time
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("freezebatch.api")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs every request with a short request ID and its duration."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = uuid.uuid4().hex[:8]
        request.state.request_id = request_id
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            duration = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"[{request_id}] {request.method} {request.url.path} - "
                f"Error after {duration:.2f}ms: {str(e)}"
            )
            raise

        duration = (time.perf_counter() - start_time) * 1000

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time-Ms"] = f"{duration:.2f}"

        # Calculations run on every keystroke, so successes stay at debug
        log_level = logging.DEBUG if response.status_code < 400 else logging.WARNING
        logger.log(
            log_level,
            f"[{request_id}] {request.method} {request.url.path} - "
            f"{response.status_code} in {duration:.2f}ms"
        )

        return response
