"""API middleware for request correlation and timing."""

import logging
import time
import uuid
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Paths polled often enough that per-request logging is noise
QUIET_PATH_PREFIXES = ("/api/health",)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID and log how long it took.

    An incoming X-Request-ID header is reused so a browser front end can
    correlate its own logs; otherwise a UUID is generated. The ID is echoed
    back on the response.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        start_time = time.perf_counter()
        log = logger.debug if request.url.path.startswith(QUIET_PATH_PREFIXES) else logger.info

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"[{request_id}] {request.method} {request.url.path} "
                f"failed after {duration_ms:.1f}ms: {e}",
                exc_info=True,
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        log(
            f"[{request_id}] {request.method} {request.url.path} "
            f"{response.status_code} in {duration_ms:.1f}ms"
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
