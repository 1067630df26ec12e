"""Custom middleware for request tracking and upload size enforcement."""

import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from content_analyzer.config import settings
from content_analyzer.core.exceptions import FileTooLargeError
from content_analyzer.core.logging import get_logger

logger = get_logger(__name__)


class CorrelationIDMiddleware(BaseHTTPMiddleware):
    """Adds a unique X-Request-ID to every request/response for tracing."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4())[:8])
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs request method, path, status, and duration."""

    async def dispatch(self, request: Request, call_next):
        start = time.time()
        response = await call_next(request)
        duration_ms = (time.time() - start) * 1000

        request_id = getattr(request.state, "request_id", "-")
        logger.info(
            f"[{request_id}] {request.method} {request.url.path} "
            f"-> {response.status_code} ({duration_ms:.0f}ms)"
        )
        return response


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Rejects requests whose declared Content-Length cannot hold an acceptable upload.

    The upload receiver still counts the bytes it actually stores, so requests
    without a Content-Length (or lying about it) are caught there.
    """

    def __init__(self, app, max_size: int | None = None):
        super().__init__(app)
        self.max_size = max_size

    @property
    def limit(self) -> int:
        if self.max_size is not None:
            return self.max_size
        return settings.max_upload_bytes + settings.upload_overhead_bytes

    async def dispatch(self, request: Request, call_next):
        content_length = request.headers.get("content-length")

        if content_length:
            try:
                size = int(content_length)
            except ValueError:
                # Malformed header, let the multipart parser reject it
                size = None

            if size is not None and size > self.limit:
                logger.warning(
                    f"Request body too large: {size} bytes (max: {self.limit})",
                    extra={"path": request.url.path, "method": request.method},
                )
                error = FileTooLargeError(settings.max_upload_mb)
                return JSONResponse(status_code=error.status_code, content=error.to_dict())

        return await call_next(request)
