"""Request middleware: body size limit and per-request logging context."""

import logging
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from document_analyzer.api.errors import internal_error_response
from document_analyzer.api.schemas import ErrorResponse
from document_analyzer.config import settings
from document_analyzer.custom_logging.log_context import request_id_context

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Room for the multipart boundaries and part headers around the uploaded document.
MULTIPART_OVERHEAD_BYTES = 64 * 1024


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Middleware to enforce maximum request body size.

    Checks the Content-Length header before the body is read, so oversized uploads are never
    buffered in memory. By default the limit is the document limit plus multipart overhead; the
    route enforces the exact document size.
    """

    def __init__(self, app, max_size: int | None = None):
        super().__init__(app)
        self.max_size = max_size or settings.MAX_UPLOAD_SIZE_BYTES + MULTIPART_OVERHEAD_BYTES

    async def dispatch(self, request: Request, call_next):
        content_length = request.headers.get("content-length")

        if content_length:
            try:
                size = int(content_length)
            except ValueError:
                # Invalid content-length header - let downstream handle it
                size = 0
            if size > self.max_size:
                logger.warning(f"Request body too large: {size} bytes (max: {self.max_size}) on {request.url.path}")
                error = ErrorResponse(error=f"Request body exceeds maximum size of {self.max_size} bytes")
                return JSONResponse(status_code=413, content=error.model_dump())

        return await call_next(request)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tags each request with an id that is prefixed to every log line it produces.

    Unhandled errors are turned into the generic 500 response here, while the request id is
    still set, so the error is logged with it and the response still passes through CORS.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        token = request_id_context.set(request_id)
        try:
            logger.info(f"{request.method} {request.url.path}")
            try:
                response = await call_next(request)
            except Exception as exc:
                response = internal_error_response(request, exc)
            logger.info(f"{request.method} {request.url.path} -> {response.status_code}")
        finally:
            request_id_context.reset(token)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
