"""Exception handlers that map errors to client-safe JSON responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from document_analyzer.api.schemas import ErrorResponse
from document_analyzer.exceptions import DocumentValidationError, TextractServiceError

logger = logging.getLogger(__name__)

DEFAULT_ERROR_STATUS = 500
INTERNAL_ERROR_MESSAGE = "An internal server error occurred. Please try again later."
INVALID_REQUEST_MESSAGE = "Invalid request. Upload the document as a file in the 'document' field."


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


async def document_validation_error_handler(request: Request, exc: DocumentValidationError) -> JSONResponse:
    """Rejects invalid uploads with the error's own status and message."""
    logger.warning(f"Rejected upload: {exc}")
    return _error_response(exc.status_code, str(exc))


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reports malformed form data as a client error without echoing the payload."""
    logger.warning(f"Malformed request: {exc.errors()}")
    return _error_response(400, INVALID_REQUEST_MESSAGE)


async def textract_error_handler(request: Request, exc: TextractServiceError) -> JSONResponse:
    """Surfaces Textract failures with the service's status code and error name only."""
    message = f"An error occurred while processing your request. Please try again later. (Error: {exc.error_name})"
    return _error_response(exc.status_code or DEFAULT_ERROR_STATUS, message)


def internal_error_response(request: Request, exc: Exception) -> JSONResponse:
    """Builds the generic 500 for any other error; the detail goes to the log, never to the client."""
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
    return _error_response(DEFAULT_ERROR_STATUS, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Installs the handlers for expected errors. Anything else is handled by RequestContextMiddleware."""
    app.add_exception_handler(DocumentValidationError, document_validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(TextractServiceError, textract_error_handler)
