"""Exception taxonomy for the document analysis service.

Validation errors are the caller's fault and map to 4xx responses. Textract errors carry the
status the service reported. Anything else is treated as an internal error.
"""

from typing import Optional


class DocumentAnalyzerError(Exception):
    """Base class for document analysis errors."""


class DocumentValidationError(DocumentAnalyzerError):
    """The uploaded document was rejected before reaching Textract."""

    status_code = 400


class EmptyDocumentError(DocumentValidationError):
    """No document was uploaded, or the uploaded file has no content."""

    def __init__(self, message: str = "No document uploaded or the file is empty."):
        super().__init__(message)


class DocumentTooLargeError(DocumentValidationError):
    """The uploaded document exceeds the configured size limit."""

    status_code = 413

    def __init__(self, size: int, max_size: int):
        super().__init__(f"Document of {size} bytes exceeds maximum size of {max_size} bytes.")
        self.size = size
        self.max_size = max_size


class TextractServiceError(DocumentAnalyzerError):
    """Textract rejected or failed the AnalyzeDocument call.

    Attributes:
        status_code: HTTP status reported by the service, if any.
        error_name: The service error code, e.g. ``InvalidParameterException``.
    """

    def __init__(self, message: str, status_code: Optional[int], error_name: str):
        super().__init__(message)
        self.status_code = status_code
        self.error_name = error_name


class CredentialVerificationError(DocumentAnalyzerError):
    """AWS credentials could not be verified at startup."""
