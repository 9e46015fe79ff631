"""Main entry point for the document analysis service."""

import logging
import sys

import uvicorn

from document_analyzer.api.app import create_app
from document_analyzer.config import settings
from document_analyzer.custom_logging.log_context import setup_logging
from document_analyzer.exceptions import CredentialVerificationError
from document_analyzer.pipeline_builder import build_pipeline

logger = logging.getLogger(__name__)


def main():
    """Verifies AWS credentials, then serves the API. Exits with status 1 if verification fails."""
    setup_logging()
    try:
        pipeline = build_pipeline()
    except CredentialVerificationError:
        logger.critical("AWS credential verification failed; refusing to start.")
        sys.exit(1)

    logger.info(f"Server starting on port {settings.PORT}")
    uvicorn.run(create_app(pipeline=pipeline), host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()
