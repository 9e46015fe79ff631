"""Pipeline builder responsible for creating the document analysis components."""

import logging

from document_analyzer.aws_client.clients import get_sts_client, get_textract_client, verify_aws_credentials
from document_analyzer.orchestration.pipeline import DocumentAnalysisPipeline
from document_analyzer.textract.textract_processor import TextractProcessor

logger = logging.getLogger(__name__)


def build_pipeline(verify_credentials: bool = True) -> DocumentAnalysisPipeline:
    """Constructs the pipeline with all its dependencies.

    This acts as the composition root for the application.

    Args:
        verify_credentials (bool): Check AWS credentials through STS before returning.

    Returns:
        DocumentAnalysisPipeline: A fully configured pipeline.

    Raises:
        CredentialVerificationError: If the credential check fails.
    """
    if verify_credentials:
        verify_aws_credentials(get_sts_client())

    textract_processor = TextractProcessor(textract_client=get_textract_client())
    logger.info("Document analysis pipeline built.")
    return DocumentAnalysisPipeline(textract_processor=textract_processor)
