"""AWS client configuration for the document analysis service."""

import logging

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from document_analyzer.config import settings
from document_analyzer.exceptions import CredentialVerificationError

logger = logging.getLogger(__name__)


def _client_config() -> Config:
    """Builds the botocore Config that bounds every outbound AWS call."""
    return Config(
        region_name=settings.AWS_REGION,
        connect_timeout=settings.TEXTRACT_CONNECT_TIMEOUT_SECONDS,
        read_timeout=settings.TEXTRACT_READ_TIMEOUT_SECONDS,
        retries={"mode": "standard", "max_attempts": settings.TEXTRACT_MAX_ATTEMPTS},
    )


def get_textract_client():
    """Creates and returns a boto3 Textract client for the configured region.

    Credentials are resolved through the default boto3 chain (environment, shared config,
    instance role).

    Returns:
        boto3.client: A configured boto3 Textract client instance.
    """
    return boto3.client("textract", region_name=settings.AWS_REGION, config=_client_config())


def get_sts_client():
    """Creates and returns a boto3 STS client for the configured region."""
    return boto3.client("sts", region_name=settings.AWS_REGION, config=_client_config())


def verify_aws_credentials(sts_client) -> str:
    """Verifies that the process can authenticate to AWS.

    Args:
        sts_client: Boto3 STS client used to call GetCallerIdentity.

    Returns:
        str: The ARN of the authenticated caller.

    Raises:
        CredentialVerificationError: If the identity call fails for any reason.
    """
    logger.info("Verifying AWS credentials...")
    try:
        identity = sts_client.get_caller_identity()
    except (BotoCoreError, ClientError) as e:
        logger.error(f"AWS credential verification failed: {e}")
        raise CredentialVerificationError(f"AWS credential verification failed: {e}") from e

    caller_arn = identity.get("Arn", "")
    logger.info(f"AWS credentials are valid for {caller_arn}")
    return caller_arn
