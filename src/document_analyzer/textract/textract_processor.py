"""This module wraps the synchronous AWS Textract AnalyzeDocument call."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from botocore.exceptions import ClientError
from textractor.data.constants import TextractFeatures

from document_analyzer.exceptions import TextractServiceError

logger = logging.getLogger(__name__)

# Form-field and table extraction are always requested.
ANALYSIS_FEATURES = (TextractFeatures.FORMS, TextractFeatures.TABLES)


@dataclass(frozen=True)
class TextractAnalysis:
    """Raw blocks and document metadata returned by Textract."""

    blocks: List[Dict[str, Any]] = field(default_factory=list)
    document_metadata: Optional[Dict[str, Any]] = None


class TextractProcessor:
    """Sends document bytes to AWS Textract for form and table analysis."""

    def __init__(self, textract_client, features: Sequence[TextractFeatures] = ANALYSIS_FEATURES):
        """Initializes the TextractProcessor.

        Args:
            textract_client: Boto3 Textract client for API calls.
            features (Sequence[TextractFeatures], optional): Feature types requested from Textract.
                Defaults to FORMS and TABLES.
        """
        self.textract_client = textract_client
        self.features = tuple(features)

    @property
    def feature_types(self) -> List[str]:
        """The FeatureTypes parameter as Textract expects it."""
        return [feature.name for feature in self.features]

    def analyze_document(self, document_bytes: bytes) -> TextractAnalysis:
        """Analyzes a document held in memory.

        Args:
            document_bytes (bytes): The raw bytes of the uploaded image or document.

        Returns:
            TextractAnalysis: The blocks and document metadata from the response. A response
                without a Blocks list yields an empty block collection.

        Raises:
            TextractServiceError: If Textract returns an error response.
        """
        logger.info(f"Begin Textract analysis of {len(document_bytes)} bytes with features {self.feature_types}")
        try:
            response = self.textract_client.analyze_document(
                Document={"Bytes": document_bytes},
                FeatureTypes=self.feature_types,
            )
        except ClientError as e:
            error_name = e.response.get("Error", {}).get("Code", type(e).__name__)
            status_code = e.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
            logger.error(f"Textract analysis failed with {error_name} (status {status_code}): {e}")
            raise TextractServiceError(
                f"Textract analysis failed: {error_name}", status_code=status_code, error_name=error_name
            ) from e

        blocks = response.get("Blocks") or []
        logger.info(f"Textract returned {len(blocks)} blocks")
        return TextractAnalysis(blocks=blocks, document_metadata=response.get("DocumentMetadata"))
