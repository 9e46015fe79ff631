"""Orchestrates the analysis of a single uploaded document."""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from document_analyzer.classification.disability import DisabilityType, determine_disability_type
from document_analyzer.exceptions import EmptyDocumentError
from document_analyzer.parsing import Block, build_block_index, parse_form_key_values, parse_raw_text
from document_analyzer.textract.textract_processor import TextractProcessor

logger = logging.getLogger(__name__)


class DocumentAnalysis(BaseModel):
    """The interpreted result of analyzing one document."""

    model_config = ConfigDict(frozen=True)

    key_value_pairs: Dict[str, str]
    raw_text: str
    disability_type: DisabilityType
    document_metadata: Optional[Dict[str, Any]] = None
    block_count: int


def interpret_blocks(
    raw_blocks: List[Dict[str, Any]], document_metadata: Optional[Dict[str, Any]] = None
) -> DocumentAnalysis:
    """Runs the block index, key/value, raw text and classification steps over Textract blocks.

    Args:
        raw_blocks (List[Dict[str, Any]]): Blocks as returned in the Textract response.
        document_metadata (Optional[Dict[str, Any]]): Passed through to the result untouched.

    Returns:
        DocumentAnalysis: The interpreted document.
    """
    blocks = [Block.model_validate(raw_block) for raw_block in raw_blocks]
    block_index = build_block_index(blocks)

    key_value_pairs = parse_form_key_values(blocks, block_index)
    raw_text = parse_raw_text(blocks)
    disability_type = determine_disability_type(raw_text)

    return DocumentAnalysis(
        key_value_pairs=key_value_pairs,
        raw_text=raw_text,
        disability_type=disability_type,
        document_metadata=document_metadata,
        block_count=len(blocks),
    )


class DocumentAnalysisPipeline:
    """Validates an upload, sends it to Textract and interprets the result."""

    def __init__(self, textract_processor: TextractProcessor):
        """Initializes the pipeline.

        Args:
            textract_processor (TextractProcessor): Client wrapper used for document analysis.
        """
        self.textract_processor = textract_processor

    def analyze(self, document_bytes: Optional[bytes]) -> DocumentAnalysis:
        """Analyzes one document.

        Args:
            document_bytes (Optional[bytes]): The uploaded file content.

        Returns:
            DocumentAnalysis: Key/value pairs, raw text, classification and metadata.

        Raises:
            EmptyDocumentError: If no bytes were supplied. Textract is not called.
            TextractServiceError: If Textract rejects the document.
        """
        if not document_bytes:
            raise EmptyDocumentError()

        analysis = self.textract_processor.analyze_document(document_bytes)
        result = interpret_blocks(analysis.blocks, analysis.document_metadata)

        logger.info(
            f"Analyzed document: {result.block_count} blocks, {len(result.key_value_pairs)} key/value pairs, "
            f"disability type '{result.disability_type.value}'"
        )
        return result
