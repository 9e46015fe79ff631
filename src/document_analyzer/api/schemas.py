"""Response schemas for the HTTP API."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from document_analyzer.classification.disability import DisabilityType
from document_analyzer.orchestration.pipeline import DocumentAnalysis


class AnalysisResponse(BaseModel):
    """Successful analysis, serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    key_value_pairs: Dict[str, str]
    raw_text: str
    disability_type: DisabilityType
    document_metadata: Optional[Dict[str, Any]] = None
    block_count: int

    @classmethod
    def from_analysis(cls, analysis: DocumentAnalysis) -> "AnalysisResponse":
        """Builds the response body from a pipeline result."""
        return cls(
            key_value_pairs=analysis.key_value_pairs,
            raw_text=analysis.raw_text,
            disability_type=analysis.disability_type,
            document_metadata=analysis.document_metadata,
            block_count=analysis.block_count,
        )


class ErrorResponse(BaseModel):
    """Failure body returned for every rejected or failed request."""

    success: bool = False
    error: str
