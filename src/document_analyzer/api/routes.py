"""Document analysis and health endpoints."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Request, UploadFile
from starlette.concurrency import run_in_threadpool

from document_analyzer.api.schemas import AnalysisResponse, ErrorResponse
from document_analyzer.config import settings
from document_analyzer.exceptions import DocumentTooLargeError, EmptyDocumentError
from document_analyzer.orchestration.pipeline import DocumentAnalysisPipeline

logger = logging.getLogger(__name__)

router = APIRouter()


def get_pipeline(request: Request) -> DocumentAnalysisPipeline:
    """Returns the pipeline built at startup."""
    return request.app.state.pipeline


@router.get("/health")
async def health():
    """Basic health check."""
    return {"status": "healthy"}


@router.post(
    "/analyze",
    response_model=AnalysisResponse,
    responses={400: {"model": ErrorResponse}, 413: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze(
    document: Optional[UploadFile] = File(None),
    pipeline: DocumentAnalysisPipeline = Depends(get_pipeline),
):
    """Analyzes an uploaded document image with Textract.

    The blocking Textract call runs in the thread pool so other requests keep being served.
    """
    if document is None:
        raise EmptyDocumentError()

    contents = await document.read()
    if len(contents) > settings.MAX_UPLOAD_SIZE_BYTES:
        raise DocumentTooLargeError(len(contents), settings.MAX_UPLOAD_SIZE_BYTES)

    logger.info(f"Received document '{document.filename}' ({len(contents)} bytes)")
    analysis = await run_in_threadpool(pipeline.analyze, contents)
    return AnalysisResponse.from_analysis(analysis)
