"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from document_analyzer.api.errors import register_exception_handlers
from document_analyzer.api.middleware import RequestContextMiddleware, RequestSizeLimitMiddleware
from document_analyzer.api.routes import router
from document_analyzer.config import settings
from document_analyzer.orchestration.pipeline import DocumentAnalysisPipeline
from document_analyzer.pipeline_builder import build_pipeline

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # A failed credential check raises here and aborts startup.
    if app.state.pipeline is None:
        app.state.pipeline = build_pipeline()
    yield


def create_app(pipeline: Optional[DocumentAnalysisPipeline] = None, static_dir: Optional[str] = None) -> FastAPI:
    """Creates the FastAPI application.

    Args:
        pipeline (Optional[DocumentAnalysisPipeline]): Pipeline used to serve requests. When omitted,
            one is built at startup, which verifies AWS credentials first.
        static_dir (Optional[str]): Directory served at "/". Defaults to settings.STATIC_DIR and is
            skipped if it does not exist.

    Returns:
        FastAPI: The configured application.
    """
    app = FastAPI(
        title="Document Analyzer API",
        description="Extracts form fields and text from document images with AWS Textract",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.pipeline = pipeline

    register_exception_handlers(app)

    # Outermost middleware is added last.
    app.add_middleware(RequestSizeLimitMiddleware)
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)

    static_path = Path(static_dir or settings.STATIC_DIR)
    if static_path.is_dir():
        app.mount("/", StaticFiles(directory=static_path, html=True), name="static")
        logger.info(f"Serving static files from {static_path.resolve()}")

    return app
