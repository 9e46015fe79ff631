"""Tests for the analyze and health endpoints."""

import logging
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from document_analyzer.api.app import create_app
from document_analyzer.config import settings
from document_analyzer.custom_logging.log_context import ContextFilter
from document_analyzer.exceptions import CredentialVerificationError, TextractServiceError
from document_analyzer.orchestration.pipeline import DocumentAnalysisPipeline
from document_analyzer.textract.textract_processor import TextractAnalysis


@pytest.fixture
def mock_textract_processor():
    processor = MagicMock()
    processor.analyze_document.return_value = TextractAnalysis(blocks=[], document_metadata={"Pages": 1})
    return processor


@pytest.fixture
def client(mock_textract_processor, tmp_path):
    app = create_app(
        pipeline=DocumentAnalysisPipeline(mock_textract_processor),
        static_dir=str(tmp_path / "no-static"),
    )
    return TestClient(app, raise_server_exceptions=False)


def _upload(content: bytes, filename: str = "form.png"):
    return {"document": (filename, content, "image/png")}


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_analyze_returns_interpreted_document(client, mock_textract_processor, response_builder):
    response_builder.add_line("Patient is blind in left eye")
    response_builder.add_key_value("Name:", "John")
    textract_response = response_builder.build()
    mock_textract_processor.analyze_document.return_value = TextractAnalysis(
        blocks=textract_response["Blocks"], document_metadata=textract_response["DocumentMetadata"]
    )

    response = client.post("/analyze", files=_upload(b"image-bytes"))

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "keyValuePairs": {"Name": "John"},
        "rawText": "Patient is blind in left eye",
        "disabilityType": "blind",
        "documentMetadata": {"Pages": 1},
        "blockCount": len(textract_response["Blocks"]),
    }
    mock_textract_processor.analyze_document.assert_called_once_with(b"image-bytes")


def test_analyze_empty_block_collection(client):
    response = client.post("/analyze", files=_upload(b"image-bytes"))

    body = response.json()
    assert response.status_code == 200
    assert body["keyValuePairs"] == {}
    assert body["rawText"] == ""
    assert body["disabilityType"] == "normal"
    assert body["blockCount"] == 0


def test_analyze_rejects_empty_file(client, mock_textract_processor):
    response = client.post("/analyze", files=_upload(b""))

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "No document uploaded or the file is empty."}
    mock_textract_processor.analyze_document.assert_not_called()


def test_analyze_rejects_missing_file(client, mock_textract_processor):
    response = client.post("/analyze")

    assert response.status_code == 400
    assert response.json()["success"] is False
    mock_textract_processor.analyze_document.assert_not_called()


def test_analyze_rejects_document_sent_as_plain_field(client, mock_textract_processor):
    response = client.post("/analyze", data={"document": "not a file"})

    assert response.status_code == 400
    assert response.json()["success"] is False
    mock_textract_processor.analyze_document.assert_not_called()


def test_analyze_rejects_oversized_upload(client, mock_textract_processor, monkeypatch):
    monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE_BYTES", 64)

    response = client.post("/analyze", files=_upload(b"x" * 1024))

    assert response.status_code == 413
    assert response.json()["success"] is False
    mock_textract_processor.analyze_document.assert_not_called()


def test_analyze_accepts_document_at_size_limit(client, mock_textract_processor, monkeypatch):
    monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE_BYTES", 64)

    response = client.post("/analyze", files=_upload(b"x" * 64))

    assert response.status_code == 200
    mock_textract_processor.analyze_document.assert_called_once_with(b"x" * 64)


def test_analyze_rejects_document_one_byte_over_limit(client, mock_textract_processor, monkeypatch):
    monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE_BYTES", 64)

    response = client.post("/analyze", files=_upload(b"x" * 65))

    assert response.status_code == 413
    assert response.json() == {
        "success": False,
        "error": "Document of 65 bytes exceeds maximum size of 64 bytes.",
    }
    mock_textract_processor.analyze_document.assert_not_called()


def test_textract_error_uses_service_status(client, mock_textract_processor):
    mock_textract_processor.analyze_document.side_effect = TextractServiceError(
        "Textract analysis failed", status_code=400, error_name="UnsupportedDocumentException"
    )

    response = client.post("/analyze", files=_upload(b"not-an-image"))

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "error": "An error occurred while processing your request. Please try again later. "
        "(Error: UnsupportedDocumentException)",
    }


def test_textract_error_without_status_defaults_to_500(client, mock_textract_processor):
    mock_textract_processor.analyze_document.side_effect = TextractServiceError(
        "Textract analysis failed", status_code=None, error_name="ThrottlingException"
    )

    response = client.post("/analyze", files=_upload(b"image-bytes"))

    assert response.status_code == 500
    assert "(Error: ThrottlingException)" in response.json()["error"]


def test_unexpected_error_is_generic_500(client, mock_textract_processor):
    mock_textract_processor.analyze_document.side_effect = RuntimeError("secret internal detail")

    response = client.post("/analyze", files=_upload(b"image-bytes"))

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "An internal server error occurred. Please try again later.",
    }
    assert "secret" not in response.text


def test_unexpected_error_keeps_request_context_and_cors(client, mock_textract_processor, caplog):
    mock_textract_processor.analyze_document.side_effect = RuntimeError("boom")
    caplog.set_level(logging.ERROR)
    caplog.handler.addFilter(ContextFilter())

    response = client.post(
        "/analyze",
        files=_upload(b"image-bytes"),
        headers={"X-Request-ID": "req-77", "Origin": "https://ui.example"},
    )

    assert response.status_code == 500
    assert response.json()["success"] is False
    assert response.headers["X-Request-ID"] == "req-77"
    assert response.headers["access-control-allow-origin"] == "*"
    assert "req-77 Unhandled error on /analyze: boom" in [record.getMessage() for record in caplog.records]


def test_error_responses_carry_cors_header(client):
    response = client.post("/analyze", files=_upload(b""), headers={"Origin": "https://ui.example"})

    assert response.status_code == 400
    assert response.headers["access-control-allow-origin"] == "*"


def test_request_id_is_echoed(client):
    response = client.get("/health", headers={"X-Request-ID": "abc-123"})

    assert response.headers["X-Request-ID"] == "abc-123"


def test_request_id_is_generated_when_absent(client):
    response = client.get("/health")

    assert response.headers["X-Request-ID"]


def test_static_files_are_served(mock_textract_processor, tmp_path):
    (tmp_path / "index.html").write_text("<h1>Upload</h1>")
    app = create_app(pipeline=DocumentAnalysisPipeline(mock_textract_processor), static_dir=str(tmp_path))
    client = TestClient(app)

    assert client.get("/").text == "<h1>Upload</h1>"
    assert client.get("/health").json() == {"status": "healthy"}


def test_startup_builds_pipeline_when_none_injected(tmp_path):
    with patch("document_analyzer.api.app.build_pipeline") as mock_build:
        app = create_app(static_dir=str(tmp_path / "no-static"))
        with TestClient(app):
            assert app.state.pipeline is mock_build.return_value

    mock_build.assert_called_once_with()


def test_startup_fails_when_credentials_fail(tmp_path):
    with patch("document_analyzer.api.app.build_pipeline", side_effect=CredentialVerificationError("denied")):
        app = create_app(static_dir=str(tmp_path / "no-static"))
        with pytest.raises(CredentialVerificationError):
            with TestClient(app):
                pass
