"""
Unit tests for the upload parsing adapter.
"""

import logging

import pytest

from doctext.config import Settings
from doctext.service import parse_upload


@pytest.fixture
def settings() -> Settings:
    """Settings with a small upload limit."""
    return Settings(max_file_size_mb=0.1)


class TestParseUpload:
    """Tests for parse_upload."""

    def test_success(self, docx_bytes: bytes, settings: Settings) -> None:
        """Test a parsed upload becomes a successful response."""
        response = parse_upload(docx_bytes, "report.docx", settings)

        assert response.success
        assert response.text == "Quarterly report Revenue grew 12%"
        assert response.pages == 1
        assert response.file_type == "docx"
        assert response.char_count == len(response.text)

    def test_unsupported_format_is_soft_failure(self, settings: Settings) -> None:
        """Test hard parse failures are reported, not raised."""
        response = parse_upload(b"data", "file.xyz", settings)

        assert not response.success
        assert response.error == "Unsupported file type: xyz"
        assert response.filename == "file.xyz"

    def test_container_error_is_soft_failure(self, settings: Settings) -> None:
        """Test that a broken container becomes a failed response."""
        response = parse_upload(b"not a zip", "slides.pptx", settings)

        assert not response.success
        assert "Failed to open PPTX as ZIP" in (response.error or "")

    def test_missing_filename(self, settings: Settings) -> None:
        """Test uploads without a filename are rejected."""
        response = parse_upload(b"data", "", settings)

        assert not response.success
        assert response.error == "No filename provided"

    def test_empty_payload(self, settings: Settings) -> None:
        """Test uploads without data are rejected."""
        response = parse_upload(b"", "notes.txt", settings)

        assert not response.success
        assert response.error == "No file data received"

    def test_oversized_payload(self, settings: Settings) -> None:
        """Test the configured size limit."""
        response = parse_upload(b"x" * 200_000, "big.txt", settings)

        assert not response.success
        assert "0.1 MB" in (response.error or "")

    def test_logs_outcome(
        self, docx_bytes: bytes, settings: Settings, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test request-level logging on success and failure."""
        with caplog.at_level(logging.INFO, logger="doctext.service"):
            parse_upload(docx_bytes, "report.docx", settings)
            parse_upload(b"data", "file.xyz", settings)

        messages = [record.getMessage() for record in caplog.records]
        assert any(message.startswith("Parsing document: report.docx") for message in messages)
        assert any("Successfully parsed report.docx" in message for message in messages)
        assert any("Failed to parse file.xyz" in message for message in messages)
