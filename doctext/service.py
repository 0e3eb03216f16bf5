"""
Upload parsing for transport handlers.

HTTP upload endpoints and desktop commands report parse failures as a
soft `success=False` response rather than an error status. This module
does that conversion and the request-level checks that go with it.
"""

import logging

from doctext.config import Settings, get_settings
from doctext.extractors import DocumentParseError, parse_document
from doctext.models import ParseResponse

logger = logging.getLogger(__name__)


def parse_upload(data: bytes, filename: str, settings: Settings | None = None) -> ParseResponse:
    """
    Parse an uploaded file into a ParseResponse.

    Args:
        data: Uploaded file content.
        filename: Name the client sent with the file.
        settings: Settings to apply; defaults to the cached environment settings.

    Returns:
        A successful response with the text, or a failed one with the error.
    """
    if settings is None:
        settings = get_settings()

    if not filename:
        return ParseResponse.failure(filename, "No filename provided")

    if not data:
        return ParseResponse.failure(filename, "No file data received")

    if len(data) > settings.max_file_size_bytes:
        return ParseResponse.failure(
            filename,
            f"File exceeds the maximum size of {settings.max_file_size_mb:g} MB",
        )

    logger.info("Parsing document: %s (%d bytes)", filename, len(data))

    try:
        document = parse_document(data, filename)
    except DocumentParseError as e:
        logger.error("Failed to parse %s: %s", filename, e)
        return ParseResponse.failure(filename, str(e))

    logger.info(
        "Successfully parsed %s: %d chars, %d pages",
        filename,
        document.char_count,
        document.unit_count,
    )
    return ParseResponse.from_document(filename, document)
