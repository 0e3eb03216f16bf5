"""
Document Extraction Module.

Provides a unified interface for extracting text from multiple document formats:
- PDF (.pdf)
- Word (.docx, .doc)
- Excel (.xlsx, .xls)
- PowerPoint (.pptx, .ppt)
- Plain text, markup, code and config files (.txt, .md, .py, .json, ...)
"""

from doctext.extractors.base import (
    ContainerOpenError,
    DocumentExtractor,
    DocumentParseError,
    ExtractionError,
    UnsupportedFormatError,
)
from doctext.extractors.factory import create_extractor, get_supported_extensions, parse_document

__all__ = [
    "ContainerOpenError",
    "DocumentExtractor",
    "DocumentParseError",
    "ExtractionError",
    "UnsupportedFormatError",
    "create_extractor",
    "get_supported_extensions",
    "parse_document",
]
