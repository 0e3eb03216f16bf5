"""
Extractor factory module.

Routes a filename to the extractor for its extension, and provides
`parse_document`, the single entry point for turning uploaded bytes
into a ParsedDocument.
"""

import logging

from doctext.extractors.base import DocumentExtractor, DocumentParseError, UnsupportedFormatError
from doctext.extractors.docx_extractor import DocxExtractor
from doctext.extractors.excel_extractor import ExcelExtractor
from doctext.extractors.pdf_extractor import PDFExtractor
from doctext.extractors.pptx_extractor import PptxExtractor
from doctext.extractors.text_extractor import TextExtractor
from doctext.models import ParsedDocument

logger = logging.getLogger(__name__)

# Registry of all available extractors
_EXTRACTORS: tuple[type[DocumentExtractor], ...] = (
    PDFExtractor,
    DocxExtractor,
    ExcelExtractor,
    PptxExtractor,
    TextExtractor,
)


def file_extension(filename: str) -> str:
    """
    Get the lowercase extension of a filename.

    Args:
        filename: Name of the uploaded file.

    Returns:
        Everything after the last dot, lowercased; empty if there is no dot.
    """
    _, dot, extension = filename.rpartition(".")
    return extension.lower() if dot else ""


def get_supported_extensions() -> tuple[str, ...]:
    """
    Get all supported file extensions across all extractors.

    Returns:
        Sorted tuple of extensions without the dot (e.g. ('bash', 'c', ...)).
    """
    extensions: list[str] = []
    for extractor_cls in _EXTRACTORS:
        extensions.extend(extractor_cls.SUPPORTED_EXTENSIONS)
    return tuple(sorted(set(extensions)))


def get_format_tags() -> dict[str, str]:
    """Map every supported extension to the format tag it reports."""
    return {
        extension: extractor_cls.format_tag(extension)
        for extractor_cls in _EXTRACTORS
        for extension in extractor_cls.SUPPORTED_EXTENSIONS
    }


def create_extractor(filename: str) -> DocumentExtractor:
    """
    Create the appropriate extractor for a given file.

    Args:
        filename: Name of the file to extract.

    Returns:
        An instance of the matching DocumentExtractor subclass.

    Raises:
        UnsupportedFormatError: If no extractor handles the extension.
    """
    extension = file_extension(filename)

    for extractor_cls in _EXTRACTORS:
        if extractor_cls.supports(extension):
            return extractor_cls()

    raise UnsupportedFormatError(extension, filename)


def parse_document(data: bytes, filename: str) -> ParsedDocument:
    """
    Extract normalized text from a document held in memory.

    The format is chosen from the filename's extension (case-insensitive).
    The call keeps no state between invocations, so it is safe to run
    concurrently on independent inputs.

    Args:
        data: Complete file content.
        filename: Original file name, used only for routing.

    Returns:
        ParsedDocument with text, unit count and format tag.

    Raises:
        DocumentParseError: If the format is unsupported or extraction fails.
    """
    extractor = create_extractor(filename)
    extension = file_extension(filename)
    logger.debug("Routing %s to %s", filename, type(extractor).__name__)
    try:
        return extractor.extract(data, extension)
    except DocumentParseError as e:
        if e.filename is None:
            e.filename = filename
        raise
