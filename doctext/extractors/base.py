"""
Base classes for document extraction.

Defines the error taxonomy and the abstract interface that all
extractors implement, so every format yields the same normalized
ParsedDocument.
"""

from abc import ABC, abstractmethod
from typing import ClassVar

from doctext.models import ParsedDocument
from doctext.text import normalize_text


class DocumentParseError(Exception):
    """
    Base class for hard parse failures.

    The message is meant to be shown to the caller as-is.
    """

    def __init__(self, message: str, filename: str | None = None, cause: Exception | None = None):
        self.message = message
        self.filename = filename
        self.cause = cause
        super().__init__(message)


class UnsupportedFormatError(DocumentParseError):
    """Raised when no extractor handles the file extension."""

    def __init__(self, extension: str, filename: str | None = None):
        self.extension = extension
        super().__init__(f"Unsupported file type: {extension}", filename)


class ContainerOpenError(DocumentParseError):
    """Raised when the bytes are not a valid container for the format."""


class ExtractionError(DocumentParseError):
    """Raised when a decoding collaborator (e.g. the PDF decoder) fails."""


class DocumentExtractor(ABC):
    """
    Abstract base class for document extractors.

    Subclasses declare the extensions they handle via
    `SUPPORTED_EXTENSIONS` (lowercase, without the dot) and the tag they
    report via `FORMAT_TAG`. An empty `FORMAT_TAG` means the extension
    itself is reported.
    """

    SUPPORTED_EXTENSIONS: ClassVar[tuple[str, ...]] = ()
    FORMAT_TAG: ClassVar[str] = ""

    @classmethod
    def supports(cls, extension: str) -> bool:
        """
        Check if this extractor handles the given extension.

        Args:
            extension: File extension without the leading dot.

        Returns:
            True if this extractor can handle the format.
        """
        return extension.lower() in cls.SUPPORTED_EXTENSIONS

    @classmethod
    def format_tag(cls, extension: str) -> str:
        """Tag reported for documents parsed from `extension`."""
        return cls.FORMAT_TAG or extension.lower()

    @abstractmethod
    def extract(self, data: bytes, extension: str) -> ParsedDocument:
        """
        Extract text content from the document bytes.

        Args:
            data: Complete file content.
            extension: Lowercase extension the caller routed on.

        Returns:
            ParsedDocument with normalized text.

        Raises:
            DocumentParseError: If extraction fails outright.
        """
        ...

    def _create_result(self, text: str, unit_count: int, format_tag: str) -> ParsedDocument:
        """
        Normalize the text and wrap it in a ParsedDocument.

        Args:
            text: Raw extracted text.
            unit_count: Format-specific count; clamped to at least one.
            format_tag: Tag of the recognized format.

        Returns:
            ParsedDocument instance.
        """
        return ParsedDocument(
            text=normalize_text(text),
            unit_count=max(1, unit_count),
            format_tag=format_tag,
        )
