"""
PDF document extractor using PyMuPDF.

The byte-stream decoding is left entirely to PyMuPDF (fitz); this module
only normalizes its output and estimates a page count from the text size.
"""

import threading
from typing import Callable, ClassVar

import fitz  # PyMuPDF

from doctext.extractors.base import DocumentExtractor, ExtractionError
from doctext.models import ParsedDocument
from doctext.text import estimate_pages, normalize_text

PDFDecoder = Callable[[bytes], str]

# PyMuPDF is not thread-safe; documents are decoded one at a time.
_FITZ_LOCK = threading.Lock()


def decode_pdf_text(data: bytes) -> str:
    """
    Decode raw text from a PDF held in memory.

    Args:
        data: PDF file content.

    Returns:
        Text of all pages in reading order, one page after another.
    """
    with _FITZ_LOCK, fitz.open(stream=data, filetype="pdf") as doc:
        return "\n".join(page.get_text("text") for page in doc)


class PDFExtractor(DocumentExtractor):
    """
    Extracts text content from PDF files.

    The decoder is a plain `bytes -> str` callable so that another PDF
    backend can be swapped in without touching the normalization path.
    """

    SUPPORTED_EXTENSIONS: ClassVar[tuple[str, ...]] = ("pdf",)
    FORMAT_TAG: ClassVar[str] = "pdf"

    def __init__(self, decoder: PDFDecoder = decode_pdf_text):
        self._decoder = decoder

    def extract(self, data: bytes, extension: str = "pdf") -> ParsedDocument:
        """
        Extract text from a PDF file.

        Args:
            data: PDF file content.
            extension: Routed extension (always "pdf").

        Returns:
            ParsedDocument whose unit count is estimated from the text size.

        Raises:
            ExtractionError: If the decoder cannot read the PDF.
        """
        try:
            raw_text = self._decoder(data)
        except fitz.EmptyFileError as e:
            raise ExtractionError("Failed to parse PDF: file is empty", cause=e) from e
        except fitz.FileDataError as e:
            raise ExtractionError(f"Failed to parse PDF: file is corrupted or invalid ({e})", cause=e) from e
        except Exception as e:
            raise ExtractionError(f"Failed to parse PDF: {e}", cause=e) from e

        text = normalize_text(raw_text)
        return self._create_result(text, estimate_pages(text), self.format_tag(extension))
