"""
Word document extractor.

Reads the main body part of a .docx container and collects its `<w:t>`
text runs. Legacy binary .doc files are routed here too; they are not
ZIP containers and are rejected as such.
"""

import logging
import zipfile
from typing import ClassVar

from doctext.container import ContainerReader
from doctext.extractors.base import ContainerOpenError, DocumentExtractor
from doctext.models import ParsedDocument
from doctext.xml_text import extract_tag_text

logger = logging.getLogger(__name__)


class DocxExtractor(DocumentExtractor):
    """
    Extracts the text body from Word documents.

    A container without a readable body part still parses, to an empty
    document. Only bytes that are not a ZIP container at all fail.
    """

    SUPPORTED_EXTENSIONS: ClassVar[tuple[str, ...]] = ("docx", "doc")
    FORMAT_TAG: ClassVar[str] = "docx"

    BODY_PART: ClassVar[str] = "word/document.xml"
    TEXT_RUN_TAG: ClassVar[str] = "w:t"

    def extract(self, data: bytes, extension: str = "docx") -> ParsedDocument:
        """
        Extract text from a Word document.

        Args:
            data: File content.
            extension: Routed extension ("docx" or "doc").

        Returns:
            ParsedDocument with a unit count of one.

        Raises:
            ContainerOpenError: If the bytes are not a ZIP container.
        """
        try:
            container = ContainerReader(data)
        except zipfile.BadZipFile as e:
            raise ContainerOpenError(f"Failed to open DOCX as ZIP: {e}", cause=e) from e

        with container:
            xml = container.read_text(self.BODY_PART)

        if xml is None:
            logger.warning("Document has no readable %s, returning empty text", self.BODY_PART)
            text = ""
        else:
            text = extract_tag_text(xml, self.TEXT_RUN_TAG)

        # The body markup carries no page breaks we can rely on.
        return self._create_result(text, 1, self.format_tag(extension))
