"""
Plain text document extractor.

Handles source code, markup, data, config and log files by decoding
them as UTF-8 text.
"""

from typing import ClassVar

from doctext.extractors.base import DocumentExtractor
from doctext.models import ParsedDocument


class TextExtractor(DocumentExtractor):
    """
    Extracts text from plain text files.

    Bytes are decoded as UTF-8; invalid sequences become U+FFFD instead
    of failing, and a leading byte order mark is dropped. The reported
    format tag is the file's own extension.
    """

    SUPPORTED_EXTENSIONS: ClassVar[tuple[str, ...]] = (
        # Prose and markup
        "txt", "md", "markdown", "html", "htm", "xml",
        # Data and config
        "json", "csv", "yaml", "yml", "toml", "ini", "env", "log", "sql",
        # Web
        "css", "js", "ts", "jsx", "tsx", "vue", "svelte",
        # Source code
        "py", "rs", "go", "java", "c", "cpp", "h", "hpp", "cs", "rb",
        "php", "swift", "kt", "scala", "r",
        # Shell
        "sh", "bash", "ps1",
    )  # fmt: skip

    ENCODING: ClassVar[str] = "utf-8-sig"

    def extract(self, data: bytes, extension: str = "txt") -> ParsedDocument:
        """
        Extract text from a plain text file.

        Args:
            data: File content.
            extension: Routed extension, reported as the format tag.

        Returns:
            ParsedDocument with a unit count of one.
        """
        content = data.decode(self.ENCODING, errors="replace")
        return self._create_result(content, 1, self.format_tag(extension))
