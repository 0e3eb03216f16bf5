"""
Text normalization and page estimation.

Every extractor funnels its output through `normalize_text` so that the
text handed to indexing is free of carriage returns and blank lines.
"""

# Rough size of one printed page, measured in UTF-8 bytes.
BYTES_PER_PAGE = 3000


def normalize_text(text: str) -> str:
    """
    Canonicalize line endings and drop blank lines.

    Each line is stripped of surrounding whitespace; lines that end up
    empty are removed. The result has no trailing newline. Applying the
    function twice gives the same result as applying it once.

    Args:
        text: Raw extracted text.

    Returns:
        The normalized text.
    """
    unified = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = (line.strip() for line in unified.split("\n"))
    return "\n".join(line for line in lines if line)


def estimate_pages(text: str) -> int:
    """
    Estimate a page count from the encoded size of the text.

    This is an approximation: it counts bytes, so non-ASCII text
    reports more pages than its visual length would suggest.

    Args:
        text: Normalized text.

    Returns:
        max(1, utf8_length // BYTES_PER_PAGE)
    """
    return max(1, len(text.encode("utf-8")) // BYTES_PER_PAGE)
