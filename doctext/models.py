"""
Pydantic models for the document text extractor.

These models define the schemas for:
- Parsed documents returned by the extraction core
- Soft responses handed back to transport callers
- Short-lived values used while walking containers

Parsed documents are frozen and validated so that a normalized text
body is guaranteed to every consumer.
"""

from typing import NamedTuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
    model_validator,
)

from doctext.text import normalize_text


# ==============================================================================
# Extraction Results
# ==============================================================================


class ParsedDocument(BaseModel):
    """
    Plain text extracted from one uploaded document.

    The text is always normalized: no carriage returns, no blank lines
    and no surrounding whitespace on any line. `unit_count` is the
    format-dependent page metric (worksheets, slides or an estimate)
    and is never below one.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    text: str = Field(
        ...,
        description="Normalized plain text content",
    )

    unit_count: int = Field(
        default=1,
        ge=1,
        description="Pages, worksheets or slides, depending on the format",
    )

    format_tag: str = Field(
        ...,
        min_length=1,
        description="Lowercase tag of the recognized format (e.g. 'pdf', 'xlsx', 'md')",
    )

    @field_validator("text")
    @classmethod
    def validate_normalized(cls, v: str) -> str:
        """Reject text that has not been through the normalizer."""
        if normalize_text(v) != v:
            raise ValueError("Text must be normalized before building a ParsedDocument")
        return v

    @field_validator("format_tag")
    @classmethod
    def validate_lowercase(cls, v: str) -> str:
        """Format tags are compared case-sensitively, so keep them lowercase."""
        if v != v.lower():
            raise ValueError(f"Format tag must be lowercase, got '{v}'")
        return v

    @computed_field  # type: ignore[prop-decorator]
    @property
    def char_count(self) -> int:
        """
        Number of characters in the text.

        Counts Unicode code points, not UTF-8 bytes, so non-ASCII text
        reports fewer than its encoded size.
        """
        return len(self.text)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_empty(self) -> bool:
        """Check whether no text could be extracted."""
        return not self.text


class ParseResponse(BaseModel):
    """
    Outcome of parsing an upload, as reported to an API or desktop caller.

    Hard failures are folded into `success=False` with an error message
    instead of aborting the surrounding request.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    filename: str
    text: str | None = None
    pages: int | None = Field(default=None, ge=1)
    file_type: str | None = None
    char_count: int | None = Field(default=None, ge=0)
    error: str | None = None

    @model_validator(mode="after")
    def validate_outcome(self) -> "ParseResponse":
        """A response carries either a parse result or an error, never both."""
        if self.success and self.error is not None:
            raise ValueError("Successful response cannot carry an error")
        if not self.success and self.error is None:
            raise ValueError("Failed response must carry an error message")
        return self

    @classmethod
    def from_document(cls, filename: str, document: ParsedDocument) -> "ParseResponse":
        """Build a successful response from a parsed document."""
        return cls(
            success=True,
            filename=filename,
            text=document.text,
            pages=document.unit_count,
            file_type=document.format_tag,
            char_count=document.char_count,
        )

    @classmethod
    def failure(cls, filename: str, error: str) -> "ParseResponse":
        """Build a failed response carrying only the error message."""
        return cls(success=False, filename=filename, error=error)


# ==============================================================================
# Container Values
# ==============================================================================


class ContainerEntry(NamedTuple):
    """A named part read out of a ZIP container."""

    name: str
    data: bytes


class SlideUnit(NamedTuple):
    """
    Extracted text of one slide.

    `index` is None when the slide's part name carries no usable number.
    """

    index: int | None
    text: str
