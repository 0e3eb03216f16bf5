"""
Unit tests for the pydantic models.
"""

import pytest
from pydantic import ValidationError

from doctext.models import ParsedDocument, ParseResponse


class TestParsedDocument:
    """Tests for ParsedDocument."""

    def test_computed_fields(self) -> None:
        """Test char_count and is_empty."""
        document = ParsedDocument(text="héllo\nworld", unit_count=2, format_tag="pdf")

        assert document.char_count == 11
        assert not document.is_empty
        assert ParsedDocument(text="", format_tag="docx").is_empty

    def test_unit_count_defaults_to_one(self) -> None:
        """Test the default unit count."""
        assert ParsedDocument(text="x", format_tag="txt").unit_count == 1

    @pytest.mark.parametrize("text", ["a\r\nb", "a\n\nb", "\nleading", "trailing\n", " padded"])
    def test_rejects_unnormalized_text(self, text: str) -> None:
        """Test the normalized-text invariant is enforced."""
        with pytest.raises(ValidationError, match="normalized"):
            ParsedDocument(text=text, format_tag="txt")

    def test_rejects_zero_units(self) -> None:
        """Test unit_count must be at least one."""
        with pytest.raises(ValidationError):
            ParsedDocument(text="x", unit_count=0, format_tag="txt")

    def test_rejects_uppercase_tag(self) -> None:
        """Test format tags must be lowercase."""
        with pytest.raises(ValidationError, match="lowercase"):
            ParsedDocument(text="x", format_tag="PDF")

    def test_is_frozen(self) -> None:
        """Test documents cannot be modified after creation."""
        document = ParsedDocument(text="x", format_tag="txt")

        with pytest.raises(ValidationError):
            document.text = "y"  # type: ignore[misc]


class TestParseResponse:
    """Tests for ParseResponse."""

    def test_from_document(self) -> None:
        """Test a successful response mirrors the document."""
        document = ParsedDocument(text="[Slide 1]\nHi", unit_count=1, format_tag="pptx")
        response = ParseResponse.from_document("deck.pptx", document)

        assert response.success
        assert response.filename == "deck.pptx"
        assert response.text == "[Slide 1]\nHi"
        assert response.pages == 1
        assert response.file_type == "pptx"
        assert response.char_count == 12
        assert response.error is None

    def test_failure(self) -> None:
        """Test a failed response carries only the error."""
        response = ParseResponse.failure("file.xyz", "Unsupported file type: xyz")

        assert not response.success
        assert response.error == "Unsupported file type: xyz"
        assert response.text is None
        assert response.pages is None

    def test_failure_requires_error(self) -> None:
        """Test that success=False without an error is rejected."""
        with pytest.raises(ValidationError):
            ParseResponse(success=False, filename="a.txt")

    def test_success_rejects_error(self) -> None:
        """Test that success=True with an error is rejected."""
        with pytest.raises(ValidationError):
            ParseResponse(success=True, filename="a.txt", error="boom")
