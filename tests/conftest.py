"""
Pytest configuration and fixtures.

Provides in-memory sample documents for all test modules.
"""

import io
import tempfile
import zipfile
from pathlib import Path
from typing import Callable, Generator, Mapping

import fitz  # PyMuPDF
import pytest
import xlwt
from openpyxl import Workbook


# ==============================================================================
# Directory Fixtures
# ==============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ==============================================================================
# Container Fixtures
# ==============================================================================


def _build_container(parts: Mapping[str, str | bytes]) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive:
        for name, content in parts.items():
            archive.writestr(name, content)
    return buffer.getvalue()


@pytest.fixture
def make_container() -> Callable[[Mapping[str, str | bytes]], bytes]:
    """Return a builder for ZIP containers; parts are written in dict order."""
    return _build_container


def _slide_xml(*runs: str) -> str:
    """Minimal slide part with one paragraph per text run."""
    paragraphs = "".join(f"<a:p><a:r><a:t>{run}</a:t></a:r></a:p>" for run in runs)
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        '<p:sld xmlns:a="http://schemas.openxmlformats.org/drawingml/2006/main" '
        'xmlns:p="http://schemas.openxmlformats.org/presentationml/2006/main">'
        f"<p:cSld><p:spTree><p:sp><p:txBody>{paragraphs}</p:txBody></p:sp></p:spTree></p:cSld>"
        "</p:sld>"
    )


@pytest.fixture
def make_slide() -> Callable[..., str]:
    """Return a builder for slide parts."""
    return _slide_xml


@pytest.fixture
def docx_bytes() -> bytes:
    """A small Word document with three text runs, one carrying attributes."""
    document_xml = (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\r\n'
        '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">'
        "<w:body>"
        "<w:p><w:r><w:t>Quarterly report</w:t></w:r></w:p>"
        '<w:p><w:r><w:t xml:space="preserve">Revenue grew</w:t></w:r>'
        "<w:r><w:tab/></w:r><w:r><w:t>12%</w:t></w:r></w:p>"
        "</w:body></w:document>"
    )
    return _build_container(
        {
            "[Content_Types].xml": "<Types/>",
            "word/document.xml": document_xml,
            "word/styles.xml": "<w:styles><w:t>not body text</w:t></w:styles>",
        }
    )


@pytest.fixture
def pptx_bytes() -> bytes:
    """A presentation whose slide parts are stored out of order (2, 1, 10)."""
    return _build_container(
        {
            "[Content_Types].xml": "<Types/>",
            "ppt/presentation.xml": "<p:presentation/>",
            "ppt/slides/slide2.xml": _slide_xml("Agenda"),
            "ppt/slides/_rels/slide2.xml.rels": "<Relationships/>",
            "ppt/slides/slide1.xml": _slide_xml("Welcome", "Team offsite"),
            "ppt/slides/slide10.xml": _slide_xml("Questions?"),
            "ppt/slideLayouts/slideLayout1.xml": _slide_xml("Layout placeholder"),
        }
    )


# ==============================================================================
# Spreadsheet Fixtures
# ==============================================================================


@pytest.fixture
def xlsx_bytes() -> bytes:
    """A workbook with a data sheet followed by an empty sheet."""
    workbook = Workbook()
    sales = workbook.active
    sales.title = "Sales"
    sales.append(["Region", "Units", "Price"])
    sales.append(["North", 12, 7.5])
    sales.append(["South", 3, 10.0])
    workbook.create_sheet("Empty")

    buffer = io.BytesIO()
    workbook.save(buffer)
    workbook.close()
    return buffer.getvalue()


@pytest.fixture
def xls_bytes() -> bytes:
    """A legacy binary workbook with a data sheet followed by an empty sheet."""
    workbook = xlwt.Workbook()
    data = workbook.add_sheet("Data")
    data.write(0, 0, "Name")
    data.write(0, 1, "Qty")
    data.write(1, 0, "apple")
    data.write(1, 1, 3)
    data.write(2, 1, 2.5)
    data.write(3, 0, True)
    workbook.add_sheet("Blank")

    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


# ==============================================================================
# PDF Fixtures
# ==============================================================================


@pytest.fixture
def pdf_bytes() -> bytes:
    """A one-page PDF with two lines of text."""
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), "Hello from PDF")
    page.insert_text((72, 100), "Second line")
    data = doc.tobytes()
    doc.close()
    return data


# ==============================================================================
# Text Fixtures
# ==============================================================================


@pytest.fixture
def sample_markdown() -> bytes:
    """Markdown with Windows line endings and blank lines."""
    return b"# Title\r\n\r\n  Some   text here  \r\n\r\n\r\n- item\rlast\n"
