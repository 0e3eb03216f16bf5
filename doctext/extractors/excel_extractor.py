"""
Excel spreadsheet extractor using openpyxl and pandas.

Flattens every worksheet into a `[Sheet: <name>]` header followed by one
tab-delimited line per row. Modern .xlsx workbooks are read with
openpyxl; legacy .xls workbooks through pandas with the xlrd engine.
"""

import io
import logging
import math
import zipfile
from typing import Any, Callable, ClassVar, Iterable, Mapping, Protocol, Sequence

import pandas as pd
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from doctext.extractors.base import ContainerOpenError, DocumentExtractor
from doctext.models import ParsedDocument

logger = logging.getLogger(__name__)


class WorkbookReader(Protocol):
    """What the extractor needs from a spreadsheet library."""

    def sheet_names(self) -> list[str]: ...

    def iter_rows(self, name: str) -> Iterable[Sequence[Any]]: ...

    def close(self) -> None: ...


class OpenpyxlWorkbook:
    """Reads .xlsx workbooks with openpyxl in read-only mode."""

    def __init__(self, data: bytes):
        # data_only: cached formula results instead of formula strings
        self._workbook = load_workbook(io.BytesIO(data), read_only=True, data_only=True)

    def sheet_names(self) -> list[str]:
        return list(self._workbook.sheetnames)

    def iter_rows(self, name: str) -> Iterable[Sequence[Any]]:
        return self._workbook[name].iter_rows(values_only=True)

    def close(self) -> None:
        self._workbook.close()


class PandasWorkbook:
    """Reads legacy .xls workbooks with pandas and xlrd."""

    def __init__(self, data: bytes):
        self._excel = pd.ExcelFile(io.BytesIO(data), engine="xlrd")

    def sheet_names(self) -> list[str]:
        return [str(name) for name in self._excel.sheet_names]

    def iter_rows(self, name: str) -> Iterable[Sequence[Any]]:
        frame = self._excel.parse(name, header=None, dtype=object)
        return frame.itertuples(index=False, name=None)

    def close(self) -> None:
        self._excel.close()


def render_cell(value: Any) -> str:
    """
    Render a cell value the way a spreadsheet would display it.

    Empty cells (None or NaN) become an empty string, booleans render
    as "true"/"false" and whole-number floats lose their fractional part.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value)


_DEFAULT_READERS: dict[str, Callable[[bytes], WorkbookReader]] = {
    "xlsx": OpenpyxlWorkbook,
    "xls": PandasWorkbook,
}


class ExcelExtractor(DocumentExtractor):
    """
    Extracts text content from Excel spreadsheets.

    Worksheets that cannot be read are skipped; the rest of the workbook
    still parses. The unit count is the number of worksheets rendered.
    """

    SUPPORTED_EXTENSIONS: ClassVar[tuple[str, ...]] = ("xlsx", "xls")

    def __init__(self, readers: Mapping[str, Callable[[bytes], WorkbookReader]] | None = None):
        self._readers = dict(_DEFAULT_READERS if readers is None else readers)

    def extract(self, data: bytes, extension: str = "xlsx") -> ParsedDocument:
        """
        Extract text from an Excel file.

        Args:
            data: File content.
            extension: Routed extension ("xlsx" or "xls").

        Returns:
            ParsedDocument with one unit per rendered worksheet.

        Raises:
            ContainerOpenError: If the workbook cannot be opened.
        """
        extension = extension.lower()
        workbook = self._open(data, extension)

        try:
            blocks = self._extract_sheets(workbook)
        finally:
            workbook.close()

        return self._create_result("\n".join(blocks), len(blocks), self.format_tag(extension))

    def _open(self, data: bytes, extension: str) -> WorkbookReader:
        reader_cls = self._readers[extension]
        label = extension.upper()

        try:
            return reader_cls(data)
        except (InvalidFileException, zipfile.BadZipFile) as e:
            raise ContainerOpenError(
                f"Failed to open {label}: not a valid Excel workbook ({e})", cause=e
            ) from e
        except Exception as e:
            raise ContainerOpenError(f"Failed to open {label}: {e}", cause=e) from e

    def _extract_sheets(self, workbook: WorkbookReader) -> list[str]:
        """
        Render every readable worksheet, in workbook order.

        Args:
            workbook: An opened workbook reader.

        Returns:
            One text block per worksheet.
        """
        blocks: list[str] = []

        for sheet_name in workbook.sheet_names():
            try:
                rows = [
                    "\t".join(render_cell(cell) for cell in row)
                    for row in workbook.iter_rows(sheet_name)
                ]
            except Exception as e:
                logger.warning("Skipping unreadable worksheet %r: %s", sheet_name, e)
                continue

            lines = [f"[Sheet: {sheet_name}]", *rows]
            blocks.append("\n".join(lines) + "\n")

        return blocks
