"""
PowerPoint presentation extractor.

Each slide lives in its own `ppt/slides/slideN.xml` part. Slides are
read in container order, stripped down to their `<a:t>` text runs and
then ordered by the number in their part name.
"""

import logging
import zipfile
from typing import ClassVar, Iterable

from doctext.container import ContainerReader
from doctext.extractors.base import ContainerOpenError, DocumentExtractor
from doctext.models import ParsedDocument, SlideUnit
from doctext.xml_text import extract_tag_text

logger = logging.getLogger(__name__)

SLIDE_PREFIX = "ppt/slides/slide"
SLIDE_SUFFIX = ".xml"


def is_slide_part(name: str) -> bool:
    """Check whether a container entry name is a slide part."""
    return name.startswith(SLIDE_PREFIX) and name.endswith(SLIDE_SUFFIX)


def slide_index(name: str) -> int | None:
    """
    Parse the slide number out of a slide part name.

    Args:
        name: Entry name such as "ppt/slides/slide12.xml".

    Returns:
        The number, or None when the name has no plain decimal number there.
    """
    number = name[len(SLIDE_PREFIX) : len(name) - len(SLIDE_SUFFIX)]
    if number.isascii() and number.isdigit():
        return int(number)
    return None


def order_slides(slides: Iterable[SlideUnit]) -> list[SlideUnit]:
    """
    Order slides by number.

    Numbered slides come first, ascending; equal numbers keep their
    enumeration order. Unnumbered slides follow in enumeration order.
    """
    numbered: list[SlideUnit] = []
    unnumbered: list[SlideUnit] = []
    for slide in slides:
        (unnumbered if slide.index is None else numbered).append(slide)

    numbered.sort(key=lambda slide: slide.index)
    return numbered + unnumbered


class PptxExtractor(DocumentExtractor):
    """
    Extracts slide text from presentations.

    Slides without any text are dropped and do not count as units.
    """

    SUPPORTED_EXTENSIONS: ClassVar[tuple[str, ...]] = ("pptx", "ppt")
    FORMAT_TAG: ClassVar[str] = "pptx"

    TEXT_RUN_TAG: ClassVar[str] = "a:t"

    def extract(self, data: bytes, extension: str = "pptx") -> ParsedDocument:
        """
        Extract text from a presentation.

        Args:
            data: File content.
            extension: Routed extension ("pptx" or "ppt").

        Returns:
            ParsedDocument with one unit per slide that has text.

        Raises:
            ContainerOpenError: If the bytes are not a ZIP container.
        """
        try:
            container = ContainerReader(data)
        except zipfile.BadZipFile as e:
            raise ContainerOpenError(f"Failed to open PPTX as ZIP: {e}", cause=e) from e

        with container:
            slides = order_slides(self._collect_slides(container))

        text = "\n\n".join(self._render_slide(slide) for slide in slides)
        return self._create_result(text, len(slides), self.format_tag(extension))

    def _collect_slides(self, container: ContainerReader) -> list[SlideUnit]:
        """Read every slide part and keep the ones that carry text."""
        slides: list[SlideUnit] = []

        for entry in container.entries(is_slide_part):
            xml = entry.data.decode("utf-8", errors="replace")
            text = extract_tag_text(xml, self.TEXT_RUN_TAG)
            if not text.strip():
                continue

            index = slide_index(entry.name)
            if index is None:
                logger.warning("Slide part %s has no slide number, ordering it last", entry.name)
            slides.append(SlideUnit(index=index, text=text))

        return slides

    @staticmethod
    def _render_slide(slide: SlideUnit) -> str:
        label = "?" if slide.index is None else str(slide.index)
        return f"[Slide {label}]\n{slide.text}"
