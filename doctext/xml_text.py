"""
Tag-scoped XML text extraction.

Office formats keep user-visible text in small "text run" elements
(`<w:t>` in word-processing documents, `<a:t>` in presentations). Pulling
those out does not need a DOM: a literal scan for the run tag is enough,
as long as spans that contain further markup are rejected.
"""

from enum import Enum


class ScanState(Enum):
    """States of the tag scanner."""

    SEARCH_OPEN = "search_open"
    SEARCH_CLOSE = "search_close"
    DONE = "done"


class TagTextScanner:
    """
    Collects the inner text of every `<tag>...</tag>` pair in a buffer.

    The open tag may carry attributes (`<a:t xml:space="preserve">`);
    a self-closing `<a:t/>` contributes nothing. Spans that contain a
    `<` are treated as nested markup and dropped, without descending
    into them. An open tag that is never closed ends the scan.
    """

    def __init__(self, tag: str):
        self.tag = tag
        self._open_prefix = f"<{tag}"
        self._close_tag = f"</{tag}>"

    def scan(self, xml: str) -> list[str]:
        """
        Scan the buffer and return the accepted text runs in order.

        Args:
            xml: Raw XML text.

        Returns:
            Inner text of each accepted run, untouched.
        """
        runs: list[str] = []
        state = ScanState.SEARCH_OPEN
        position = 0
        content_start = 0

        while state is not ScanState.DONE:
            if state is ScanState.SEARCH_OPEN:
                found = self._find_open(xml, position)
                if found is None:
                    state = ScanState.DONE
                    continue
                content_start, self_closing = found
                if self_closing:
                    position = content_start
                else:
                    state = ScanState.SEARCH_CLOSE

            else:
                end = xml.find(self._close_tag, content_start)
                if end == -1:
                    state = ScanState.DONE
                    continue
                candidate = xml[content_start:end]
                if self._is_plain(candidate):
                    runs.append(candidate)
                position = end + len(self._close_tag)
                state = ScanState.SEARCH_OPEN

        return runs

    def _find_open(self, xml: str, start: int) -> tuple[int, bool] | None:
        """
        Locate the next open tag at or after `start`.

        Returns:
            (index just past the open tag, whether it was self-closing),
            or None when no further open tag exists.
        """
        prefix_len = len(self._open_prefix)
        index = xml.find(self._open_prefix, start)

        while index != -1:
            after = index + prefix_len
            if after < len(xml):
                next_char = xml[after]
                if next_char == ">":
                    return after + 1, False
                if next_char.isspace():
                    tag_end = xml.find(">", after)
                    if tag_end == -1:
                        return None
                    return tag_end + 1, xml[tag_end - 1] == "/"
            # Longer tag sharing the prefix, e.g. <a:tab/> for <a:t
            index = xml.find(self._open_prefix, after)

        return None

    @staticmethod
    def _is_plain(candidate: str) -> bool:
        return "<" not in candidate


def extract_tag_text(xml: str, tag: str) -> str:
    """
    Join the text runs of `tag` found in `xml` with single spaces.

    Args:
        xml: Raw XML text.
        tag: Literal tag name, including any namespace prefix (e.g. "a:t").

    Returns:
        The space-joined runs, or an empty string if there are none.
    """
    return " ".join(TagTextScanner(tag).scan(xml))
