"""
ZIP container access for office formats.

Word-processing documents and presentations are ZIP archives of XML
parts. `ContainerReader` opens an in-memory buffer and hands out parts by
name or by enumeration; nothing is written to disk.
"""

import io
import logging
import zipfile
import zlib
from typing import Callable, Iterator

from doctext.models import ContainerEntry

logger = logging.getLogger(__name__)

# Errors that can surface while inflating a single member of an otherwise
# readable archive (bad CRC, truncated data, unsupported compression,
# encrypted member).
_MEMBER_READ_ERRORS = (
    zipfile.BadZipFile,
    zlib.error,
    EOFError,
    NotImplementedError,
    RuntimeError,
)


class ContainerReader:
    """
    Read-only view of a ZIP container held in memory.

    Raises `zipfile.BadZipFile` from the constructor when the bytes are
    not a ZIP archive; callers translate that into their own error.
    Individual parts that cannot be read are reported as missing.
    """

    def __init__(self, data: bytes):
        self._archive = zipfile.ZipFile(io.BytesIO(data))

    def __enter__(self) -> "ContainerReader":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._archive.close()

    def names(self) -> list[str]:
        """Entry names in the archive's own (central directory) order."""
        return self._archive.namelist()

    def read(self, name: str) -> ContainerEntry | None:
        """
        Look up a part by name.

        Args:
            name: Path of the part inside the archive.

        Returns:
            The entry, or None if it is absent or cannot be inflated.
        """
        try:
            data = self._archive.read(name)
        except KeyError:
            logger.debug("Container has no part named %s", name)
            return None
        except _MEMBER_READ_ERRORS as e:
            logger.warning("Could not read container part %s: %s", name, e)
            return None
        return ContainerEntry(name=name, data=data)

    def read_text(self, name: str) -> str | None:
        """Read a part and decode it as UTF-8, replacing invalid sequences."""
        entry = self.read(name)
        if entry is None:
            return None
        return entry.data.decode("utf-8", errors="replace")

    def entries(self, predicate: Callable[[str], bool]) -> Iterator[ContainerEntry]:
        """
        Yield readable entries whose name satisfies `predicate`.

        Entries are read lazily, one at a time, in enumeration order.
        """
        for name in self.names():
            if not predicate(name):
                continue
            entry = self.read(name)
            if entry is not None:
                yield entry
