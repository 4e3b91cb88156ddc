"""Line-break detection and MIME boundary recognition."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import Iterable, Optional, Union

CRLF = "\r\n"
DCRLF = "\r\n\r\n"
LF = "\n"
CR = "\r"

PART_CONTENT_TYPE_PATTERN = "Content-Type:"
PART_CONTENT_DISPOSITION_PATTERN = "Content-Disposition:"
PART_CONTENT_TRANSFER_ENCODING_PATTERN = "Content-Transfer-Encoding:"
PART_CONTENT_ID_PATTERN = "Content-ID:"

MIMETYPE_DEFAULT = "application/octet-stream"
MIMETYPE_TEXT_PLAIN = "text/plain"

LINE_LENGTH = 72
FROM_HEADER = "From"

_FILE_CHUNK = 511


class BoundaryType(enum.Enum):
    """Whether a boundary line opens a part or closes the multipart body."""

    OPEN = "open"
    CLOSE = "close"


@dataclass(frozen=True)
class BoundaryInfo:
    """A recognised boundary line."""

    type: BoundaryType
    marker: str

    @property
    def length(self) -> int:
        return len(self.marker)


def determine_linebreak(s: str) -> Optional[str]:
    """Return the line break used in ``s`` (CRLF preferred over LF over CR), or None."""
    for candidate in (CRLF, LF, CR):
        if candidate in s:
            return candidate
    return None


def determine_linebreak_from_file(path: Union[str, os.PathLike]) -> str:
    """Return the first line break found in the file, defaulting to CRLF.

    Raises OSError if the file cannot be read.
    """
    with open(path, "rb") as fh:
        for chunk in iter(lambda: fh.readline(_FILE_CHUNK), b""):
            found = determine_linebreak(chunk.decode("latin-1"))
            if found is not None:
                return found
    return CRLF


def get_boundary_info(
    boundaries: Iterable[str], s: str, newline: Optional[str]
) -> Optional[BoundaryInfo]:
    """Check whether the first line of ``s`` is one of the given boundaries.

    Returns None when ``newline`` is None, when ``s`` holds no line break,
    or when the first line matches no boundary.
    """
    if newline is None:
        return None
    end = s.find(newline)
    if end < 0:
        return None
    line = s[:end]
    for bound in boundaries:
        closing = f"--{bound}--"
        if line == closing:
            return BoundaryInfo(BoundaryType.CLOSE, closing)
        opening = f"--{bound}"
        if line == opening:
            return BoundaryInfo(BoundaryType.OPEN, opening)
    return None