"""EPS header rewriting.

The page geometry of the produced PDF follows the ``%%BoundingBox`` comment of
the EPS file. Ghostscript ignores that comment on its own, so a small block of
PostScript is spliced in right after the directive: it sets the page size to the
box dimensions and moves the box origin to (0, 0). Every byte outside the
rewritten directive spans is kept as is.
"""

from __future__ import annotations

import math
import re
from typing import Iterable, List, Optional, Union

from .errors import BoundingBoxParseError, DirectiveNotFound
from .log import get_logger
from .models import BoundingBox, DirectiveSpan, Edit, Orientation
from .utils import coerce_orientation

logger = get_logger(__name__)

BOUNDING_BOX = b"%%BoundingBox:"
ORIENTATION = b"%%Orientation:"
DEFAULT_NEWLINE = b"\r\n"

_DIRECTIVE_VALUE = re.compile(rb"[^\r\n%]*")
_NEWLINE = re.compile(rb"\r\n|\r|\n")
_NUMBER = re.compile(rb"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def find_directive(buffer: bytes, marker: bytes) -> DirectiveSpan:
    """Locate the value of the first ``marker`` comment, matched case-insensitively.

    The span starts right after the marker and stops before the first CR, LF or
    ``%`` (or at the end of the buffer).
    """
    index = buffer.lower().find(marker.lower())
    if index < 0:
        raise DirectiveNotFound(marker.decode("ascii").rstrip(":"))
    start = index + len(marker)
    end = _DIRECTIVE_VALUE.match(buffer, start).end()
    return DirectiveSpan(start, end)


def parse_bounding_box(text: Union[bytes, str]) -> BoundingBox:
    """Parse four ASCII-whitespace separated, finite coordinates."""
    if isinstance(text, str):
        text = text.encode("latin-1", errors="replace")
    tokens = text.split()
    if len(tokens) != 4 or not all(_NUMBER.fullmatch(token) for token in tokens):
        raise BoundingBoxParseError(f"Error reading BB coordinates: {text.strip()!r}")
    bbox = BoundingBox(*(float(token) for token in tokens))
    values = (bbox.x0, bbox.y0, bbox.x1, bbox.y1, bbox.width, bbox.height)
    if not all(math.isfinite(value) for value in values):
        raise BoundingBoxParseError(f"BB coordinates out of range: {text.strip()!r}")
    return bbox


def detect_newline(buffer: bytes) -> bytes:
    match = _NEWLINE.search(buffer)
    return match.group() if match else DEFAULT_NEWLINE


def transform_orientation(text: str, mode: Orientation) -> Optional[str]:
    """Return the replacement orientation text, or None when it stays untouched."""
    value = text.strip().lower()
    if not value or mode == Orientation.NONE:
        return None
    if mode == Orientation.FLIP:
        if "landscape" in value:
            return "Portrait"
        if "portrait" in value:
            return "Landscape"
        return None
    if "landscape" in value or "portrait" in value:
        return " "
    return None


def page_setup_block(bbox: BoundingBox, newline: bytes = DEFAULT_NEWLINE) -> bytes:
    width, height = bbox.page_size
    shift_x, shift_y = bbox.origin_shift
    lines = [
        f" 0 0 {width} {height} ".encode("ascii"),
        f"<< /PageSize [{width} {height}] >> setpagedevice".encode("ascii"),
        f"gsave {shift_x} {shift_y} translate".encode("ascii"),
    ]
    return newline.join(lines)


def apply_edits(buffer: bytes, edits: Iterable[Edit]) -> bytes:
    """Replace each edit's range of ``buffer``; ranges may not overlap."""
    parts: List[bytes] = []
    position = 0
    for edit in sorted(edits, key=lambda item: item.start):
        if edit.start < position:
            raise ValueError(f"Overlapping edit at offset {edit.start}")
        parts.append(buffer[position:edit.start])
        parts.append(edit.replacement)
        position = edit.end
    parts.append(buffer[position:])
    return b"".join(parts)


def orientation_edit(buffer: bytes, mode: Orientation) -> Optional[Edit]:
    if mode == Orientation.NONE:
        return None
    try:
        span = find_directive(buffer, ORIENTATION)
    except DirectiveNotFound:
        logger.debug("No orientation directive, leaving orientation as is")
        return None
    replacement = transform_orientation(span.text(buffer).decode("latin-1"), mode)
    if replacement is None:
        return None
    return Edit(span.start, span.end, replacement.encode("ascii"))


def rewrite_header(buffer: bytes, orientation: Union[Orientation, int] = Orientation.NONE) -> bytes:
    """Return ``buffer`` with the page setup block spliced in; unknown modes act as NONE."""
    span = find_directive(buffer, BOUNDING_BOX)
    bbox = parse_bounding_box(span.text(buffer))
    newline = detect_newline(buffer)
    logger.debug(
        "Bounding box %s at bytes %d-%d, page %dx%d",
        (bbox.x0, bbox.y0, bbox.x1, bbox.y1),
        span.start,
        span.end,
        *bbox.page_size,
    )
    edits = [Edit(span.start, span.end, page_setup_block(bbox, newline))]
    extra = orientation_edit(buffer, Orientation(coerce_orientation(orientation)))
    if extra is not None:
        edits.append(extra)
    return apply_edits(buffer, edits)
