from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from .utils import round_half_away


class Orientation(IntEnum):
    """How the %%Orientation directive is treated before conversion."""

    NONE = 0
    FLIP = 1
    REMOVE = 2


@dataclass(frozen=True)
class DirectiveSpan:
    """Half-open byte range holding the text that follows a directive marker."""

    start: int
    end: int

    def text(self, buffer: bytes) -> bytes:
        return buffer[self.start:self.end]


@dataclass(frozen=True)
class BoundingBox:
    x0: float
    y0: float
    x1: float
    y1: float

    @property
    def width(self) -> float:
        return abs(self.x1 - self.x0)

    @property
    def height(self) -> float:
        return abs(self.y1 - self.y0)

    @property
    def page_size(self) -> tuple[int, int]:
        return round_half_away(self.width), round_half_away(self.height)

    @property
    def origin_shift(self) -> tuple[int, int]:
        return round_half_away(-self.x0), round_half_away(-self.y0)


@dataclass(frozen=True)
class Edit:
    start: int
    end: int
    replacement: bytes


@dataclass
class ConversionResult:
    status: int
    message: str
    target: str
    output: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == 0
