"""Convert EPS files to PDF pages sized to their bounding box."""

from .converter import convert
from .eps import rewrite_header
from .models import ConversionResult, Orientation

__all__ = ["ConversionResult", "Orientation", "convert", "rewrite_header"]
