"""Parser package."""

from .base import Segment, SegmentKind, Segmenter
from .html_parser import HTMLSegmenter

__all__ = [
    "Segment",
    "SegmentKind",
    "Segmenter",
    "HTMLSegmenter",
]
