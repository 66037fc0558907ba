"""
SlideTabs: Section tab bars and page numbers for slide decks.

Section-header slides drive a clickable tab row drawn on every content
slide; each layout pass replaces the previous one in full.
"""

__version__ = "0.1.0"
__author__ = "SlideTabs Team"

from slidetabs.models import Section, TabGeometry, LayoutConfig, LayoutResult, ElementTag
from slidetabs.layout import TabLayoutEngine, ActiveSectionTracker
from slidetabs.pipeline import TabBarPipeline

__all__ = [
    "Section",
    "TabGeometry",
    "LayoutConfig",
    "LayoutResult",
    "ElementTag",
    "TabLayoutEngine",
    "ActiveSectionTracker",
    "TabBarPipeline",
]
