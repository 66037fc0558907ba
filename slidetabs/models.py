"""
Core data models for SlideTabs.

Sections, tab geometries, layout configuration and layout results are
pydantic models; configuration and geometry are frozen once built.
"""

import json
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple, Dict, Any, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator


TAG_NAMESPACE = "slidetabs"


class ElementTag(str, Enum):
    """Ownership tag carried by every element drawn during a layout pass."""

    TAB = "tab"
    TAB_BACKGROUND = "tab_background"
    TAB_SEPARATOR = "tab_separator"
    PAGE_NUMBER = "page_number"

    def encode(self) -> str:
        return f"{TAG_NAMESPACE}:{self.value}"


def parse_tag(label: Optional[str]) -> Optional[ElementTag]:
    """
    Decode an element label back into an ElementTag.

    Returns None for labels that were not written by a layout pass.
    """
    if not label:
        return None
    namespace, sep, value = label.partition(":")
    if not sep or namespace != TAG_NAMESPACE:
        return None
    try:
        return ElementTag(value)
    except ValueError:
        return None


class Section(BaseModel):
    """A titled division of the presentation, anchored at one slide."""

    model_config = ConfigDict(frozen=True)

    title: str
    source_index: int = Field(ge=0, description="Position of the section-header slide")
    section_id: str = Field(..., description="Opaque identifier of the anchor slide")


class TabGeometry(BaseModel):
    """Computed size and position of one tab."""

    model_config = ConfigDict(frozen=True)

    title: str
    section_id: str
    source_index: int = Field(ge=0)
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    line_count: int = Field(ge=1)
    x: float = 0.0


class LayoutConfig(BaseModel):
    """
    Every knob of a layout pass, in points.

    Passed explicitly into layout and render calls; there is no global
    style state.
    """

    model_config = ConfigDict(frozen=True)

    # Tab row geometry
    total_width: float = Field(default=720.0, gt=0)
    base_height: float = Field(default=14.0, gt=0)
    y: float = 0.0
    font_size: float = Field(default=8.0, gt=0)
    padding: float = Field(default=10.0, ge=0)
    spacing: float = Field(default=2.0, ge=0)
    min_width: float = Field(default=50.0, gt=0)
    max_tab_height: float = Field(default=40.0, gt=0)
    line_height_factor: float = Field(default=1.2, gt=0)
    max_lines: int = Field(default=2, ge=1)
    char_width_factor: float = Field(default=0.6, gt=0)
    multiline_min_width_factor: float = Field(default=1.5, gt=0)

    # Styling
    accent_color: str = "#1F4E79"
    font_family: str = "Arial"
    background_color: str = "#FFFFFF"
    active_text_color: str = "#FFFFFF"
    inactive_text_color: str = "#888888"
    background_outline_weight: float = Field(default=0.1, ge=0)
    separator_weight: float = Field(default=1.0, gt=0)

    # Page number box
    page_number_x: float = 665.0
    page_number_y: float = 370.0
    page_number_width: float = Field(default=50.0, gt=0)
    page_number_height: float = Field(default=30.0, gt=0)
    page_number_font_size: float = Field(default=12.0, gt=0)

    # Slide classification
    skip_cover: bool = True
    section_layout_names: Tuple[str, ...] = ("SECTION_HEADER", "Section Header")

    @field_validator("section_layout_names", mode="before")
    @classmethod
    def coerce_layout_names(cls, v: Union[str, List[str], Tuple[str, ...]]) -> Tuple[str, ...]:
        if isinstance(v, str):
            return (v,)
        return tuple(v)

    def to_dict(self) -> Dict[str, Any]:
        """Export to dict for JSON serialization."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LayoutConfig":
        """Load from dict."""
        return cls.model_validate(data)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "LayoutConfig":
        """Load from a JSON file; missing keys keep their defaults."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config not found: {path}")
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))


class LayoutResult(BaseModel):
    """
    The sole output of the layout core.

    Tabs carry the uniform height and their final x position.
    """

    model_config = ConfigDict(frozen=True)

    tabs: List[TabGeometry] = Field(default_factory=list)
    uniform_height: float = Field(gt=0)
    start_x: float = Field(ge=0)
    total_row_width: float = Field(ge=0)

    @property
    def row_end(self) -> float:
        return self.start_x + self.total_row_width

    def overflows(self, total_width: float) -> bool:
        """True when the row extends past the canvas (left unfixed)."""
        return self.total_row_width > total_width


class PassSummary(BaseModel):
    """Counts reported by one layout pass."""

    sections: int = 0
    tab_bars: int = 0
    tabs_drawn: int = 0
    page_numbers: int = 0
    artifacts_removed: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
