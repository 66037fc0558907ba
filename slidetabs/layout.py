"""
Tab layout engine.

Turns an ordered list of sections into tab geometries: per-tab widths,
up to ``max_lines`` lines of wrapped text, a uniform row height and a
centered start position. Pure functions of (sections, config); nothing
here touches a presentation.
"""

import math
from typing import List, Optional, Sequence

from slidetabs.models import Section, TabGeometry, LayoutConfig, LayoutResult
from slidetabs.measurers import BaseTextMeasurer, CharCountMeasurer


class TabLayoutEngine:
    """
    Compute tab geometry for a row of section tabs.

    Widths come from a text measurer; when a title does not fit its
    share of the row the tab is clamped to that share and the text wraps.
    A row wider than the canvas is left as is (it is never rebalanced).
    """

    def __init__(self, measurer: Optional[BaseTextMeasurer] = None):
        """
        Initialize engine.

        Args:
            measurer: Text measurer; defaults to the character-count
                heuristic using ``config.char_width_factor``
        """
        self.measurer = measurer

    def layout(self, sections: Sequence[Section], config: LayoutConfig) -> Optional[LayoutResult]:
        """Run a full layout. Returns None when there are no sections."""
        if not sections:
            return None
        tabs = self.compute_tab_geometries(sections, config)
        return self.compute_uniform_layout(tabs, config)

    def compute_tab_geometries(
        self, sections: Sequence[Section], config: LayoutConfig
    ) -> List[TabGeometry]:
        """
        Compute one geometry per section, in section order.

        Heights are per tab here; see compute_uniform_layout.
        """
        n = len(sections)
        if n == 0:
            return []

        measurer = self.measurer or CharCountMeasurer(config.char_width_factor)
        max_per_tab = (config.total_width - (n - 1) * config.spacing) / n

        geometries = []
        for section in sections:
            text_width = measurer.measure(section.title, config.font_family, config.font_size)
            ideal_width = max(text_width + 2 * config.padding, config.min_width)

            lines = 1
            width = ideal_width
            if n > 1 and ideal_width > max_per_tab:
                width = max(max_per_tab, config.min_width)
                inner_width = max_per_tab - 2 * config.padding
                if inner_width > 0:
                    lines = min(math.ceil(text_width / inner_width), config.max_lines)
                else:
                    lines = config.max_lines
                lines = max(lines, 1)

            multiline_min = config.min_width * config.multiline_min_width_factor
            if lines > 1 and width < multiline_min:
                width = multiline_min

            height = config.base_height
            if lines > 1:
                height = min(
                    config.base_height * config.line_height_factor * lines,
                    config.max_tab_height,
                )
            height = max(height, config.base_height)

            geometries.append(
                TabGeometry(
                    title=section.title,
                    section_id=section.section_id,
                    source_index=section.source_index,
                    width=width,
                    height=height,
                    line_count=lines,
                )
            )

        return geometries

    def compute_uniform_layout(
        self, tabs: Sequence[TabGeometry], config: LayoutConfig
    ) -> LayoutResult:
        """
        Give every tab the tallest height and center the row.

        Widths are unchanged. start_x is clamped at 0, so an overflowing
        row starts at the left edge and runs past the right one.
        """
        uniform_height = max([config.base_height] + [tab.height for tab in tabs])
        total_row_width = sum(tab.width for tab in tabs) + config.spacing * max(len(tabs) - 1, 0)
        start_x = max((config.total_width - total_row_width) / 2, 0.0)

        placed = []
        x = start_x
        for tab in tabs:
            placed.append(tab.model_copy(update={"height": uniform_height, "x": x}))
            x += tab.width + config.spacing

        return LayoutResult(
            tabs=placed,
            uniform_height=uniform_height,
            start_x=start_x,
            total_row_width=total_row_width,
        )


class ActiveSectionTracker:
    """
    Forward-only pointer over sections for an ascending walk over slides.

    Each call to advance() moves the pointer past every section anchored
    at or before the given slide, so a full pass over slides and sections
    is linear.
    """

    def __init__(self, sections: Sequence[Section]):
        self.sections = list(sections)
        self._next = 0
        self._last_slide: Optional[int] = None

    @property
    def current(self) -> Optional[int]:
        return self._next - 1 if self._next > 0 else None

    def advance(self, slide_index: int) -> Optional[int]:
        """
        Return the active section position for ``slide_index``.

        Raises:
            ValueError: If slide_index is lower than a previous call
        """
        if self._last_slide is not None and slide_index < self._last_slide:
            raise ValueError(
                f"Slides must be visited in ascending order: {slide_index} after {self._last_slide}"
            )
        self._last_slide = slide_index

        while self._next < len(self.sections) and self.sections[self._next].source_index <= slide_index:
            self._next += 1
        return self.current


def assign_active_section(slide_index: int, sections: Sequence[Section]) -> Optional[int]:
    """Active section position for a single slide, or None before the first section."""
    return ActiveSectionTracker(sections).advance(slide_index)


def assign_active_sections(slide_count: int, sections: Sequence[Section]) -> List[Optional[int]]:
    """Active section position for every slide, computed in one pass."""
    tracker = ActiveSectionTracker(sections)
    return [tracker.advance(i) for i in range(slide_count)]
