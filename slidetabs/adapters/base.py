"""
Base presentation adapter interface.

An adapter reads slides and sections out of a presentation, removes the
elements drawn by a previous layout pass and draws a new one.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from slidetabs.models import Section, TabGeometry, LayoutConfig, LayoutResult


class BasePresentationAdapter(ABC):
    """Abstract base class for all presentation backends."""

    def __init__(self):
        self.name = self.__class__.__name__.replace("Adapter", "").lower()

    @property
    @abstractmethod
    def slide_count(self) -> int:
        pass

    @abstractmethod
    def slide_layout_name(self, slide_index: int) -> Optional[str]:
        pass

    @abstractmethod
    def slide_texts(self, slide_index: int) -> List[str]:
        """Text of every untagged text-bearing element, in drawing order."""
        pass

    @abstractmethod
    def slide_id(self, slide_index: int) -> str:
        pass

    @abstractmethod
    def clear_tab_artifacts(self, slide_index: int) -> int:
        """
        Remove every element tagged by a previous layout pass.

        Returns:
            Number of elements removed
        """
        pass

    @abstractmethod
    def draw_page_number(
        self, slide_index: int, current: int, total: int, config: LayoutConfig
    ) -> None:
        pass

    @abstractmethod
    def commit(self):
        """Submit everything drawn since the adapter was opened."""
        pass

    @abstractmethod
    def _draw_background(self, slide_index: int, result: LayoutResult, config: LayoutConfig) -> None:
        pass

    @abstractmethod
    def _draw_tab(
        self,
        slide_index: int,
        tab: TabGeometry,
        fill_color: str,
        text_color: str,
        config: LayoutConfig,
    ) -> None:
        pass

    @abstractmethod
    def _draw_separator(self, slide_index: int, result: LayoutResult, config: LayoutConfig) -> None:
        pass

    def is_section_header(self, slide_index: int, config: LayoutConfig) -> bool:
        return self.slide_layout_name(slide_index) in config.section_layout_names

    def discover_sections(self, config: LayoutConfig) -> List[Section]:
        """
        Collect section-header slides in slide order.

        The title is the first non-empty text on the slide; header slides
        without any text are skipped.
        """
        sections = []
        for index in range(self.slide_count):
            if not self.is_section_header(index, config):
                continue
            title = next((t.strip() for t in self.slide_texts(index) if t and t.strip()), "")
            if title:
                sections.append(
                    Section(title=title, source_index=index, section_id=self.slide_id(index))
                )
        return sections

    def draw_tab_bar(
        self,
        slide_index: int,
        result: LayoutResult,
        active_index: Optional[int],
        config: LayoutConfig,
    ) -> int:
        """
        Draw background bar, tabs and separator line on one slide.

        Returns:
            Number of tabs drawn
        """
        self._draw_background(slide_index, result, config)
        for i, tab in enumerate(result.tabs):
            is_active = i == active_index
            self._draw_tab(
                slide_index,
                tab,
                fill_color=config.accent_color if is_active else config.background_color,
                text_color=config.active_text_color if is_active else config.inactive_text_color,
                config=config,
            )
        self._draw_separator(slide_index, result, config)
        return len(result.tabs)
