"""
PPTX adapter using python-pptx.

Reads sections from a local .pptx file and draws the tab bar and page
numbers as editable shapes. Ownership tags are stored in shape names.
"""

from pathlib import Path
from typing import Dict, List, Optional, Union
from pptx import Presentation
from pptx.presentation import Presentation as PresentationDocument
from pptx.util import Pt
from pptx.enum.text import PP_ALIGN, MSO_ANCHOR, MSO_AUTO_SIZE
from pptx.enum.shapes import MSO_SHAPE, MSO_CONNECTOR
from pptx.dml.color import RGBColor

from slidetabs.adapters.base import BasePresentationAdapter
from slidetabs.colors import parse_hex_color
from slidetabs.models import ElementTag, TabGeometry, LayoutConfig, LayoutResult, parse_tag


def _rgb(hex_color: str) -> RGBColor:
    return RGBColor(*parse_hex_color(hex_color))


class PPTXAdapter(BasePresentationAdapter):
    """
    Draw tabs into a python-pptx Presentation.

    Features:
    - Section discovery from slide layout names
    - Tag-based removal of a previous pass
    - Tabs that jump to their section slide on click
    """

    def __init__(
        self,
        source: Union[str, Path, PresentationDocument],
        output_path: Optional[Union[str, Path]] = None,
    ):
        """
        Initialize adapter.

        Args:
            source: Path to a .pptx file or an open Presentation
            output_path: Where commit() saves; defaults to the source path
        """
        super().__init__()
        if isinstance(source, (str, Path)):
            source = Path(source)
            if not source.exists():
                raise FileNotFoundError(f"PPTX not found: {source}")
            self.source_path: Optional[Path] = source
            self.prs = Presentation(str(source))
        else:
            self.source_path = None
            self.prs = source

        self.output_path = Path(output_path) if output_path else self.source_path
        self._slides = list(self.prs.slides)
        self._slides_by_id: Dict[str, object] = {str(s.slide_id): s for s in self._slides}

    @property
    def slide_count(self) -> int:
        return len(self._slides)

    def slide_layout_name(self, slide_index: int) -> Optional[str]:
        return self._slides[slide_index].slide_layout.name

    def slide_id(self, slide_index: int) -> str:
        return str(self._slides[slide_index].slide_id)

    def slide_texts(self, slide_index: int) -> List[str]:
        texts = []
        for shape in self._slides[slide_index].shapes:
            if parse_tag(shape.name) is not None or not shape.has_text_frame:
                continue
            texts.append(shape.text_frame.text)
        return texts

    def clear_tab_artifacts(self, slide_index: int) -> int:
        removed = 0
        for shape in list(self._slides[slide_index].shapes):
            if parse_tag(shape.name) is None:
                continue
            element = shape._element
            element.getparent().remove(element)
            removed += 1
        return removed

    def draw_page_number(
        self, slide_index: int, current: int, total: int, config: LayoutConfig
    ) -> None:
        slide = self._slides[slide_index]
        box = slide.shapes.add_textbox(
            Pt(config.page_number_x),
            Pt(config.page_number_y),
            Pt(config.page_number_width),
            Pt(config.page_number_height),
        )
        box.name = ElementTag.PAGE_NUMBER.encode()
        self._write_text(
            box,
            f"{current} / {total}",
            font_name=config.font_family,
            font_size=config.page_number_font_size,
            color=config.inactive_text_color,
        )

    def commit(self) -> Path:
        if self.output_path is None:
            raise ValueError("No output path: adapter was opened from an in-memory Presentation")
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.prs.save(str(self.output_path))
        print(f"[PPTX] Saved presentation to {self.output_path}")
        return self.output_path

    def _draw_background(self, slide_index: int, result: LayoutResult, config: LayoutConfig) -> None:
        slide = self._slides[slide_index]
        bar = slide.shapes.add_shape(
            MSO_SHAPE.RECTANGLE,
            Pt(0),
            Pt(config.y),
            Pt(config.total_width),
            Pt(result.uniform_height),
        )
        bar.name = ElementTag.TAB_BACKGROUND.encode()
        bar.fill.solid()
        bar.fill.fore_color.rgb = _rgb(config.background_color)
        bar.line.color.rgb = _rgb(config.background_color)
        bar.line.width = Pt(config.background_outline_weight)

    def _draw_tab(
        self,
        slide_index: int,
        tab: TabGeometry,
        fill_color: str,
        text_color: str,
        config: LayoutConfig,
    ) -> None:
        slide = self._slides[slide_index]
        box = slide.shapes.add_textbox(
            Pt(tab.x), Pt(config.y), Pt(tab.width), Pt(tab.height)
        )
        box.name = ElementTag.TAB.encode()
        box.fill.solid()
        box.fill.fore_color.rgb = _rgb(fill_color)
        self._write_text(
            box,
            tab.title,
            font_name=config.font_family,
            font_size=config.font_size,
            color=text_color,
        )

        target = self._slides_by_id.get(tab.section_id)
        if target is not None:
            box.click_action.target_slide = target
        else:
            print(f"[PPTX] Warning: Section slide {tab.section_id} not found, tab has no link")

    def _draw_separator(self, slide_index: int, result: LayoutResult, config: LayoutConfig) -> None:
        slide = self._slides[slide_index]
        y = config.y + result.uniform_height
        line = slide.shapes.add_connector(
            MSO_CONNECTOR.STRAIGHT, Pt(0), Pt(y), Pt(config.total_width), Pt(y)
        )
        line.name = ElementTag.TAB_SEPARATOR.encode()
        line.line.color.rgb = _rgb(config.accent_color)
        line.line.width = Pt(config.separator_weight)

    @staticmethod
    def _write_text(shape, text: str, font_name: str, font_size: float, color: str) -> None:
        """Single bold, centered run, vertically middle-anchored."""
        text_frame = shape.text_frame
        text_frame.word_wrap = True
        # fixed box size, so the row keeps one height
        text_frame.auto_size = MSO_AUTO_SIZE.NONE
        text_frame.vertical_anchor = MSO_ANCHOR.MIDDLE
        text_frame.margin_left = 0
        text_frame.margin_right = 0
        text_frame.margin_top = 0
        text_frame.margin_bottom = 0

        p = text_frame.paragraphs[0]
        p.alignment = PP_ALIGN.CENTER
        run = p.add_run()
        run.text = text
        run.font.bold = True
        run.font.underline = False
        run.font.name = font_name
        run.font.size = Pt(font_size)
        run.font.color.rgb = _rgb(color)
