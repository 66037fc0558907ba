"""
Main orchestration pipeline for SlideTabs.

One layout pass: discover sections, remove the previous pass, lay out
the tab row, draw tab bars and page numbers, commit.
"""

from pathlib import Path
from typing import Optional

from slidetabs.models import LayoutConfig, PassSummary
from slidetabs.layout import TabLayoutEngine, ActiveSectionTracker
from slidetabs.measurers import BaseTextMeasurer
from slidetabs.adapters import BasePresentationAdapter, PPTXAdapter


class TabBarPipeline:
    """
    Full-replace tab bar generation over any presentation adapter.

    Pipeline stages:
    1. Discovery: section-header slides and their titles
    2. Cleanup: delete every tagged element from the previous pass
    3. Layout: tab widths, wrapping, uniform height, centering
    4. Rendering: page number on every slide, tab bar on content slides
    5. Commit: one save / one batch request
    """

    def __init__(
        self,
        config: Optional[LayoutConfig] = None,
        measurer: Optional[BaseTextMeasurer] = None,
    ):
        """
        Initialize pipeline.

        Args:
            config: Layout and style configuration (defaults if omitted)
            measurer: Text measurer for the layout engine
        """
        self.config = config or LayoutConfig()
        self.engine = TabLayoutEngine(measurer)

    def run(self, adapter: BasePresentationAdapter) -> PassSummary:
        """
        Run one layout pass and commit it.

        Returns:
            Counts of what was removed and drawn
        """
        config = self.config
        summary = PassSummary()

        print(f"[SlideTabs] Layout pass over {adapter.slide_count} slides ({adapter.name})")

        sections = adapter.discover_sections(config)
        summary.sections = len(sections)
        if not sections:
            print("[SlideTabs] No section headers found, nothing to do")
            return summary
        print(f"[SlideTabs] Found {len(sections)} sections: {', '.join(s.title for s in sections)}")

        first = 1 if config.skip_cover else 0
        total_pages = adapter.slide_count

        # every slide, so a pass that skips the cover still removes older cover tabs
        for index in range(total_pages):
            summary.artifacts_removed += adapter.clear_tab_artifacts(index)
        if summary.artifacts_removed:
            print(f"[SlideTabs] Removed {summary.artifacts_removed} elements from the previous pass")

        result = self.engine.layout(sections, config)
        if result.overflows(config.total_width):
            print(
                f"[SlideTabs] Warning: Tab row is {result.total_row_width:.1f}pt wide, "
                f"wider than {config.total_width:.1f}pt; tabs will run past the slide edge"
            )

        tracker = ActiveSectionTracker(sections)
        for index in range(first, total_pages):
            active = tracker.advance(index)

            adapter.draw_page_number(index, index + 1, total_pages, config)
            summary.page_numbers += 1

            if adapter.is_section_header(index, config):
                continue

            summary.tabs_drawn += adapter.draw_tab_bar(index, result, active, config)
            summary.tab_bars += 1

        adapter.commit()
        print(
            f"[SlideTabs] Drew {summary.tab_bars} tab bars and {summary.page_numbers} page numbers"
        )
        return summary

    def process_pptx(
        self, pptx_path: Path, output_path: Optional[Path] = None
    ) -> dict:
        """
        Run a layout pass over a local .pptx file.

        Args:
            pptx_path: Input presentation
            output_path: Output file (default: overwrite the input)

        Returns:
            {"pptx": Path to the saved file (None when nothing was
            written), "summary": PassSummary}
        """
        pptx_path = Path(pptx_path)
        if not pptx_path.exists():
            raise FileNotFoundError(f"PPTX not found: {pptx_path}")

        adapter = PPTXAdapter(pptx_path, output_path=output_path or pptx_path)
        summary = self.run(adapter)
        return {
            "pptx": adapter.output_path if summary.sections else None,
            "summary": summary,
        }
