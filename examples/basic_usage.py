"""
Basic usage example for SlideTabs.

This example adds a section tab bar and page numbers to a local
PowerPoint deck using the Python API.
"""

from pathlib import Path
from slidetabs import LayoutConfig, TabBarPipeline


def main():
    # Accent color and font for the active tab, separator and page numbers
    config = LayoutConfig(
        accent_color="#C00000",
        font_family="Calibri",
        total_width=720,  # 10" wide slides
    )

    pipeline = TabBarPipeline(config=config)

    pptx_path = Path("examples/sample_deck.pptx")
    output_path = Path("output/sample_deck_tabs.pptx")

    result = pipeline.process_pptx(pptx_path=pptx_path, output_path=output_path)

    summary = result["summary"]
    print("\n✓ Tabs added!")
    print(f"  Sections: {summary.sections}")
    print(f"  Tab bars: {summary.tab_bars}")
    print(f"  PPTX: {result['pptx']}")


if __name__ == "__main__":
    main()
