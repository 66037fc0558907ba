"""
Command-line interface for SlideTabs.
"""

import sys
import argparse
from pathlib import Path

from slidetabs import __version__
from slidetabs.models import LayoutConfig
from slidetabs.measurers import PillowFontMeasurer
from slidetabs.pipeline import TabBarPipeline


def build_config(args: argparse.Namespace) -> LayoutConfig:
    """Config file values first, then command-line overrides."""
    config = LayoutConfig.from_json_file(args.config) if args.config else LayoutConfig()

    overrides = {}
    if args.accent:
        overrides["accent_color"] = args.accent
    if args.font:
        overrides["font_family"] = args.font
    if args.total_width:
        overrides["total_width"] = args.total_width
    if args.include_cover:
        overrides["skip_cover"] = False

    if overrides:
        config = LayoutConfig.from_dict({**config.to_dict(), **overrides})
    return config


def main() -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="SlideTabs: Add a section tab bar and page numbers to a presentation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Update a deck in place
  slidetabs deck.pptx

  # Write to a new file with a custom accent color
  slidetabs deck.pptx -o deck_tabs.pptx --accent "#C00000"

  # Measure tab widths with real font metrics
  slidetabs deck.pptx --font "DejaVu Sans" --font-file /usr/share/fonts/DejaVuSans.ttf

  # Load layout settings from JSON
  slidetabs deck.pptx --config tabs.json
        """,
    )

    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="Input PPTX file",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"SlideTabs {__version__}",
    )

    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Output PPTX file (default: overwrite input)",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="JSON file with layout settings",
    )

    parser.add_argument(
        "--accent",
        help="Accent color for the active tab and separator line (hex)",
    )

    parser.add_argument(
        "--font",
        help="Font family for tabs and page numbers",
    )

    parser.add_argument(
        "--total-width",
        type=float,
        help="Width of the tab row in points (default: 720)",
    )

    parser.add_argument(
        "--font-file",
        type=Path,
        help="TrueType font used to measure tab text instead of the character-count estimate",
    )

    parser.add_argument(
        "--include-cover",
        action="store_true",
        help="Also draw on the first slide",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print tracebacks on error",
    )

    args = parser.parse_args()

    # Validate input
    if not args.input:
        parser.print_help()
        return 1

    if not args.input.exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    try:
        config = build_config(args)
        measurer = PillowFontMeasurer(default_font_file=args.font_file) if args.font_file else None
        pipeline = TabBarPipeline(config=config, measurer=measurer)

        result = pipeline.process_pptx(pptx_path=args.input, output_path=args.output)

        summary = result["summary"]
        if result["pptx"]:
            print(f"\n✓ {summary.sections} sections, {summary.tab_bars} tab bars")
            print(f"  PPTX: {result['pptx']}")
        else:
            print("\nNo section header slides found; presentation left unchanged")

        return 0

    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        return 130

    except Exception as e:
        print(f"\nError: {e}", file=sys.stderr)
        if args.debug:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
