"""
Tests for the tab layout engine and active-section tracking.
"""

import pytest

from slidetabs.layout import (
    ActiveSectionTracker,
    TabLayoutEngine,
    assign_active_section,
    assign_active_sections,
)
from slidetabs.measurers import BaseTextMeasurer
from slidetabs.models import LayoutConfig, Section


def make_sections(titles, start=1, step=2):
    return [
        Section(title=t, source_index=start + i * step, section_id=f"p{start + i * step}")
        for i, t in enumerate(titles)
    ]


class FixedMeasurer(BaseTextMeasurer):
    def __init__(self, width):
        super().__init__()
        self.width = width
        self.calls = []

    def measure(self, text, font, size):
        self.calls.append((text, font, size))
        return self.width


def test_geometries_preserve_order_and_count():
    titles = ["Intro", "Method", "A Rather Long Results Section", "Q&A", "Appendix"]
    sections = make_sections(titles)
    tabs = TabLayoutEngine().compute_tab_geometries(sections, LayoutConfig())

    assert [t.title for t in tabs] == titles
    assert [t.section_id for t in tabs] == [s.section_id for s in sections]
    for tab in tabs:
        assert tab.width >= 50
        assert tab.line_count in (1, 2)


def test_short_titles_stay_single_line():
    sections = make_sections(["Intro", "A Very Long Section Title Indeed"])
    intro, long_tab = TabLayoutEngine().compute_tab_geometries(sections, LayoutConfig())

    # 5 * 4.8 + 20 = 44, floored at min_width
    assert intro.width == pytest.approx(50)
    assert intro.line_count == 1
    # 32 * 4.8 + 20
    assert long_tab.width == pytest.approx(173.6)
    assert long_tab.line_count == 1
    assert long_tab.height == 14


def test_long_titles_wrap_and_cap_at_max_lines():
    sections = make_sections(["x" * 60] * 5)
    tabs = TabLayoutEngine().compute_tab_geometries(sections, LayoutConfig())

    for tab in tabs:
        # (720 - 4 * 2) / 5
        assert tab.width == pytest.approx(142.4)
        # ceil(288 / 122.4) = 3, capped to 2
        assert tab.line_count == 2
        assert tab.height == pytest.approx(14 * 1.2 * 2)


def test_multiline_tab_gets_minimum_readable_width():
    sections = make_sections(["y" * 20] * 12)
    tabs = TabLayoutEngine().compute_tab_geometries(sections, LayoutConfig())

    for tab in tabs:
        assert tab.line_count == 2
        assert tab.width == pytest.approx(75)


def test_no_room_for_text_uses_max_lines():
    sections = make_sections(["z" * 10] * 40)
    tabs = TabLayoutEngine().compute_tab_geometries(sections, LayoutConfig())

    assert all(t.line_count == 2 for t in tabs)
    assert all(t.width == pytest.approx(75) for t in tabs)


def test_height_capped_at_max_tab_height():
    config = LayoutConfig(max_lines=3)
    sections = make_sections(["x" * 60] * 5)
    tabs = TabLayoutEngine().compute_tab_geometries(sections, config)

    assert all(t.line_count == 3 for t in tabs)
    # 14 * 1.2 * 3 = 50.4, capped
    assert all(t.height == 40 for t in tabs)


def test_single_section_never_wraps():
    sections = make_sections(["w" * 200])
    (tab,) = TabLayoutEngine().compute_tab_geometries(sections, LayoutConfig())

    assert tab.line_count == 1
    assert tab.width == pytest.approx(200 * 4.8 + 20)


def test_geometries_are_deterministic():
    sections = make_sections(["Intro", "x" * 60, "Results", "y" * 35])
    engine = TabLayoutEngine()
    config = LayoutConfig()
    assert engine.compute_tab_geometries(sections, config) == engine.compute_tab_geometries(sections, config)


def test_custom_measurer_is_used():
    measurer = FixedMeasurer(1000)
    config = LayoutConfig(font_family="Roboto", font_size=9)
    sections = make_sections(["a", "b"])
    tabs = TabLayoutEngine(measurer).compute_tab_geometries(sections, config)

    assert measurer.calls == [("a", "Roboto", 9), ("b", "Roboto", 9)]
    assert all(t.line_count == 2 for t in tabs)
    assert all(t.width == pytest.approx(359) for t in tabs)


def test_char_width_factor_from_config():
    config = LayoutConfig(char_width_factor=1.0)
    (tab,) = TabLayoutEngine().compute_tab_geometries(make_sections(["abcdefghij"]), config)
    assert tab.width == pytest.approx(10 * 8 + 20)


def test_uniform_layout_heights_and_centering():
    engine = TabLayoutEngine()
    config = LayoutConfig()
    sections = make_sections(["Intro", "A Very Long Section Title Indeed"])
    result = engine.compute_uniform_layout(engine.compute_tab_geometries(sections, config), config)

    assert result.uniform_height == 14
    assert all(t.height == 14 for t in result.tabs)
    assert result.total_row_width == pytest.approx(50 + 173.6 + 2)
    assert result.start_x + result.total_row_width / 2 == pytest.approx(720 / 2)
    assert result.tabs[0].x == pytest.approx(result.start_x)
    assert result.tabs[1].x == pytest.approx(result.start_x + 50 + 2)


def test_uniform_height_is_max_of_tab_heights():
    engine = TabLayoutEngine()
    config = LayoutConfig()
    sections = make_sections(["Intro"] + ["x" * 60] * 4)
    tabs = engine.compute_tab_geometries(sections, config)
    result = engine.compute_uniform_layout(tabs, config)

    expected = max(t.height for t in tabs)
    assert expected > config.base_height
    assert result.uniform_height == pytest.approx(expected)
    assert all(t.height == pytest.approx(expected) for t in result.tabs)
    # widths untouched
    assert [t.width for t in result.tabs] == [t.width for t in tabs]


def test_overflowing_row_starts_at_zero():
    engine = TabLayoutEngine()
    config = LayoutConfig()
    result = engine.layout(make_sections(["w" * 200]), config)

    assert result.total_row_width > config.total_width
    assert result.start_x == 0
    assert result.overflows(config.total_width)


def test_single_section_is_centered():
    engine = TabLayoutEngine()
    result = engine.layout(make_sections(["Overview"]), LayoutConfig())

    (tab,) = result.tabs
    assert tab.width == pytest.approx(8 * 4.8 + 20)
    assert result.start_x == pytest.approx((720 - tab.width) / 2)


def test_layout_with_no_sections_is_none():
    measurer = FixedMeasurer(10)
    assert TabLayoutEngine(measurer).layout([], LayoutConfig()) is None
    assert measurer.calls == []


def test_assign_active_sections():
    sections = make_sections(["A", "B"], start=2, step=3)  # slides 2 and 5
    assert assign_active_sections(8, sections) == [None, None, 0, 0, 0, 1, 1, 1]


def test_assign_active_section_single_slide():
    sections = make_sections(["A", "B"], start=2, step=3)
    assert assign_active_section(0, sections) is None
    assert assign_active_section(4, sections) == 0
    assert assign_active_section(9, sections) == 1


def test_tracker_skips_adjacent_sections():
    sections = make_sections(["A", "B", "C"], start=0, step=1)
    tracker = ActiveSectionTracker(sections)
    # the cover is skipped by the caller; slide 1 already belongs to B
    assert tracker.advance(1) == 1
    assert tracker.advance(2) == 2


def test_tracker_is_monotonic():
    sections = make_sections(["A", "B", "C", "D"], start=1, step=3)
    tracker = ActiveSectionTracker(sections)
    previous = -1
    for i in range(20):
        active = tracker.advance(i)
        value = -1 if active is None else active
        assert value >= previous
        previous = value


def test_tracker_rejects_backwards_walk():
    tracker = ActiveSectionTracker(make_sections(["A"]))
    tracker.advance(3)
    tracker.advance(3)
    with pytest.raises(ValueError):
        tracker.advance(2)


def test_tracker_with_no_sections():
    tracker = ActiveSectionTracker([])
    assert tracker.advance(0) is None
    assert tracker.advance(10) is None


def test_tab_just_over_its_share_wraps():
    # ideal 143 sits between max_per_tab 142.4 and total_width / n 144
    sections = make_sections(list("abcde"))
    tabs = TabLayoutEngine(FixedMeasurer(123)).compute_tab_geometries(sections, LayoutConfig())

    for tab in tabs:
        assert tab.width == pytest.approx(142.4)
        assert tab.line_count == 2
