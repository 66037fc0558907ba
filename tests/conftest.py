"""
Shared fixtures: an in-memory deck and a fake Google Slides service.
"""

import itertools

import pytest
from pptx import Presentation

TITLE_LAYOUT = 0
CONTENT_LAYOUT = 1
SECTION_LAYOUT = 2


def build_deck(plan):
    """
    Build a Presentation from (layout_index, title) pairs.

    The default template's layout 2 is "Section Header".
    """
    prs = Presentation()
    for layout_index, title in plan:
        slide = prs.slides.add_slide(prs.slide_layouts[layout_index])
        if title is not None:
            slide.shapes.title.text = title
    return prs


@pytest.fixture
def deck():
    return build_deck(
        [
            (TITLE_LAYOUT, "Quarterly Review"),
            (SECTION_LAYOUT, "Intro"),
            (CONTENT_LAYOUT, "Agenda"),
            (SECTION_LAYOUT, "Results"),
            (CONTENT_LAYOUT, "Revenue"),
            (CONTENT_LAYOUT, "Costs"),
        ]
    )


class FakeCall:
    def __init__(self, result):
        self.result = result

    def execute(self):
        return self.result


class FakePresentations:
    def __init__(self, service):
        self.service = service

    def get(self, presentationId):
        self.service.get_calls.append(presentationId)
        return FakeCall(self.service.presentation)

    def batchUpdate(self, presentationId, body):
        self.service.batch_calls.append((presentationId, body))
        return FakeCall({"presentationId": presentationId, "replies": [{} for _ in body["requests"]]})


class FakeSlidesService:
    """Records get/batchUpdate calls the way googleapiclient builds them."""

    def __init__(self, presentation):
        self.presentation = presentation
        self.get_calls = []
        self.batch_calls = []

    def presentations(self):
        return FakePresentations(self)


def text_element(object_id, text, title=None):
    element = {
        "objectId": object_id,
        "shape": {
            "shapeType": "TEXT_BOX",
            "text": {"textElements": [{"paragraphMarker": {}}, {"textRun": {"content": text}}]},
        },
    }
    if title is not None:
        element["title"] = title
    return element


@pytest.fixture
def gslides_presentation():
    return {
        "presentationId": "deck-1",
        "layouts": [
            {"objectId": "L_TITLE", "layoutProperties": {"name": "TITLE"}},
            {"objectId": "L_SECTION", "layoutProperties": {"name": "SECTION_HEADER"}},
            {"objectId": "L_BODY", "layoutProperties": {"name": "TITLE_AND_BODY"}},
        ],
        "slides": [
            {
                "objectId": "p0",
                "slideProperties": {"layoutObjectId": "L_TITLE"},
                "pageElements": [text_element("p0_t", "Quarterly Review\n")],
            },
            {
                "objectId": "p1",
                "slideProperties": {"layoutObjectId": "L_SECTION"},
                "pageElements": [text_element("p1_t", "  Intro\n")],
            },
            {
                "objectId": "p2",
                "slideProperties": {"layoutObjectId": "L_BODY"},
                "pageElements": [
                    text_element("p2_t", "Agenda\n"),
                    text_element("old_tab", "Stale\n", title="slidetabs:tab"),
                    {"objectId": "old_line", "title": "slidetabs:tab_separator", "line": {}},
                ],
            },
            {
                "objectId": "p3",
                "slideProperties": {"layoutObjectId": "L_SECTION"},
                "pageElements": [
                    text_element("p3_num", "3 / 5\n", title="slidetabs:page_number"),
                    text_element("p3_empty", "\n"),
                    text_element("p3_t", "Results\n"),
                ],
            },
            {
                "objectId": "p4",
                "slideProperties": {"layoutObjectId": "L_BODY"},
                "pageElements": [text_element("p4_t", "Revenue\n")],
            },
        ],
    }


@pytest.fixture
def slides_service(gslides_presentation):
    return FakeSlidesService(gslides_presentation)


@pytest.fixture
def sequential_ids():
    counter = itertools.count()
    return lambda: f"obj_{next(counter)}"
