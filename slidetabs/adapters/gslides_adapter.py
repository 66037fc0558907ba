"""
Google Slides adapter.

Works on the presentation JSON returned by ``presentations().get`` and
accumulates Slides API requests; commit() submits them as one
``batchUpdate``. Ownership tags are stored in each element's alt-text
title.

The Slides service is injected (e.g. ``googleapiclient.discovery.build
("slides", "v1", credentials=...)``), so authentication stays with the
caller.
"""

import uuid
from typing import Any, Callable, Dict, List, Optional

from slidetabs.adapters.base import BasePresentationAdapter
from slidetabs.colors import hex_to_rgb_fraction
from slidetabs.models import ElementTag, TabGeometry, LayoutConfig, LayoutResult, parse_tag


def _pt(magnitude: float) -> Dict[str, Any]:
    return {"magnitude": magnitude, "unit": "PT"}


def _solid_fill(hex_color: str) -> Dict[str, Any]:
    return {"solidFill": {"color": {"rgbColor": hex_to_rgb_fraction(hex_color)}}}


def _new_object_id() -> str:
    return f"st_{uuid.uuid4().hex}"


class GoogleSlidesAdapter(BasePresentationAdapter):
    """Render tabs into a live Google Slides presentation."""

    def __init__(
        self,
        slides_service,
        presentation_id: str,
        presentation: Optional[Dict[str, Any]] = None,
        id_factory: Callable[[], str] = _new_object_id,
    ):
        """
        Initialize adapter.

        Args:
            slides_service: Google Slides v1 service resource
            presentation_id: Presentation to update
            presentation: Already-fetched presentation JSON (skips the get call)
            id_factory: Generator for new object IDs
        """
        super().__init__()
        self.service = slides_service
        self.presentation_id = presentation_id
        self.id_factory = id_factory

        if presentation is None:
            presentation = (
                self.service.presentations().get(presentationId=presentation_id).execute()
            )
        self.presentation = presentation
        self._slides: List[Dict[str, Any]] = presentation.get("slides", [])
        self._layout_names: Dict[str, str] = {
            layout["objectId"]: layout.get("layoutProperties", {}).get("name", "")
            for layout in presentation.get("layouts", [])
        }
        self.requests: List[Dict[str, Any]] = []

    @property
    def slide_count(self) -> int:
        return len(self._slides)

    def slide_layout_name(self, slide_index: int) -> Optional[str]:
        layout_id = self._slides[slide_index].get("slideProperties", {}).get("layoutObjectId")
        return self._layout_names.get(layout_id)

    def slide_id(self, slide_index: int) -> str:
        return self._slides[slide_index]["objectId"]

    def slide_texts(self, slide_index: int) -> List[str]:
        texts = []
        for element in self._slides[slide_index].get("pageElements", []):
            if parse_tag(element.get("title")) is not None:
                continue
            text = element.get("shape", {}).get("text")
            if not text:
                continue
            texts.append(
                "".join(
                    te.get("textRun", {}).get("content", "")
                    for te in text.get("textElements", [])
                )
            )
        return texts

    def clear_tab_artifacts(self, slide_index: int) -> int:
        removed = 0
        for element in self._slides[slide_index].get("pageElements", []):
            if parse_tag(element.get("title")) is None:
                continue
            self.requests.append({"deleteObject": {"objectId": element["objectId"]}})
            removed += 1
        return removed

    def draw_page_number(
        self, slide_index: int, current: int, total: int, config: LayoutConfig
    ) -> None:
        object_id = self._create_box(
            slide_index,
            "TEXT_BOX",
            ElementTag.PAGE_NUMBER,
            x=config.page_number_x,
            y=config.page_number_y,
            width=config.page_number_width,
            height=config.page_number_height,
        )
        self.requests.append(
            {"insertText": {"objectId": object_id, "text": f"{current} / {total}"}}
        )
        self._style_text(
            object_id,
            font_family=config.font_family,
            font_size=config.page_number_font_size,
            color=config.inactive_text_color,
        )

    def commit(self) -> Optional[Dict[str, Any]]:
        if not self.requests:
            print("[GSlides] Nothing to submit")
            return None
        print(f"[GSlides] Submitting {len(self.requests)} requests to {self.presentation_id}")
        response = (
            self.service.presentations()
            .batchUpdate(presentationId=self.presentation_id, body={"requests": self.requests})
            .execute()
        )
        self.requests = []
        return response

    def _draw_background(self, slide_index: int, result: LayoutResult, config: LayoutConfig) -> None:
        object_id = self._create_box(
            slide_index,
            "RECTANGLE",
            ElementTag.TAB_BACKGROUND,
            x=0,
            y=config.y,
            width=config.total_width,
            height=result.uniform_height,
        )
        self.requests.append(
            {
                "updateShapeProperties": {
                    "objectId": object_id,
                    "shapeProperties": {
                        "shapeBackgroundFill": _solid_fill(config.background_color),
                        "outline": {
                            "weight": _pt(config.background_outline_weight),
                            "outlineFill": _solid_fill(config.background_color),
                        },
                    },
                    "fields": "shapeBackgroundFill.solidFill.color,outline.weight,outline.outlineFill.solidFill.color",
                }
            }
        )

    def _draw_tab(
        self,
        slide_index: int,
        tab: TabGeometry,
        fill_color: str,
        text_color: str,
        config: LayoutConfig,
    ) -> None:
        object_id = self._create_box(
            slide_index,
            "TEXT_BOX",
            ElementTag.TAB,
            x=tab.x,
            y=config.y,
            width=tab.width,
            height=tab.height,
        )
        self.requests.append({"insertText": {"objectId": object_id, "text": tab.title}})
        self.requests.append(
            {
                "updateShapeProperties": {
                    "objectId": object_id,
                    "shapeProperties": {
                        "shapeBackgroundFill": _solid_fill(fill_color),
                        "contentAlignment": "MIDDLE",
                    },
                    "fields": "shapeBackgroundFill.solidFill.color,contentAlignment",
                }
            }
        )
        self._style_text(
            object_id,
            font_family=config.font_family,
            font_size=config.font_size,
            color=text_color,
            link_page_id=tab.section_id,
        )

    def _draw_separator(self, slide_index: int, result: LayoutResult, config: LayoutConfig) -> None:
        object_id = self.id_factory()
        self.requests.append(
            {
                "createLine": {
                    "objectId": object_id,
                    "lineCategory": "STRAIGHT",
                    "elementProperties": self._element_properties(
                        slide_index, 0, config.y + result.uniform_height, config.total_width, 0
                    ),
                }
            }
        )
        self._tag(object_id, ElementTag.TAB_SEPARATOR)
        self.requests.append(
            {
                "updateLineProperties": {
                    "objectId": object_id,
                    "lineProperties": {
                        "lineFill": _solid_fill(config.accent_color),
                        "weight": _pt(config.separator_weight),
                    },
                    "fields": "lineFill.solidFill.color,weight",
                }
            }
        )

    def _element_properties(
        self, slide_index: int, x: float, y: float, width: float, height: float
    ) -> Dict[str, Any]:
        return {
            "pageObjectId": self.slide_id(slide_index),
            "size": {"height": _pt(height), "width": _pt(width)},
            "transform": {
                "translateX": x,
                "translateY": y,
                "scaleX": 1,
                "scaleY": 1,
                "unit": "PT",
            },
        }

    def _create_box(
        self,
        slide_index: int,
        shape_type: str,
        tag: ElementTag,
        x: float,
        y: float,
        width: float,
        height: float,
    ) -> str:
        object_id = self.id_factory()
        self.requests.append(
            {
                "createShape": {
                    "objectId": object_id,
                    "shapeType": shape_type,
                    "elementProperties": self._element_properties(slide_index, x, y, width, height),
                }
            }
        )
        self._tag(object_id, tag)
        return object_id

    def _tag(self, object_id: str, tag: ElementTag) -> None:
        self.requests.append(
            {"updatePageElementAltText": {"objectId": object_id, "title": tag.encode()}}
        )

    def _style_text(
        self,
        object_id: str,
        font_family: str,
        font_size: float,
        color: str,
        link_page_id: Optional[str] = None,
    ) -> None:
        style = {
            "bold": True,
            "fontFamily": font_family,
            "fontSize": _pt(font_size),
            "foregroundColor": {"opaqueColor": {"rgbColor": hex_to_rgb_fraction(color)}},
        }
        fields = "bold,fontFamily,fontSize,foregroundColor"
        if link_page_id is not None:
            style["underline"] = False
            style["link"] = {"pageObjectId": link_page_id}
            fields += ",underline,link"

        self.requests.append(
            {
                "updateTextStyle": {
                    "objectId": object_id,
                    "textRange": {"type": "ALL"},
                    "style": style,
                    "fields": fields,
                }
            }
        )
        self.requests.append(
            {
                "updateParagraphStyle": {
                    "objectId": object_id,
                    "textRange": {"type": "ALL"},
                    "style": {"alignment": "CENTER"},
                    "fields": "alignment",
                }
            }
        )
