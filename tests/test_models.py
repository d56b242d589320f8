"""Tests for the presentation document model."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from pydantic import ValidationError

from slayd.models import (
    CardNode,
    CodeNode,
    DefaultSlide,
    Document,
    FlowArrow,
    FlowBox,
    FlowNode,
    GridSlide,
    HeroSlide,
    ImageRef,
    ImageSlide,
    ListNode,
    TwoColumnContent,
    UnknownNode,
)

MakeSlide = Callable[[dict[str, Any]], Any]
MakeNodes = Callable[[list[Any]], list[Any]]


class TestSlideDispatch:
    """The ``type`` key selects the slide model."""

    def test_known_kinds(self, make_slide: MakeSlide) -> None:
        assert isinstance(make_slide({"type": "hero"}), HeroSlide)
        assert isinstance(make_slide({"type": "grid", "items": []}), GridSlide)
        assert isinstance(make_slide({"type": "image", "image": "a.png"}), ImageSlide)

    def test_unknown_kind_falls_back(self, make_slide: MakeSlide) -> None:
        slide = make_slide({"type": "mystery", "title": "T"})

        assert isinstance(slide, DefaultSlide)
        assert slide.type == "mystery"

    def test_missing_kind_falls_back(self, make_slide: MakeSlide) -> None:
        assert isinstance(make_slide({"title": "T"}), DefaultSlide)

    def test_non_string_kind_falls_back(self, make_slide: MakeSlide) -> None:
        assert isinstance(make_slide({"type": ["hero"]}), DefaultSlide)


class TestContentDispatch:
    def test_node_kinds(self, make_nodes: MakeNodes) -> None:
        nodes = make_nodes(
            [
                "text",
                {"type": "list", "items": ["a"]},
                {"type": "card"},
                {"type": "code", "code": "x"},
                {"type": "flow", "items": []},
                {"type": "two-column-content"},
                {"type": "nope"},
            ]
        )

        assert nodes[0] == "text"
        assert isinstance(nodes[1], ListNode)
        assert isinstance(nodes[2], CardNode)
        assert isinstance(nodes[3], CodeNode)
        assert isinstance(nodes[4], FlowNode)
        assert isinstance(nodes[5], TwoColumnContent)
        assert isinstance(nodes[6], UnknownNode)

    def test_non_mapping_node_is_unknown(self, make_nodes: MakeNodes) -> None:
        (node,) = make_nodes([3])

        assert isinstance(node, UnknownNode)

    def test_content_of_other_shape_is_absent(self) -> None:
        card = CardNode.model_validate({"content": {"unexpected": "mapping"}})

        assert card.content is None

    def test_flow_items(self) -> None:
        flow = FlowNode.model_validate({"items": [{"type": "arrow"}, {"title": "Box"}]})

        assert isinstance(flow.items[0], FlowArrow)
        assert isinstance(flow.items[1], FlowBox)


class TestFieldHandling:
    def test_numbers_become_text(self, make_slide: MakeSlide) -> None:
        slide = make_slide({"title": 2024, "subtitle": 1.5})

        assert slide.title == "2024"
        assert slide.subtitle == "1.5"

    def test_aliases(self, make_slide: MakeSlide) -> None:
        hero = make_slide({"type": "hero", "titleSize": "3rem"})
        code = make_slide({"type": "code", "code": "x", "lang": "go"})

        assert hero.title_size == "3rem"
        assert code.language == "go"

    def test_image_ref_from_string(self) -> None:
        assert ImageRef.model_validate("a.png") == ImageRef(src="a.png")

    def test_models_are_frozen(self, make_slide: MakeSlide) -> None:
        slide = make_slide({"title": "T"})

        with pytest.raises(ValidationError):
            slide.title = "Changed"

    def test_extra_keys_ignored(self, make_slide: MakeSlide) -> None:
        slide = make_slide({"type": "hero", "title": "T", "speaker_notes": "hidden"})

        assert not hasattr(slide, "speaker_notes")


class TestRequiredFields:
    """Missing kind-specific structure is rejected when the document loads."""

    def test_grid_needs_items(self, make_slide: MakeSlide) -> None:
        with pytest.raises(ValidationError):
            make_slide({"type": "grid"})

    def test_table_needs_headers_and_rows(self, make_slide: MakeSlide) -> None:
        with pytest.raises(ValidationError):
            make_slide({"type": "table", "rows": []})
        with pytest.raises(ValidationError):
            make_slide({"type": "table", "headers": []})

    def test_image_needs_source(self, make_slide: MakeSlide) -> None:
        with pytest.raises(ValidationError):
            make_slide({"type": "image"})

    def test_gallery_needs_images(self, make_slide: MakeSlide) -> None:
        with pytest.raises(ValidationError):
            make_slide({"type": "image", "preset": "grid", "image": "a.png"})

    def test_document_needs_slides(self) -> None:
        with pytest.raises(ValidationError):
            Document.model_validate({"title": "Empty", "slides": []})
        with pytest.raises(ValidationError):
            Document.model_validate({"title": "Missing"})


class TestDocument:
    def test_document_fields(self) -> None:
        document = Document.model_validate(
            {
                "title": "Deck",
                "lang": "en",
                "theme": "light",
                "codeTheme": "github-dark",
                "transition": "slide",
                "slides": [{"type": "hero", "title": "Hi"}],
            }
        )

        assert document.code_theme == "github-dark"
        assert document.lang == "en"
        assert isinstance(document.slides[0], HeroSlide)

    def test_defaults(self) -> None:
        document = Document.model_validate({"slides": [{}]})

        assert document.title == ""
        assert document.lang is None
        assert document.transition is None
