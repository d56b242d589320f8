"""Presentation document model.

A presentation is parsed once into this tree of frozen pydantic models and
never mutated afterwards. Slides and content nodes are tagged unions keyed
on their ``type`` field. Unknown slide types fall back to ``DefaultSlide``
and unknown content node types become ``UnknownNode``, so a document with a
misspelled tag still loads.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    model_validator,
)

SLIDE_KINDS = frozenset(
    {
        "hero",
        "image",
        "two-column",
        "grid",
        "code",
        "timeline",
        "table",
        "flow",
        "default",
    }
)

CONTENT_NODE_KINDS = frozenset(
    {
        "list",
        "card",
        "quote",
        "callout",
        "code",
        "flow",
        "two-column-content",
    }
)


class _Model(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


def _type_tag(value: Any) -> Any:
    if isinstance(value, dict):
        return value.get("type")
    return getattr(value, "type", None)


def _loose_content(value: Any) -> Any:
    """Treat content that is neither text nor a list as absent."""
    if value is None or isinstance(value, (str, list)):
        return value
    return None


# =============================================================================
# Flow diagrams
# =============================================================================


class FlowArrow(_Model):
    """Connector between two flow boxes."""

    type: Literal["arrow"] = "arrow"
    text: str | None = None


class FlowBox(_Model):
    """Labeled box in a flow diagram."""

    type: Any = None
    title: str | None = None
    subtitle: str | None = None
    content: str | None = None


def _flow_item_kind(value: Any) -> str:
    return "arrow" if _type_tag(value) == "arrow" else "box"


FlowItem = Annotated[
    Union[
        Annotated[FlowArrow, Tag("arrow")],
        Annotated[FlowBox, Tag("box")],
    ],
    Discriminator(_flow_item_kind),
]


class Flow(_Model):
    """Ordered boxes and arrows, laid out left to right."""

    items: list[FlowItem] = Field(default_factory=list)
    style: str | None = None


# =============================================================================
# Content nodes
# =============================================================================


class ListNode(_Model):
    type: Literal["list"] = "list"
    items: list[str]
    style: str | None = None


class CardNode(_Model):
    """Card container.

    Cards also appear untagged inside two-column ``cards`` lists, so the tag
    is not constrained here.
    """

    type: str = "card"
    title: str | None = None
    content: OptionalContent = None
    style: str | None = None


class QuoteNode(_Model):
    type: Literal["quote"] = "quote"
    text: str | None = None


class CalloutNode(_Model):
    type: Literal["callout"] = "callout"
    content: OptionalContent = None
    style: str | None = None


class CodeNode(_Model):
    type: Literal["code"] = "code"
    code: str
    language: str | None = Field(
        None, validation_alias=AliasChoices("language", "lang")
    )


class FlowNode(Flow):
    type: Literal["flow"] = "flow"


class Column(_Model):
    """One side of a two-column layout."""

    title: str | None = None
    cards: list[CardNode] | None = None
    content: OptionalContent = None


class TwoColumnContent(_Model):
    """Layout marker consumed by two-column slides."""

    type: Literal["two-column-content"] = "two-column-content"
    left: Column | None = None
    right: Column | None = None


class UnknownNode(_Model):
    """Content node with an unrecognized tag. Renders as nothing."""

    type: Any = None

    @model_validator(mode="before")
    @classmethod
    def _accept_any_shape(cls, data: Any) -> Any:
        return data if isinstance(data, (dict, BaseModel)) else {}


def _content_node_kind(value: Any) -> str:
    if isinstance(value, str):
        return "text"
    kind = _type_tag(value)
    if isinstance(kind, str) and kind in CONTENT_NODE_KINDS:
        return kind
    return "unknown"


ContentNode = Annotated[
    Union[
        Annotated[str, Tag("text")],
        Annotated[ListNode, Tag("list")],
        Annotated[CardNode, Tag("card")],
        Annotated[QuoteNode, Tag("quote")],
        Annotated[CalloutNode, Tag("callout")],
        Annotated[CodeNode, Tag("code")],
        Annotated[FlowNode, Tag("flow")],
        Annotated[TwoColumnContent, Tag("two-column-content")],
        Annotated[UnknownNode, Tag("unknown")],
    ],
    Discriminator(_content_node_kind),
]

# A paragraph of text, or an ordered sequence of nodes
Content = Union[str, list[ContentNode]]
OptionalContent = Annotated[Optional[Content], BeforeValidator(_loose_content)]


# =============================================================================
# Slide parts
# =============================================================================


class ImageRef(_Model):
    """Image in a gallery. A bare string is shorthand for ``src``."""

    src: str
    alt: str | None = None
    caption: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _from_url(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"src": data}
        return data


class GridItem(_Model):
    """Grid cell: ``feature``, ``metric`` or a plain card."""

    type: str | None = None
    icon: str | None = None
    stat: str | None = None
    title: str | None = None
    label: str | None = None
    content: OptionalContent = None


class TimelineItem(_Model):
    period: str | None = None
    title: str | None = None
    description: str | None = None
    items: list[str] | None = None


# =============================================================================
# Slides
# =============================================================================


class _SlideBase(_Model):
    title: str | None = None
    subtitle: str | None = None
    transition: str | None = None


class HeroSlide(_SlideBase):
    type: Literal["hero"] = "hero"
    logo: str | None = None
    title_size: str | None = Field(None, alias="titleSize")


class ImageSlide(_SlideBase):
    """Image slide.

    ``preset`` selects the layout: ``grid`` uses ``images``, every other
    preset uses ``image``.
    """

    type: Literal["image"] = "image"
    preset: str = "center"
    image: str | None = None
    images: list[ImageRef] | None = None
    alt: str | None = None
    caption: str | None = None
    position: str = "left"
    content: OptionalContent = None

    @model_validator(mode="after")
    def _check_source(self) -> ImageSlide:
        if self.preset == "grid":
            if self.images is None:
                raise ValueError("grid image slides need 'images'")
        elif self.image is None:
            raise ValueError("image slides need 'image'")
        return self


class TwoColumnSlide(_SlideBase):
    type: Literal["two-column"] = "two-column"
    left: Column | None = None
    right: Column | None = None
    content: OptionalContent = None


class GridSlide(_SlideBase):
    type: Literal["grid"] = "grid"
    items: list[GridItem]
    columns: int = 3


class CodeSlide(_SlideBase):
    type: Literal["code"] = "code"
    code: str
    language: str | None = Field(
        None, validation_alias=AliasChoices("language", "lang")
    )
    description: str | None = None
    notes: str | None = None


class TimelineSlide(_SlideBase):
    type: Literal["timeline"] = "timeline"
    items: list[TimelineItem]


class TableSlide(_SlideBase):
    type: Literal["table"] = "table"
    headers: list[str]
    rows: list[list[Any]]


class FlowSlide(_SlideBase):
    type: Literal["flow"] = "flow"
    description: str | None = None
    flows: list[Flow] | None = None
    content: OptionalContent = None


class DefaultSlide(_SlideBase):
    """Title, subtitle and content. Also used for unknown slide types."""

    type: Any = None
    content: OptionalContent = None


def _slide_kind(value: Any) -> str:
    kind = _type_tag(value)
    if isinstance(kind, str) and kind in SLIDE_KINDS:
        return kind
    return "default"


Slide = Annotated[
    Union[
        Annotated[HeroSlide, Tag("hero")],
        Annotated[ImageSlide, Tag("image")],
        Annotated[TwoColumnSlide, Tag("two-column")],
        Annotated[GridSlide, Tag("grid")],
        Annotated[CodeSlide, Tag("code")],
        Annotated[TimelineSlide, Tag("timeline")],
        Annotated[TableSlide, Tag("table")],
        Annotated[FlowSlide, Tag("flow")],
        Annotated[DefaultSlide, Tag("default")],
    ],
    Discriminator(_slide_kind),
]


class Document(_Model):
    """A whole presentation."""

    title: str = ""
    lang: str | None = None
    theme: str | None = None
    code_theme: str | None = Field(None, alias="codeTheme")
    transition: str | None = None
    slides: list[Slide] = Field(min_length=1)


for _model in (
    CardNode,
    CalloutNode,
    Column,
    TwoColumnContent,
    GridItem,
    ImageSlide,
    TwoColumnSlide,
    GridSlide,
    FlowSlide,
    DefaultSlide,
    Document,
):
    _model.model_rebuild()
