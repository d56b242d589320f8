"""Slide rendering.

Each slide model maps to one renderer. The renderer produces the slide body
and ``render_slide`` wraps it in the slide container carrying the active
flag and transition class.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from loguru import logger

from slayd.content import MUTED_COLOR, render_column, render_content, render_flow
from slayd.errors import SlideRenderError
from slayd.markdown import render_code_block, render_markdown
from slayd.markup import escape_html, join_markup
from slayd.models import (
    CodeSlide,
    DefaultSlide,
    FlowSlide,
    GridItem,
    GridSlide,
    HeroSlide,
    ImageRef,
    ImageSlide,
    TableSlide,
    TimelineSlide,
    TwoColumnContent,
    TwoColumnSlide,
)
from slayd.styles import resolve_transition, transition_class

if TYPE_CHECKING:
    from collections.abc import Callable

    from slayd.models import Document

DEFAULT_TITLE_SIZE = "5rem"
DEFAULT_ALT_TEXT = "Image"

# Gallery column markers by image count; other counts use the default grid
GALLERY_COLUMNS: dict[int, str] = {3: "gallery-3", 4: "gallery-4"}

GRID_ITEM_CLASSES: dict[str, str] = {
    "feature": "feature-box",
    "metric": "metric-box",
}


def render_slide(slide: Any, index: int, default_transition: str | None = None) -> str:
    """Render one slide.

    Args:
        slide: Slide model
        index: Position in the deck; only the first slide starts active
        default_transition: Document-level transition, if any

    Returns:
        HTML fragment for the slide
    """
    transition = resolve_transition(slide.transition, default_transition)
    active = " active" if index == 0 else ""
    renderer = _SLIDE_RENDERERS.get(type(slide), _render_default)

    return join_markup(
        f'<div class="slide{active} {transition_class(transition)}" data-transition="{transition}">',
        renderer(slide),
        "</div>",
    )


def render_slides(
    document: Document,
    isolate_errors: bool = False,
    default_transition: str | None = None,
) -> list[str]:
    """Render every slide of a document, in order.

    Args:
        document: Presentation to render
        isolate_errors: Replace a slide that fails to render with an error
            slide instead of aborting the whole document
        default_transition: Transition for slides when neither the slide nor
            the document names one

    Returns:
        HTML fragments, one per slide

    Raises:
        SlideRenderError: If a slide fails and isolate_errors is False
    """
    transition = document.transition or default_transition
    fragments: list[str] = []
    for index, slide in enumerate(document.slides):
        try:
            fragments.append(render_slide(slide, index, transition))
        except Exception as e:
            if not isolate_errors:
                raise SlideRenderError(index, e) from e
            logger.opt(exception=e).error("Slide {} failed to render", index + 1)
            fragments.append(render_error_slide(index, e))
    return fragments


def render_error_slide(index: int, error: BaseException) -> str:
    """Placeholder shown in place of a slide that failed to render."""
    active = " active" if index == 0 else ""
    return join_markup(
        f'<div class="slide{active} error-slide no-transition" data-transition="none">',
        f"<h2>Slide {index + 1} could not be rendered</h2>",
        f'<div class="content"><pre><code>{escape_html(str(error))}</code></pre></div>',
        "</div>",
    )


def _heading(slide: Any) -> str:
    return join_markup(
        f"<h2>{slide.title}</h2>" if slide.title else "",
        f'<div class="subtitle">{render_markdown(slide.subtitle)}</div>' if slide.subtitle else "",
    )


def _content_section(*parts: str) -> str:
    return join_markup('<div class="content">', *parts, "</div>")


# =============================================================================
# Hero
# =============================================================================


def _render_hero(slide: HeroSlide) -> str:
    size = slide.title_size or DEFAULT_TITLE_SIZE
    return join_markup(
        '<div class="content" style="justify-content: center; text-align: center;">',
        '<div class="hero">',
        f'<div class="logo">{slide.logo}</div>' if slide.logo else "",
        f'<h1 style="font-size: {size};">{slide.title or ""}</h1>',
        f'<div class="subtitle">{render_markdown(slide.subtitle)}</div>' if slide.subtitle else "",
        "</div>",
        "</div>",
    )


# =============================================================================
# Image
# =============================================================================


def _alt_text(alt: str | None, slide: ImageSlide) -> str:
    return alt or slide.title or DEFAULT_ALT_TEXT


def _render_image(slide: ImageSlide) -> str:
    if slide.preset == "grid":
        return _render_image_gallery(slide)
    if slide.preset == "split":
        return _render_image_split(slide)
    return _render_image_single(slide)


def _render_image_single(slide: ImageSlide) -> str:
    caption = ""
    if slide.caption:
        caption = (
            f'<p class="caption" style="margin-top: 1rem; color: {MUTED_COLOR};">'
            f"{render_markdown(slide.caption)}</p>"
        )
    return join_markup(
        f'<div class="image-slide preset-{slide.preset}">',
        f"<h1>{slide.title}</h1>" if slide.title else "",
        f'<img src="{slide.image}" alt="{_alt_text(slide.alt, slide)}">',
        caption,
        "</div>",
    )


def _render_gallery_image(image: ImageRef, slide: ImageSlide) -> str:
    return join_markup(
        "<figure>",
        f'<img src="{image.src}" alt="{_alt_text(image.alt, slide)}">',
        f"<figcaption>{render_markdown(image.caption)}</figcaption>" if image.caption else "",
        "</figure>",
    )


def _render_image_gallery(slide: ImageSlide) -> str:
    images = slide.images or []
    marker = GALLERY_COLUMNS.get(len(images))
    gallery_class = f"image-gallery {marker}" if marker else "image-gallery"
    return join_markup(
        '<div class="image-slide preset-grid">',
        _heading(slide),
        f'<div class="{gallery_class}">',
        *(_render_gallery_image(image, slide) for image in images),
        "</div>",
        "</div>",
    )


def _render_image_split(slide: ImageSlide) -> str:
    position = "right" if slide.position == "right" else "left"
    image_pane = join_markup(
        '<div class="split-image">',
        f'<img src="{slide.image}" alt="{_alt_text(slide.alt, slide)}">',
        "</div>",
    )
    text_pane = join_markup(
        '<div class="split-text">',
        _heading(slide),
        render_content(slide.content) if slide.content else "",
        "</div>",
    )
    panes = (image_pane, text_pane) if position == "left" else (text_pane, image_pane)
    return join_markup(f'<div class="image-split image-{position}">', *panes, "</div>")


# =============================================================================
# Two columns
# =============================================================================


def _render_two_column(slide: TwoColumnSlide) -> str:
    # A two-column-content node in the content list supplies the columns;
    # the remaining nodes render above them.
    if isinstance(slide.content, list):
        marker = next(
            (node for node in slide.content if isinstance(node, TwoColumnContent)),
            None,
        )
        if marker is not None:
            others = [node for node in slide.content if not isinstance(node, TwoColumnContent)]
            return join_markup(
                _heading(slide),
                _content_section(
                    render_content(others),
                    _columns(marker.left, marker.right),
                ),
            )

    return join_markup(
        _heading(slide),
        _content_section(
            _columns(slide.left, slide.right),
            render_content(slide.content) if slide.content else "",
        ),
    )


def _columns(left: Any, right: Any) -> str:
    return join_markup(
        '<div class="two-column">',
        render_column(left),
        render_column(right),
        "</div>",
    )


# =============================================================================
# Grid
# =============================================================================


def _render_grid_item(item: GridItem) -> str:
    css_class = GRID_ITEM_CLASSES.get(item.type or "", "card")
    return join_markup(
        f'<div class="{css_class}">',
        f'<div class="feature-icon">{item.icon}</div>' if item.icon else "",
        f'<div class="stat">{item.stat}</div>' if item.stat else "",
        f"<h3>{item.title}</h3>" if item.title else "",
        f'<div class="stat-label">{item.label}</div>' if item.label else "",
        render_content(item.content) if item.content else "",
        "</div>",
    )


def _render_grid(slide: GridSlide) -> str:
    return join_markup(
        _heading(slide),
        _content_section(
            f'<div class="grid-{slide.columns}">',
            *(_render_grid_item(item) for item in slide.items),
            "</div>",
        ),
    )


# =============================================================================
# Code
# =============================================================================


def _render_code(slide: CodeSlide) -> str:
    description = ""
    if slide.description:
        description = (
            f'<p style="color: {MUTED_COLOR}; margin-bottom: 1rem;">'
            f"{render_markdown(slide.description)}</p>"
        )
    notes = ""
    if slide.notes:
        notes = (
            f'<div class="card" style="margin-top: 1rem;">'
            f'<p style="color: {MUTED_COLOR};">{render_markdown(slide.notes)}</p></div>'
        )
    return join_markup(
        _heading(slide),
        _content_section(
            description,
            render_code_block(slide.code, slide.language),
            notes,
        ),
    )


# =============================================================================
# Timeline
# =============================================================================


def _render_timeline(slide: TimelineSlide) -> str:
    entries = []
    for item in slide.items:
        description = ""
        if item.description:
            description = (
                f'<p style="color: {MUTED_COLOR}; margin-top: 0.5rem;">'
                f"{render_markdown(item.description)}</p>"
            )
        sub_items = ""
        if item.items:
            sub_items = "<ul>" + "".join(f"<li>{render_markdown(i)}</li>" for i in item.items) + "</ul>"
        entries.append(
            join_markup(
                '<div class="timeline-item">',
                f"<strong>{item.period or ''}</strong> - {item.title or ''}",
                description,
                sub_items,
                "</div>",
            )
        )
    return join_markup(_heading(slide), _content_section(*entries))


# =============================================================================
# Table
# =============================================================================


def _cell_text(value: Any) -> str:
    """Stringify a table cell the way YAML authors expect to read it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _render_table(slide: TableSlide) -> str:
    header_cells = "".join(f"<th>{header}</th>" for header in slide.headers)
    rows = [
        "<tr>" + "".join(f"<td>{render_markdown(_cell_text(cell))}</td>" for cell in row) + "</tr>"
        for row in slide.rows
    ]
    return join_markup(
        _heading(slide),
        _content_section(
            "<table>",
            f"<thead><tr>{header_cells}</tr></thead>",
            join_markup("<tbody>", *rows, "</tbody>"),
            "</table>",
        ),
    )


# =============================================================================
# Flow and default
# =============================================================================


def _render_flow(slide: FlowSlide) -> str:
    description = ""
    if slide.description:
        description = (
            f'<p style="color: {MUTED_COLOR}; margin-bottom: 1.5rem;">'
            f"{render_markdown(slide.description)}</p>"
        )
    flows = "".join(render_flow(flow) for flow in slide.flows) if slide.flows else ""
    return join_markup(
        _heading(slide),
        _content_section(
            description,
            flows,
            render_content(slide.content) if slide.content else "",
        ),
    )


def _render_default(slide: Any) -> str:
    content = getattr(slide, "content", None)
    return join_markup(
        _heading(slide),
        _content_section(render_content(content) if content else ""),
    )


_SLIDE_RENDERERS: dict[type, Callable[[Any], str]] = {
    HeroSlide: _render_hero,
    ImageSlide: _render_image,
    TwoColumnSlide: _render_two_column,
    GridSlide: _render_grid,
    CodeSlide: _render_code,
    TimelineSlide: _render_timeline,
    TableSlide: _render_table,
    FlowSlide: _render_flow,
    DefaultSlide: _render_default,
}
