"""Content rendering.

Turns slide body content (a paragraph string or a list of content nodes)
into HTML. Cards and callouts nest content, so rendering recurses through
``render_content``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from slayd.markdown import render_code_block, render_markdown
from slayd.markup import join_markup, style_attr
from slayd.models import (
    CalloutNode,
    CardNode,
    CodeNode,
    Flow,
    FlowArrow,
    FlowBox,
    FlowNode,
    ListNode,
    QuoteNode,
)
from slayd.styles import resolve_color

if TYPE_CHECKING:
    from collections.abc import Callable

    from slayd.models import Column

DEFAULT_ARROW = "→"
MUTED_COLOR = "#6b7280"


def render_content(content: Any) -> str:
    """Render a content field.

    Args:
        content: A paragraph string or a list of content nodes

    Returns:
        HTML string. Any other shape (including None) renders as empty.
    """
    if isinstance(content, str):
        return f"<p>{render_markdown(content)}</p>"
    if isinstance(content, list):
        return "\n".join(render_node(node) for node in content)
    return ""


def render_node(node: Any) -> str:
    """Render a single content node.

    Strings become paragraphs. Nodes with no renderer (unknown tags and the
    two-column layout marker) render as empty strings.
    """
    if isinstance(node, str):
        return f"<p>{render_markdown(node)}</p>"
    renderer = _NODE_RENDERERS.get(type(node))
    if renderer is None:
        return ""
    return renderer(node)


def render_card(card: CardNode) -> str:
    return join_markup(
        f'<div class="card"{style_attr(card.style)}>',
        f"<h3>{card.title}</h3>" if card.title else "",
        render_content(card.content) if card.content else "",
        "</div>",
    )


def render_column(column: Column | None) -> str:
    """Render one side of a two-column layout.

    Title, then cards, then generic content; each part is optional.
    """
    if column is None:
        return "<div></div>"

    cards = "\n".join(render_card(card) for card in column.cards) if column.cards else ""
    return join_markup(
        "<div>",
        f"<h3>{column.title}</h3>" if column.title else "",
        cards,
        render_content(column.content) if column.content else "",
        "</div>",
    )


def render_flow(flow: Flow) -> str:
    """Render a flow diagram.

    Items are emitted in order; the order is the diagram's reading order.
    """
    if not flow.items:
        return ""

    items = [
        _render_flow_arrow(item) if isinstance(item, FlowArrow) else _render_flow_box(item)
        for item in flow.items
    ]
    return join_markup(
        f'<div class="flow"{style_attr(flow.style)}>',
        *items,
        "</div>",
    )


def _render_flow_arrow(arrow: FlowArrow) -> str:
    return f'<div class="flow-arrow">{arrow.text or DEFAULT_ARROW}</div>'


def _render_flow_box(box: FlowBox) -> str:
    return join_markup(
        '<div class="flow-item">',
        f"<strong>{box.title}</strong>" if box.title else "",
        f'<br><small style="color: {MUTED_COLOR};">{box.subtitle}</small>' if box.subtitle else "",
        f"<br>{render_markdown(box.content)}" if box.content else "",
        "</div>",
    )


def _render_list(node: ListNode) -> str:
    style = f' style="color: {resolve_color(node.style)};"' if node.style else ""
    items = "".join(f"<li>{render_markdown(item)}</li>" for item in node.items)
    return f"<ul{style}>{items}</ul>"


def _render_code(node: CodeNode) -> str:
    return render_code_block(node.code, node.language)


def _render_quote(node: QuoteNode) -> str:
    return f'<div class="quote">{render_markdown(node.text)}</div>'


def _render_callout(node: CalloutNode) -> str:
    return join_markup(
        f'<div class="card" style="text-align: center; {node.style or ""}">',
        render_content(node.content) if node.content else "",
        "</div>",
    )


_NODE_RENDERERS: dict[type, Callable[[Any], str]] = {
    ListNode: _render_list,
    CardNode: render_card,
    CodeNode: _render_code,
    QuoteNode: _render_quote,
    CalloutNode: _render_callout,
    FlowNode: render_flow,
}
