"""Small HTML building helpers shared by the renderers."""

from __future__ import annotations

# Named references for the five HTML metacharacters. Single pass, so "&"
# produced by one replacement is never escaped again.
_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#039;",
    }
)


def escape_html(text: str | None) -> str:
    """Escape ``& < > " '`` as named character references.

    Args:
        text: Raw text, may be empty or None

    Returns:
        Escaped text, or an empty string for empty input
    """
    if not text:
        return ""
    return text.translate(_HTML_ESCAPES)


def style_attr(style: str | None) -> str:
    """Build a ``style`` attribute (with leading space) from a raw CSS string.

    The value is caller-supplied CSS and is emitted verbatim.
    """
    return f' style="{style}"' if style else ""


def join_markup(*parts: str) -> str:
    """Join markup fragments with newlines, dropping empty ones."""
    return "\n".join(part for part in parts if part)
