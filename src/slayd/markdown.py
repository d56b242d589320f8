"""Inline text formatting.

Converts a text field into inline HTML. The supported syntax is a small
markdown subset:

- fenced code blocks (```` ```lang ... ``` ````), escaped and tagged with a
  highlight.js language class
- inline code (`` `code` ``), emitted as-is
- bold (``**text**``)
- newlines, rendered as ``<br>``

Formatting runs in three stages. Fenced blocks are extracted first and
replaced by numbered placeholders, the remaining text is transformed, and
the blocks are restored last so that no inline rule ever touches code.
Anything else (including raw HTML) passes through untouched.
"""

from __future__ import annotations

import re

from slayd.markup import escape_html

DEFAULT_CODE_LANGUAGE = "plaintext"

_FENCED_BLOCK = re.compile(r"```(\w+)?\n([\s\S]*?)```")
_INLINE_CODE = re.compile(r"`([^`]+)`")
_BOLD = re.compile(r"\*\*([^*]+)\*\*")

# Placeholders hold no markdown characters and no newlines, so the
# transform stage leaves them intact.
_PLACEHOLDER = "\x00{index}\x00"
_PLACEHOLDER_PATTERN = re.compile(r"\x00(\d+)\x00")


def render_code_block(code: str | None, language: str | None = None) -> str:
    """Render escaped source code as a ``<pre><code>`` block.

    Args:
        code: Raw source code
        language: highlight.js language name (defaults to plaintext)

    Returns:
        HTML for the code block
    """
    lang = language or DEFAULT_CODE_LANGUAGE
    return f'<pre><code class="language-{lang}">{escape_html(code)}</code></pre>'


def extract_code_blocks(text: str) -> tuple[str, list[str]]:
    """Replace fenced code blocks with numbered placeholders.

    Returns:
        Tuple of (text with placeholders, rendered blocks by index)
    """
    blocks: list[str] = []

    def _extract(match: re.Match[str]) -> str:
        blocks.append(render_code_block(match.group(2).strip(), match.group(1)))
        return _PLACEHOLDER.format(index=len(blocks) - 1)

    return _FENCED_BLOCK.sub(_extract, text), blocks


def transform_inline(text: str) -> str:
    """Apply inline code, bold and line break rules."""
    text = _INLINE_CODE.sub(r"<code>\1</code>", text)
    text = _BOLD.sub(r"<strong>\1</strong>", text)
    return text.replace("\n", "<br>")


def restore_code_blocks(text: str, blocks: list[str]) -> str:
    """Put rendered code blocks back in place of their placeholders."""
    if not blocks:
        return text

    def _restore(match: re.Match[str]) -> str:
        index = int(match.group(1))
        return blocks[index] if index < len(blocks) else match.group(0)

    return _PLACEHOLDER_PATTERN.sub(_restore, text)


def render_markdown(text: str | None) -> str:
    """Format a text field as inline HTML.

    Args:
        text: Text using the markdown subset, may be empty or None

    Returns:
        HTML string (empty for empty input)
    """
    if not text:
        return ""

    # NUL is reserved for placeholders
    text = text.replace("\x00", "")
    text, blocks = extract_code_blocks(text)
    text = transform_inline(text)
    return restore_code_blocks(text, blocks)
