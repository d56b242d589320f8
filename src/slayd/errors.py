"""Exceptions raised while loading and rendering presentations."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class SlaydError(Exception):
    """Base exception for slayd errors."""


class DocumentError(SlaydError):
    """Raised when a presentation document cannot be loaded.

    Covers YAML syntax errors, a top level that is not a mapping and
    documents that do not match the slide model.
    """

    def __init__(self, message: str, source: Path | None = None) -> None:
        super().__init__(f"{source}: {message}" if source else message)
        self.source = source


class SlideRenderError(SlaydError):
    """Raised when a single slide fails to render."""

    def __init__(self, index: int, cause: BaseException) -> None:
        super().__init__(f"Slide {index + 1} failed to render: {cause}")
        self.index = index
        self.cause = cause
