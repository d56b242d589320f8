"""slayd - Compile YAML slide decks into a single HTML presentation."""

from slayd.builder import build_all, build_presentation, init_presentation
from slayd.content import render_content, render_flow, render_node
from slayd.document import build_html
from slayd.errors import DocumentError, SlaydError, SlideRenderError
from slayd.loader import load_document, parse_document
from slayd.markdown import render_markdown
from slayd.markup import escape_html
from slayd.models import Document
from slayd.slides import render_slide, render_slides
from slayd.styles import resolve_color

__all__ = [
    "Document",
    "DocumentError",
    "SlaydError",
    "SlideRenderError",
    "build_all",
    "build_html",
    "build_presentation",
    "escape_html",
    "init_presentation",
    "load_document",
    "parse_document",
    "render_content",
    "render_flow",
    "render_markdown",
    "render_node",
    "render_slide",
    "render_slides",
    "resolve_color",
]

__version__ = "0.1.0"
