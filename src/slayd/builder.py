"""Build presentations from YAML files on disk."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from slayd.config import Settings, get_settings
from slayd.document import build_html
from slayd.errors import SlaydError
from slayd.loader import load_document

_YAML_SUFFIX = re.compile(r"\.ya?ml$", re.IGNORECASE)

INIT_TEMPLATE = """\
title: "My Presentation"
theme: light  # or leave empty for dark theme
transition: fade  # fade, slide, zoom or none

slides:
  # Title slide
  - type: hero
    title: "Welcome"
    subtitle: "My first presentation with Slayd"
    logo: "🚀"

  # Content slide
  - type: default
    title: "About This Presentation"
    content:
      - "This is a starter template"
      - "Edit this YAML file to create your slides"
      - type: list
        items:
          - "Multiple slide types available"
          - "Simple **markdown** formatting"
          - "Easy to customize"

  # Two-column slide
  - type: two-column
    title: "Features"
    left:
      title: "Easy"
      content:
        - "Write in YAML"
        - "No HTML needed"
    right:
      title: "Powerful"
      content:
        - "Multiple layouts"
        - "Custom themes"

  # Closing slide
  - type: hero
    title: "Thank You!"
    subtitle: "Start editing to make it yours"
    logo: "✨"
"""


@dataclass(frozen=True)
class BuildResult:
    """Outcome of building one presentation."""

    source: Path
    output: Path
    slide_count: int


@dataclass
class BuildSummary:
    """Outcome of building every presentation in a directory."""

    built: list[BuildResult] = field(default_factory=list)
    failed: list[tuple[Path, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def default_output_path(input_path: Path) -> Path:
    """Output path for an input file: ``talk.yaml`` -> ``talk.html``."""
    if _YAML_SUFFIX.search(input_path.name):
        return input_path.with_name(_YAML_SUFFIX.sub(".html", input_path.name))
    return input_path.with_suffix(".html")


def build_presentation(
    input_path: Path | str,
    output_path: Path | str | None = None,
    settings: Settings | None = None,
) -> BuildResult:
    """Compile one YAML presentation into an HTML file.

    Args:
        input_path: YAML presentation file
        output_path: HTML destination (defaults to the input name with .html)
        settings: Build settings (defaults to environment settings)

    Returns:
        BuildResult describing the written file

    Raises:
        DocumentError: If the presentation cannot be loaded
        SlideRenderError: If a slide fails to render
        OSError: If a file cannot be read or written
    """
    source = Path(input_path)
    output = Path(output_path) if output_path else default_output_path(source)

    logger.info("Building {} -> {}", source, output)
    document = load_document(source)
    html = build_html(document, settings or get_settings())
    output.write_text(html, encoding="utf-8")
    logger.info("Wrote {} slides to {}", len(document.slides), output)

    return BuildResult(source=source, output=output, slide_count=len(document.slides))


def find_presentations(directory: Path | str) -> list[Path]:
    """List YAML files directly inside a directory, sorted by name."""
    return sorted(
        path
        for path in Path(directory).iterdir()
        if path.is_file() and _YAML_SUFFIX.search(path.name)
    )


def build_all(directory: Path | str = ".", settings: Settings | None = None) -> BuildSummary:
    """Build every YAML presentation in a directory.

    A failing file is recorded and the remaining files are still built.
    """
    summary = BuildSummary()
    for path in find_presentations(directory):
        try:
            summary.built.append(build_presentation(path, settings=settings))
        except (SlaydError, OSError) as e:
            logger.error("Failed to build {}: {}", path, e)
            summary.failed.append((path, str(e)))
    return summary


def init_presentation(path: Path | str = "presentation.yaml") -> Path:
    """Write the starter presentation template.

    Raises:
        FileExistsError: If the file already exists
    """
    path = Path(path)
    if path.exists():
        raise FileExistsError(f"File already exists: {path}")
    path.write_text(INIT_TEMPLATE, encoding="utf-8")
    logger.debug("Created template {}", path)
    return path
