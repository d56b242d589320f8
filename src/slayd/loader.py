"""Load presentation documents from YAML."""

from __future__ import annotations

import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from slayd.errors import DocumentError
from slayd.models import Document

_BOOL_TAG = "tag:yaml.org,2002:bool"


class PresentationLoader(yaml.SafeLoader):
    """SafeLoader that reads only true and false as booleans.

    Plain words such as Yes, No, On and Off stay strings.
    """


PresentationLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
PresentationLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def _describe_validation_error(error: ValidationError) -> str:
    """Summarize pydantic errors as ``location: message`` pairs."""
    problems = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        problems.append(f"{location}: {detail['msg']}" if location else detail["msg"])
    return "; ".join(problems)


def parse_document(text: str, source: Path | None = None) -> Document:
    """Parse YAML text into a Document.

    Args:
        text: YAML source
        source: Path the text came from, used in error messages

    Returns:
        Validated Document

    Raises:
        DocumentError: If the YAML is invalid or does not describe a presentation
    """
    try:
        data = yaml.load(text, Loader=PresentationLoader)
    except yaml.YAMLError as e:
        raise DocumentError(f"Invalid YAML: {e}", source) from e

    if not isinstance(data, dict):
        raise DocumentError("Presentation must be a YAML mapping", source)

    try:
        document = Document.model_validate(data)
    except ValidationError as e:
        raise DocumentError(_describe_validation_error(e), source) from e

    logger.debug("Loaded {} slides from {}", len(document.slides), source or "<string>")
    return document


def load_document(path: Path | str) -> Document:
    """Read and parse a YAML presentation file."""
    path = Path(path)
    return parse_document(path.read_text(encoding="utf-8"), path)
