"""Shared test fixtures for slayd."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from pydantic import TypeAdapter

from slayd.config import Settings
from slayd.models import ContentNode, Slide

_SLIDE_ADAPTER: TypeAdapter[Any] = TypeAdapter(Slide)
_NODES_ADAPTER: TypeAdapter[Any] = TypeAdapter(list[ContentNode])


@pytest.fixture
def make_slide() -> Callable[[dict[str, Any]], Any]:
    """Build a slide model from a YAML-shaped mapping."""
    return _SLIDE_ADAPTER.validate_python


@pytest.fixture
def make_nodes() -> Callable[[list[Any]], list[Any]]:
    """Build a list of content nodes from YAML-shaped data."""
    return _NODES_ADAPTER.validate_python


@pytest.fixture
def settings() -> Settings:
    """Settings that ignore the environment and any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def sample_yaml() -> str:
    return """\
title: "Sample Deck"
lang: en
theme: light
transition: slide

slides:
  - type: hero
    title: "Welcome"
    subtitle: "A **sample** deck"
    logo: "🚀"
  - type: table
    title: "Numbers"
    headers: ["Name", "Value"]
    rows:
      - ["alpha", 1]
      - ["beta", 2]
  - title: "Closing"
    content: "Thanks"
"""
