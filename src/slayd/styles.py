"""Style token and transition resolution."""

from __future__ import annotations

from types import MappingProxyType

# Named color tokens accepted by list styles
COLOR_MAP = MappingProxyType(
    {
        "red": "#f87171",
        "green": "#4ade80",
        "blue": "#60a5fa",
        "yellow": "#fbbf24",
        "gray": "#6b7280",
    }
)

DEFAULT_TRANSITION = "fade"
NO_TRANSITION = "none"


def resolve_color(token: str) -> str:
    """Resolve a color token to a hex value.

    Unknown tokens are returned unchanged so raw CSS colors still work.
    """
    return COLOR_MAP.get(token, token)


def resolve_transition(
    slide_transition: str | None,
    default_transition: str | None = None,
) -> str:
    """Pick the effective transition for a slide.

    Slide override first, then the document default, then ``fade``.
    """
    return slide_transition or default_transition or DEFAULT_TRANSITION


def transition_class(transition: str) -> str:
    """Map a transition name to its CSS class."""
    if transition == NO_TRANSITION:
        return "no-transition"
    return f"transition-{transition}"
