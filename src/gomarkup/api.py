"""Public rendering entry point."""

from __future__ import annotations

import logging
from functools import lru_cache

from gomarkup.core.parser import parse_diagram
from gomarkup.drawing.environment import surface_supported
from gomarkup.drawing.renderer import DiagramRenderer, RenderResult

_LOGGER = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def shared_renderer() -> DiagramRenderer:
    """Renderer whose stone bitmaps are reused by every :func:`render` call."""
    return DiagramRenderer()


def render(source: str) -> RenderResult | None:
    """Render board markup *source*.

    Returns ``None`` if no drawing surface is available or if *source* is
    not valid board markup.
    """
    if not surface_supported():
        _LOGGER.warning("No QGuiApplication running; cannot render diagrams")
        return None
    parsed = parse_diagram(source)
    if parsed is None:
        return None
    return shared_renderer().render(parsed)
