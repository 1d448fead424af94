"""Qt drawing layer: turns parsed diagrams into images."""

from gomarkup.drawing.cells import CellPlan, plan_cell
from gomarkup.drawing.environment import ensure_application, surface_supported
from gomarkup.drawing.renderer import DiagramRenderer, RenderResult
from gomarkup.drawing.stones import StoneImages, create_stone_image
from gomarkup.drawing.theme import DiagramTheme

__all__ = [
    "CellPlan",
    "DiagramRenderer",
    "DiagramTheme",
    "RenderResult",
    "StoneImages",
    "create_stone_image",
    "ensure_application",
    "plan_cell",
    "surface_supported",
]
