"""Resolution of a board field into the things drawn for it."""

from __future__ import annotations

from dataclasses import dataclass

from gomarkup.core.enums import MarkShape, SpecialPiece, StoneColor
from gomarkup.core.models import Field, ParsedDiagram
from gomarkup.core.pieces import (
    EMPTY_POINT,
    move_number,
    numbered_stone_color,
    piece_style,
)


@dataclass(frozen=True, slots=True)
class CellPlan:
    """Everything drawn at one point, in drawing order."""

    lines: bool
    stone: StoneColor | None = None
    mark: MarkShape | None = None
    special: SpecialPiece | None = None
    label: str | None = None


def plan_cell(cell: Field, diagram: ParsedDiagram) -> CellPlan:
    """Work out what to draw for *cell* of *diagram*."""
    style = piece_style(cell.piece)
    lines = cell.piece != EMPTY_POINT

    if style.special is SpecialPiece.NUMBER:
        value = move_number(cell.piece)
        return CellPlan(
            lines,
            stone=numbered_stone_color(value, diagram.white_first),
            special=SpecialPiece.NUMBER,
            label=str(value + diagram.move_delta),
        )
    if style.special is SpecialPiece.LETTER:
        return CellPlan(lines, special=SpecialPiece.LETTER, label=cell.piece)
    return CellPlan(lines, stone=style.stone, mark=style.mark, special=style.special)
