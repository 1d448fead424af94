"""Piece character table.

Each markup character maps to at most one stone, one mark and one special
drawing. Characters not listed draw nothing beyond the board lines.
"""

from __future__ import annotations

import string
from dataclasses import dataclass

from gomarkup.core.enums import MarkShape, SpecialPiece, StoneColor


@dataclass(frozen=True, slots=True)
class PieceStyle:
    stone: StoneColor | None = None
    mark: MarkShape | None = None
    special: SpecialPiece | None = None


PLAIN = PieceStyle()
EMPTY_POINT = "_"  # suppresses the board lines as well

_W, _B = StoneColor.WHITE, StoneColor.BLACK

_STYLE_TABLE: tuple[tuple[str, PieceStyle], ...] = (
    ("O", PieceStyle(_W)),
    ("W", PieceStyle(_W, MarkShape.CIRCLE)),
    ("@", PieceStyle(_W, MarkShape.SQUARE)),
    ("Q", PieceStyle(_W, MarkShape.TRIANGLE)),
    ("P", PieceStyle(_W, MarkShape.CROSS)),
    ("X", PieceStyle(_B)),
    ("B", PieceStyle(_B, MarkShape.CIRCLE)),
    ("#", PieceStyle(_B, MarkShape.SQUARE)),
    ("Y", PieceStyle(_B, MarkShape.TRIANGLE)),
    ("Z", PieceStyle(_B, MarkShape.CROSS)),
    ("C", PieceStyle(mark=MarkShape.CIRCLE)),
    ("S", PieceStyle(mark=MarkShape.SQUARE)),
    ("T", PieceStyle(mark=MarkShape.TRIANGLE)),
    ("M", PieceStyle(mark=MarkShape.CROSS)),
    ("*", PieceStyle(StoneColor.BOTH)),
    (string.digits, PieceStyle(special=SpecialPiece.NUMBER)),
    ("?", PieceStyle(special=SpecialPiece.TERRITORY)),
    (string.ascii_lowercase, PieceStyle(special=SpecialPiece.LETTER)),
    (",", PieceStyle(special=SpecialPiece.STAR_POINT)),
)

_STYLES: dict[str, PieceStyle] = {
    ch: style for chars, style in _STYLE_TABLE for ch in chars
}


def piece_style(piece: str) -> PieceStyle:
    """Look up *piece* (case-sensitive); unknown characters are plain."""
    return _STYLES.get(piece, PLAIN)


def move_number(piece: str) -> int:
    """Numeric value of a digit piece, with ``0`` standing for 10."""
    return int(piece) or 10


def numbered_stone_color(value: int, white_first: bool) -> StoneColor:
    """Odd moves belong to the first player."""
    is_black = (value % 2 == 1) != white_first
    return StoneColor.BLACK if is_black else StoneColor.WHITE
