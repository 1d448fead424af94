"""Core enumerations for the board-markup domain."""

from __future__ import annotations

from enum import Enum, StrEnum, auto


class HeaderKind(Enum):
    """How the first markup line was classified."""

    VOID = auto()  # not a header; parsed as an ordinary row
    CAPTION = auto()  # caption only, no options
    OPTIONS = auto()  # options present, caption optional


class StoneColor(StrEnum):
    """Stone bitmap selector."""

    WHITE = "white"
    BLACK = "black"
    BOTH = "both"


class MarkShape(Enum):
    """Red annotation drawn over a point or stone."""

    CIRCLE = auto()
    SQUARE = auto()
    TRIANGLE = auto()
    CROSS = auto()


class SpecialPiece(Enum):
    """Pieces whose drawing depends on more than a lookup."""

    NUMBER = auto()
    TERRITORY = auto()
    LETTER = auto()
    STAR_POINT = auto()


class FailureReason(StrEnum):
    """Why a markup text was rejected."""

    EMPTY_INPUT = "empty input"
    NOT_MARKUP = "line without $$ prefix"
    EMPTY_BOARD = "no rows"
    IRREGULAR_GRID = "rows of different width"
