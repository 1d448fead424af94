"""Board coordinate inference and coordinate labels."""

from __future__ import annotations

from dataclasses import dataclass

from gomarkup.core.models import Row

DEFAULT_BOARD_SIZE = 19


@dataclass(frozen=True, slots=True)
class Edges:
    """Which physical board edges the diagram draws."""

    left: bool
    right: bool
    top: bool
    bottom: bool

    @classmethod
    def of(cls, board: list[Row]) -> Edges:
        first = board[0]
        return cls(
            left=first[0].left,
            right=first[len(first) - 1].right,
            top=first.top,
            bottom=board[-1].bottom,
        )


@dataclass(frozen=True, slots=True)
class CoordinateFrame:
    """Outcome of inference; offsets are ``None`` when ambiguous."""

    board_size: int
    left: int | None
    top: int | None

    @property
    def resolved(self) -> bool:
        return self.left is not None and self.top is not None


def effective_board_size(
    edges: Edges, width: int, height: int, given: int | None
) -> int:
    """Board size used for labels; an explicit non-zero size always wins."""
    if given:
        return given
    if edges.left and edges.right:
        return width
    if edges.top and edges.bottom:
        return height
    return DEFAULT_BOARD_SIZE


def infer_coordinates(
    board: list[Row], given_size: int | None = None
) -> CoordinateFrame:
    """Work out the board coordinates of the diagram's left column and top row."""
    width, height = len(board[0]), len(board)
    edges = Edges.of(board)
    size = effective_board_size(edges, width, height, given_size)

    left: int | None = None
    if edges.left:
        left = 0
    elif edges.right:
        left = size - width

    top: int | None = None
    if edges.top:
        top = size - 1
    elif edges.bottom:
        top = height - 1

    return CoordinateFrame(size, left, top)


def column_letter(index: int) -> str:
    """Go column letter for 1-based *index*; ``I`` is skipped.

    Out-of-range indices wrap to a 16-bit code unit; surrogates give ``""``.
    """
    if index >= 9:
        index += 1
    code = (ord("A") - 1 + index) & 0xFFFF
    if 0xD800 <= code <= 0xDFFF:
        return ""
    return chr(code)


def row_label(top_coordinate: int, row: int) -> str:
    return str(top_coordinate - row + 1)
