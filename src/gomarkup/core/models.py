"""Grid model produced by the markup parser."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(slots=True)
class Field:
    """One board cell: the raw piece character plus vertical edge flags."""

    piece: str
    left: bool = False
    right: bool = False


@dataclass(slots=True)
class Row:
    """A board row with horizontal edge flags."""

    fields: list[Field] = field(default_factory=list)
    top: bool = False
    bottom: bool = False

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields)

    def __getitem__(self, index: int) -> Field:
        return self.fields[index]

    def append(self, cell: Field) -> None:
        self.fields.append(cell)

    @property
    def pieces(self) -> str:
        return "".join(cell.piece for cell in self.fields)


@dataclass(slots=True)
class ParsedDiagram:
    """A rectangular board plus the options read from the header line."""

    board: list[Row]
    white_first: bool = False
    move_delta: int = 0
    board_size: int | None = None
    caption: str | None = None
    coordinates: bool = False
    left_coordinate: int | None = None
    top_coordinate: int | None = None

    @property
    def width(self) -> int:
        return len(self.board[0]) if self.board else 0

    @property
    def height(self) -> int:
        return len(self.board)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.board)
