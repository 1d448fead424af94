"""Board-markup parsing.

:func:`read_diagram` is strict and raises :class:`MarkupError`;
:func:`parse_diagram` is the forgiving entry point that returns ``None``
for anything that is not valid markup.
"""

from __future__ import annotations

import logging

from gomarkup.core.coordinates import infer_coordinates
from gomarkup.core.enums import FailureReason
from gomarkup.core.grammar import is_markup_line, split_lines
from gomarkup.core.header import classify_header
from gomarkup.core.models import ParsedDiagram
from gomarkup.core.scanner import RowScanner

_LOGGER = logging.getLogger(__name__)


class MarkupError(ValueError):
    """Raised when a text is not well-formed board markup."""

    def __init__(self, reason: FailureReason, detail: str = "") -> None:
        self.reason = reason
        message = f"Invalid board markup ({reason})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


def read_diagram(text: str) -> ParsedDiagram:
    """Parse *text* into a :class:`ParsedDiagram`."""
    lines = split_lines(text)
    for line in lines:
        if not is_markup_line(line):
            raise MarkupError(FailureReason.NOT_MARKUP, repr(line))
    if not lines:
        raise MarkupError(FailureReason.EMPTY_INPUT)

    header = classify_header(lines[0])
    if header.consumed:
        lines = lines[1:]

    board = RowScanner().feed_all(lines).finish()
    if not board:
        raise MarkupError(FailureReason.EMPTY_BOARD)

    width = len(board[0])
    for index, row in enumerate(board):
        if len(row) != width:
            raise MarkupError(
                FailureReason.IRREGULAR_GRID,
                f"row {index} has {len(row)} fields, expected {width}",
            )

    diagram = ParsedDiagram(
        board=board,
        white_first=header.white_first,
        move_delta=header.move_delta,
        board_size=header.board_size,
        caption=header.caption,
    )

    if header.coordinates:
        frame = infer_coordinates(board, header.board_size)
        diagram.board_size = frame.board_size
        if frame.resolved:
            diagram.coordinates = True
            diagram.left_coordinate = frame.left
            diagram.top_coordinate = frame.top
        else:
            _LOGGER.debug("Coordinates requested but board edges are ambiguous")

    return diagram


def parse_diagram(text: str) -> ParsedDiagram | None:
    """Parse *text*, returning ``None`` if it is not valid markup."""
    try:
        return read_diagram(text)
    except MarkupError as exc:
        _LOGGER.debug("%s", exc)
        return None
