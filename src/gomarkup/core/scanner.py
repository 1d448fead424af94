"""Row scanner: turns board lines into rows of fields.

The scanner is a small state machine. Before the first line there is no
open row; afterwards the last row of the board is the open one. A border
line closes the open row from below and opens (or reuses) an empty row
marked as having a top edge. A content line fills the open row, reusing it
if it is still empty.
"""

from __future__ import annotations

from collections.abc import Iterable

from gomarkup.core.grammar import is_border_line, is_boundary_char, is_skipped_char
from gomarkup.core.models import Field, Row


class RowScanner:
    """Accumulates rows from markup lines in order."""

    def __init__(self) -> None:
        self._rows: list[Row] = []

    @property
    def open_row(self) -> Row | None:
        """The row new fields go into, or ``None`` before the first line."""
        return self._rows[-1] if self._rows else None

    def feed(self, line: str) -> None:
        if is_border_line(line):
            self._border_line()
        else:
            self._content_line(line)

    def feed_all(self, lines: Iterable[str]) -> RowScanner:
        for line in lines:
            self.feed(line)
        return self

    def finish(self) -> list[Row]:
        """Return the scanned rows, dropping a trailing row with no fields."""
        rows = list(self._rows)
        if rows and not rows[-1].fields:
            rows.pop()
        return rows

    # ── Transitions ──────────────────────────────────────────────────────

    def _ensure_row(self) -> Row:
        row = self.open_row
        if row is None or row.fields:
            row = Row()
            self._rows.append(row)
        return row

    def _border_line(self) -> None:
        row = self.open_row
        if row is not None and row.fields:
            row.bottom = True
        self._ensure_row().top = True

    def _content_line(self, line: str) -> None:
        row = self._ensure_row()
        last: Field | None = None
        next_is_left = False
        for ch in line:
            if is_skipped_char(ch):
                continue
            if is_boundary_char(ch):
                if last is not None:
                    last.right = True
                next_is_left = True
                continue
            last = Field(ch, left=next_is_left)
            next_is_left = False
            row.append(last)
