"""DiagramRenderer — draws a parsed diagram onto a QImage."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import (
    QBrush,
    QColor,
    QFont,
    QFontMetricsF,
    QImage,
    QPainter,
    QPainterPath,
    QPen,
)

from gomarkup.core.coordinates import column_letter, row_label
from gomarkup.core.enums import MarkShape, SpecialPiece, StoneColor
from gomarkup.core.models import Field, ParsedDiagram, Row
from gomarkup.drawing.cells import CellPlan, plan_cell
from gomarkup.drawing.geometry import ARM, PITCH, cell_center, surface_size
from gomarkup.drawing.stones import STONE_CENTER, StoneImages
from gomarkup.drawing.theme import DiagramTheme

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class RenderResult:
    """A rendered diagram."""

    image: QImage
    width: int
    height: int
    caption: str | None = None

    def save(self, path: str | Path, fmt: str = "PNG") -> None:
        """Write the image to *path*."""
        if not self.image.save(str(path), fmt):
            raise OSError(f"Could not write diagram image to {path}")


class DiagramRenderer:
    """Renders :class:`ParsedDiagram` objects with a fixed 22 px grid.

    The stone bitmaps live in a :class:`StoneImages` cache owned by the
    renderer (or shared with others when passed in).
    """

    _MARK_RADIUS = 5.0
    _MARK_PEN = 2.0
    _STAR_RADIUS = 2.5
    _NUMBER_BASELINE = 4.0
    _LETTER_BASELINE = 5.0
    _ROW_LABEL_RIGHT = 16.0
    _ROW_LABEL_BASELINE = 31.5
    _COLUMN_LABEL_BASELINE = 12.0

    def __init__(
        self,
        theme: DiagramTheme | None = None,
        stones: StoneImages | None = None,
    ) -> None:
        self._theme = theme or DiagramTheme.default()
        self._stones = stones or StoneImages()

    @property
    def theme(self) -> DiagramTheme:
        return self._theme

    @property
    def stones(self) -> StoneImages:
        return self._stones

    # ── Public API ───────────────────────────────────────────────────────

    def render(self, diagram: ParsedDiagram) -> RenderResult:
        """Draw *diagram* on a new image."""
        width, height = surface_size(
            diagram.width, diagram.height, diagram.coordinates
        )
        image = QImage(width, height, QImage.Format.Format_ARGB32_Premultiplied)
        image.fill(self._theme.background)

        painter = QPainter(image)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
        try:
            for r, row in enumerate(diagram.board):
                for c, cell in enumerate(row):
                    x, y = cell_center(r, c, diagram.coordinates)
                    self._draw_cell(painter, x, y, row, cell, plan_cell(cell, diagram))
            if diagram.coordinates:
                self._draw_coordinates(painter, diagram)
        finally:
            painter.end()

        _LOGGER.debug(
            "Rendered %dx%d diagram at %dx%d px",
            diagram.width,
            diagram.height,
            width,
            height,
        )
        caption = diagram.caption if diagram.caption else None
        return RenderResult(image, width, height, caption)

    # ── Cells ────────────────────────────────────────────────────────────

    def _draw_cell(
        self,
        painter: QPainter,
        x: float,
        y: float,
        row: Row,
        cell: Field,
        plan: CellPlan,
    ) -> None:
        if plan.lines:
            self._draw_lines(painter, x, y, row.top, cell.right, row.bottom, cell.left)

        painter.save()
        if plan.stone is not None:
            self._draw_stone(painter, x, y, plan.stone)
        if plan.mark is not None:
            self._draw_mark(painter, x, y, plan.mark)

        if plan.special is SpecialPiece.NUMBER:
            assert plan.stone is not None and plan.label is not None
            self._draw_number(painter, x, y, plan.label, plan.stone)
        elif plan.special is SpecialPiece.TERRITORY:
            # Integer bounds; fractional ones leave seams between cells.
            painter.fillRect(
                QRectF(x - ARM - 0.5, y - ARM - 0.5, PITCH, PITCH),
                self._theme.territory,
            )
        elif plan.special is SpecialPiece.LETTER:
            assert plan.label is not None
            self._draw_letter(painter, x, y, plan.label)
        elif plan.special is SpecialPiece.STAR_POINT:
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QBrush(self._theme.ink))
            painter.drawEllipse(QPointF(x, y), self._STAR_RADIUS, self._STAR_RADIUS)
        painter.restore()

    def _draw_lines(
        self,
        painter: QPainter,
        x: float,
        y: float,
        top: bool,
        right: bool,
        bottom: bool,
        left: bool,
    ) -> None:
        """Board-line cross; an arm stops at the centre where an edge is drawn."""
        path = QPainterPath()
        path.moveTo(x - (0 if left else ARM), y)
        path.lineTo(x + (0 if right else ARM), y)
        path.moveTo(x, y - (0 if top else ARM))
        path.lineTo(x, y + (0 if bottom else ARM))
        painter.strokePath(path, self._pen(self._theme.line, 1.0))

    def _draw_stone(
        self, painter: QPainter, x: float, y: float, color: StoneColor
    ) -> None:
        painter.drawImage(
            QPointF(x - STONE_CENTER, y - STONE_CENTER), self._stones.image(color)
        )

    def _draw_mark(
        self, painter: QPainter, x: float, y: float, shape: MarkShape
    ) -> None:
        r = self._MARK_RADIUS
        color = self._theme.mark
        if shape is MarkShape.CIRCLE:
            path = QPainterPath()
            path.addEllipse(QPointF(x, y), r, r)
            painter.strokePath(path, self._pen(color, self._MARK_PEN))
        elif shape is MarkShape.SQUARE:
            painter.fillRect(QRectF(x - r, y - r, 2 * r, 2 * r), color)
        elif shape is MarkShape.TRIANGLE:
            path = QPainterPath()
            path.moveTo(x, y - 6)
            path.lineTo(x + 6, y + 4)
            path.lineTo(x - 6, y + 4)
            path.closeSubpath()
            painter.fillPath(path, QBrush(color))
        elif shape is MarkShape.CROSS:
            path = QPainterPath()
            path.moveTo(x - r, y - r)
            path.lineTo(x + r, y + r)
            path.moveTo(x + r, y - r)
            path.lineTo(x - r, y + r)
            painter.strokePath(path, self._pen(color, self._MARK_PEN))

    def _draw_number(
        self, painter: QPainter, x: float, y: float, label: str, stone: StoneColor
    ) -> None:
        font = self._theme.font(self._theme.number_px)
        painter.setFont(font)
        # White on black stones, black on white ones.
        painter.setPen(
            QColor(Qt.GlobalColor.white)
            if stone is StoneColor.BLACK
            else self._theme.ink
        )
        painter.drawText(
            self._centered(font, label, x, y + self._NUMBER_BASELINE), label
        )

    def _draw_letter(self, painter: QPainter, x: float, y: float, letter: str) -> None:
        """Bold letter with a background-coloured halo."""
        font = self._theme.font(self._theme.letter_px, bold=True)
        path = QPainterPath()
        origin = self._centered(font, letter, x, y + self._LETTER_BASELINE)
        path.addText(origin, font, letter)
        painter.strokePath(
            path, self._pen(self._theme.background, self._theme.letter_outline)
        )
        painter.fillPath(path, QBrush(self._theme.ink))

    # ── Coordinates ──────────────────────────────────────────────────────

    def _draw_coordinates(self, painter: QPainter, diagram: ParsedDiagram) -> None:
        assert diagram.left_coordinate is not None
        assert diagram.top_coordinate is not None
        font = self._theme.font(self._theme.coordinate_px)
        metrics = QFontMetricsF(font)
        painter.save()
        try:
            painter.setFont(font)
            painter.setPen(self._theme.coordinate)
            for r in range(diagram.height):
                text = row_label(diagram.top_coordinate, r)
                painter.drawText(
                    QPointF(
                        self._ROW_LABEL_RIGHT - metrics.horizontalAdvance(text),
                        r * PITCH + self._ROW_LABEL_BASELINE,
                    ),
                    text,
                )
            for c in range(diagram.width):
                letter = column_letter(diagram.left_coordinate + c + 1)
                x, _ = cell_center(0, c, True)
                painter.drawText(
                    self._centered(font, letter, x, self._COLUMN_LABEL_BASELINE),
                    letter,
                )
        finally:
            painter.restore()

    # ── Helpers ──────────────────────────────────────────────────────────

    @staticmethod
    def _pen(color: QColor, width: float) -> QPen:
        pen = QPen(color, width)
        pen.setCapStyle(Qt.PenCapStyle.FlatCap)
        pen.setJoinStyle(Qt.PenJoinStyle.MiterJoin)
        return pen

    @staticmethod
    def _centered(font: QFont, text: str, x: float, baseline: float) -> QPointF:
        """Baseline origin that centres *text* horizontally on *x*."""
        advance = QFontMetricsF(font).horizontalAdvance(text)
        return QPointF(x - advance / 2.0, baseline)
