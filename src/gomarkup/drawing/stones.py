"""Pre-rendered stone bitmaps."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QImage, QPainter, QPainterPath, QRadialGradient

from gomarkup.core.enums import StoneColor

STONE_SIZE = 29  # px, square
STONE_CENTER = 14.5
STONE_RADIUS = 10.0

# (offset, radius, alpha) rings approximating a 3 px blurred shadow.
_SHADOW_RINGS: tuple[tuple[float, float, int], ...] = (
    (1.0, 12.5, 25),
    (1.0, 11.5, 45),
    (1.0, 10.5, 80),
)

_SHADE: dict[StoneColor, tuple[QColor, QColor]] = {
    # (rim, highlight)
    StoneColor.WHITE: (QColor("#e0e0e0"), QColor(255, 255, 255)),
    StoneColor.BLACK: (QColor(0, 0, 0), QColor("#404040")),
}

_BASE: dict[StoneColor, QColor] = {
    StoneColor.WHITE: QColor(255, 255, 255),
    StoneColor.BLACK: QColor(0, 0, 0),
}


def _disc() -> QPainterPath:
    path = QPainterPath()
    path.addEllipse(QPointF(STONE_CENTER, STONE_CENTER), STONE_RADIUS, STONE_RADIUS)
    return path


def _right_half_disc() -> QPainterPath:
    box = QRectF(
        STONE_CENTER - STONE_RADIUS,
        STONE_CENTER - STONE_RADIUS,
        2 * STONE_RADIUS,
        2 * STONE_RADIUS,
    )
    path = QPainterPath()
    path.moveTo(STONE_CENTER, STONE_CENTER)
    path.arcTo(box, 90.0, -180.0)
    path.closeSubpath()
    return path


def _shading(color: StoneColor) -> QRadialGradient:
    """Radial gradient with the highlight towards the upper left."""
    rim, highlight = _SHADE[color]
    gradient = QRadialGradient(
        QPointF(STONE_CENTER, STONE_CENTER), STONE_RADIUS, QPointF(7.5, 7.5), 2.0
    )
    gradient.setColorAt(0.0, highlight)
    gradient.setColorAt(0.75, rim)
    gradient.setColorAt(1.0, rim)
    return gradient


def _paint_stone(painter: QPainter, color: StoneColor, path: QPainterPath) -> None:
    painter.fillPath(path, QBrush(_BASE[color]))
    painter.fillPath(path, QBrush(_shading(color)))


def create_stone_image(color: StoneColor) -> QImage:
    """Render one stone (with drop shadow) into a transparent image."""
    if color is StoneColor.BOTH:
        image = create_stone_image(StoneColor.BLACK)
        painter = QPainter(image)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        _paint_stone(painter, StoneColor.WHITE, _right_half_disc())
        painter.end()
        return image

    image = QImage(STONE_SIZE, STONE_SIZE, QImage.Format.Format_ARGB32_Premultiplied)
    image.fill(Qt.GlobalColor.transparent)
    painter = QPainter(image)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)

    painter.setPen(Qt.PenStyle.NoPen)
    for offset, radius, alpha in _SHADOW_RINGS:
        painter.setBrush(QColor(0, 0, 0, alpha))
        painter.drawEllipse(
            QPointF(STONE_CENTER + offset, STONE_CENTER + offset), radius, radius
        )

    _paint_stone(painter, color, _disc())
    painter.end()
    return image


class StoneImages:
    """Lazily built white, black and two-colour stone bitmaps.

    Images are built on first access and never change afterwards, so one
    instance can be shared by any number of renders.
    """

    def __init__(self) -> None:
        self._images: dict[StoneColor, QImage] | None = None

    @property
    def built(self) -> bool:
        return self._images is not None

    def image(self, color: StoneColor) -> QImage:
        """Return the bitmap for *color*, building the set on first use."""
        if self._images is None:
            self._images = {c: create_stone_image(c) for c in StoneColor}
        return self._images[color]
