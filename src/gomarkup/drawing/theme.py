"""Colours and font sizes used when drawing diagrams."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor, QFont


@dataclass(frozen=True)
class DiagramTheme:
    """Palette for the board, marks and labels."""

    background: QColor  # board wood
    line: QColor  # grid lines
    mark: QColor  # circle / square / triangle / cross
    coordinate: QColor  # margin labels
    territory: QColor  # '?' overlay
    ink: QColor  # letters and star points
    font_family: str = "sans-serif"
    number_px: int = 12
    letter_px: int = 15
    coordinate_px: int = 10
    letter_outline: float = 6.0

    @classmethod
    def default(cls) -> DiagramTheme:
        return cls(
            background=QColor("#d3823b"),  # brown
            line=QColor(0, 0, 0),
            mark=QColor(255, 0, 0),
            coordinate=QColor("#6b421e"),
            territory=QColor(255, 255, 255, 128),  # white, half transparent
            ink=QColor(0, 0, 0),
        )

    def font(self, pixel_size: int, *, bold: bool = False) -> QFont:
        font = QFont(self.font_family)
        font.setStyleHint(QFont.StyleHint.SansSerif)
        font.setPixelSize(pixel_size)
        font.setBold(bold)
        return font
