r"""Core domain layer — markup grammar, parser and grid model, no Qt.

Quick start::

    from gomarkup.core import parse_diagram

    diagram = parse_diagram("$$B Black to play\n$$ X O .\n$$ . X O")
    for row in diagram:
        print(row.pieces)
"""

from gomarkup.core.coordinates import column_letter, infer_coordinates, row_label
from gomarkup.core.enums import (
    FailureReason,
    HeaderKind,
    MarkShape,
    SpecialPiece,
    StoneColor,
)
from gomarkup.core.header import HeaderInfo, classify_header
from gomarkup.core.models import Field, ParsedDiagram, Row
from gomarkup.core.parser import MarkupError, parse_diagram, read_diagram
from gomarkup.core.pieces import PieceStyle, piece_style

__all__ = [
    # Enums
    "FailureReason",
    "HeaderKind",
    "MarkShape",
    "SpecialPiece",
    "StoneColor",
    # Model
    "Field",
    "ParsedDiagram",
    "Row",
    # Parsing
    "HeaderInfo",
    "MarkupError",
    "classify_header",
    "parse_diagram",
    "read_diagram",
    # Pieces / coordinates
    "PieceStyle",
    "column_letter",
    "infer_coordinates",
    "piece_style",
    "row_label",
]
