"""Classification of the first markup line.

The first line is ambiguous: ``$$B`` is a header, ``$$ Black to play`` is a
caption, and ``$$ X O . .`` is an ordinary board row. Classification is a
pure function of the line so the heuristic can be checked on its own.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass

from gomarkup.core.enums import HeaderKind
from gomarkup.core.grammar import (
    SENTINEL,
    has_illegal_content,
    looks_like_words,
    match_header,
)

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HeaderInfo:
    """Result of :func:`classify_header`."""

    kind: HeaderKind
    white_first: bool = False
    coordinates: bool = False
    board_size: int | None = None
    move_delta: int = 0
    caption: str | None = None

    @property
    def consumed(self) -> bool:
        """Whether the line is removed from the board rows."""
        return self.kind is not HeaderKind.VOID


VOID_HEADER = HeaderInfo(HeaderKind.VOID)

# Longest digit run that can still be a finite double.
_MAX_FINITE_DIGITS = len(str(int(sys.float_info.max)))


def _finite_number(digits: str | None) -> int | None:
    """Decimal value of *digits*, or ``None`` if absent or beyond a double."""
    if not digits:
        return None
    digits = digits.lstrip("0") or "0"
    if len(digits) > _MAX_FINITE_DIGITS:
        return None
    value = int(digits)
    if value > sys.float_info.max:
        return None
    return value


def _is_caption(text: str) -> bool:
    if not text:
        return False
    if has_illegal_content(text):
        return True
    # Every character could be board content; only prose-like text wins.
    return looks_like_words(text)


def classify_header(line: str) -> HeaderInfo:
    """Decide whether *line* is a header, a bare caption, or a board row."""
    match = match_header(line)
    if match is None:
        # A colour flag can swallow a caption's first letter ("$$White to
        # live"); read the remainder as a caption only if it is prose.
        rest = line[len(SENTINEL) :].rstrip()
        if line.startswith(SENTINEL) and looks_like_words(rest):
            _LOGGER.debug("Header %r read as unspaced caption", line)
            return HeaderInfo(HeaderKind.CAPTION, caption=rest)
        return VOID_HEADER

    caption = (match.group("caption") or "").rstrip()
    if not match.group("options"):
        if not _is_caption(caption):
            return VOID_HEADER
        _LOGGER.debug("Header %r read as caption", line)
        return HeaderInfo(HeaderKind.CAPTION, caption=caption)

    size = _finite_number(match.group("size"))
    first_move = _finite_number(match.group("first_move"))
    info = HeaderInfo(
        HeaderKind.OPTIONS,
        white_first=match.group("color") == "W",
        coordinates=match.group("coord") == "c",
        board_size=size,
        move_delta=first_move - 1 if first_move is not None else 0,
        caption=caption,
    )
    _LOGGER.debug("Header %r read as options %s", line, info)
    return info
