"""Lexical primitives of the board markup.

Every markup line starts with the ``$$`` sentinel. The first line may carry
options (``$$Wc19m31 caption``); the rest are board rows made of piece
characters, with ``|``, ``+`` and ``-`` drawing the board edges.
"""

from __future__ import annotations

import re

SENTINEL = "$$"
BOUNDARY_CHARS = frozenset("|+-")

_LINE_SPLIT_RE = re.compile(r"\n+")
_HEADER_RE = re.compile(
    r"\$\$(?P<options>(?P<color>[BW]?)(?P<coord>c?)(?P<size>[0-9]*)"
    r"(?:m(?P<first_move>[0-9]+))?)(?:\s+(?P<caption>.*))?"
)
# Only full-width horizontal edges are recognised.
_BORDER_RE = re.compile(r"\$\$\s(?:[|+\-]\s*){2,}")
_ILLEGAL_CONTENT_RE = re.compile(r"[^\sOW@QPXB#YZCSTM0-9?a-z,*+|_\-]")
_WORDS_RE = re.compile(r"[A-Za-z0-9_]{2} [A-Za-z0-9_]{2}")


def split_lines(text: str) -> list[str]:
    """Split *text* into its non-blank lines."""
    text = text.replace("\r", "\n")
    return [line for line in _LINE_SPLIT_RE.split(text) if line.strip()]


def is_markup_line(line: str) -> bool:
    return line.startswith(SENTINEL)


def match_header(line: str) -> re.Match[str] | None:
    """Match the options pattern against a whole line."""
    return _HEADER_RE.fullmatch(line)


def is_border_line(line: str) -> bool:
    """True for lines made only of edge punctuation, e.g. ``$$ +-----+``."""
    return _BORDER_RE.fullmatch(line) is not None


def has_illegal_content(text: str) -> bool:
    """True if *text* holds a character that cannot appear in a board row."""
    return _ILLEGAL_CONTENT_RE.search(text) is not None


def looks_like_words(text: str) -> bool:
    """Coarse prose check: two 2+ character runs separated by a space."""
    return _WORDS_RE.search(text) is not None


def is_boundary_char(ch: str) -> bool:
    return ch in BOUNDARY_CHARS


def is_skipped_char(ch: str) -> bool:
    """Sentinel dollars and whitespace carry no board content."""
    return ch == "$" or ch.isspace()
