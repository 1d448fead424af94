"""Command-line entry point: render board markup to a PNG file."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

_LOGGER = logging.getLogger(__name__)


@dataclass
class RenderOptions:
    """Options collected from the command line."""

    source: Path | None = None  # None reads stdin
    output: Path = Path("diagram.png")
    verbose: bool = False


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gomarkup",
        description="Render a Go board-markup diagram to a PNG image.",
    )
    parser.add_argument(
        "source",
        nargs="?",
        type=Path,
        help="markup file (default: read standard input)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("diagram.png"),
        help="image file to write (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def parse_options(argv: list[str] | None = None) -> RenderOptions:
    args = _build_parser().parse_args(argv)
    return RenderOptions(source=args.source, output=args.output, verbose=args.verbose)


def _read_source(options: RenderOptions) -> str:
    if options.source is None:
        return sys.stdin.read()
    return options.source.read_text(encoding="utf-8")


def run(options: RenderOptions) -> int:
    """Render according to *options*; return a process exit status."""
    from gomarkup.api import render
    from gomarkup.drawing.environment import ensure_application

    try:
        text = _read_source(options)
    except OSError as exc:
        print(f"gomarkup: cannot read {options.source}: {exc}", file=sys.stderr)
        return 2

    ensure_application()
    result = render(text)
    if result is None:
        print("gomarkup: input is not valid board markup", file=sys.stderr)
        return 1

    result.save(options.output)
    _LOGGER.info(
        "Wrote %s (%dx%d px)", options.output, result.width, result.height
    )
    if result.caption:
        print(result.caption)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Launch the command-line renderer."""
    options = parse_options(argv)
    logging.basicConfig(
        level=logging.DEBUG if options.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run(options)


if __name__ == "__main__":
    sys.exit(main())
