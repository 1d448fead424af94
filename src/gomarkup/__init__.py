r"""Go board diagrams from plain-text board markup.

Usage::

    from gomarkup import ensure_application, render

    ensure_application()
    result = render("$$B Black to play\n$$ +-----\n$$ | . O .\n$$ | X . .")
    if result is not None:
        result.save("diagram.png")
"""

from gomarkup.api import render
from gomarkup.core.parser import parse_diagram as parse
from gomarkup.drawing.environment import ensure_application
from gomarkup.drawing.renderer import RenderResult

__all__ = ["RenderResult", "ensure_application", "parse", "render"]
