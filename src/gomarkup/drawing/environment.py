"""Drawing-surface availability."""

from __future__ import annotations

import logging
import os
import sys

from PyQt6.QtGui import QGuiApplication

_LOGGER = logging.getLogger(__name__)


def surface_supported() -> bool:
    """Text rendering on a ``QImage`` needs a ``QGuiApplication``."""
    return QGuiApplication.instance() is not None


def _use_offscreen_platform() -> None:
    # Headless Linux has no display server to connect to.
    if (
        sys.platform.startswith("linux")
        and "QT_QPA_PLATFORM" not in os.environ
        and "DISPLAY" not in os.environ
        and "WAYLAND_DISPLAY" not in os.environ
    ):
        os.environ["QT_QPA_PLATFORM"] = "offscreen"


def ensure_application(argv: list[str] | None = None) -> QGuiApplication:
    """Return the running GUI application, creating a headless one if needed."""
    app = QGuiApplication.instance()
    if app is None:
        _use_offscreen_platform()
        app = QGuiApplication(sys.argv[:1] if argv is None else argv)
        _LOGGER.debug("Created QGuiApplication (platform %s)", app.platformName())
    return app  # type: ignore[return-value]
