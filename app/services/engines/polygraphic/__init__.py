"""Polygraphic cipher engines."""

from app.services.engines.polygraphic.nihilist import NihilistEngine
from app.services.engines.polygraphic.checkerboard import CheckerboardEngine
from app.services.engines.polygraphic.hill import Hill2x2Engine, Hill3x3Engine

__all__ = [
    "NihilistEngine",
    "CheckerboardEngine",
    "Hill2x2Engine",
    "Hill3x3Engine",
]
