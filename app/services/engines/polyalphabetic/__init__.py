"""Polyalphabetic cipher engines."""

from app.services.engines.polyalphabetic.vigenere import VigenereEngine
from app.services.engines.polyalphabetic.porta import PortaEngine

__all__ = [
    "VigenereEngine",
    "PortaEngine",
]
