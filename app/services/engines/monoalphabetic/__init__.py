"""Monoalphabetic cipher engines."""

from app.services.engines.monoalphabetic.caesar import CaesarEngine
from app.services.engines.monoalphabetic.atbash import AtbashEngine
from app.services.engines.monoalphabetic.affine import AffineEngine
from app.services.engines.monoalphabetic.aristocrat import AristocratEngine
from app.services.engines.monoalphabetic.patristocrat import PatristocratEngine
from app.services.engines.monoalphabetic.aristocrat_misspelled import AristocratMisspelledEngine
from app.services.engines.monoalphabetic.xenocrypt import XenocryptEngine

__all__ = [
    "CaesarEngine",
    "AtbashEngine",
    "AffineEngine",
    "AristocratEngine",
    "PatristocratEngine",
    "AristocratMisspelledEngine",
    "XenocryptEngine",
]
