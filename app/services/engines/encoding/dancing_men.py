import logging
import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from app.models.schemas import (
    CipherCategory,
    CipherType,
    CompetitionLevel,
    Difficulty,
    RelatedCipher,
)
from app.services.engines.alphabets import ALPHABET
from app.services.engines.base import CipherEngine
from app.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)

GLYPHS = MappingProxyType({
    "A": "🕺", "B": "💃", "C": "👯", "D": "🕴", "E": "🧍",
    "F": "🧎", "G": "🏃", "H": "🚶", "I": "🤸", "J": "🤾",
    "K": "🤽", "L": "🏊", "M": "🧗", "N": "🤹", "O": "🚴",
    "P": "🏇", "Q": "🏂", "R": "⛷️", "S": "🏄", "T": "🏋️",
    "U": "🤼", "V": "🤺", "W": "🤺", "X": "🧘", "Y": "🤳",
    "Z": "🧏",
})


@EngineRegistry.register
class DancingMenEngine(CipherEngine):
    """
    Dancing Men cipher engine.

    Every letter is drawn as a figure. V and W share a figure, which reads
    back as V. A custom `mapping` of letters to glyphs replaces the
    built-in table.
    """

    name = "Dancing Men"
    cipher_type = CipherType.DANCING_MEN
    category = CipherCategory.ENCODING
    difficulty = Difficulty.BEGINNER
    description = "Substitution cipher from Sherlock Holmes"
    info = (
        "A substitution cipher where each letter is represented by a stick "
        "figure in different poses. Popularized in \"The Adventure of the "
        "Dancing Men\" by Arthur Conan Doyle."
    )
    competition_level = CompetitionLevel.DIVISION_C
    related_ciphers = (
        RelatedCipher(
            name="Baconian Cipher",
            description="Another encoding-based cipher",
            cipher_type=CipherType.BACONIAN,
        ),
        RelatedCipher(
            name="Aristocrat Cipher",
            description="Substitution cipher",
            cipher_type=CipherType.ARISTOCRAT,
        ),
    )

    DEFAULTS = MappingProxyType({"mapping": GLYPHS})
    REVERSIBLE = False

    def encrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        glyphs = self._parse_mapping(params)
        return "".join(glyphs.get(char, char) for char in text.upper())

    def decrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Replace every known glyph with its letter."""
        letters: dict[str, str] = {}
        for letter, glyph in self._parse_mapping(params).items():
            letters.setdefault(glyph, letter)

        # Longest first: some glyphs carry a variation selector
        pattern = re.compile("|".join(
            re.escape(glyph) for glyph in sorted(letters, key=len, reverse=True)
        ))
        return pattern.sub(lambda match: letters[match.group(0)], text)

    def _parse_mapping(self, params: Mapping[str, Any] | None) -> Mapping[str, str]:
        """Return a letter -> glyph table, ignoring entries that are not letters."""
        value = self._param(params, "mapping")
        if isinstance(value, Mapping):
            glyphs = {
                str(letter).upper(): str(glyph)
                for letter, glyph in value.items()
                if str(letter).upper() in ALPHABET and glyph
            }
            if glyphs:
                return glyphs

        logger.debug("dancing_men: invalid mapping=%r, using default", value)
        return GLYPHS
