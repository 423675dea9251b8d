from collections.abc import Mapping
from typing import Any

from app.models.schemas import (
    CipherCategory,
    CipherType,
    CompetitionLevel,
    Difficulty,
    HistoricalPeriod,
    RelatedCipher,
)
from app.services.engines.base import CipherEngine
from app.services.engines.registry import EngineRegistry

BACON_CODES: dict[str, str] = {
    "A": "AAAAA", "B": "AAAAB", "C": "AAABA", "D": "AAABB", "E": "AABAA",
    "F": "AABAB", "G": "AABBA", "H": "AABBB", "I": "ABAAA", "J": "ABAAA",
    "K": "ABAAB", "L": "ABABA", "M": "ABABB", "N": "ABBAA", "O": "ABBAB",
    "P": "ABBBA", "Q": "ABBBB", "R": "BAAAA", "S": "BAAAB", "T": "BAABA",
    "U": "BAABB", "V": "BAABB", "W": "BABAA", "X": "BABAB", "Y": "BABBA",
    "Z": "BABBB",
}
# Shared groups read back as the earlier letter (I, U)
BACON_LETTERS: dict[str, str] = {
    code: letter for letter, code in reversed(BACON_CODES.items())
}


@EngineRegistry.register
class BaconianEngine(CipherEngine):
    """
    Baconian cipher engine.

    Each letter becomes a five-letter group of A's and B's from Bacon's
    24-letter table, where I/J and U/V share a group. Decryption therefore
    returns I for J and U for V.

    Groups are separated by single spaces. A space in the plaintext sits
    between two separators, so words are split by three spaces.
    """

    name = "Baconian Cipher"
    cipher_type = CipherType.BACONIAN
    category = CipherCategory.ENCODING
    difficulty = Difficulty.BEGINNER
    description = "Binary encoding with A and B"
    info = "Invented by Francis Bacon using As and Bs."
    competition_level = CompetitionLevel.DIVISION_A
    historical_period = HistoricalPeriod.RENAISSANCE
    related_ciphers = (
        RelatedCipher(
            name="Morse Code",
            description="Uses dots and dashes to encode letters",
        ),
        RelatedCipher(
            name="Binary Code",
            description="Modern digital encoding using 0s and 1s",
        ),
    )

    REVERSIBLE = False
    WORD_SEPARATOR = "   "

    def encrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Replace each letter with its group; other characters are kept."""
        return " ".join(BACON_CODES.get(char, char) for char in text.upper())

    def decrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Look up each space-separated group; unknown groups pass through."""
        words = []
        for word in text.split(self.WORD_SEPARATOR):
            words.append("".join(
                BACON_LETTERS.get(group.upper(), group) for group in word.split(" ")
            ))
        return " ".join(words)
