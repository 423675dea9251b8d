import random
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, ClassVar

from app.models.schemas import (
    CipherCategory,
    CipherType,
    CompetitionLevel,
    Difficulty,
    HistoricalPeriod,
    RelatedCipher,
)
from app.services.engines.alphabets import ALPHABET
from app.services.engines.base import CipherEngine
from app.services.engines.registry import EngineRegistry


def _tableau_row(row: int) -> str:
    """
    Row `row` (0-12) of the Porta tableau.

    The first half of the alphabet maps into the second half shifted by the
    row number, and the second half maps back, so every row is its own inverse.
    """
    first = [ALPHABET[13 + (x + row) % 13] for x in range(13)]
    second = [ALPHABET[(x - row) % 13] for x in range(13)]
    return "".join(first + second)


@EngineRegistry.register
class PortaEngine(CipherEngine):
    """
    Porta cipher engine.

    Uses 13 reciprocal alphabets, one per keyword letter pair (AB, CD, ..., YZ).
    Because each row is reciprocal the cipher is self-reciprocal: encryption
    and decryption are the same operation.
    """

    name = "Porta Cipher"
    cipher_type = CipherType.PORTA
    category = CipherCategory.POLYALPHABETIC
    difficulty = Difficulty.INTERMEDIATE
    description = "Polyalphabetic substitution with keyword"
    info = "Created by Giovanni Battista della Porta in 1563. Uses 13 alphabets."
    competition_level = CompetitionLevel.DIVISION_B
    historical_period = HistoricalPeriod.RENAISSANCE
    related_ciphers = (
        RelatedCipher(
            name="Vigenère Cipher",
            description="Classic polyalphabetic cipher using keyword",
            cipher_type=CipherType.VIGENERE,
        ),
        RelatedCipher(
            name="Beaufort Cipher",
            description="Similar to Vigenère but uses subtraction",
        ),
        RelatedCipher(
            name="Caesar Cipher",
            description="Simple shift cipher",
            cipher_type=CipherType.CAESAR,
        ),
    )

    DEFAULTS = MappingProxyType({"keyword": "CRYPTO"})
    PRACTICE_WORDS: ClassVar[tuple[str, ...]] = ("CRYPTO", "SECRET", "PORTA", "CIPHER")
    TABLEAU: ClassVar[tuple[str, ...]] = tuple(_tableau_row(row) for row in range(13))

    def encrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Encrypt (same as decrypt for Porta)."""
        return self._transform(text, self._keyword_param(params, "keyword"))

    def decrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Decrypt (same as encrypt for Porta)."""
        return self._transform(text, self._keyword_param(params, "keyword"))

    def practice_params(self, rng: random.Random) -> dict[str, Any]:
        return {"keyword": rng.choice(self.PRACTICE_WORDS)}

    def _transform(self, text: str, key: str) -> str:
        """Apply the tableau row selected by each keyword letter."""
        result = []
        key_idx = 0

        for char in text.upper():
            if char in ALPHABET:
                row = self.TABLEAU[ALPHABET.index(key[key_idx % len(key)]) // 2]
                result.append(row[ALPHABET.index(char)])
                key_idx += 1
            else:
                result.append(char)

        return "".join(result)
