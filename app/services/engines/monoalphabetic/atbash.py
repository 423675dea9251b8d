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
from app.services.engines.alphabets import map_ascii_letters
from app.services.engines.base import CipherEngine
from app.services.engines.registry import EngineRegistry


@EngineRegistry.register
class AtbashEngine(CipherEngine):
    """
    Atbash cipher engine.

    Atbash is a monoalphabetic substitution cipher where the alphabet is reversed:
    A -> Z, B -> Y, C -> X, etc.

    Originally used for the Hebrew alphabet, it's self-reciprocal.
    """

    name = "Atbash Cipher"
    cipher_type = CipherType.ATBASH
    category = CipherCategory.SUBSTITUTION
    difficulty = Difficulty.BEGINNER
    description = "Reverse alphabet substitution"
    info = "One of the oldest known ciphers. A becomes Z, B becomes Y."
    competition_level = CompetitionLevel.DIVISION_A
    historical_period = HistoricalPeriod.ANCIENT
    related_ciphers = (
        RelatedCipher(
            name="Caesar Cipher",
            description="Shifts letters by a fixed amount",
            cipher_type=CipherType.CAESAR,
        ),
        RelatedCipher(
            name="Aristocrat Cipher",
            description="Random letter substitution with preserved spaces",
            cipher_type=CipherType.ARISTOCRAT,
        ),
        RelatedCipher(
            name="Simple Substitution",
            description="Each letter maps to another letter randomly",
        ),
        RelatedCipher(
            name="Pigpen Cipher",
            description="Substitutes letters with geometric symbols",
        ),
    )

    def encrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Encrypt (same as decrypt for Atbash)."""
        return self._transform(text)

    def decrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Decrypt (same as encrypt for Atbash)."""
        return self._transform(text)

    def _transform(self, text: str) -> str:
        """Apply Atbash transformation (self-reciprocal)."""
        return map_ascii_letters(text, lambda x: 25 - x)
