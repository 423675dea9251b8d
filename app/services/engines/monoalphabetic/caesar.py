import random
from collections.abc import Mapping
from types import MappingProxyType
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
class CaesarEngine(CipherEngine):
    """
    Caesar cipher engine.

    The Caesar cipher is a simple substitution cipher that shifts each letter
    by a fixed amount. Case is preserved and non-letters pass through.
    """

    name = "Caesar Cipher"
    cipher_type = CipherType.CAESAR
    category = CipherCategory.SUBSTITUTION
    difficulty = Difficulty.BEGINNER
    description = "Shift each letter by a fixed number"
    info = "Named after Julius Caesar, who used it with a shift of 3."
    competition_level = CompetitionLevel.DIVISION_A
    historical_period = HistoricalPeriod.ANCIENT
    related_ciphers = (
        RelatedCipher(
            name="ROT13",
            description="A Caesar cipher with a shift of 13, common on online forums",
        ),
        RelatedCipher(
            name="Atbash Cipher",
            description="Reverses the alphabet: A becomes Z, B becomes Y",
            cipher_type=CipherType.ATBASH,
        ),
        RelatedCipher(
            name="Aristocrat Cipher",
            description="Random letter substitution that preserves word spaces",
            cipher_type=CipherType.ARISTOCRAT,
        ),
        RelatedCipher(
            name="Affine Cipher",
            description="Mathematical substitution using multiplication and addition",
            cipher_type=CipherType.AFFINE,
        ),
    )

    DEFAULTS = MappingProxyType({"shift": 3})

    def encrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Encrypt plaintext with the given shift."""
        return self._encrypt(text, self._parse_shift(params))

    def decrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Decrypt by shifting forward with the inverse shift."""
        return self._decrypt(text, self._parse_shift(params))

    def practice_params(self, rng: random.Random) -> dict[str, Any]:
        """Random shift (1-25, excluding 0)."""
        return {"shift": rng.randint(1, 25)}

    def _parse_shift(self, params: Mapping[str, Any] | None) -> int:
        """Parse the shift, coerced to 0-25."""
        return self._int_param(params, "shift") % 26

    def _encrypt(self, plaintext: str, shift: int) -> str:
        """Encrypt using Caesar cipher."""
        return map_ascii_letters(plaintext, lambda x: x + shift)

    def _decrypt(self, ciphertext: str, shift: int) -> str:
        """Decryption is encryption with shift 26 - shift."""
        return self._encrypt(ciphertext, (26 - shift) % 26)
