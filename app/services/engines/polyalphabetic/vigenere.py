import random
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, ClassVar

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


@EngineRegistry.register
class VigenereEngine(CipherEngine):
    """
    Vigenère cipher engine.

    A polyalphabetic substitution cipher that uses a keyword to determine
    the shift for each letter. Each letter of the keyword represents a
    different Caesar shift applied in sequence. Non-letters pass through
    without consuming a keyword position.
    """

    name = "Vigenère"
    cipher_type = CipherType.VIGENERE
    category = CipherCategory.POLYALPHABETIC
    difficulty = Difficulty.INTERMEDIATE
    description = "Polyalphabetic substitution cipher"
    info = (
        "Uses a keyword to create multiple Caesar ciphers. Each letter of the "
        "keyword determines the shift for the corresponding plaintext letter."
    )
    competition_level = CompetitionLevel.DIVISION_C
    related_ciphers = (
        RelatedCipher(
            name="Caesar Cipher",
            description="Single shift substitution",
            cipher_type=CipherType.CAESAR,
        ),
        RelatedCipher(
            name="Porta Cipher",
            description="Another keyword-based cipher",
            cipher_type=CipherType.PORTA,
        ),
        RelatedCipher(
            name="Beaufort Cipher",
            description="Variant of Vigenère",
        ),
    )

    DEFAULTS = MappingProxyType({"keyword": "KEY"})
    PRACTICE_WORDS: ClassVar[tuple[str, ...]] = (
        "KEY", "SECRET", "CIPHER", "CODE", "CRYPTO", "HIDDEN", "LEMON",
    )

    def encrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Encrypt using the keyword."""
        return self._encrypt(text, self._keyword_param(params, "keyword"))

    def decrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Decrypt using the keyword."""
        return self._decrypt(text, self._keyword_param(params, "keyword"))

    def practice_params(self, rng: random.Random) -> dict[str, Any]:
        """Pick a keyword from a short word list."""
        return {"keyword": rng.choice(self.PRACTICE_WORDS)}

    def _encrypt(self, plaintext: str, key: str) -> str:
        """Encrypt using Vigenère cipher."""
        result = []
        key_idx = 0

        for char in plaintext.upper():
            if char in ALPHABET:
                shift = ALPHABET.index(key[key_idx % len(key)])
                result.append(ALPHABET[(ALPHABET.index(char) + shift) % 26])
                key_idx += 1
            else:
                result.append(char)

        return "".join(result)

    def _decrypt(self, ciphertext: str, key: str) -> str:
        """Decrypt using Vigenère cipher."""
        result = []
        key_idx = 0

        for char in ciphertext.upper():
            if char in ALPHABET:
                shift = ALPHABET.index(key[key_idx % len(key)])
                result.append(ALPHABET[(ALPHABET.index(char) - shift + 26) % 26])
                key_idx += 1
            else:
                result.append(char)

        return "".join(result)
