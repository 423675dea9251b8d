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
from app.services.engines.alphabets import map_ascii_letters, mod_inverse
from app.services.engines.base import CipherEngine
from app.services.engines.registry import EngineRegistry


@EngineRegistry.register
class AffineEngine(CipherEngine):
    """
    Affine cipher engine.

    The Affine cipher encrypts using the formula: E(x) = (ax + b) mod 26.
    Decryption uses: D(y) = a^(-1) * (y - b) mod 26, which only exists when
    'a' is coprime with 26. For any other 'a' decrypt returns a placeholder
    message instead of a result.
    """

    name = "Affine Cipher"
    cipher_type = CipherType.AFFINE
    category = CipherCategory.SUBSTITUTION
    difficulty = Difficulty.ADVANCED
    description = "Mathematical cipher using formula"
    info = "Uses formula E(x) = (ax + b) mod 26."
    competition_level = CompetitionLevel.DIVISION_B
    related_ciphers = (
        RelatedCipher(
            name="Caesar Cipher",
            description="Special case of Affine where a=1",
            cipher_type=CipherType.CAESAR,
        ),
        RelatedCipher(
            name="Atbash Cipher",
            description="Special case of Affine where a=-1, b=-1",
            cipher_type=CipherType.ATBASH,
        ),
        RelatedCipher(
            name="Multiplicative Cipher",
            description="Affine cipher where b=0",
        ),
    )

    DEFAULTS = MappingProxyType({"a": 5, "b": 8})
    # 'a' values offered in practice mode (coprime with 26, excluding 1 and 3)
    PRACTICE_A: ClassVar[tuple[int, ...]] = (5, 7, 9, 11, 15, 17, 19, 21, 23, 25)

    def encrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Encrypt using E(x) = (ax + b) mod 26."""
        a, b = self._parse_key(params)
        return map_ascii_letters(text, lambda x: a * x + b)

    def decrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Decrypt using D(y) = a^(-1) * (y - b) mod 26."""
        a, b = self._parse_key(params)
        a_inv = mod_inverse(a % 26)

        if a_inv is None:
            return f"Cannot decrypt: a={a} has no inverse modulo 26"

        return map_ascii_letters(text, lambda y: a_inv * (y - b + 26))

    def practice_params(self, rng: random.Random) -> dict[str, Any]:
        """Random valid (a, b) values."""
        return {"a": rng.choice(self.PRACTICE_A), "b": rng.randint(0, 25)}

    def _parse_key(self, params: Mapping[str, Any] | None) -> tuple[int, int]:
        """Parse key to (a, b) tuple."""
        return self._int_param(params, "a"), self._int_param(params, "b") % 26
