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
from app.services.engines.alphabets import ALPHABET, keyed_alphabet
from app.services.engines.base import CipherEngine
from app.services.engines.registry import EngineRegistry


@EngineRegistry.register
class AristocratEngine(CipherEngine):
    """
    Aristocrat cipher engine.

    A keyed monoalphabetic substitution that keeps word boundaries and
    punctuation in place. The substitution alphabet is built from the key:
    its unique letters first, then the rest of the alphabet in order, so a
    full 26-letter permutation is used as-is and a short keyword such as
    "ZEBRAS" expands to ZEBRASCDFGHIJKLMNOPQTUVWXY.

    Subclasses change the plain alphabet (ALPHABET), the parameter name
    (KEY_PARAM) and the pre/post-processing around the substitution.
    """

    name = "Aristocrat Cipher"
    cipher_type = CipherType.ARISTOCRAT
    category = CipherCategory.SUBSTITUTION
    difficulty = Difficulty.INTERMEDIATE
    description = "Monoalphabetic substitution with spaces"
    info = "A substitution cipher that preserves word boundaries."
    competition_level = CompetitionLevel.DIVISION_B
    related_ciphers = (
        RelatedCipher(
            name="Patristocrat Cipher",
            description="Same as Aristocrat but removes all spaces between words",
            cipher_type=CipherType.PATRISTOCRAT,
        ),
        RelatedCipher(
            name="Caesar Cipher",
            description="Simple shift substitution cipher",
            cipher_type=CipherType.CAESAR,
        ),
        RelatedCipher(
            name="Atbash Cipher",
            description="Reverses the alphabet completely",
            cipher_type=CipherType.ATBASH,
        ),
        RelatedCipher(
            name="Affine Cipher",
            description="Mathematical substitution cipher",
            cipher_type=CipherType.AFFINE,
        ),
    )

    ALPHABET: ClassVar[str] = ALPHABET
    KEY_PARAM: ClassVar[str] = "key"
    DEFAULTS = MappingProxyType({"key": "ZEBRASCDFGHIJKLMNOPQTUVWXY"})

    def encrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Substitute every letter, preserving spaces and punctuation."""
        return self._substitute(text.upper(), self._substitution_key(params))

    def decrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Reverse the substitution mapping."""
        return self._unsubstitute(text.upper(), self._substitution_key(params))

    def default_key(self) -> str:
        return keyed_alphabet(self.DEFAULTS[self.KEY_PARAM], self.ALPHABET)

    def _substitution_key(self, params: Mapping[str, Any] | None) -> str:
        """Expand the key parameter into a full substitution alphabet."""
        keyword = self._keyword_param(params, self.KEY_PARAM, self.ALPHABET)
        return keyed_alphabet(keyword, self.ALPHABET)

    def _substitute(self, text: str, key: str) -> str:
        """Map plain letters to cipher letters: ALPHABET[i] -> key[i]."""
        mapping = dict(zip(self.ALPHABET, key))
        return "".join(mapping.get(char, char) for char in text)

    def _unsubstitute(self, text: str, key: str) -> str:
        """Inverse mapping: key[i] -> ALPHABET[i]."""
        inverse = dict(zip(key, self.ALPHABET))
        return "".join(inverse.get(char, char) for char in text)
