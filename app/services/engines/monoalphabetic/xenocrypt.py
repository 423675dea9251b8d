from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, ClassVar

from app.models.schemas import CipherType, Difficulty, RelatedCipher
from app.services.engines.alphabets import SPANISH_ALPHABET
from app.services.engines.monoalphabetic.aristocrat import AristocratEngine
from app.services.engines.registry import EngineRegistry


@EngineRegistry.register
class XenocryptEngine(AristocratEngine):
    """
    Xenocrypt engine: an Aristocrat over the 27-letter Spanish alphabet.

    Ñ is a letter in its own right (it sorts after Z). Accented vowels are
    folded to their plain forms before substitution.
    """

    name = "Xenocrypt"
    cipher_type = CipherType.XENOCRYPT
    difficulty = Difficulty.ADVANCED
    description = "Spanish substitution cipher"
    info = (
        "A monoalphabetic substitution cipher used on Spanish text. Uses the "
        "27-letter Spanish alphabet including Ñ. Popular in cryptography competitions."
    )
    related_ciphers = (
        RelatedCipher(
            name="Aristocrat Cipher",
            description="Similar monoalphabetic substitution cipher",
            cipher_type=CipherType.ARISTOCRAT,
        ),
        RelatedCipher(
            name="Patristocrat Cipher",
            description="Same concept but removes spaces",
            cipher_type=CipherType.PATRISTOCRAT,
        ),
        RelatedCipher(
            name="Caesar Cipher",
            description="Simpler substitution cipher",
            cipher_type=CipherType.CAESAR,
        ),
    )

    ALPHABET = SPANISH_ALPHABET
    KEY_PARAM = "keyword"
    DEFAULTS = MappingProxyType({"keyword": "CRYPTO"})

    ACCENTS: ClassVar[dict[int, int]] = str.maketrans("ÁÉÍÓÚÜ", "AEIOUU")

    def encrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Fold accents, then substitute over the Spanish alphabet."""
        normalized = text.upper().translate(self.ACCENTS)
        return self._substitute(normalized, self._substitution_key(params))
