from collections.abc import Mapping
from typing import Any

from app.models.schemas import CipherType, RelatedCipher
from app.services.engines.alphabets import letters_only
from app.services.engines.monoalphabetic.aristocrat import AristocratEngine
from app.services.engines.registry import EngineRegistry


@EngineRegistry.register
class PatristocratEngine(AristocratEngine):
    """
    Patristocrat cipher engine.

    Same substitution as the Aristocrat, but every non-letter is removed
    before encryption so word boundaries are invisible.
    """

    name = "Patristocrat Cipher"
    cipher_type = CipherType.PATRISTOCRAT
    description = "Monoalphabetic substitution without spaces"
    info = "Similar to Aristocrat but removes all spaces, making it harder to solve."
    related_ciphers = (
        RelatedCipher(
            name="Aristocrat Cipher",
            description="Same cipher but preserves spaces",
            cipher_type=CipherType.ARISTOCRAT,
        ),
        RelatedCipher(
            name="Caesar Cipher",
            description="Simple shift substitution",
            cipher_type=CipherType.CAESAR,
        ),
        RelatedCipher(
            name="Atbash Cipher",
            description="Reverses the alphabet",
            cipher_type=CipherType.ATBASH,
        ),
    )

    def encrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Strip non-letters, then substitute."""
        return self._substitute(letters_only(text, self.ALPHABET), self._substitution_key(params))
