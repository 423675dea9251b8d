import re
from collections.abc import Mapping
from typing import Any, ClassVar

from app.models.schemas import CipherType, RelatedCipher
from app.services.engines.monoalphabetic.aristocrat import AristocratEngine
from app.services.engines.registry import EngineRegistry


def _word_pattern(words: Mapping[str, str]) -> re.Pattern[str]:
    alternatives = sorted(words, key=len, reverse=True)
    return re.compile(r"\b(" + "|".join(alternatives) + r")\b")


@EngineRegistry.register
class AristocratMisspelledEngine(AristocratEngine):
    """
    Aristocrat with intentional misspellings.

    Before substitution, common words are replaced by misspelled forms
    (THE -> TEH, AND -> NAD, ...) to disturb word-pattern attacks. Decryption
    undoes the substitution and then maps the misspellings back. The reverse
    table is not a strict inverse: a genuine "WIT" in the plaintext comes back
    as "WITH".
    """

    name = "Aristocrat Misspelled"
    cipher_type = CipherType.ARISTOCRAT_MISSPELLED
    description = "Substitution cipher with intentional misspellings"
    info = (
        "Similar to Aristocrat cipher but includes common misspellings to make "
        "frequency analysis more challenging."
    )
    related_ciphers = (
        RelatedCipher(
            name="Aristocrat Cipher",
            description="Standard substitution cipher",
            cipher_type=CipherType.ARISTOCRAT,
        ),
        RelatedCipher(
            name="Patristocrat Cipher",
            description="Substitution without spaces",
            cipher_type=CipherType.PATRISTOCRAT,
        ),
    )
    REVERSIBLE = False

    MISSPELLINGS: ClassVar[dict[str, str]] = {
        "THE": "TEH",
        "AND": "NAD",
        "YOU": "YUO",
        "THAT": "THTA",
        "WITH": "WIT",
        "FOR": "FORR",
    }
    CORRECTIONS: ClassVar[dict[str, str]] = {
        misspelled: correct for correct, misspelled in MISSPELLINGS.items()
    }

    _MISSPELL_RE: ClassVar[re.Pattern[str]] = _word_pattern(MISSPELLINGS)
    _CORRECT_RE: ClassVar[re.Pattern[str]] = _word_pattern(CORRECTIONS)

    def encrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Misspell common words, then substitute."""
        misspelled = self._MISSPELL_RE.sub(
            lambda match: self.MISSPELLINGS[match.group(1)],
            text.upper(),
        )
        return self._substitute(misspelled, self._substitution_key(params))

    def decrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Undo the substitution, then restore the misspelled words."""
        plaintext = self._unsubstitute(text.upper(), self._substitution_key(params))
        return self._CORRECT_RE.sub(
            lambda match: self.CORRECTIONS[match.group(1)],
            plaintext,
        )
