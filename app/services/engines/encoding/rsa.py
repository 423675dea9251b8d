import logging
import re
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
from app.services.engines.alphabets import ALPHABET, letters_only
from app.services.engines.base import CipherEngine
from app.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)


@EngineRegistry.register
class RSAEngine(CipherEngine):
    """
    Textbook RSA on single letters.

    With p=3 and q=11: n=33, e=3, d=7. Each letter A=1 .. Z=26 is raised to
    e modulo n and written as a two-digit number. There is no padding and
    the key is tiny; this is for demonstration only.

    Decrypted values outside 1..26 are shown as "?".
    """

    name = "RSA"
    cipher_type = CipherType.RSA
    category = CipherCategory.SUBSTITUTION
    difficulty = Difficulty.ADVANCED
    description = "Asymmetric encryption (simplified)"
    info = (
        "RSA is a public-key cryptosystem. This simplified version demonstrates "
        "the concept using small prime numbers for educational purposes."
    )
    competition_level = CompetitionLevel.DIVISION_C
    historical_period = HistoricalPeriod.CONTEMPORARY
    related_ciphers = (
        RelatedCipher(
            name="Affine Cipher",
            description="Mathematical substitution cipher",
            cipher_type=CipherType.AFFINE,
        ),
        RelatedCipher(
            name="Hill Cipher",
            description="Matrix-based cipher",
            cipher_type=CipherType.HILL_2X2,
        ),
    )

    DEFAULTS = MappingProxyType({"n": 33, "e": 3, "d": 7})

    def encrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Encrypt each letter as c = m^e mod n."""
        n = self._positive_param(params, "n", minimum=2)
        e = self._positive_param(params, "e", minimum=1)
        return " ".join(
            f"{pow(ALPHABET.index(char) + 1, e, n):02d}"
            for char in letters_only(text)
        )

    def decrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Decrypt each number as m = c^d mod n."""
        n = self._positive_param(params, "n", minimum=2)
        d = self._positive_param(params, "d", minimum=1)

        result = []
        for token in re.findall(r"\d+", text):
            try:
                m = pow(int(token), d, n)
            except ValueError:
                result.append("?")
                continue
            result.append(ALPHABET[m - 1] if 1 <= m <= 26 else "?")

        return "".join(result)

    def _positive_param(self, params: Mapping[str, Any] | None, name: str, minimum: int) -> int:
        value = self._int_param(params, name)
        if value < minimum:
            logger.debug("rsa: %s=%d below %d, using default", name, value, minimum)
            return int(self.DEFAULTS[name])
        return value
