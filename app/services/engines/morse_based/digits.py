import logging
from collections.abc import Mapping
from typing import Any, ClassVar

from app.models.schemas import CipherCategory, Difficulty
from app.services.engines.base import CipherEngine

logger = logging.getLogger(__name__)


class MorseDigitEngine(CipherEngine):
    """
    Shared parameter handling for ciphers that replace Morse symbols with digits.

    The `mapping` parameter assigns one digit to each symbol in MAPPED_SYMBOLS.
    It may be a dict ({".": "5", "-": "8"}) or a string (".=5,-=8"). A mapping
    that misses a symbol, uses a non-digit or reuses a digit falls back to the
    default.
    """

    category = CipherCategory.SUBSTITUTION
    difficulty = Difficulty.ADVANCED

    MAPPED_SYMBOLS: ClassVar[str]

    def _parse_mapping(self, params: Mapping[str, Any] | None) -> dict[str, str]:
        """Return a symbol -> digit mapping."""
        value = self._param(params, "mapping")

        if isinstance(value, str):
            pairs = [pair.split("=", 1) for pair in value.split(",") if "=" in pair]
            raw = {symbol.strip(): digit.strip() for symbol, digit in pairs}
        elif isinstance(value, Mapping):
            raw = {str(symbol): str(digit).strip() for symbol, digit in value.items()}
        else:
            raw = {}

        mapping = {symbol: raw.get(symbol, "") for symbol in self.MAPPED_SYMBOLS}
        digits = list(mapping.values())
        if all(len(d) == 1 and d.isdigit() for d in digits) and len(set(digits)) == len(digits):
            return mapping

        logger.debug("%s: invalid mapping=%r, using default", self.cipher_type.value, value)
        return dict(self.DEFAULTS["mapping"])
