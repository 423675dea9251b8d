import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from app.models.schemas import CipherType, CompetitionLevel, RelatedCipher
from app.services.engines.morse import SEPARATOR, from_morse_stream, to_morse_stream
from app.services.engines.morse_based.digits import MorseDigitEngine
from app.services.engines.registry import EngineRegistry


@EngineRegistry.register
class MorbitEngine(MorseDigitEngine):
    """
    Morbit cipher engine.

    Like Pollux, but the letter separator also gets its own digit, so the
    whole Morse stream becomes digits. The output is shown in pairs.
    Only letters are encoded.
    """

    name = "Morbit"
    cipher_type = CipherType.MORBIT
    description = "Morse code digit substitution with pairs"
    info = (
        "Similar to Pollux but uses pairs of digits. Converts text to Morse, "
        "then groups symbols and substitutes with digit pairs."
    )
    competition_level = CompetitionLevel.DIVISION_C
    related_ciphers = (
        RelatedCipher(
            name="Pollux",
            description="Similar Morse code digit cipher",
            cipher_type=CipherType.POLLUX,
        ),
        RelatedCipher(
            name="Fractionated Morse",
            description="Another Morse-based cipher",
            cipher_type=CipherType.FRACTIONATED_MORSE,
        ),
    )

    MAPPED_SYMBOLS = ".-" + SEPARATOR
    DEFAULTS = MappingProxyType({"mapping": MappingProxyType({".": "1", "-": "2", "x": "3"})})

    def encrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Map every stream symbol to a digit and group the digits in pairs."""
        mapping = self._parse_mapping(params)
        digits = "".join(mapping[symbol] for symbol in to_morse_stream(text, include_digits=False))
        return " ".join(digits[i:i + 2] for i in range(0, len(digits), 2))

    def decrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Drop the grouping, map digits back to symbols and decode."""
        reverse = {digit: symbol for symbol, digit in self._parse_mapping(params).items()}
        digits = re.sub(r"\D", "", text)
        return from_morse_stream("".join(reverse.get(digit, "") for digit in digits))
