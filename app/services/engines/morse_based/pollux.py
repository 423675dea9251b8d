from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from app.models.schemas import CipherType, CompetitionLevel, RelatedCipher
from app.services.engines.morse import SEPARATOR, from_morse_stream, to_morse_stream
from app.services.engines.morse_based.digits import MorseDigitEngine
from app.services.engines.registry import EngineRegistry


@EngineRegistry.register
class PolluxEngine(MorseDigitEngine):
    """
    Pollux cipher engine.

    Text is converted to Morse code; dots and dashes become digits and each
    letter separator becomes a space. Digits 0-9 in the plaintext are
    encoded too.
    """

    name = "Pollux"
    cipher_type = CipherType.POLLUX
    description = "Morse code digit substitution cipher"
    info = (
        "Converts text to Morse code, then substitutes dots and dashes with "
        "digits. Each dot/dash combination maps to a unique digit."
    )
    competition_level = CompetitionLevel.DIVISION_B
    related_ciphers = (
        RelatedCipher(
            name="Morbit",
            description="Similar Morse code digit cipher",
            cipher_type=CipherType.MORBIT,
        ),
        RelatedCipher(
            name="Fractionated Morse",
            description="Another Morse-based cipher",
            cipher_type=CipherType.FRACTIONATED_MORSE,
        ),
    )

    MAPPED_SYMBOLS = ".-"
    DEFAULTS = MappingProxyType({"mapping": MappingProxyType({".": "5", "-": "8"})})

    def encrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Replace Morse symbols with digits and separators with spaces."""
        mapping = self._parse_mapping(params)
        mapping[SEPARATOR] = " "
        return "".join(mapping[symbol] for symbol in to_morse_stream(text))

    def decrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Rebuild the Morse stream from digits and whitespace, then decode it."""
        reverse = {digit: symbol for symbol, digit in self._parse_mapping(params).items()}

        stream = []
        for char in text:
            if char.isspace():
                stream.append(SEPARATOR)
            elif char in reverse:
                stream.append(reverse[char])

        return from_morse_stream("".join(stream))
