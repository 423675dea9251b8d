import itertools
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from app.models.schemas import (
    CipherCategory,
    CipherType,
    CompetitionLevel,
    Difficulty,
    RelatedCipher,
)
from app.services.engines.alphabets import keyed_alphabet, letters_only
from app.services.engines.base import CipherEngine
from app.services.engines.morse import SEPARATOR, SYMBOLS, from_morse_stream, to_morse_stream
from app.services.engines.registry import EngineRegistry

# All 27 triplets over ".-x" in base-3 order; "xxx" is last and never used
TRIPLETS = tuple("".join(t) for t in itertools.product(SYMBOLS, repeat=3))


@EngineRegistry.register
class FractionatedMorseEngine(CipherEngine):
    """
    Fractionated Morse cipher engine.

    The Morse stream (letters and digits, separator "x" between characters)
    is cut into triplets, the last one padded with "x". Triplet number i
    becomes letter i of the keyed alphabet.

    Example with keyword "CRYPTO":
        Table:  CRYPTOABDEFGHIJKLMNQSUVWXZ
        "..." -> C, "..-" -> R, "..x" -> Y, ...
    """

    name = "Fractionated Morse"
    cipher_type = CipherType.FRACTIONATED_MORSE
    category = CipherCategory.POLYALPHABETIC
    difficulty = Difficulty.ADVANCED
    description = "Morse code with fractionation"
    info = (
        "Converts text to Morse code, then splits into groups of three symbols. "
        "Each triplet maps to a letter using a keyword-based table."
    )
    competition_level = CompetitionLevel.DIVISION_B
    related_ciphers = (
        RelatedCipher(
            name="Nihilist Cipher",
            description="Also uses keyword-based substitution with numbers",
            cipher_type=CipherType.NIHILIST,
        ),
        RelatedCipher(
            name="Morse Code",
            description="Basic encoding using dots and dashes",
        ),
        RelatedCipher(
            name="Porta Cipher",
            description="Another keyword-based polyalphabetic cipher",
            cipher_type=CipherType.PORTA,
        ),
    )

    DEFAULTS = MappingProxyType({"keyword": "CRYPTO"})

    def encrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Encrypt by mapping each Morse triplet to a table letter."""
        table = keyed_alphabet(self._keyword_param(params, "keyword"))
        stream = to_morse_stream(text)
        if len(stream) % 3:
            stream += SEPARATOR * (3 - len(stream) % 3)

        result = []
        for i in range(0, len(stream), 3):
            index = TRIPLETS.index(stream[i:i + 3])
            if index < len(table):
                result.append(table[index])

        return "".join(result)

    def decrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Decrypt by expanding letters back to triplets and reading the Morse."""
        table = keyed_alphabet(self._keyword_param(params, "keyword"))
        stream = "".join(TRIPLETS[table.index(char)] for char in letters_only(text))
        return from_morse_stream(stream)
