import random
import re
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
from app.services.engines.alphabets import POLYBIUS_ALPHABET, letters_only, polybius_square
from app.services.engines.base import CipherEngine
from app.services.engines.registry import EngineRegistry


@EngineRegistry.register
class NihilistEngine(CipherEngine):
    """
    Nihilist cipher engine.

    Letters are converted to two-digit Polybius coordinates (row * 10 + col,
    both 1-indexed) in a square keyed by `polybius_key`. The keyword is
    converted the same way and added, position by position and cycling, to
    the plaintext numbers. Ciphertext is the space-separated sums.
    """

    name = "Nihilist Cipher"
    cipher_type = CipherType.NIHILIST
    category = CipherCategory.POLYGRAPHIC
    difficulty = Difficulty.ADVANCED
    description = "Polybius square with numerical addition"
    info = (
        "Used by Russian Nihilists in the 1880s. Combines Polybius square "
        "with numerical addition."
    )
    competition_level = CompetitionLevel.DIVISION_C
    related_ciphers = (
        RelatedCipher(
            name="Straddling Checkerboard",
            description="Variable-length numerical encoding used by Soviet spies",
            cipher_type=CipherType.CHECKERBOARD,
        ),
        RelatedCipher(
            name="Polybius Square",
            description="Converts letters to coordinates in a 5×5 grid",
        ),
    )

    DEFAULTS = MappingProxyType({"keyword": "CRYPTO", "polybius_key": "CRYPTO"})

    def practice_params(self, rng: random.Random) -> dict[str, Any]:
        return {"keyword": "SECRET", "polybius_key": "CRYPTO"}

    def encrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Add the cycling key numbers to the plaintext coordinates."""
        square, key_numbers = self._parse_key(params)

        result = []
        for idx, char in enumerate(self._clean(text)):
            value = self._coordinates(square, char) + key_numbers[idx % len(key_numbers)]
            result.append(str(value))

        return " ".join(result)

    def decrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Subtract the cycling key numbers and read letters back from the square."""
        square, key_numbers = self._parse_key(params)

        result = []
        for idx, token in enumerate(re.findall(r"\d+", text)):
            try:
                number = int(token)
            except ValueError:
                result.append("?")
                continue

            diff = number - key_numbers[idx % len(key_numbers)]
            row, col = divmod(diff, 10)
            if 1 <= row <= 5 and 1 <= col <= 5:
                result.append(square[(row - 1) * 5 + (col - 1)])
            else:
                result.append("?")

        return "".join(result)

    def _parse_key(self, params: Mapping[str, Any] | None) -> tuple[str, list[int]]:
        """Build the square and the keyword's coordinate numbers."""
        square = polybius_square(self._keyword_param(params, "polybius_key"))
        keyword = self._clean(self._keyword_param(params, "keyword"))
        return square, [self._coordinates(square, char) for char in keyword]

    def _clean(self, text: str) -> str:
        """Uppercase letters only, J folded into I."""
        return letters_only(text.upper().replace("J", "I"), POLYBIUS_ALPHABET)

    def _coordinates(self, square: str, char: str) -> int:
        """Return the two-digit coordinate number of a letter in the square."""
        row, col = divmod(square.index(char), 5)
        return (row + 1) * 10 + (col + 1)
