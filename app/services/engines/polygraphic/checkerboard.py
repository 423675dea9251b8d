import logging
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
from app.services.engines.alphabets import POLYBIUS_ALPHABET, keyed_alphabet, letters_only
from app.services.engines.base import CipherEngine
from app.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)


@EngineRegistry.register
class CheckerboardEngine(CipherEngine):
    """
    Straddling checkerboard engine.

    The board is a keyed 25-letter alphabet (J merged into I) laid out under
    the digits 0-9. The first row fills every column that is not a blank and
    gives single-digit codes; each blank digit then heads a further row of ten
    two-digit codes (blank digit + column digit).

    Because no single-digit code starts with a blank digit, a digit stream can
    be split unambiguously: a blank digit always begins a two-digit code.
    """

    name = "Straddling Checkerboard"
    cipher_type = CipherType.CHECKERBOARD
    category = CipherCategory.POLYGRAPHIC
    difficulty = Difficulty.ADVANCED
    description = "Variable-length numerical encoding"
    info = "Used by Soviet spies during the Cold War."
    competition_level = CompetitionLevel.DIVISION_C
    related_ciphers = (
        RelatedCipher(
            name="Nihilist Cipher",
            description="Russian cipher using Polybius square with addition",
            cipher_type=CipherType.NIHILIST,
        ),
    )

    DEFAULTS = MappingProxyType({"key": "CRYPTO", "blank_positions": "2,6"})
    MIN_BLANKS = 2

    def practice_params(self, rng: random.Random) -> dict[str, Any]:
        return {"key": "SECRET", "blank_positions": "2,6"}

    def encrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Concatenate the board code of every letter."""
        board, _ = self._build_board(params)
        clean = letters_only(text.upper().replace("J", "I"), POLYBIUS_ALPHABET)
        return "".join(board.get(char, "") for char in clean)

    def decrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Split the digit stream against the rebuilt board."""
        board, blanks = self._build_board(params)
        lookup = {code: char for char, code in board.items()}
        digits = re.sub(r"\D", "", text)

        result = []
        i = 0
        while i < len(digits):
            if digits[i] in blanks:
                code = digits[i:i + 2]
                i += 2
            else:
                code = digits[i]
                i += 1
            if code in lookup:
                result.append(lookup[code])

        return "".join(result)

    def _build_board(self, params: Mapping[str, Any] | None) -> tuple[dict[str, str], list[str]]:
        """Return the letter -> code table and the blank digits."""
        key = self._keyword_param(params, "key").replace("J", "I")
        alphabet = keyed_alphabet(key, POLYBIUS_ALPHABET)
        blanks = self._parse_blanks(params)

        codes = [str(col) for col in range(10) if str(col) not in blanks]
        for blank in blanks:
            codes.extend(f"{blank}{col}" for col in range(10))

        return dict(zip(alphabet, codes)), blanks

    def _parse_blanks(self, params: Mapping[str, Any] | None) -> list[str]:
        """
        Parse blank columns from "2,6" or [2, 6].

        One blank gives only 19 codes for 25 letters, so fewer than two
        distinct blanks (or all ten) is treated as invalid and uses the default.
        """
        value = self._param(params, "blank_positions")
        tokens = value.split(",") if isinstance(value, str) else value

        blanks: list[str] = []
        try:
            for token in tokens:
                digit = int(str(token).strip())
                if 0 <= digit <= 9 and str(digit) not in blanks:
                    blanks.append(str(digit))
        except (TypeError, ValueError):
            blanks = []

        if len(blanks) < self.MIN_BLANKS or len(blanks) == 10:
            logger.debug("checkerboard: invalid blank_positions=%r, using default", value)
            return self._parse_blanks(self.DEFAULTS)
        return blanks
