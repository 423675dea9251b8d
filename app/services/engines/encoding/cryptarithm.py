import logging
import operator
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, ClassVar

from app.models.schemas import (
    CipherCategory,
    CipherType,
    CompetitionLevel,
    CryptarithmResult,
    Difficulty,
    RelatedCipher,
)
from app.services.engines.alphabets import ALPHABET
from app.services.engines.base import CipherEngine
from app.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)


@EngineRegistry.register
class CryptarithmEngine(CipherEngine):
    """
    Cryptarithm puzzle engine.

    A cryptarithm is an equation such as SEND + MORE = MONEY in which every
    letter stands for a different digit. validate_equation() checks a
    proposed letter -> digit mapping against the equation.

    encrypt/decrypt simply swap letters and digits using the mapping, which
    may be a dict ({"S": 9}) or a string ("S=9,E=5").
    """

    name = "Cryptarithm"
    cipher_type = CipherType.CRYPTARITHM
    category = CipherCategory.PUZZLE
    difficulty = Difficulty.ADVANCED
    description = "Mathematical puzzle with letter substitution"
    info = (
        "A type of mathematical puzzle where digits are replaced by letters. "
        "Each letter represents a unique digit, and the equation must be "
        "mathematically correct."
    )
    competition_level = CompetitionLevel.DIVISION_B
    related_ciphers = (
        RelatedCipher(
            name="Aristocrat Cipher",
            description="Letter substitution puzzle",
            cipher_type=CipherType.ARISTOCRAT,
        ),
        RelatedCipher(
            name="Alphametics",
            description="Classic cryptarithm puzzles",
        ),
    )

    DEFAULTS = MappingProxyType({
        "mapping": MappingProxyType({
            "S": "9", "E": "5", "N": "6", "D": "7",
            "M": "1", "O": "0", "R": "8", "Y": "2",
        }),
        "equation": "SEND + MORE = MONEY",
    })
    REVERSIBLE = False

    OPERATORS: ClassVar[dict[str, Callable[[int, int], int]]] = {
        "+": operator.add,
        "-": operator.sub,
        "*": operator.mul,
        "×": operator.mul,
        "/": operator.floordiv,
        "÷": operator.floordiv,
    }
    MAX_WORD_LENGTH = 100  # letters per equation word

    def encrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Replace mapped letters with their digits."""
        digits = self._parse_mapping(self._param(params, "mapping"))
        return "".join(digits.get(char, char) for char in text.upper())

    def decrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Replace mapped digits with their letters."""
        digits = self._parse_mapping(self._param(params, "mapping"))
        letters = {digit: letter for letter, digit in digits.items()}
        return "".join(letters.get(char, char) for char in text)

    def parse_equation(self, equation: str) -> tuple[list[str], str | None]:
        """
        Split an equation into its words and main operator.

        The main operator is the first operator other than "=". Characters
        that are neither letters nor operators are ignored.

        Example:
            "SEND + MORE = MONEY" -> (["SEND", "MORE", "MONEY"], "+")
        """
        words: list[str] = []
        current = ""
        main_operator = None
        has_equals = False

        for char in equation.upper():
            if char in self.OPERATORS or char == "=":
                if current:
                    words.append(current)
                    current = ""
                if char == "=":
                    has_equals = True
                elif main_operator is None:
                    main_operator = char
            elif char in ALPHABET:
                current += char

        if current:
            words.append(current)

        return words, main_operator if has_equals else None

    def word_to_number(self, word: str, mapping: Mapping[str, str]) -> int | None:
        """
        Convert a word to its number.

        Returns None if a letter is unmapped or a multi-digit number would
        start with 0.
        """
        if any(char not in mapping for char in word):
            return None
        digits = "".join(mapping[char] for char in word)
        if len(digits) > 1 and digits[0] == "0":
            return None
        return int(digits)

    def validate_equation(self, equation: str, mapping: Mapping[str, Any] | str) -> CryptarithmResult:
        """
        Check that a mapping solves the equation.

        Checks run in order: equation format (three words of at most
        MAX_WORD_LENGTH letters), digit values, mapping
        completeness (and leading zeros), unique digits, then the arithmetic.
        Division must be exact.
        """
        words, main_operator = self.parse_equation(equation)
        if (
            len(words) != 3
            or main_operator is None
            or any(len(word) > self.MAX_WORD_LENGTH for word in words)
        ):
            return CryptarithmResult(valid=False, error="Invalid equation format")

        digit_map = self._parse_mapping(mapping, strict=True)
        if digit_map is None:
            return CryptarithmResult(valid=False, error="Each letter must map to a digit 0-9")

        numbers = [self.word_to_number(word, digit_map) for word in words]
        if any(number is None for number in numbers):
            return CryptarithmResult(valid=False, error="Incomplete letter mapping")

        if len(set(digit_map.values())) != len(digit_map):
            return CryptarithmResult(valid=False, error="Each letter must map to a unique digit")

        left, right, expected = numbers
        if main_operator in "/÷":
            if right == 0:
                return CryptarithmResult(valid=False, error="Division by zero")
            if left % right:
                return CryptarithmResult(
                    valid=False,
                    error=(
                        f"Equation doesn't balance: {left} {main_operator} {right} = "
                        f"{left / right:g}, but expected {expected}"
                    ),
                )

        result = self.OPERATORS[main_operator](left, right)
        if result != expected:
            return CryptarithmResult(
                valid=False,
                error=(
                    f"Equation doesn't balance: {left} {main_operator} {right} = "
                    f"{result}, but expected {expected}"
                ),
            )

        return CryptarithmResult(valid=True, result=result, numbers=numbers)

    def _parse_mapping(self, value: Any, strict: bool = False) -> dict[str, str] | None:
        """
        Normalise a mapping to uppercase letter -> digit string.

        With strict=False an unusable mapping falls back to the default;
        with strict=True it returns None instead.
        """
        if isinstance(value, str):
            pairs = [pair.split("=", 1) for pair in value.split(",") if "=" in pair]
        elif isinstance(value, Mapping):
            pairs = list(value.items())
        else:
            pairs = []

        mapping = {str(letter).strip().upper(): str(digit).strip() for letter, digit in pairs}
        mapping = {letter: digit for letter, digit in mapping.items() if letter}

        if mapping and all(len(digit) == 1 and digit.isdigit() for digit in mapping.values()):
            return mapping

        if strict:
            return None
        logger.debug("cryptarithm: invalid mapping=%r, using default", value)
        return dict(self.DEFAULTS["mapping"])
