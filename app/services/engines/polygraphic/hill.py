import logging
import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, ClassVar

from app.models.schemas import (
    CipherCategory,
    CipherType,
    CompetitionLevel,
    Difficulty,
    RelatedCipher,
)
from app.services.engines.alphabets import ALPHABET, letters_only, mod_inverse
from app.services.engines.base import CipherEngine
from app.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)

Matrix = list[list[int]]


class HillEngine(CipherEngine):
    """
    Hill cipher engine.

    The Hill cipher uses matrix multiplication for encryption.
    Plaintext is divided into vectors of length n, and each vector
    is multiplied by an n x n key matrix modulo 26.

    For a 2x2 matrix:
    [a b]   [p1]   [a*p1 + b*p2]
    [c d] x [p2] = [c*p1 + d*p2] (mod 26)

    Decryption multiplies by the inverse matrix, built from the adjugate and
    the modular inverse of the determinant. A matrix whose determinant shares
    a factor with 26 has no inverse; the determinant inverse then falls back
    to 0 and decryption yields a string of A's.

    Concrete engines set BLOCK_SIZE and a default matrix.
    """

    category = CipherCategory.POLYGRAPHIC
    difficulty = Difficulty.ADVANCED

    BLOCK_SIZE: ClassVar[int]

    def encrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Encrypt using the key matrix."""
        return self._multiply_blocks(text, self._parse_key(params))

    def decrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Decrypt using the inverse key matrix."""
        return self._multiply_blocks(text, self._matrix_inverse_mod26(self._parse_key(params)))

    def _parse_key(self, params: Mapping[str, Any] | None) -> Matrix:
        """
        Parse the matrix parameter.

        Accepts nested lists ([[3, 3], [2, 5]]), a flat list, or a string of
        numbers ("3 3 2 5", "3,3;2,5"). Anything that is not exactly
        BLOCK_SIZE^2 integers falls back to the default matrix.
        """
        value = self._param(params, "matrix")
        n = self.BLOCK_SIZE

        if isinstance(value, str):
            entries: list[Any] = re.findall(r"-?\d+", value)
        elif isinstance(value, (list, tuple)):
            entries = [x for row in value for x in (row if isinstance(row, (list, tuple)) else [row])]
        else:
            entries = []

        try:
            numbers = [int(x) for x in entries]
        except (TypeError, ValueError):
            numbers = []

        if len(numbers) != n * n:
            logger.debug("%s: invalid matrix=%r, using default", self.cipher_type.value, value)
            numbers = [x for row in self.DEFAULTS["matrix"] for x in row]

        return [[numbers[i * n + j] % 26 for j in range(n)] for i in range(n)]

    def _determinant(self, m: Matrix) -> int:
        """Calculate determinant of a 2x2 or 3x3 matrix."""
        if len(m) == 2:
            return m[0][0] * m[1][1] - m[0][1] * m[1][0]
        return (
            m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1]) -
            m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0]) +
            m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0])
        )

    def _adjugate(self, m: Matrix) -> Matrix:
        """Calculate adjugate (transposed cofactor matrix) of a 2x2 or 3x3 matrix."""
        if len(m) == 2:
            return [
                [m[1][1], -m[0][1]],
                [-m[1][0], m[0][0]],
            ]
        return [
            [
                (m[1][1] * m[2][2] - m[1][2] * m[2][1]),
                -(m[0][1] * m[2][2] - m[0][2] * m[2][1]),
                (m[0][1] * m[1][2] - m[0][2] * m[1][1]),
            ],
            [
                -(m[1][0] * m[2][2] - m[1][2] * m[2][0]),
                (m[0][0] * m[2][2] - m[0][2] * m[2][0]),
                -(m[0][0] * m[1][2] - m[0][2] * m[1][0]),
            ],
            [
                (m[1][0] * m[2][1] - m[1][1] * m[2][0]),
                -(m[0][0] * m[2][1] - m[0][1] * m[2][0]),
                (m[0][0] * m[1][1] - m[0][1] * m[1][0]),
            ],
        ]

    def _matrix_inverse_mod26(self, matrix: Matrix) -> Matrix:
        """Calculate matrix inverse modulo 26 (all zeros if not invertible)."""
        det_inv = mod_inverse(self._determinant(matrix) % 26) or 0
        return [
            [(value * det_inv) % 26 for value in row]
            for row in self._adjugate(matrix)
        ]

    def _multiply_blocks(self, text: str, matrix: Matrix) -> str:
        """Multiply each X-padded block of letters by the matrix."""
        n = self.BLOCK_SIZE
        letters = letters_only(text)

        # Pad to multiple of block size
        if len(letters) % n:
            letters += "X" * (n - len(letters) % n)

        result = []
        for i in range(0, len(letters), n):
            block = [ALPHABET.index(c) for c in letters[i:i + n]]
            for row in matrix:
                result.append(ALPHABET[sum(row[j] * block[j] for j in range(n)) % 26])

        return "".join(result)


@EngineRegistry.register
class Hill2x2Engine(HillEngine):
    """Hill cipher on letter pairs."""

    name = "Hill 2x2"
    cipher_type = CipherType.HILL_2X2
    description = "Matrix-based cipher using 2x2 matrix"
    info = (
        "Encrypts pairs of letters using a 2x2 matrix. Each pair is multiplied "
        "by the matrix modulo 26."
    )
    competition_level = CompetitionLevel.DIVISION_C
    related_ciphers = (
        RelatedCipher(
            name="Hill 3x3",
            description="Larger matrix version",
            cipher_type=CipherType.HILL_3X3,
        ),
        RelatedCipher(
            name="Affine Cipher",
            description="Mathematical substitution",
            cipher_type=CipherType.AFFINE,
        ),
    )

    BLOCK_SIZE = 2
    DEFAULTS = MappingProxyType({"matrix": ((3, 3), (2, 5))})


@EngineRegistry.register
class Hill3x3Engine(HillEngine):
    """Hill cipher on letter triplets."""

    name = "Hill 3x3"
    cipher_type = CipherType.HILL_3X3
    description = "Matrix-based cipher using 3x3 matrix"
    info = (
        "Encrypts triplets of letters using a 3x3 matrix. More secure than 2x2 "
        "but computationally more complex."
    )
    competition_level = CompetitionLevel.DIVISION_C
    related_ciphers = (
        RelatedCipher(
            name="Hill 2x2",
            description="Smaller matrix version",
            cipher_type=CipherType.HILL_2X2,
        ),
        RelatedCipher(
            name="Affine Cipher",
            description="Mathematical substitution",
            cipher_type=CipherType.AFFINE,
        ),
    )

    BLOCK_SIZE = 3
    DEFAULTS = MappingProxyType({"matrix": ((1, 2, 0), (0, 3, 1), (1, 0, 1))})
