import logging
import random
from collections import Counter
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
from app.services.engines.alphabets import letters_only
from app.services.engines.base import CipherEngine
from app.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)


@EngineRegistry.register
class RailFenceEngine(CipherEngine):
    """
    Rail Fence cipher engine.

    The Rail Fence cipher writes the plaintext in a zigzag pattern across
    a number of "rails" (rows), then reads off each rail in order to
    produce the ciphertext. Only letters are kept.

    Example with 3 rails:
    Plaintext: WEAREDISCOVEREDFLEEATONCE

    W . . . E . . . C . . . R . . . L . . . T . . . E
    . E . R . D . S . O . E . E . F . E . A . O . C .
    . . A . . . I . . . V . . . D . . . E . . . N . .

    Read off rows: WECRLTE + ERDSOEEFEAOC + AIVDEN
    """

    name = "Rail Fence"
    cipher_type = CipherType.RAIL_FENCE
    category = CipherCategory.TRANSPOSITION
    difficulty = Difficulty.INTERMEDIATE
    description = "Zigzag transposition cipher"
    info = (
        "Writes the plaintext in a zigzag pattern across multiple rails, then "
        "reads off rows. The number of rails determines the encryption."
    )
    competition_level = CompetitionLevel.DIVISION_C
    related_ciphers = (
        RelatedCipher(
            name="Columnar Transposition",
            description="Another transposition cipher",
            cipher_type=CipherType.COLUMNAR,
        ),
        RelatedCipher(
            name="Scytale",
            description="Ancient Greek transposition cipher",
        ),
    )

    DEFAULTS = MappingProxyType({"rails": 3})
    MIN_RAILS = 2

    def encrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Encrypt using the specified number of rails."""
        letters = letters_only(text)
        return self._encrypt(letters, self._parse_rails(params, len(letters)))

    def decrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Decrypt using the specified number of rails."""
        letters = letters_only(text)
        return self._decrypt(letters, self._parse_rails(params, len(letters)))

    def practice_params(self, rng: random.Random) -> dict[str, Any]:
        """Pick 2-5 rails."""
        return {"rails": rng.randint(2, 5)}

    def _parse_rails(self, params: Mapping[str, Any] | None, length: int) -> int:
        """
        Parse number of rails; at least two rails are always used.

        Rails beyond the text length are never reached, so the count is capped
        there.
        """
        rails = self._int_param(params, "rails")
        if rails < self.MIN_RAILS:
            logger.debug("rail_fence: rails=%d raised to %d", rails, self.MIN_RAILS)
            rails = self.MIN_RAILS
        return min(rails, max(length, self.MIN_RAILS))

    def _zigzag(self, n: int, rails: int) -> list[int]:
        """Rail index of each of n positions."""
        pattern = []
        rail = 0
        direction = 1  # 1 = down, -1 = up

        for _ in range(n):
            pattern.append(rail)

            # Change direction at top or bottom
            if rail == 0:
                direction = 1
            elif rail == rails - 1:
                direction = -1

            rail += direction

        return pattern

    def _encrypt(self, plaintext: str, rails: int) -> str:
        """Encrypt using Rail Fence cipher."""
        fence: list[list[str]] = [[] for _ in range(rails)]
        for char, rail in zip(plaintext, self._zigzag(len(plaintext), rails)):
            fence[rail].append(char)

        # Read off each rail
        return "".join("".join(row) for row in fence)

    def _decrypt(self, ciphertext: str, rails: int) -> str:
        """Decrypt using Rail Fence cipher."""
        n = len(ciphertext)
        pattern = self._zigzag(n, rails)

        # Split ciphertext into rails by how many characters each one holds
        lengths = Counter(pattern)
        fence = []
        idx = 0
        for rail in range(rails):
            length = lengths[rail]
            fence.append(iter(ciphertext[idx:idx + length]))
            idx += length

        # Read off in zigzag pattern
        return "".join(next(fence[rail]) for rail in pattern)
