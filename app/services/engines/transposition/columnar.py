import random
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


@EngineRegistry.register
class ColumnarEngine(CipherEngine):
    """
    Complete Columnar Transposition cipher engine.

    The plaintext is written into a grid row by row, then the columns
    are read out in an order determined by a keyword. The last row is
    padded with X so every column has the same height.

    Example with keyword "ZEBRAS" (sorted: A=1, B=2, E=3, R=4, S=5, Z=6):

    Key:    Z E B R A S
    Order:  6 3 2 4 1 5
            ─────────────
            W E A R E D
            I S C O V E
            R E D F L E
            E A T O N C
            E X X X X X  (padded)

    Read columns in sorted order: EVLNX, ACDTX, ESEAX, ROFOX, DEECX, WIREE

    Repeated keyword letters are ranked left to right.
    """

    name = "Complete Columnar"
    cipher_type = CipherType.COLUMNAR
    category = CipherCategory.TRANSPOSITION
    difficulty = Difficulty.INTERMEDIATE
    description = "Transposition using keyword order"
    info = "Text is rearranged based on keyword order."
    competition_level = CompetitionLevel.DIVISION_B
    related_ciphers = (
        RelatedCipher(
            name="Rail Fence Cipher",
            description="Writes text in zigzag pattern across rails",
            cipher_type=CipherType.RAIL_FENCE,
        ),
        RelatedCipher(
            name="Route Cipher",
            description="Writes message in grid and reads in different pattern",
        ),
    )

    DEFAULTS = MappingProxyType({"keyword": "CRYPTO"})

    def encrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Encrypt using the keyword."""
        return self._encrypt(text, self._keyword_param(params, "keyword"))

    def decrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """Decrypt using the keyword; trailing X padding is removed."""
        return self._decrypt(text, self._keyword_param(params, "keyword"))

    def practice_params(self, rng: random.Random) -> dict[str, Any]:
        return {"keyword": "SECRET"}

    def _keyword_to_order(self, keyword: str) -> list[int]:
        """Convert keyword to column ordering."""
        # Sort by character, keeping original indices
        sorted_chars = sorted(enumerate(keyword), key=lambda x: x[1])
        order = [0] * len(keyword)
        for new_pos, (orig_pos, _) in enumerate(sorted_chars):
            order[orig_pos] = new_pos + 1  # 1-indexed
        return order

    def _encrypt(self, plaintext: str, keyword: str) -> str:
        """Encrypt using column ordering."""
        order = self._keyword_to_order(keyword)
        plaintext = letters_only(plaintext)
        key_length = len(order)

        # Pad plaintext to fill grid
        if len(plaintext) % key_length:
            plaintext += "X" * (key_length - len(plaintext) % key_length)

        num_rows = len(plaintext) // key_length

        # Build grid row by row
        grid = [plaintext[i * key_length:(i + 1) * key_length] for i in range(num_rows)]

        # Read columns in order
        result = []
        for col_idx in range(1, key_length + 1):
            col_pos = order.index(col_idx)
            for row in grid:
                result.append(row[col_pos])

        return "".join(result)

    def _decrypt(self, ciphertext: str, keyword: str) -> str:
        """Decrypt using column ordering."""
        order = self._keyword_to_order(keyword)
        ciphertext = letters_only(ciphertext)
        key_length = len(order)
        num_rows = -(-len(ciphertext) // key_length)

        # Columns are filled in reading order; a short ciphertext leaves the
        # last columns short
        columns = [""] * key_length
        idx = 0
        for col_idx in range(1, key_length + 1):
            col_pos = order.index(col_idx)
            columns[col_pos] = ciphertext[idx:idx + num_rows]
            idx += num_rows

        # Read row by row
        result = []
        for row in range(num_rows):
            for column in columns:
                if row < len(column):
                    result.append(column[row])

        return "".join(result).rstrip("X")
