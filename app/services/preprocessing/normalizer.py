import re
import unicodedata
from enum import Enum


class NormalizationMode(str, Enum):
    """Text normalization modes."""

    ANSWER = "answer"  # Uppercase, all whitespace removed
    DISPLAY = "display"  # Uppercase, whitespace collapsed to single spaces


class TextNormalizer:
    """
    Normalizes user-typed text before it is compared or shown.

    Handles:
    - Unicode normalization (NFKC), so full-width or composed letters
      compare equal to their plain forms
    - Case conversion
    - Whitespace removal or collapsing
    """

    def normalize(
        self,
        text: str,
        mode: NormalizationMode = NormalizationMode.ANSWER,
    ) -> str:
        """
        Normalize text.

        Args:
            text: Input text to normalize
            mode: Normalization mode

        Returns:
            Normalized text string
        """
        text = unicodedata.normalize("NFKC", text)

        if mode == NormalizationMode.DISPLAY:
            return self.collapse_whitespace(text.upper())
        return self.strip_whitespace(text.upper())

    def answers_match(self, answer: str, expected: str) -> bool:
        """Compare two texts ignoring case and whitespace."""
        return self.normalize(answer) == self.normalize(expected)

    def strip_whitespace(self, text: str) -> str:
        """Remove all whitespace from text."""
        return re.sub(r"\s+", "", text)

    def collapse_whitespace(self, text: str) -> str:
        """Collapse multiple whitespace characters to single space."""
        return re.sub(r"\s+", " ", text).strip()
