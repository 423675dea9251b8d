import logging
import random
from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, ClassVar

from app.models.schemas import (
    CipherCategory,
    CipherDefinition,
    CipherType,
    CompetitionLevel,
    Difficulty,
    HistoricalPeriod,
    RelatedCipher,
)
from app.services.engines.alphabets import ALPHABET, letters_only

logger = logging.getLogger(__name__)


def plain_params(value: Any) -> Any:
    """Copy parameter values into plain dicts and lists for serialisation."""
    if isinstance(value, Mapping):
        return {key: plain_params(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [plain_params(item) for item in value]
    return value


class CipherEngine(ABC):
    """
    Abstract base class for all cipher engines.

    Each cipher implementation must provide:
    - encrypt(): Transform plaintext into ciphertext
    - decrypt(): Transform ciphertext back into plaintext

    Engines are stateless. Parameters arrive as a plain dict (the "param bag")
    on every call; anything missing or malformed falls back to the engine's
    DEFAULTS, so neither direction ever raises for user input.
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    category: CipherCategory
    difficulty: Difficulty
    description: str
    info: ClassVar[str] = ""
    competition_level: CompetitionLevel
    historical_period: HistoricalPeriod = HistoricalPeriod.MODERN
    related_ciphers: ClassVar[tuple[RelatedCipher, ...]] = ()

    DEFAULTS: ClassVar[Mapping[str, Any]] = MappingProxyType({})
    # False when decrypt is lossy or the cipher is not an encrypt/decrypt pair
    REVERSIBLE: ClassVar[bool] = True

    @abstractmethod
    def encrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """
        Encrypt plaintext.

        Args:
            text: The plaintext to encrypt
            params: Cipher-specific parameters; missing keys use DEFAULTS

        Returns:
            Ciphertext
        """
        pass

    @abstractmethod
    def decrypt(self, text: str, params: Mapping[str, Any] | None = None) -> str:
        """
        Decrypt ciphertext.

        Args:
            text: The ciphertext to decrypt
            params: The parameters used for encryption

        Returns:
            Plaintext, or a human-readable placeholder when the inverse
            cannot be computed for these parameters
        """
        pass

    def practice_params(self, rng: random.Random) -> dict[str, Any]:
        """
        Choose parameters for a practice challenge.

        Default implementation uses the cipher's defaults.
        """
        return plain_params(self.DEFAULTS)

    def default_key(self) -> str | None:
        """Fixed substitution alphabet used when no key is supplied, if any."""
        return None

    def definition(self) -> CipherDefinition:
        """Build the immutable catalog entry for this engine."""
        return CipherDefinition(
            id=self.cipher_type,
            name=self.name,
            description=self.description,
            category=self.category,
            difficulty=self.difficulty,
            points=self.difficulty.points,
            info=self.info,
            competition_level=self.competition_level,
            historical_period=self.historical_period,
            related_ciphers=list(self.related_ciphers),
            key=self.default_key(),
            parameters=list(self.DEFAULTS),
            defaults=plain_params(self.DEFAULTS),
            reversible=self.REVERSIBLE,
        )

    def _param(self, params: Mapping[str, Any] | None, name: str) -> Any:
        """Look up a parameter, falling back to the default when absent or None."""
        if params is not None:
            value = params.get(name)
            if value is not None:
                return value
        return self.DEFAULTS[name]

    def _int_param(self, params: Mapping[str, Any] | None, name: str) -> int:
        """
        Read an integer parameter given as 5, "5" or 5.0.

        Malformed values fall back to the default.
        """
        value = self._param(params, name)
        if isinstance(value, float) and value.is_integer():
            return int(value)
        try:
            return int(str(value).strip())
        except (TypeError, ValueError):
            logger.debug(
                "%s: invalid %s=%r, using default %r",
                self.cipher_type.value, name, value, self.DEFAULTS[name],
            )
            return int(self.DEFAULTS[name])

    def _keyword_param(
        self,
        params: Mapping[str, Any] | None,
        name: str,
        alphabet: str = ALPHABET,
    ) -> str:
        """Read a keyword parameter cleaned to alphabet letters; empty falls back."""
        keyword = letters_only(str(self._param(params, name)), alphabet)
        if not keyword:
            logger.debug("%s: empty %s, using default", self.cipher_type.value, name)
            keyword = letters_only(str(self.DEFAULTS[name]), alphabet)
        return keyword
