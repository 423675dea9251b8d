from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field


# ============================================================================
# Enums
# ============================================================================


class CipherCategory(str, Enum):
    """Cipher categories shown when browsing the catalog."""

    SUBSTITUTION = "substitution"
    POLYALPHABETIC = "polyalphabetic"
    POLYGRAPHIC = "polygraphic"
    TRANSPOSITION = "transposition"
    ENCODING = "encoding"
    PUZZLE = "puzzle"


class Difficulty(str, Enum):
    """Difficulty levels. Each level is worth a fixed number of practice points."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def points(self) -> int:
        return {
            Difficulty.BEGINNER: 5,
            Difficulty.INTERMEDIATE: 10,
            Difficulty.ADVANCED: 15,
        }[self]


class CompetitionLevel(str, Enum):
    """Science Olympiad division a cipher is tested at."""

    DIVISION_A = "divisionA"
    DIVISION_B = "divisionB"
    DIVISION_C = "divisionC"


class HistoricalPeriod(str, Enum):
    """Era in which a cipher was invented or in common use."""

    ANCIENT = "ancient"
    MEDIEVAL = "medieval"
    RENAISSANCE = "renaissance"
    MODERN = "modern"
    CONTEMPORARY = "contemporary"


class CipherType(str, Enum):
    """Identifiers of every cipher in the catalog."""

    CAESAR = "caesar"
    ATBASH = "atbash"
    ARISTOCRAT = "aristocrat"
    AFFINE = "affine"
    NIHILIST = "nihilist"
    CHECKERBOARD = "checkerboard"
    COLUMNAR = "columnar"
    BACONIAN = "baconian"
    PORTA = "porta"
    PATRISTOCRAT = "patristocrat"
    CRYPTARITHM = "cryptarithm"
    FRACTIONATED_MORSE = "fractionated_morse"
    XENOCRYPT = "xenocrypt"
    RAIL_FENCE = "rail_fence"
    POLLUX = "pollux"
    MORBIT = "morbit"
    VIGENERE = "vigenere"
    RSA = "rsa"
    ARISTOCRAT_MISSPELLED = "aristocrat_misspelled"
    DANCING_MEN = "dancing_men"
    HILL_2X2 = "hill_2x2"
    HILL_3X3 = "hill_3x3"


class Mode(str, Enum):
    """Direction of a transform."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


# ============================================================================
# Catalog Schemas
# ============================================================================


class RelatedCipher(BaseModel):
    """Pointer from one cipher to a similar one, which may be outside the catalog."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    cipher_type: CipherType | None = None

    @computed_field
    @property
    def in_app(self) -> bool:
        return self.cipher_type is not None


class CipherDefinition(BaseModel):
    """Immutable description of a cipher and its parameters."""

    model_config = ConfigDict(frozen=True)

    id: CipherType
    name: str
    description: str
    category: CipherCategory
    difficulty: Difficulty
    points: int
    info: str = ""
    competition_level: CompetitionLevel
    historical_period: HistoricalPeriod
    related_ciphers: list[RelatedCipher] = []
    key: str | None = None
    parameters: list[str] = []
    defaults: dict[str, Any] = Field(default_factory=dict)
    reversible: bool = True


class CryptarithmResult(BaseModel):
    """Outcome of checking a letter-to-digit mapping against an equation."""

    valid: bool
    result: int | None = None
    numbers: list[int] = []
    error: str | None = None


# ============================================================================
# Practice Schemas
# ============================================================================


class PracticeChallenge(BaseModel):
    """A generated practice puzzle. The plaintext is kept so the caller can verify answers."""

    cipher_type: CipherType
    ciphertext: str
    params: dict[str, Any] = Field(default_factory=dict)
    plaintext: str
    points: int


class AnswerResult(BaseModel):
    """Result of checking a practice answer."""

    correct: bool
    points: int


# ============================================================================
# Request Schemas
# ============================================================================


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    plaintext: str = Field(min_length=1, max_length=100_000)
    cipher_type: CipherType
    params: dict[str, Any] = Field(default_factory=dict)


class DecryptRequest(BaseModel):
    """Request schema for /decrypt endpoint."""

    ciphertext: str = Field(min_length=1, max_length=100_000)
    cipher_type: CipherType
    params: dict[str, Any] = Field(default_factory=dict)


class CryptarithmRequest(BaseModel):
    """Request schema for /cryptarithm/validate endpoint."""

    equation: str = Field(min_length=1, max_length=200)
    mapping: dict[str, int | str]


class ChallengeRequest(BaseModel):
    """Request schema for /practice/challenge endpoint."""

    cipher_type: CipherType


class AnswerRequest(BaseModel):
    """Request schema for /practice/check endpoint."""

    cipher_type: CipherType
    answer: str = Field(max_length=10_000)
    plaintext: str = Field(max_length=10_000)


# ============================================================================
# Response Schemas
# ============================================================================


class EncryptResponse(BaseModel):
    """Response schema for /encrypt endpoint."""

    ciphertext: str
    cipher_type: CipherType
    params: dict[str, Any]


class DecryptResponse(BaseModel):
    """Response schema for /decrypt endpoint."""

    plaintext: str
    cipher_type: CipherType
    params: dict[str, Any]


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
