"""
Catalog of available ciphers and the single entry point for transforms.

Callers name a cipher by its id and pass a plain parameter dict; everything
else (engine lookup, defaults, direction) is resolved here.
"""

import logging
from collections.abc import Mapping
from typing import Any, cast

from app.core.exceptions import EngineNotFoundError, ValidationError
from app.models.schemas import CipherDefinition, CipherType, CryptarithmResult, Mode
from app.services.engines.base import CipherEngine
from app.services.engines.encoding.cryptarithm import CryptarithmEngine
from app.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)


def _coerce_cipher_type(cipher_id: CipherType | str) -> CipherType:
    try:
        return CipherType(cipher_id)
    except ValueError:
        raise EngineNotFoundError(str(cipher_id)) from None


def get_engine(cipher_id: CipherType | str) -> CipherEngine:
    """
    Get the engine for a cipher id.

    Raises:
        EngineNotFoundError: If the id is not a known cipher
    """
    cipher_type = _coerce_cipher_type(cipher_id)
    engine = EngineRegistry().get_engine(cipher_type)
    if engine is None:
        raise EngineNotFoundError(cipher_type.value)
    return engine


def list_ciphers() -> list[CipherDefinition]:
    """List every cipher definition in catalog order."""
    return [engine.definition() for engine in EngineRegistry().get_all_engines()]


def get_definition(cipher_id: CipherType | str) -> CipherDefinition:
    """Get the definition of one cipher."""
    return get_engine(cipher_id).definition()


def transform(
    cipher_id: CipherType | str,
    mode: Mode | str,
    text: str,
    params: Mapping[str, Any] | None = None,
) -> str:
    """
    Encrypt or decrypt text with a cipher.

    Args:
        cipher_id: Cipher id, e.g. "caesar"
        mode: "encrypt" or "decrypt"
        text: Input text
        params: Cipher-specific parameters; missing or malformed values
            fall back to the cipher's defaults

    Returns:
        The transformed text

    Raises:
        EngineNotFoundError: If the id is not a known cipher
        ValidationError: If mode is neither encrypt nor decrypt
    """
    engine = get_engine(cipher_id)
    try:
        mode = Mode(mode)
    except ValueError:
        raise ValidationError(f"Unknown mode '{mode}'", {"mode": str(mode)}) from None

    logger.debug("%s %s: %d chars, params=%r", mode.value, engine.cipher_type.value, len(text), params)

    if mode == Mode.ENCRYPT:
        return engine.encrypt(text, params)
    return engine.decrypt(text, params)


def validate_cryptarithm(equation: str, mapping: Mapping[str, Any] | str) -> CryptarithmResult:
    """Check a letter -> digit mapping against a cryptarithm equation."""
    engine = cast(CryptarithmEngine, get_engine(CipherType.CRYPTARITHM))
    return engine.validate_equation(equation, mapping)
