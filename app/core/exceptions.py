from typing import Any


class CipherClassroomError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CipherClassroomError):
    """Raised when input validation fails."""

    pass


class TextTooLongError(ValidationError):
    """Raised when input text exceeds maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Text length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class EngineError(CipherClassroomError):
    """Base exception for cipher engine errors."""

    pass


class EngineNotFoundError(EngineError):
    """Raised when requested cipher engine is not found."""

    def __init__(self, cipher_id: str):
        super().__init__(
            f"Cipher '{cipher_id}' not found",
            {"cipher_id": cipher_id},
        )
