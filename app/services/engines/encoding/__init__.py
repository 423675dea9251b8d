"""Encoding and puzzle engines."""

from app.services.engines.encoding.baconian import BaconianEngine
from app.services.engines.encoding.cryptarithm import CryptarithmEngine
from app.services.engines.encoding.dancing_men import DancingMenEngine
from app.services.engines.encoding.rsa import RSAEngine

__all__ = [
    "BaconianEngine",
    "CryptarithmEngine",
    "DancingMenEngine",
    "RSAEngine",
]
