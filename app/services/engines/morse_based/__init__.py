"""Ciphers built on the International Morse code stream."""

from app.services.engines.morse_based.fractionated_morse import FractionatedMorseEngine
from app.services.engines.morse_based.morbit import MorbitEngine
from app.services.engines.morse_based.pollux import PolluxEngine

__all__ = [
    "FractionatedMorseEngine",
    "MorbitEngine",
    "PolluxEngine",
]
