"""
Alphabet helpers shared by the cipher engines.

Everything here is a pure function over immutable strings: squares and keyed
alphabets are rebuilt on every call from the keyword that is passed in.
"""
import string
from collections.abc import Callable

ALPHABET = string.ascii_uppercase
# 25 letters, J folded into I
POLYBIUS_ALPHABET = "ABCDEFGHIKLMNOPQRSTUVWXYZ"
SPANISH_ALPHABET = ALPHABET + "Ñ"


def letters_only(text: str, alphabet: str = ALPHABET) -> str:
    """Uppercase text and drop every character outside the alphabet."""
    return "".join(char for char in text.upper() if char in alphabet)


def keyed_alphabet(keyword: str, alphabet: str = ALPHABET) -> str:
    """
    Build a mixed alphabet: the keyword's unique letters first, then the
    remaining alphabet letters in order.

    Characters of the keyword outside the alphabet are ignored. The result is
    always a permutation of the alphabet.
    """
    result = []
    for char in letters_only(keyword, alphabet) + alphabet:
        if char not in result:
            result.append(char)
    return "".join(result)


def polybius_square(keyword: str) -> str:
    """Return a keyed 5x5 square as a 25-character row-major string."""
    return keyed_alphabet(keyword.upper().replace("J", "I"), POLYBIUS_ALPHABET)


def map_ascii_letters(text: str, func: Callable[[int], int]) -> str:
    """
    Apply func to the 0-25 index of every ASCII letter, keeping case.

    Non-letters pass through unchanged. func's result is reduced mod 26.
    """
    result = []
    for char in text:
        if "A" <= char <= "Z":
            base = ord("A")
        elif "a" <= char <= "z":
            base = ord("a")
        else:
            result.append(char)
            continue
        result.append(chr(func(ord(char) - base) % 26 + base))
    return "".join(result)


def mod_inverse(a: int, m: int = 26) -> int | None:
    """Find x in 1..m-1 with (a * x) % m == 1 by linear search."""
    for x in range(1, m):
        if (a * x) % m == 1:
            return x
    return None
