"""
International Morse code and the separated symbol stream used by the
Morse-based ciphers.

A stream is the Morse code of each character followed by the separator "x",
with a final "xxx" appended, e.g. "HI" -> "....x..xxxx".
"""
import string

SEPARATOR = "x"
SYMBOLS = ".-" + SEPARATOR

MORSE_CODE: dict[str, str] = {
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".", "F": "..-.",
    "G": "--.", "H": "....", "I": "..", "J": ".---", "K": "-.-", "L": ".-..",
    "M": "--", "N": "-.", "O": "---", "P": ".--.", "Q": "--.-", "R": ".-.",
    "S": "...", "T": "-", "U": "..-", "V": "...-", "W": ".--", "X": "-..-",
    "Y": "-.--", "Z": "--..",
    "0": "-----", "1": ".----", "2": "..---", "3": "...--", "4": "....-",
    "5": ".....", "6": "-....", "7": "--...", "8": "---..", "9": "----.",
}

MORSE_LOOKUP: dict[str, str] = {code: char for char, code in MORSE_CODE.items()}


def to_morse_stream(text: str, include_digits: bool = True) -> str:
    """Encode text as a separated Morse stream, dropping unsupported characters."""
    allowed = string.ascii_uppercase + (string.digits if include_digits else "")
    parts = [MORSE_CODE[char] + SEPARATOR for char in text.upper() if char in allowed]
    return "".join(parts) + SEPARATOR * 3


def from_morse_stream(stream: str) -> str:
    """
    Decode a separated Morse stream.

    Symbols accumulate in a buffer that is looked up whenever a separator (or
    the end of the stream) is reached. Unknown codes are skipped.
    """
    result = []
    buffer = ""
    for symbol in stream + SEPARATOR:
        if symbol == SEPARATOR:
            if buffer in MORSE_LOOKUP:
                result.append(MORSE_LOOKUP[buffer])
            buffer = ""
        elif symbol in ".-":
            buffer += symbol
    return "".join(result)
