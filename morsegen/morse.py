from __future__ import annotations

import re
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

LETTER_SEPARATOR = "   "
WORD_SEPARATOR = "       "
EOM = "<EOM>"

# ASCII whitespace only, so e.g. "\xa0" stays inside a word.
_WORD_SPLIT_RE = re.compile(r"[ \t\n\v\f\r]+")

# ITU Morse, elements space separated
SYMBOL_TABLE: Mapping[str, str] = MappingProxyType(
    {
        "A": ". -",
        "B": "- . . .",
        "C": "- . - .",
        "D": "- . .",
        "E": ".",
        "F": ". . - .",
        "G": "- - .",
        "H": ". . . .",
        "I": ". .",
        "J": ". - - -",
        "K": "- . -",
        "L": ". - . .",
        "M": "- -",
        "N": "- .",
        "O": "- - -",
        "P": ". - - .",
        "Q": "- - . -",
        "R": ". - .",
        "S": ". . .",
        "T": "-",
        "U": ". . -",
        "V": ". . . -",
        "W": ". - -",
        "X": "- . . -",
        "Y": "- . - -",
        "Z": "- - . .",
        "0": "- - - - -",
        "1": ". - - - -",
        "2": ". . - - -",
        "3": ". . . - -",
        "4": ". . . . -",
        "5": ". . . . .",
        "6": "- . . . .",
        "7": "- - . . .",
        "8": "- - - . .",
        "9": "- - - - .",
        ".": ". - . - . -",
        ",": "- - . . - -",
        ":": "- - - . . .",
        "?": ". . - - . .",
        "/": "- . . - .",
        "-": "- . . . . -",
        "(": "- . - - . -",
        ")": "- . - - . -",
        "=": "- . . . -",
        "+": ". - . - .",
        "&": ". - . . .",
        "'": ". - - - - .",
        "!": "- . - . - -",
        "_": ". . - - . -",
        '"': ". - . . - .",
        "$": ". . . - . . -",
        "@": ". - - . - .",
    }
)

# ITU-R M.1677-1 prosigns, sent as one character with no letter gap.
PROSIGN_TABLE: Mapping[str, str] = MappingProxyType(
    {
        "AR": ". - . - .",
        "SK": ". . . - . -",
        "BT": "- . . . -",
    }
)


class UnsupportedCharacterError(ValueError):
    """Raised when a word holds a character outside ``SYMBOL_TABLE``."""

    def __init__(self, char: str, word: Optional[str] = None):
        self.char = char
        self.word = word
        super().__init__(f"Unsupported character: {char}")


def ascii_upper(text: str) -> str:
    # ASCII only; non-ASCII letters stay as-is and miss the table.
    return "".join(ch.upper() if ch.isascii() else ch for ch in text)


def tokenize_message(text: str) -> List[str]:
    return [ascii_upper(word) for word in _WORD_SPLIT_RE.split(text) if word]


def is_supported(ch: str) -> bool:
    return ascii_upper(ch) in SYMBOL_TABLE


def unsupported_chars(text: str) -> List[str]:
    """Return the distinct unsupported characters of ``text`` in first-seen order.

    Whitespace is ignored and prosign words are skipped entirely.
    """
    found: List[str] = []
    for word in tokenize_message(text):
        if word in PROSIGN_TABLE:
            continue
        for ch in word:
            if not is_supported(ch) and ch not in found:
                found.append(ch)
    return found


def encode_word(word: str) -> str:
    """
    Encode a single whitespace-free word.

    A word that is exactly a prosign key maps to the prosign pattern; anything
    else is encoded letter by letter with three spaces between letters.
    """
    token = ascii_upper(word)
    prosign = PROSIGN_TABLE.get(token)
    if prosign is not None:
        return prosign

    letters: List[str] = []
    for ch in token:
        pattern = SYMBOL_TABLE.get(ch)
        if pattern is None:
            raise UnsupportedCharacterError(ch, token)
        letters.append(pattern)
    return LETTER_SEPARATOR.join(letters)


def encode_words(words: Iterable[str]) -> str:
    return WORD_SEPARATOR.join(encode_word(word) for word in words)


def encode_text(text: str) -> str:
    return encode_words(tokenize_message(text))
