from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from .morse import EOM, UnsupportedCharacterError, encode_word, encode_words, tokenize_message


class TranslatorState(str, Enum):
    EMPTY = "EMPTY"
    READY = "READY"
    EXHAUSTED = "EXHAUSTED"


@dataclass
class TranslationResult:
    ok: bool
    morse: str = ""
    unsupported_char: Optional[str] = None
    errors: List[str] = field(default_factory=list)


class MorseTranslator:
    """
    Text to Morse translator with bulk and word-by-word output.

    The message, its uppercased words and the read cursor are always replaced
    together. Instances are not synchronized; share one across threads only
    behind an external lock.
    """

    def __init__(self, message: str = ""):
        self._message = ""
        self._words: Tuple[str, ...] = ()
        self._cursor = 0
        self.logs: List[Dict[str, str]] = []
        if message:
            self.set_message(message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def remaining(self) -> int:
        return len(self._words) - self._cursor

    @property
    def state(self) -> TranslatorState:
        if not self._words:
            return TranslatorState.EMPTY
        if self._cursor < len(self._words):
            return TranslatorState.READY
        return TranslatorState.EXHAUSTED

    def set_message(self, text: str) -> None:
        words = tuple(tokenize_message(text))
        self._message, self._words, self._cursor = text, words, 0
        self._log("INFO", f"Message set ({len(words)} words).")

    def clear_message(self) -> None:
        self._message, self._words, self._cursor = "", (), 0
        self._log("INFO", "Message cleared.")

    def get_message(self) -> str:
        """
        Return the whole message in Morse, words separated by seven spaces.

        Does not touch the cursor or the log. Raises ``UnsupportedCharacterError``
        on the first character with no Morse pattern.
        """
        return encode_words(self._words)

    def get_next(self) -> str:
        """
        Return the next word in Morse, or ``"<EOM>"`` once all words are sent.

        The cursor moves past the word before it is encoded, so a word that
        raises ``UnsupportedCharacterError`` is not offered again.
        """
        if self._cursor >= len(self._words):
            return EOM

        word = self._words[self._cursor]
        self._cursor += 1
        try:
            pattern = encode_word(word)
        except UnsupportedCharacterError as exc:
            self._log("ERR", f"{exc} in word {word!r}")
            raise
        self._log("TX", word)
        return pattern

    def iter_words(self) -> Iterator[str]:
        while True:
            pattern = self.get_next()
            if pattern == EOM:
                return
            yield pattern

    def translate(self, text: str) -> TranslationResult:
        self.set_message(text)
        try:
            morse = self.get_message()
        except UnsupportedCharacterError as exc:
            return TranslationResult(ok=False, unsupported_char=exc.char, errors=[str(exc)])
        return TranslationResult(ok=True, morse=morse)

    def _log(self, level: str, message: str) -> None:
        self.logs.append(
            {
                "timestamp_utc": datetime.now(timezone.utc).isoformat(),
                "level": level,
                "state": self.state.value,
                "message": message,
            }
        )
        if len(self.logs) > 2000:
            self.logs = self.logs[-1000:]
