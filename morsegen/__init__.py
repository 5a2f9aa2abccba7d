from .config import AppConfig, OutputConfig, load_config, save_config
from .morse import (
    EOM,
    LETTER_SEPARATOR,
    PROSIGN_TABLE,
    SYMBOL_TABLE,
    WORD_SEPARATOR,
    UnsupportedCharacterError,
    encode_text,
    encode_word,
    tokenize_message,
)
from .translator import MorseTranslator, TranslationResult, TranslatorState

__all__ = [
    "AppConfig",
    "OutputConfig",
    "load_config",
    "save_config",
    "EOM",
    "LETTER_SEPARATOR",
    "PROSIGN_TABLE",
    "SYMBOL_TABLE",
    "WORD_SEPARATOR",
    "UnsupportedCharacterError",
    "encode_text",
    "encode_word",
    "tokenize_message",
    "MorseTranslator",
    "TranslationResult",
    "TranslatorState",
]
