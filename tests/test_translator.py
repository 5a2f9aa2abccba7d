from __future__ import annotations

import pytest

from morsegen.morse import EOM, UnsupportedCharacterError
from morsegen.translator import MorseTranslator, TranslatorState


def test_full_message_expands_prosign_inline():
    tr = MorseTranslator()
    tr.set_message("CQ AR DE K")
    assert tr.get_message() == (
        "- . - .   - - . -       . - . - .       - . .   .       - . -"
    )


def test_incremental_prosigns_then_eom_forever():
    tr = MorseTranslator()
    tr.set_message("AR SK")
    assert tr.get_next() == ". - . - ."
    assert tr.get_next() == ". . . - . -"
    assert tr.get_next() == EOM
    assert tr.get_next() == "<EOM>"
    assert tr.get_next() == "<EOM>"
    assert tr.state == TranslatorState.EXHAUSTED
    assert tr.cursor == 2


def test_empty_message():
    tr = MorseTranslator()
    assert tr.state == TranslatorState.EMPTY
    tr.set_message("")
    assert tr.get_next() == EOM
    assert tr.get_message() == ""
    tr.set_message("   \t ")
    assert tr.words == ()
    assert tr.state == TranslatorState.EMPTY
    assert tr.get_next() == EOM


def test_message_is_stored_raw_and_words_uppercased():
    tr = MorseTranslator("  hello   World ")
    assert tr.message == "  hello   World "
    assert tr.words == ("HELLO", "WORLD")


def test_get_message_does_not_depend_on_cursor():
    tr = MorseTranslator("E T")
    assert tr.get_next() == "."
    assert tr.get_message() == ".       -"
    assert tr.cursor == 1
    assert tr.get_next() == "-"


def test_unsupported_character_aborts_full_message():
    tr = MorseTranslator()
    tr.set_message("HELLO @ WORLD")
    ok = tr.get_message()
    assert ". - - . - ." in ok

    tr.set_message("HELLO ~ WORLD")
    with pytest.raises(UnsupportedCharacterError) as excinfo:
        tr.get_message()
    assert excinfo.value.char == "~"

    tr.set_message("HELLO @ WORLD")
    assert tr.get_message() == ok


def test_failed_word_is_consumed_by_get_next():
    tr = MorseTranslator("E ~x T")
    assert tr.get_next() == "."
    with pytest.raises(UnsupportedCharacterError):
        tr.get_next()
    assert tr.cursor == 2
    assert tr.get_next() == "-"
    assert tr.get_next() == EOM


def test_set_message_resets_cursor():
    tr = MorseTranslator("A B C")
    tr.get_next()
    tr.get_next()
    tr.set_message("K")
    assert tr.cursor == 0
    assert tr.state == TranslatorState.READY
    assert tr.get_next() == "- . -"
    assert tr.get_next() == EOM


def test_clear_message_is_idempotent():
    tr = MorseTranslator("CQ")
    tr.clear_message()
    tr.clear_message()
    assert tr.message == ""
    assert tr.words == ()
    assert tr.cursor == 0
    assert tr.state == TranslatorState.EMPTY
    assert tr.get_message() == ""


def test_iter_words_yields_until_eom():
    tr = MorseTranslator("cq bt k")
    assert list(tr.iter_words()) == ["- . - .   - - . -", "- . . . -", "- . -"]
    assert tr.remaining == 0
    assert list(tr.iter_words()) == []


def test_translate_returns_result_instead_of_raising():
    tr = MorseTranslator()
    res = tr.translate("sos")
    assert res.ok
    assert res.morse == ". . .   - - -   . . ."

    res = tr.translate("a~b")
    assert not res.ok
    assert res.morse == ""
    assert res.unsupported_char == "~"
    assert res.errors == ["Unsupported character: ~"]


def test_logs_record_set_tx_and_errors():
    tr = MorseTranslator("E ~")
    tr.get_next()
    with pytest.raises(UnsupportedCharacterError):
        tr.get_next()
    levels = [rec["level"] for rec in tr.logs]
    assert levels == ["INFO", "TX", "ERR"]
    assert tr.logs[1]["message"] == "E"
    assert tr.logs[-1]["state"] == TranslatorState.EXHAUSTED.value


def test_logs_are_capped():
    tr = MorseTranslator()
    for _ in range(2001):
        tr.set_message("E")
    assert len(tr.logs) == 1000


def test_failed_get_message_leaves_log_untouched():
    tr = MorseTranslator("HELLO ~ WORLD")
    before = list(tr.logs)
    with pytest.raises(UnsupportedCharacterError):
        tr.get_message()
    assert tr.logs == before
    assert tr.cursor == 0
