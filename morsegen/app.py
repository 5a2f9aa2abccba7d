from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from .config import AppConfig, load_config
from .morse import EOM, UnsupportedCharacterError, unsupported_chars
from .translator import MorseTranslator

EXIT_UNSUPPORTED = 2


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Translate text and ITU prosigns (AR, SK, BT) to Morse code")
    p.add_argument("text", nargs="*", help="Message to translate. Read from stdin when omitted.")
    p.add_argument("--config", default="morsegen.yaml", help="YAML config path.")
    p.add_argument("--words", action="store_true", help="Print one word per line instead of the full message.")
    p.add_argument("--full", action="store_true", help="Print the full message on one line.")
    p.add_argument("--show-text", action="store_true", help="Prefix each word line with its source word.")
    p.add_argument("--skip-unsupported", action="store_true", help="In word mode, report bad words and continue.")
    p.add_argument("--interactive", action="store_true", help="Run stdin session mode.")
    return p


def _apply_cli_overrides(cfg: AppConfig, args: argparse.Namespace) -> None:
    if args.words:
        cfg.output.mode = "words"
    if args.full:
        cfg.output.mode = "full"
    if args.show_text:
        cfg.output.show_text = True
    if args.skip_unsupported:
        cfg.output.skip_unsupported = True


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    cfg = load_config(Path(args.config))
    _apply_cli_overrides(cfg, args)

    if args.interactive:
        return _run_interactive_cli(MorseTranslator())

    text = " ".join(args.text) if args.text else sys.stdin.read()
    translator = MorseTranslator(text)
    if cfg.output.mode == "words":
        return _print_words(translator, cfg, sys.stdout, sys.stderr)
    return _print_full(translator, sys.stdout, sys.stderr)


def _print_full(translator: MorseTranslator, out: TextIO, err: TextIO) -> int:
    try:
        morse = translator.get_message()
    except UnsupportedCharacterError as exc:
        print(f"ERR {_describe_unsupported(translator.message, exc)}", file=err)
        return EXIT_UNSUPPORTED
    print(morse, file=out)
    return 0


def _print_words(translator: MorseTranslator, cfg: AppConfig, out: TextIO, err: TextIO) -> int:
    while True:
        word = translator.words[translator.cursor] if translator.remaining else ""
        try:
            pattern = translator.get_next()
        except UnsupportedCharacterError as exc:
            print(f"ERR {_describe_unsupported(word, exc)} in {word}", file=err)
            if not cfg.output.skip_unsupported:
                return EXIT_UNSUPPORTED
            continue
        if pattern == EOM:
            break
        if cfg.output.show_text:
            print(f"{word}\t{pattern}", file=out)
        else:
            print(pattern, file=out)
    return 0


def _describe_unsupported(text: str, exc: UnsupportedCharacterError) -> str:
    bad = unsupported_chars(text) or [exc.char]
    return f"Unsupported characters: {' '.join(bad)}"


def _run_interactive_cli(translator: MorseTranslator) -> int:
    print("Session mode (stdin). Commands: /next /full /clear /state /logs /quit")
    while True:
        try:
            line = input("tx> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not line:
            continue
        cmd = line.lower()
        if cmd == "/quit":
            break
        if cmd == "/clear":
            translator.clear_message()
            print("Message cleared.")
            continue
        if cmd == "/state":
            print(f"state: {translator.state.value} ({translator.cursor}/{len(translator.words)})")
            continue
        if cmd == "/logs":
            for rec in translator.logs:
                print(f"{rec['timestamp_utc']} {rec['level']} [{rec['state']}] {rec['message']}")
            continue
        try:
            if cmd == "/next":
                print(translator.get_next())
            elif cmd == "/full":
                print(translator.get_message())
            else:
                translator.set_message(line)
                print(translator.get_message())
        except UnsupportedCharacterError as exc:
            print(f"ERR {exc}")
    return 0
