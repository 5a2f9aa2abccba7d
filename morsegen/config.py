from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

OUTPUT_MODES = ("full", "words")


@dataclass
class OutputConfig:
    mode: str = "full"  # full | words
    show_text: bool = False
    skip_unsupported: bool = False


@dataclass
class AppConfig:
    output: OutputConfig = field(default_factory=OutputConfig)


def load_config(path: str | Path) -> AppConfig:
    p = Path(path)
    if not p.exists():
        cfg = AppConfig()
        save_config(p, cfg)
        return cfg

    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    cfg = AppConfig()

    output_raw = raw.get("output", {}) if isinstance(raw, dict) else {}
    if isinstance(output_raw, dict):
        _apply_dataclass_updates(cfg.output, output_raw)

    mode = str(cfg.output.mode or "full").strip().lower()
    cfg.output.mode = mode if mode in OUTPUT_MODES else "full"
    cfg.output.show_text = _as_bool(cfg.output.show_text)
    cfg.output.skip_unsupported = _as_bool(cfg.output.skip_unsupported)

    return cfg


def save_config(path: str | Path, config: AppConfig) -> None:
    payload = {
        "output": asdict(config.output),
    }
    p = Path(path)
    p.write_text(yaml.safe_dump(payload, sort_keys=False, allow_unicode=False), encoding="utf-8")


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return value is True or value == 1


def _apply_dataclass_updates(target: Any, updates: Dict[str, Any]) -> None:
    for key, value in updates.items():
        if hasattr(target, key):
            setattr(target, key, value)
