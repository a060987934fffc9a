from __future__ import annotations
import os
from pathlib import Path
from typing import Optional

_DEFAULT_PROMPT = "> "
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_HISTORY_FILE = Path.home() / ".sprig_history"


def get_prompt() -> str:
    return os.environ.get('SPRIG_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> str:
    return os.environ.get('SPRIG_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()


def get_recursion_limit() -> Optional[int]:
    raw = os.environ.get('SPRIG_RECURSION_LIMIT')
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"SPRIG_RECURSION_LIMIT must be an integer, got {raw!r}") from None


def get_history_file() -> Path:
    raw = os.environ.get('SPRIG_HISTORY_FILE')
    return Path(raw) if raw else _DEFAULT_HISTORY_FILE
