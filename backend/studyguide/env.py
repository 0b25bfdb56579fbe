# backend/studyguide/env.py
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _int_env(name: str, default: int, *, min_value: Optional[int] = None, max_value: Optional[int] = None) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    token = raw.strip().split()[0]
    try:
        val = int(token)
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        return default
    if max_value is not None and val > max_value:
        return default
    return val


def _flag_env(name: str, default: str = "0") -> bool:
    return os.getenv(name, default) not in ("0", "", "false", "False")


@dataclass(frozen=True)
class _Env:
    SCRIPTURE_DEFAULT_LOCALE: str
    SCRIPTURE_MAX_INPUT_LENGTH: int
    SCRIPTURE_NORMALIZE_MAX_PASSES: int
    SCRIPTURE_DEBUG: bool
    LOG_LEVEL: str


def load_env() -> _Env:
    return _Env(
        SCRIPTURE_DEFAULT_LOCALE=(os.getenv("SCRIPTURE_DEFAULT_LOCALE") or "en-US").strip(),
        SCRIPTURE_MAX_INPUT_LENGTH=_int_env("SCRIPTURE_MAX_INPUT_LENGTH", 500, min_value=1, max_value=10000),
        SCRIPTURE_NORMALIZE_MAX_PASSES=_int_env("SCRIPTURE_NORMALIZE_MAX_PASSES", 3, min_value=1, max_value=10),
        SCRIPTURE_DEBUG=_flag_env("SCRIPTURE_DEBUG"),
        LOG_LEVEL=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
    )


ENV = load_env()
