"""Environment-driven defaults for the command line.

Values come from ``BLOCKRSA_*`` variables, optionally provided through a
``.env`` file in the working directory. Command-line flags override them.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_BITS = 1024
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    bits: int = DEFAULT_BITS
    workers: Optional[int] = None
    log_level: str = DEFAULT_LOG_LEVEL
    input_path: Optional[str] = None
    no_color: bool = False


def _int_var(env: Mapping[str, str], name: str, default: Optional[int]) -> Optional[int]:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid integer for {name}: {raw!r}") from exc


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build :class:`Settings` from ``env`` (the process environment by default)."""

    if env is None:
        load_dotenv(find_dotenv(usecwd=True))
        env = os.environ

    return Settings(
        bits=_int_var(env, "BLOCKRSA_BITS", DEFAULT_BITS),
        workers=_int_var(env, "BLOCKRSA_WORKERS", None),
        log_level=env.get("BLOCKRSA_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip() or DEFAULT_LOG_LEVEL,
        input_path=env.get("BLOCKRSA_INPUT") or None,
        no_color=bool(env.get("NO_COLOR")),
    )


__all__ = ["Settings", "load_settings", "DEFAULT_BITS", "DEFAULT_LOG_LEVEL"]
