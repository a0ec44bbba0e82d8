"""Plaintext loading."""
from __future__ import annotations

from pathlib import Path


def read_text_file(path: str | Path) -> str:
    """Return the UTF-8 content of the text file at ``path``."""

    target = Path(path)
    try:
        return target.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"File not found: {target}") from exc


__all__ = ["read_text_file"]
