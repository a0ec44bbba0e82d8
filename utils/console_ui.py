"""Console presentation helpers for the block RSA command line."""
from __future__ import annotations

import shutil
import sys
from typing import Optional

import colorama
import pyfiglet
from colorama import Fore, Style

__all__ = [
    "init",
    "banner",
    "section",
    "kv",
    "bullet",
    "success",
    "warning",
    "error",
    "elapsed",
    "rule",
    "line",
]

_width = 100
_plain_mode = False
_styles = {"success": "", "warning": "", "error": "", "heading": ""}
_symbols = {"success": "✓", "warning": "!", "error": "✗", "bullet": "•"}


def init(plain: bool = False) -> None:
    """Set up colour and symbols; ``plain`` (or a non-TTY stdout) gives ASCII output."""

    global _width, _plain_mode, _styles, _symbols

    _width = shutil.get_terminal_size(fallback=(100, 24)).columns or 100

    isatty = getattr(sys.stdout, "isatty", None)
    _plain_mode = plain or not (isatty is not None and isatty())

    if _plain_mode:
        _styles = {"success": "", "warning": "", "error": "", "heading": ""}
        _symbols = {"success": "[OK]", "warning": "[!]", "error": "[X]", "bullet": "-"}
        return

    colorama.init(autoreset=True)
    _styles = {
        "success": Fore.GREEN + Style.BRIGHT,
        "warning": Fore.YELLOW + Style.BRIGHT,
        "error": Fore.RED + Style.BRIGHT,
        "heading": Fore.CYAN + Style.BRIGHT,
    }
    _symbols = {"success": "✓", "warning": "!", "error": "✗", "bullet": "•"}


def _apply(kind: str, message: str) -> str:
    style = _styles.get(kind, "")
    if not style:
        return message
    return f"{style}{message}{Style.RESET_ALL}"


def rule(char: str = "=", width: Optional[int] = None) -> None:
    """Print a horizontal rule spanning the console width."""

    count = width if width is not None else _width
    print(char * max(1, count))


def banner(title: str) -> None:
    if _plain_mode:
        print(f"=== {title} ===".center(_width))
        return
    print(pyfiglet.figlet_format(title, width=_width))


def section(title: str) -> None:
    rule("=")
    print(_apply("heading", f" {title.upper()}"))
    rule("=")


def kv(key: str, value: str) -> None:
    print(f"{key}: {value}")


def bullet(msg: str) -> None:
    print(f"{_symbols['bullet']} {msg}")


def success(msg: str) -> None:
    print(_apply("success", f"{_symbols['success']} {msg}"))


def warning(msg: str) -> None:
    print(_apply("warning", f"{_symbols['warning']} {msg}"))


def error(msg: str) -> None:
    print(_apply("error", f"{_symbols['error']} {msg}"))


def elapsed(prefix: str, seconds: float) -> None:
    """Print a timing line with millisecond resolution."""

    print(f"{prefix} {seconds:.3f}s")


def line() -> None:
    rule("-")
