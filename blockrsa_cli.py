#!/usr/bin/env python3
"""
Block RSA CLI – generate a key, encrypt a text block by block, decrypt it
concurrently and report sizes and timings.

Usage:
  Encrypt a file:
    python blockrsa_cli.py --input war_and_peace.txt
    python blockrsa_cli.py --input war_and_peace.txt --bits 2048 --workers 8

  Encrypt a literal message (or type one when prompted):
    python blockrsa_cli.py --message "hello"
    python blockrsa_cli.py

  Time several key sizes and export a dashboard PNG:
    python blockrsa_cli.py --input book.txt --dashboard out/timings.png --sweep 512 1024 2048

Environment: BLOCKRSA_BITS, BLOCKRSA_WORKERS, BLOCKRSA_INPUT,
BLOCKRSA_LOG_LEVEL and NO_COLOR (a local .env file is read too).
"""

from __future__ import annotations

import argparse
import logging
import sys
import textwrap
from typing import List, Optional, Sequence

from blockrsa.errors import BlockRsaError
from blockrsa.pipeline import PipelineReport, run_pipeline
from blockrsa.settings import Settings, load_settings
from blockrsa.text_source import read_text_file
from reports.timing_dashboard import make_timing_dashboard
from utils import console_ui

logger = logging.getLogger("blockrsa.cli")

DEFAULT_SWEEP = (512, 1024, 2048)
CIPHERTEXT_PREVIEW_BLOCKS = 3


def _configure_logging(level_name: str) -> None:
    level_value = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(
        level=level_value,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _load_message(args: argparse.Namespace) -> str:
    if args.message is not None:
        return args.message
    if args.input:
        return read_text_file(args.input)
    return input("Enter plaintext: ")


def _print_report(report: PipelineReport) -> None:
    console_ui.kv(
        "Text size",
        f"{report.message_bytes} bytes ({report.message_mib:.4f} MiB), "
        f"{report.message_chars} characters",
    )
    console_ui.kv("Modulus n size", f"{report.bits} bits")
    console_ui.kv("Maximum block size", f"{report.block_size} bytes")
    console_ui.kv("Ciphertext blocks", str(report.block_count))
    console_ui.kv("Decrypted message identical to original", str(report.identical))
    console_ui.elapsed("Key generation time:", report.keygen_seconds)
    console_ui.elapsed("Encryption time:", report.encrypt_seconds)
    console_ui.elapsed("Decryption time:", report.decrypt_seconds)


def _print_ciphertext_preview(ciphertexts: Sequence[int]) -> None:
    console_ui.section("Ciphertext (head)")
    for index, value in enumerate(ciphertexts[:CIPHERTEXT_PREVIEW_BLOCKS]):
        text = hex(value)[2:66] + ("…" if value.bit_length() > 256 else "")
        print(f"      Block {index:02d}: 0x{text}")
    hidden = len(ciphertexts) - CIPHERTEXT_PREVIEW_BLOCKS
    if hidden > 0:
        console_ui.bullet(f"... {hidden} more block(s)")


def run_single(message: str, bits: int, workers: Optional[int], show_ciphertext: bool) -> bool:
    console_ui.section("Block RSA round-trip")
    report, _, ciphertexts = run_pipeline(message, bits, max_workers=workers)
    _print_report(report)
    if show_ciphertext:
        _print_ciphertext_preview(ciphertexts)
    if report.identical:
        console_ui.success("Round-trip completed.")
    else:
        console_ui.error("Decrypted text differs from the original.")
    return report.identical


def run_sweep(message: str, sweep: Sequence[int], workers: Optional[int], save_path: str) -> bool:
    reports: List[PipelineReport] = []
    for index, bits in enumerate(sweep, start=1):
        console_ui.section(f"[{index}/{len(sweep)}] {bits}-bit key")
        report, _, _ = run_pipeline(message, bits, max_workers=workers)
        _print_report(report)
        reports.append(report)
        console_ui.line()

    out = make_timing_dashboard(reports, save_path)
    console_ui.success(f"Saved timing dashboard to {out.resolve()}")
    return all(report.identical for report in reports)


def parse_args(argv: Optional[Sequence[str]] = None, settings: Optional[Settings] = None) -> argparse.Namespace:
    settings = settings or Settings()
    ap = argparse.ArgumentParser(
        description="Textbook RSA over fixed-size blocks with concurrent decryption.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""
        Examples:
          python blockrsa_cli.py --input war_and_peace.txt
          python blockrsa_cli.py --message "AB" --bits 1024
          python blockrsa_cli.py --input book.txt --dashboard timings.png
        """),
    )
    source = ap.add_mutually_exclusive_group()
    source.add_argument("--input", default=settings.input_path, help="Plaintext file (UTF-8).")
    source.add_argument("--message", help="Plaintext given on the command line.")
    ap.add_argument(
        "--bits",
        type=int,
        default=settings.bits,
        help=f"Modulus size in bits (default {settings.bits}).",
    )
    ap.add_argument(
        "--workers",
        type=int,
        default=settings.workers,
        help="Cap on decryption threads (default: one per block).",
    )
    ap.add_argument(
        "--dashboard",
        metavar="PNG",
        help="Time every key size in --sweep and save a dashboard image.",
    )
    ap.add_argument(
        "--sweep",
        type=int,
        nargs="+",
        default=list(DEFAULT_SWEEP),
        help="Key sizes used with --dashboard.",
    )
    ap.add_argument(
        "--show-ciphertext",
        action="store_true",
        help="Print the first ciphertext blocks.",
    )
    ap.add_argument(
        "--plain",
        action="store_true",
        default=settings.no_color,
        help="Disable colors/banners; print plain ASCII.",
    )
    ap.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level name (default %(default)s).",
    )
    return ap.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        settings = load_settings()
    except ValueError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    args = parse_args(argv, settings)
    _configure_logging(args.log_level)
    console_ui.init(plain=args.plain)
    console_ui.banner("Block RSA")

    try:
        message = _load_message(args)
        if args.dashboard:
            ok = run_sweep(message, args.sweep, args.workers, args.dashboard)
        else:
            ok = run_single(message, args.bits, args.workers, args.show_ciphertext)
    except (BlockRsaError, FileNotFoundError, ValueError) as exc:
        logger.debug("Run failed", exc_info=True)
        console_ui.error(f"Failed: {exc}")
        return 1
    except (EOFError, KeyboardInterrupt):
        console_ui.warning("No plaintext given.")
        return 1

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
