"""Stage timings of the block RSA pipeline across key sizes."""
from __future__ import annotations

from pathlib import Path
from typing import Sequence

from blockrsa.pipeline import PipelineReport
from utils.plotting import ensure_parent, nice_axes, save, wide_grid


def make_timing_dashboard(reports: Sequence[PipelineReport], save_path: str | Path) -> Path:
    """Plot key generation, encryption and decryption times per key size and save to PNG."""
    if not reports:
        raise ValueError("At least one pipeline report is required")
    target = ensure_parent(save_path)

    ordered = sorted(reports, key=lambda report: report.bits)
    labels = [str(report.bits) for report in ordered]
    positions = range(len(ordered))

    fig, axes = wide_grid(1, 2)
    message_bytes = ordered[0].message_bytes
    fig.suptitle(f"Textbook RSA block pipeline ({message_bytes} byte message)")

    ax = axes[0][0]
    nice_axes(ax, "Stage time by key size", xlabel="Modulus (bits)", ylabel="Seconds")
    width = 0.27
    for offset, label, attr, color in (
        (-width, "Key generation", "keygen_seconds", "#6366f1"),
        (0.0, "Encrypt", "encrypt_seconds", "#f97316"),
        (width, "Decrypt (concurrent)", "decrypt_seconds", "#10b981"),
    ):
        ax.bar(
            [p + offset for p in positions],
            [getattr(report, attr) for report in ordered],
            width=width,
            label=label,
            color=color,
        )
    ax.set_xticks(list(positions))
    ax.set_xticklabels(labels)
    ax.legend()

    ax = axes[0][1]
    nice_axes(ax, "Blocks per message", xlabel="Modulus (bits)", ylabel="Blocks")
    bars = ax.bar(list(positions), [report.block_count for report in ordered], color="#3b82f6")
    ax.set_xticks(list(positions))
    ax.set_xticklabels([f"{label}\n({report.block_size} B/block)" for label, report in zip(labels, ordered)])
    for bar, report in zip(bars, ordered):
        ax.text(
            bar.get_x() + bar.get_width() / 2,
            bar.get_height(),
            str(report.block_count),
            ha="center",
            va="bottom",
        )

    fig.tight_layout(rect=(0, 0, 1, 0.92))
    return save(fig, target)


__all__ = ["make_timing_dashboard"]
