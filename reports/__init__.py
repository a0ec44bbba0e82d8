from __future__ import annotations

from .timing_dashboard import make_timing_dashboard

__all__ = ["make_timing_dashboard"]
