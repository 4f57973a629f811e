"""
Shared helpers for Power Pong.
"""

from __future__ import annotations


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into ``[low, high]``."""
    return max(low, min(high, value))
