"""Core temporal types.

This module provides:
    - Instant: Point in time with nanosecond precision and a display zone
"""

from __future__ import annotations

from datef.core.instant import Instant

__all__: list[str] = [
    "Instant",
]
