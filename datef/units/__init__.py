"""Temporal units.

This module provides:
    - Timezone: UTC offset-based timezone representation
"""

from __future__ import annotations

from datef.units.timezone import Timezone

__all__: list[str] = [
    "Timezone",
]
