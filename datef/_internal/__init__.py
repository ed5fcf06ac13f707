"""Internal utilities for datef.

This module contains private implementation details:
    - Constants and magic numbers
    - Calendar arithmetic
    - Custom decorators (@memoize)

Note: This module is not part of the public API.
"""

from __future__ import annotations

from datef._internal.decorators import memoize

__all__: list[str] = [
    "memoize",
]
