"""Pytest configuration and fixtures for datef tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so datef can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def reference_time():
    """The reference time Mon Jan 2 15:04:05.123456789 MST 2006 (UTC-7)."""
    from datef.core.instant import Instant
    from datef.units.timezone import Timezone

    return Instant.from_components(
        2006, 1, 2, 15, 4, 5, 123_456_789,
        timezone=Timezone.from_hours(-7, name="MST"),
    )
