"""Pytest configuration and fixtures for Hilal tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so hilal can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from hilal import PlainDate  # noqa: E402

UMALQURA = "islamic-umalqura"


@pytest.fixture
def hijri_eve() -> PlainDate:
    """30 Dhu al-Hijjah 1445 (2024-07-06), the last day of the year."""
    return PlainDate(2024, 7, 6).with_calendar(UMALQURA)
