"""Pytest configuration and fixtures for Datewise tests."""

from __future__ import annotations

import datetime
import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so datewise can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def ref_now() -> datetime.datetime:
    """Fixed reference "now": Tuesday 2024-03-05 12:00:00."""
    return datetime.datetime(2024, 3, 5, 12, 0, 0)


@pytest.fixture
def frozen_now(monkeypatch: pytest.MonkeyPatch, ref_now: datetime.datetime) -> datetime.datetime:
    """Patch the library wall clock to return ref_now."""
    from datewise import clock

    monkeypatch.setattr(clock, "local_now", lambda: ref_now)
    return ref_now
