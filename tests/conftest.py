"""Pytest configuration and fixtures.

Provides environment isolation, logging configuration and marker registration.
All fixtures here are autouse unless noted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import os
from typing import Any

import pytest

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class RecordingCallback:
    """Callable test double that records its arguments.

    Returns ``returns`` on every call. Use to verify how many times a
    combinator invoked its callback, and with what.
    """

    returns: Any = None
    calls: list[Any] = field(default_factory=list)

    def __call__(self, arg: Any) -> Any:
        self.calls.append(arg)
        return self.returns

    @property
    def call_count(self) -> int:
        return len(self.calls)


@pytest.fixture
def recorder():
    """Return a factory for RecordingCallback doubles (not autouse)."""
    return RecordingCallback


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_okerr_env(request, monkeypatch):
    """Clear OKERR_* env vars so toggles never leak between tests.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return

    for key in list(os.environ.keys()):
        if key.startswith("OKERR_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("asyncio").setLevel(logging.WARNING)


# =============================================================================
# Pytest Hooks
# =============================================================================


def pytest_configure(config):
    """Configure custom markers for test organization."""
    markers = [
        "unit: Fast, isolated unit tests",
        "allow_env_pollution: Keep OKERR_* environment variables for this test",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)
