"""Pytest configuration and fixtures.

Provides environment isolation, logging configuration and shared caching-state
fixtures. Fixtures here are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import logging
import os

import pytest

from taskcache.reasons import DisabledReason, DisabledReasonCategory

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_taskcache_env(request, monkeypatch):
    """Clear TASKCACHE_* env vars to prevent test pollution.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return

    for key in list(os.environ.keys()):
        if key.startswith("TASKCACHE_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("dotenv").setLevel(logging.WARNING)


# =============================================================================
# Shared values (opt-in)
# =============================================================================


@pytest.fixture
def no_outputs_reason() -> DisabledReason:
    """A typical per-task reason produced by external decision logic."""
    return DisabledReasonCategory.NO_OUTPUTS_DECLARED.reason(
        "Task has no outputs declared"
    )
