"""taskcache: task output caching state for build systems.

Public API:
    - enabled() / disabled(reason): Build a caching state
    - ENABLED / DISABLED: Shared states for the common cases
    - DisabledReasonCategory / DisabledReason: Why caching was disabled
    - resolve_config() / caching_state_for(): Configuration
    - describe() / report(): Diagnostics
"""

from __future__ import annotations

import logging

from taskcache.config import FrozenConfig, caching_state_for, config_scope, resolve_config
from taskcache.errors import ConfigurationError, InternalError, TaskCacheError
from taskcache.reasons import DisabledReason, DisabledReasonCategory
from taskcache.reporting import describe, report, summarize
from taskcache.state import (
    DISABLED,
    ENABLED,
    CachingDisabled,
    CachingEnabled,
    CachingState,
    disabled,
    enabled,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("taskcache")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("taskcache").addHandler(logging.NullHandler())

__all__ = [
    "DISABLED",
    "ENABLED",
    "CachingDisabled",
    "CachingEnabled",
    "CachingState",
    "ConfigurationError",
    "DisabledReason",
    "DisabledReasonCategory",
    "FrozenConfig",
    "InternalError",
    "TaskCacheError",
    "caching_state_for",
    "config_scope",
    "describe",
    "disabled",
    "enabled",
    "report",
    "resolve_config",
    "summarize",
]
