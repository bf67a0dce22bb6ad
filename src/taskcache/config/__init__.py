# src/taskcache/config/__init__.py

"""Configuration management for taskcache.

Configuration is resolved once at entry points into immutable FrozenConfig
objects; ``config_scope`` makes one ambient for a block of code.
"""

# ruff: noqa: I001

from .core import (
    FrozenConfig,
    Origin,
    FieldOrigin,
    Settings,
    SourceMap,
    caching_state_for,
    config_scope,
    current_config,
    resolve_config,
    was_field_overridden,
)
from .loaders import ENV_PREFIX, load_env

__all__ = [  # noqa: RUF022
    # Main public API
    "resolve_config",
    "FrozenConfig",
    "config_scope",
    "current_config",
    "caching_state_for",
    # Core types for typing and advanced usage
    "Settings",
    "Origin",
    "FieldOrigin",
    "SourceMap",
    "was_field_overridden",
    # Loaders
    "ENV_PREFIX",
    "load_env",
]
