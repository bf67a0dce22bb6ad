# src/taskcache/config/loaders.py

"""Configuration loaders.

Pure data loading: each loader returns a plain dictionary that the core
resolver merges and validates. Nothing here performs validation.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

ENV_PREFIX = "TASKCACHE_"


def _coerce_bool(v: str) -> bool:
    """Convert string to boolean using common conventions."""
    return v.strip().lower() in {"1", "true", "yes", "on"}


def env_key(field: str) -> str:
    """Return the environment variable that feeds ``field``."""
    return f"{ENV_PREFIX}{field.upper()}"


def load_env() -> Mapping[str, Any]:
    """Load configuration from ``TASKCACHE_*`` environment variables.

    Values for boolean schema fields are coerced; anything else is passed
    through as a string so the schema can report it precisely.
    """
    from .core import Settings  # local import to keep loaders import-light

    config: dict[str, Any] = {}
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        field_name = key[len(ENV_PREFIX) :].lower()
        info = Settings.model_fields.get(field_name)
        if info is not None and info.annotation is bool:
            config[field_name] = _coerce_bool(value)
        else:
            config[field_name] = value
    return config
