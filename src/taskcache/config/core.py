# src/taskcache/config/core.py

"""Configuration schema and resolution.

Configuration is resolved once at the entry point into an immutable
FrozenConfig, which then flows to the code that needs it:
- Settings: pydantic schema holding fields, defaults and validation
- FrozenConfig: immutable runtime payload
- SourceMap: where each field's value came from
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from dataclasses import dataclass
from enum import Enum
from functools import cache
import logging
from typing import TYPE_CHECKING, Any, Literal, overload

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from taskcache.errors import ConfigurationError
from taskcache.state import DISABLED, ENABLED, CachingState

from .loaders import env_key, load_env

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

log = logging.getLogger(__name__)

# --- Schema (Pydantic wall) ---


class Settings(BaseModel):
    """Pydantic schema for configuration validation and defaults."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    #: When False every task starts from the shared "caching is disabled" state.
    build_cache_enabled: bool = Field(default=True)
    #: Log disabled reasons at INFO rather than DEBUG.
    report_disabled_reasons: bool = Field(default=True)


@cache
def _default_settings() -> dict[str, Any]:
    return Settings().model_dump()


# --- Immutable runtime payload ---


@dataclass(frozen=True)
class FrozenConfig:
    """Validated configuration passed to the code that reads it."""

    build_cache_enabled: bool
    report_disabled_reasons: bool


# --- Audit types ---


class Origin(str, Enum):
    """Source origin for configuration field values."""

    DEFAULT = "default"
    ENV = "env"
    OVERRIDES = "overrides"


@dataclass(frozen=True)
class FieldOrigin:
    """Tracks where a configuration field value came from."""

    origin: Origin
    env_key: str | None = None  # e.g., "TASKCACHE_BUILD_CACHE_ENABLED"


SourceMap = dict[str, FieldOrigin]


# --- Ambient scope ---

_AMBIENT: contextvars.ContextVar[FrozenConfig | None] = contextvars.ContextVar(
    "ambient_config", default=None
)

_DOTENV_LOADED: bool = False


@contextmanager
def config_scope(
    cfg_or_overrides: Mapping[str, Any] | FrozenConfig | None = None,
    **overrides: object,
) -> Generator[FrozenConfig]:
    """Run a block with an ambient configuration.

    Thread-safe and async-safe; the previous ambient config is restored on exit.

    Example:
        with config_scope(build_cache_enabled=False):
            state = caching_state_for()  # the shared DISABLED state
    """
    if isinstance(cfg_or_overrides, FrozenConfig):
        cfg = cfg_or_overrides
    else:
        cfg = resolve_config(overrides={**(cfg_or_overrides or {}), **overrides})

    token = _AMBIENT.set(cfg)
    try:
        yield cfg
    finally:
        _AMBIENT.reset(token)


def current_config() -> FrozenConfig:
    """Return the ambient config, or resolve one from the environment."""
    cfg = _AMBIENT.get()
    return cfg if cfg is not None else resolve_config()


def _try_load_dotenv() -> None:
    """Load a ``.env`` file into the environment, once per process."""
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    from dotenv import load_dotenv

    load_dotenv()
    _DOTENV_LOADED = True


# --- Public resolution API ---


@overload
def resolve_config(
    overrides: Mapping[str, Any] | None = ...,
    *,
    explain: Literal[True],
) -> tuple[FrozenConfig, SourceMap]: ...


@overload
def resolve_config(
    overrides: Mapping[str, Any] | None = ...,
    *,
    explain: Literal[False] = ...,
) -> FrozenConfig: ...


def resolve_config(
    overrides: Mapping[str, Any] | None = None,
    *,
    explain: bool = False,
) -> FrozenConfig | tuple[FrozenConfig, SourceMap]:
    """Resolve configuration into a FrozenConfig.

    Precedence: defaults < env < overrides.

    Args:
        overrides: Programmatic configuration overrides.
        explain: If True, return tuple of (config, source_map) for audit.

    Raises:
        ConfigurationError: If configuration validation fails.
    """
    _try_load_dotenv()

    merged, sources = _resolve_layers(env=load_env(), overrides=overrides or {})

    try:
        settings = Settings.model_validate(merged)
    except ValidationError as e:
        err = e.errors()[0]
        loc = err.get("loc") or ()
        field = str(loc[0]) if loc else None
        msg = err.get("msg")
        hint = None
        if field is not None:
            origin = sources.get(field)
            if origin is not None and origin.env_key:
                hint = f"Check the value of {origin.env_key}."
            elif field not in Settings.model_fields:
                hint = f"Known fields: {', '.join(sorted(Settings.model_fields))}."
        raise ConfigurationError(
            f"Configuration validation failed for {field!r}: {msg}", hint=hint
        ) from e

    frozen = FrozenConfig(
        build_cache_enabled=settings.build_cache_enabled,
        report_disabled_reasons=settings.report_disabled_reasons,
    )
    log.debug("Resolved configuration: %s", frozen)
    return (frozen, sources) if explain else frozen


def caching_state_for(cfg: FrozenConfig | None = None) -> CachingState:
    """Return the shared starting state for tasks under ``cfg``.

    Uses the ambient configuration when ``cfg`` is not given.
    """
    cfg = cfg if cfg is not None else current_config()
    return ENABLED if cfg.build_cache_enabled else DISABLED


# --- Internal helpers ---


def _resolve_layers(
    *,
    env: Mapping[str, Any],
    overrides: Mapping[str, Any],
) -> tuple[dict[str, Any], SourceMap]:
    """Merge layers with last-wins precedence, recording each field's origin."""
    out: dict[str, Any] = {}
    src: SourceMap = {}

    for k, v in _default_settings().items():
        out[k] = v
        src[k] = FieldOrigin(origin=Origin.DEFAULT)

    for k, v in env.items():
        out[k] = v
        src[k] = FieldOrigin(origin=Origin.ENV, env_key=env_key(k))

    for k, v in overrides.items():
        out[k] = v
        src[k] = FieldOrigin(origin=Origin.OVERRIDES)

    return out, src


def was_field_overridden(sources: SourceMap, field: str) -> bool:
    """Return True if a field's value did not come from defaults."""
    fo = sources.get(field)
    return bool(fo and fo.origin is not Origin.DEFAULT)
