"""Diagnostics for task caching states.

Disabled reasons are surfaced verbatim so users can see why a task that looks
cacheable was not cached.
"""

from __future__ import annotations

from collections import Counter
import logging
from typing import TYPE_CHECKING

from taskcache.state import CachingDisabled, CachingEnabled

if TYPE_CHECKING:
    from collections.abc import Mapping

    from taskcache.config import FrozenConfig
    from taskcache.reasons import DisabledReasonCategory
    from taskcache.state import CachingState

log = logging.getLogger(__name__)


def describe(task_path: str, state: CachingState) -> str:
    """Return a one-line, user-facing description of ``state``."""
    match state:
        case CachingDisabled(reason=reason):
            return f"Caching disabled for task '{task_path}' because: {reason.description}"
        case CachingEnabled():
            return f"Caching enabled for task '{task_path}'"
    raise TypeError(f"Not a caching state: {state!r}")


def report(
    task_path: str, state: CachingState, *, config: FrozenConfig | None = None
) -> str:
    """Log the description of ``state`` and return it.

    Disabled states are logged at INFO when ``report_disabled_reasons`` is on;
    everything else goes to DEBUG.
    """
    if config is None:
        from taskcache.config import current_config

        config = current_config()

    message = describe(task_path, state)
    level = (
        logging.INFO
        if not state.is_enabled and config.report_disabled_reasons
        else logging.DEBUG
    )
    log.log(level, "%s", message)
    return message


def summarize(
    states: Mapping[str, CachingState],
) -> dict[DisabledReasonCategory | None, int]:
    """Count states per disabled category; enabled states count under ``None``."""
    counts: Counter[DisabledReasonCategory | None] = Counter()
    for state in states.values():
        counts[state.reason.category if state.reason is not None else None] += 1
    return dict(counts)
