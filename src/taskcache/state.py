"""Task output caching state.

A task's caching state is either enabled, or disabled with exactly one
reason. The two cases are separate types so an enabled state can never carry
a reason and a disabled state can never lack one.

Example:
    category = DisabledReasonCategory.NO_OUTPUTS_DECLARED
    state = disabled(category.reason("Task has no outputs declared"))
    match state:
        case CachingDisabled(reason=reason):
            print(reason.category, reason.description)
        case CachingEnabled():
            ...
"""

from __future__ import annotations

import dataclasses
from typing import Final, Literal

from taskcache.errors import InternalError
from taskcache.reasons import DisabledReason, DisabledReasonCategory

__all__ = [
    "DISABLED",
    "ENABLED",
    "CachingDisabled",
    "CachingEnabled",
    "CachingState",
    "disabled",
    "enabled",
]


@dataclasses.dataclass(frozen=True, slots=True)
class CachingEnabled:
    """Task output caching is enabled."""

    @property
    def is_enabled(self) -> Literal[True]:
        return True

    @property
    def reason(self) -> None:
        return None

    @property
    def disabled_reason(self) -> None:
        return None

    def __str__(self) -> str:
        return "CachingState(disabled_reason=None)"

    __repr__ = __str__


@dataclasses.dataclass(frozen=True, slots=True)
class CachingDisabled:
    """Task output caching is disabled for the attached reason."""

    reason: DisabledReason

    def __post_init__(self) -> None:
        if self.reason is None:
            raise InternalError(
                "reason must be set if task output caching is disabled",
                hint="Pass a DisabledReason describing why caching was disabled.",
            )
        if not isinstance(self.reason, DisabledReason):
            raise InternalError(
                f"reason must be a DisabledReason, got {type(self.reason).__name__}",
                hint="Build reasons with DisabledReasonCategory.<NAME>.reason(...).",
            )

    @property
    def is_enabled(self) -> Literal[False]:
        return False

    @property
    def disabled_reason(self) -> str:
        """The reason's description, for display."""
        return self.reason.description

    def __str__(self) -> str:
        return f"CachingState(disabled_reason={str(self.reason)!r})"

    __repr__ = __str__


CachingState = CachingEnabled | CachingDisabled

ENABLED: Final[CachingEnabled] = CachingEnabled()
DISABLED: Final[CachingDisabled] = CachingDisabled(
    DisabledReasonCategory.BUILD_CACHE_DISABLED.reason("Task output caching is disabled")
)


def enabled() -> CachingState:
    """Return the shared enabled state."""
    return ENABLED


def disabled(reason: DisabledReason) -> CachingState:
    """Return a disabled state for ``reason``.

    Raises:
        InternalError: If ``reason`` is missing. A disabled state without a
            cause would hide the real caching problem from the user.
    """
    return CachingDisabled(reason)
