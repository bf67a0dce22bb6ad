"""Disablement reasons: a closed category plus a human-readable description."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from taskcache.errors import InternalError


class DisabledReasonCategory(str, Enum):
    """Why caching was not applied to a task, independent of the wording."""

    UNKNOWN = "unknown"
    BUILD_CACHE_DISABLED = "build_cache_disabled"
    NOT_ENABLED_FOR_TASK = "not_enabled_for_task"
    NOT_CACHEABLE = "not_cacheable"
    CACHE_IF_SPEC_NOT_SATISFIED = "cache_if_spec_not_satisfied"
    DO_NOT_CACHE_IF_SPEC_SATISFIED = "do_not_cache_if_spec_satisfied"
    NO_OUTPUTS_DECLARED = "no_outputs_declared"
    NON_CACHEABLE_TREE_OUTPUT = "non_cacheable_tree_output"
    OVERLAPPING_OUTPUTS = "overlapping_outputs"
    NON_CACHEABLE_TASK_ACTION = "non_cacheable_task_action"
    NON_CACHEABLE_TASK_IMPLEMENTATION = "non_cacheable_task_implementation"
    NON_CACHEABLE_INPUTS = "non_cacheable_inputs"
    VALIDATION_FAILURE = "validation_failure"

    def reason(self, description: str) -> DisabledReason:
        """Build a reason in this category."""
        return DisabledReason(self, description)


@dataclass(frozen=True, slots=True)
class DisabledReason:
    """A categorized explanation for why a task's output is not cached.

    The description is shown to users verbatim; the category is what code
    should branch on.
    """

    category: DisabledReasonCategory
    description: str

    def __post_init__(self) -> None:
        if not isinstance(self.category, DisabledReasonCategory):
            raise InternalError(
                f"category must be a DisabledReasonCategory, got {self.category!r}",
                hint="Build reasons with DisabledReasonCategory.<NAME>.reason(...).",
            )
        if not isinstance(self.description, str):
            raise InternalError(
                f"description must be a str, got {type(self.description).__name__}"
            )

    def __str__(self) -> str:
        return f"{self.category.name}: {self.description}"
