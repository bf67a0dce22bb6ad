"""Tests for user-facing caching diagnostics."""

from __future__ import annotations

import logging

import pytest

from taskcache.config import FrozenConfig
from taskcache.reasons import DisabledReasonCategory
from taskcache.reporting import describe, report, summarize
from taskcache.state import DISABLED, ENABLED, disabled

pytestmark = pytest.mark.unit

_QUIET = FrozenConfig(build_cache_enabled=True, report_disabled_reasons=False)
_LOUD = FrozenConfig(build_cache_enabled=True, report_disabled_reasons=True)


def test_describe_surfaces_description_verbatim(no_outputs_reason):
    message = describe(":app:compile", disabled(no_outputs_reason))

    assert message == (
        "Caching disabled for task ':app:compile' because: Task has no outputs declared"
    )


def test_describe_enabled():
    assert describe(":lib:jar", ENABLED) == "Caching enabled for task ':lib:jar'"


def test_describe_rejects_non_state():
    with pytest.raises(TypeError):
        describe(":x", "enabled")  # type: ignore[arg-type]


def test_report_logs_disabled_reason_at_info(caplog, no_outputs_reason):
    with caplog.at_level(logging.DEBUG, logger="taskcache.reporting"):
        message = report(":app:compile", disabled(no_outputs_reason), config=_LOUD)

    (record,) = caplog.records
    assert record.levelno == logging.INFO
    assert record.getMessage() == message
    assert "Task has no outputs declared" in record.getMessage()


def test_report_uses_debug_when_reasons_are_quiet(caplog):
    with caplog.at_level(logging.DEBUG, logger="taskcache.reporting"):
        report(":app:compile", DISABLED, config=_QUIET)

    (record,) = caplog.records
    assert record.levelno == logging.DEBUG


def test_report_enabled_is_debug_only(caplog):
    with caplog.at_level(logging.DEBUG, logger="taskcache.reporting"):
        report(":lib:jar", ENABLED, config=_LOUD)

    assert [r.levelno for r in caplog.records] == [logging.DEBUG]


def test_report_falls_back_to_resolved_config(caplog):
    with caplog.at_level(logging.INFO, logger="taskcache.reporting"):
        report(":app:test", DISABLED)

    assert "Task output caching is disabled" in caplog.text


def test_summarize_counts_by_category(no_outputs_reason):
    states = {
        ":a": ENABLED,
        ":b": DISABLED,
        ":c": disabled(no_outputs_reason),
        ":d": disabled(no_outputs_reason),
        ":e": ENABLED,
    }

    assert summarize(states) == {
        None: 2,
        DisabledReasonCategory.BUILD_CACHE_DISABLED: 1,
        DisabledReasonCategory.NO_OUTPUTS_DECLARED: 2,
    }


def test_summarize_empty():
    assert summarize({}) == {}
