"""
test_debug_logger.py
--------------------
Unit tests for DebugLogger filtering and formatting.
"""

import pytest

from scene_transition.core.debug.debug_logger import DebugLogger, LoggerConfig
from scene_transition.core.services.operation_barrier import OperationBarrier


@pytest.fixture(autouse=True)
def restore_config():
    saved = (LoggerConfig.ENABLE_LOGGING, LoggerConfig.LOG_LEVEL, dict(LoggerConfig.CATEGORIES))
    LoggerConfig.SHOW_TIMESTAMP = False
    yield
    LoggerConfig.ENABLE_LOGGING, LoggerConfig.LOG_LEVEL, categories = saved
    LoggerConfig.CATEGORIES.clear()
    LoggerConfig.CATEGORIES.update(categories)
    LoggerConfig.SHOW_TIMESTAMP = True


def test_line_has_source_and_tag(capsys):
    DebugLogger.state("[STM] OnBeforeLoad (Active: A)", category="transition")

    out = capsys.readouterr().out
    assert "[TestDebugLogger][STATE] [STM] OnBeforeLoad (Active: A)" in out


def test_source_is_calling_class(capsys):
    DebugLogger.configure(level="VERBOSE")

    OperationBarrier().start_operation("fade")

    assert "[OperationBarrier][TRACE]" in capsys.readouterr().out


def test_disabled_category_is_silent(capsys):
    DebugLogger.system("subscribed", category="hooks")

    assert capsys.readouterr().out == ""


def test_warnings_ignore_category_table(capsys):
    DebugLogger.warn("Cleared 2 invalid blocking operations", category="hooks")

    assert "[WARN]" in capsys.readouterr().out


def test_level_filters_verbose_lines(capsys):
    DebugLogger.configure(level="INFO")
    DebugLogger.trace("hidden")

    DebugLogger.configure(level="verbose")
    DebugLogger.trace("shown")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "shown" in out


def test_configure_categories_and_switch(capsys):
    DebugLogger.configure(hooks=True)
    DebugLogger.system("subscribed", category="hooks")

    DebugLogger.configure(enabled=False)
    DebugLogger.fail("nothing")
    DebugLogger.section("Quiet")

    out = capsys.readouterr().out
    assert "subscribed" in out
    assert "nothing" not in out
    assert "Quiet" not in out


def test_unknown_level_rejected():
    with pytest.raises(ValueError):
        DebugLogger.configure(level="LOUD")


def test_init_entry_is_padded_to_line_length(capsys):
    DebugLogger.init_entry("TransitionScheduler")

    line = capsys.readouterr().out.strip()
    assert "> TransitionScheduler" in line
    assert line.endswith("[OK]\033[0m")
    assert "....." in line
