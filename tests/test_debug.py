"""
Tests for connect4.debug
"""

import logging

import pytest

from connect4.debug import TRACE, DebugLevel, DebugManager


@pytest.fixture
def manager(caplog) -> DebugManager:
    """Debug manager writing to pytest's capture handler."""
    manager = DebugManager(name="connect4.test")
    manager.logger.addHandler(caplog.handler)
    caplog.set_level(TRACE, logger="connect4.test")
    yield manager
    manager.logger.removeHandler(caplog.handler)
    manager.configure(log_file="")


class TestLevels:

    def test_default_info(self, manager: DebugManager, caplog):
        manager.info("shown")
        manager.debug("hidden")
        assert [r.getMessage() for r in caplog.records] == ["shown"]

    def test_component_prefix(self, manager: DebugManager, caplog):
        manager.warning("column full", "engine")
        assert caplog.records[-1].getMessage() == "[engine] column full"
        assert caplog.records[-1].levelno == logging.WARNING

    def test_trace_level(self, manager: DebugManager, caplog):
        manager.configure(level=DebugLevel.TRACE)
        manager.trace("deep")
        assert caplog.records[-1].levelname == "TRACE"

    def test_disabled(self, manager: DebugManager, caplog):
        manager.configure(enabled=False)
        manager.error("nothing")
        assert caplog.records == []

    def test_component_filter(self, manager: DebugManager, caplog):
        manager.configure(components=["engine"])
        manager.info("kept", "engine")
        manager.info("dropped", "board")
        assert [r.getMessage() for r in caplog.records] == ["[engine] kept"]

    def test_set_from_string(self, manager: DebugManager):
        assert manager.set_from_string("Debug")
        assert manager.level == DebugLevel.DEBUG
        assert not manager.set_from_string("loud")
        assert manager.level == DebugLevel.DEBUG


class TestFileOutput:

    def test_log_file(self, manager: DebugManager, tmp_path):
        path = tmp_path / "game.log"
        manager.configure(log_file=str(path))
        manager.info("to file", "cli")
        manager.configure(log_file="")
        assert "[cli] to file" in path.read_text()


class TestTimers:

    def test_start_end(self, manager: DebugManager):
        manager.start_timer("t")
        elapsed = manager.end_timer("t")
        assert elapsed is not None and elapsed >= 0

    def test_end_without_start(self, manager: DebugManager, caplog):
        assert manager.end_timer("never") is None
        assert "not started" in caplog.records[-1].getMessage()

    def test_context_manager(self, manager: DebugManager, caplog):
        manager.configure(level=DebugLevel.TRACE)
        with manager.timer("block", "engine"):
            pass
        assert "Performance [block]" in caplog.records[-1].getMessage()
