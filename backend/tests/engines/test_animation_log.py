"""Unit tests for engines.animation.modules.log."""

import logging

import pytest

from animgen.engines.animation.modules.log import MAX_MESSAGE_CHARS, make_log_module

LOGGER_NAME = "tests.animation.log"


@pytest.fixture
def log(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)
    return make_log_module(logger_instance=logging.getLogger(LOGGER_NAME), extra={"scene": "intro"})


class TestLogModule:
    def test_levels(self, log, caplog: pytest.LogCaptureFixture) -> None:
        log.info("a")
        log.warn("b")
        log.error("c")
        assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
            (logging.INFO, "a"),
            (logging.WARNING, "b"),
            (logging.ERROR, "c"),
        ]

    def test_debug_filtered_by_level(self, log, caplog: pytest.LogCaptureFixture) -> None:
        log.debug("hidden")
        assert caplog.records == []

    def test_formatting(self, log, caplog: pytest.LogCaptureFixture) -> None:
        log.info("frame %s of %s", 3, 10)
        log.info("no placeholders", 1, 2)
        assert [r.getMessage() for r in caplog.records] == ["frame 3 of 10", "no placeholders 1 2"]

    def test_extra_attached(self, log, caplog: pytest.LogCaptureFixture) -> None:
        log.info("hello")
        assert caplog.records[0].scene == "intro"

    def test_truncation(self, log, caplog: pytest.LogCaptureFixture) -> None:
        log.warn("x" * (MAX_MESSAGE_CHARS + 500))
        message = caplog.records[0].getMessage()
        assert message.endswith("...[truncated]")
        assert len(message) == MAX_MESSAGE_CHARS + len("...[truncated]")

    def test_non_string_message(self, log, caplog: pytest.LogCaptureFixture) -> None:
        log.info({"frame": 1})
        assert caplog.records[0].getMessage() == "{'frame': 1}"
