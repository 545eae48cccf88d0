import logging

from shambago.common.logger import get_logger
from frontend.utils.logger import get_logger as get_frontend_logger


def test_handler_added_once():
    first = get_logger("shambago.tests.once")
    second = get_logger("shambago.tests.once")

    assert first is second
    assert len(first.handlers) == 1
    assert first.propagate is False


def test_frontend_logger_is_tagged():
    logger = get_frontend_logger("frontend.tests.tagged")
    record = logging.LogRecord(
        "frontend.tests.tagged", logging.INFO, __file__, 1, "hello", None, None
    )

    line = logger.handlers[0].formatter.format(record)

    assert "| FRONTEND |" in line
    assert line.endswith("frontend.tests.tagged | hello")


def test_core_logger_is_untagged():
    logger = get_logger("shambago.tests.untagged")
    record = logging.LogRecord(
        "shambago.tests.untagged", logging.INFO, __file__, 1, "hi", None, None
    )

    assert "FRONTEND" not in logger.handlers[0].formatter.format(record)
