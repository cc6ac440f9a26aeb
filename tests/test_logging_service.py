"""Tests for the logging service."""

import logging

from sentinel_ui.services.logging_service import LoggingService, LogLevel


def test_callbacks_receive_formatted_messages():
    service = LoggingService(level="DEBUG")
    received = []
    service.add_handler(lambda message, level: received.append((message, level)))

    service.info("daemon connected")

    message, level = received[0]
    assert level is LogLevel.INFO
    assert "daemon connected" in message
    assert "test_logging_service.py" in message


def test_module_loggers_are_routed():
    service = LoggingService(level="INFO")
    received = []
    service.add_handler(lambda message, level: received.append(level))

    logging.getLogger("sentinel_ui.managers.ipc_manager").warning("connection lost")

    assert received == [LogLevel.WARNING]


def test_level_filters_messages():
    service = LoggingService(level="WARNING")
    received = []
    service.add_handler(lambda message, level: received.append(level))

    service.debug("noise")
    service.info("noise")
    service.error("real problem")

    assert received == [LogLevel.ERROR]


def test_remove_handler():
    service = LoggingService()
    received = []

    def handler(message, level):
        received.append(message)

    service.add_handler(handler)
    service.remove_handler(handler)
    service.warning("nobody listening")

    assert received == []


def test_broken_handler_does_not_raise():
    service = LoggingService()
    received = []

    def broken(message, level):
        raise RuntimeError("handler bug")

    service.add_handler(broken)
    service.add_handler(lambda message, level: received.append(message))

    service.error("still delivered")

    assert len(received) == 1

