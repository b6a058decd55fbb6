import logging

from services.common import logging_utils


def test_level_resolution(monkeypatch):
    monkeypatch.delenv("POWER_FLOW_LOG_LEVEL", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert logging_utils._resolve_level(None) == logging.DEBUG
    monkeypatch.setenv("POWER_FLOW_LOG_LEVEL", "error")
    assert logging_utils._resolve_level(None) == logging.ERROR
    assert logging_utils._resolve_level("warning") == logging.WARNING
    assert logging_utils._resolve_level("chatty") == logging.INFO


def test_quiet_loggers():
    logging_utils.quiet_loggers(["power_flow_test.http"], level=logging.ERROR)
    assert logging.getLogger("power_flow_test.http").level == logging.ERROR


def test_get_logger_returns_named_logger():
    assert logging_utils.get_logger("dashboard.components").name == "dashboard.components"
