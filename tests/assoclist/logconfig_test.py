import logging

import pytest

from assoclist import logconfig


def test_trace_level_registered():
    assert "TRACE" == logging.getLevelName(logconfig.TRACE)


def test_default_level(monkeypatch):
    monkeypatch.delenv("ASSOCLIST_LOGGING_LEVEL", raising=False)
    assert "WARNING" == logconfig.get_level()


def test_level_from_env(monkeypatch):
    monkeypatch.setenv("ASSOCLIST_LOGGING_LEVEL", "DEBUG")
    assert "DEBUG" == logconfig.get_level()


@pytest.mark.parametrize(
    "env,handler_type",
    [
        ("true", logging.StreamHandler),
        ("TRUE", logging.StreamHandler),
        ("", logging.NullHandler),
        ("false", logging.NullHandler),
    ],
)
def test_get_handler(monkeypatch, env, handler_type):
    monkeypatch.setenv("ASSOCLIST_USE_DEV_LOGGER", env)
    handler = logconfig.get_handler(level="INFO")
    assert type(handler) is handler_type
    assert logging.INFO == handler.level


def test_configure_root_logger(monkeypatch):
    monkeypatch.delenv("ASSOCLIST_USE_DEV_LOGGER", raising=False)
    logger = logging.getLogger("assoclist")
    handlers = list(logger.handlers)
    level = logger.level
    try:
        logconfig.configure_root_logger(level="ERROR")
        assert logging.ERROR == logger.level
        assert isinstance(logger.handlers[-1], logging.NullHandler)
    finally:
        logger.handlers = handlers
        logger.setLevel(level)


def test_mutations_log_at_trace(caplog):
    from assoclist import ext

    with caplog.at_level(logconfig.TRACE, logger="assoclist"):
        seq = []
        ext.entry(seq, "a").or_insert(1)
        ext.insert(seq, "a", 2)
        ext.remove(seq, "a")
    messages = [r.getMessage() for r in caplog.records]
    assert "Appended new pair at index 0" in messages
    assert "Replaced value at index 0" in messages
    assert "Removed pair at index 0" in messages


def test_configure_root_logger_replaces_own_handler():
    logger = logging.getLogger("assoclist")
    handlers = list(logger.handlers)
    level = logger.level
    try:
        logconfig.configure_root_logger()
        logconfig.configure_root_logger()
        own = [h for h in logger.handlers if h.get_name() == logconfig.HANDLER_NAME]
        assert 1 == len(own)
    finally:
        logger.handlers = handlers
        logger.setLevel(level)
