from __future__ import annotations

import logging

from layerdeps.core.stdlib_logging import LOG_FORMAT, configure_stdlib_logging


def _layerdeps_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h.formatter, "_fmt", None) == LOG_FORMAT]


def test_single_handler_when_called_twice():
    configure_stdlib_logging(level="INFO")
    configure_stdlib_logging(level="DEBUG")

    handlers = _layerdeps_handlers()
    assert len(handlers) == 1
    assert handlers[0].level == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG


def test_file_handler(tmp_path):
    log_path = tmp_path / "logs" / "layerdeps.log"

    configure_stdlib_logging(level="info", log_path=log_path)
    logging.getLogger("layerdeps.test").info("hello from test")
    for handler in _layerdeps_handlers():
        handler.flush()

    assert "INFO layerdeps.test: hello from test" in log_path.read_text(encoding="utf-8")


def test_switching_target_replaces_handler(tmp_path):
    configure_stdlib_logging(level="INFO", log_path=tmp_path / "a.log")
    configure_stdlib_logging(level="INFO")

    handlers = _layerdeps_handlers()
    assert len(handlers) == 1
    assert not isinstance(handlers[0], logging.FileHandler)


def test_unknown_level_falls_back_to_info():
    configure_stdlib_logging(level="chatty")

    assert logging.getLogger().level == logging.INFO
