from __future__ import annotations

import logging

from minitemplate import render
from minitemplate.logging import LogConfig
from minitemplate.logging import configure_logging


def test_configure_logging_with_file(tmp_path):
    log_file = tmp_path / "minitemplate.log"
    logger = configure_logging(
        LogConfig(log_file=log_file, log_level=logging.DEBUG, console_level=logging.ERROR)
    )
    try:
        assert logger.name == "minitemplate"
        assert len(logger.handlers) == 2

        render("{{#xs}}{{.}}{{/xs}}", {"xs": [1, 2]})
        for handler in logger.handlers:
            handler.flush()

        text = log_file.read_text(encoding="utf-8")
        assert "Tokenized" in text
        assert "Block {{#xs}} (line 1) renders 2 time(s)" in text
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


def test_configure_logging_replaces_handlers():
    logger = configure_logging()
    configure_logging()
    try:
        assert len(logger.handlers) == 1
    finally:
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


def test_render_logs_blocks(caplog):
    with caplog.at_level(logging.DEBUG, logger="minitemplate"):
        render("{{^none}}x{{/none}}", {})
    assert any("renders 1 time(s)" in r.getMessage() for r in caplog.records)
