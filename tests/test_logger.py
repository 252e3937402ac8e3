"""Tests for the logging wrapper."""

import logging

from elkaliases_docs.config import config
from elkaliases_docs.utils.logger import Logger


def test_file_handler_when_log_dir_set(tmp_path, monkeypatch):
    log_dir = tmp_path / "logs"
    monkeypatch.setitem(config._attributes, "log_dir", str(log_dir))
    file_logger = Logger("ElkAliasesDocsFileTest")
    try:
        file_logger.warning("sidebar rendered")
        for handler in file_logger.logger.handlers:
            handler.flush()
        content = (log_dir / "docs.log").read_text(encoding="utf-8")
        assert "WARNING | file: test_logger.py | func: test_file_handler_when_log_dir_set | sidebar rendered" in content
    finally:
        for handler in list(file_logger.logger.handlers):
            handler.close()
            file_logger.logger.removeHandler(handler)


def test_no_file_handler_without_log_dir(monkeypatch):
    monkeypatch.setitem(config._attributes, "log_dir", "")
    stream_logger = Logger("ElkAliasesDocsStreamTest")
    try:
        assert not any(isinstance(h, logging.FileHandler) for h in stream_logger.logger.handlers)
    finally:
        for handler in list(stream_logger.logger.handlers):
            stream_logger.logger.removeHandler(handler)
