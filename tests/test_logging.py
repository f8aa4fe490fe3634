"""Tests for logging setup and the JSONL formatter."""

import json
import logging

from blog_content.config import LoggingConfig
from blog_content.utils.logging import JsonlFormatter, log_event, setup_logging, truncate_text


def test_jsonl_formatter_includes_extra_fields():
    record = logging.LogRecord("blog_content", logging.INFO, __file__, 1, "content_rendered", None, None)
    record.dialect = "plain"

    payload = json.loads(JsonlFormatter().format(record))

    assert payload["message"] == "content_rendered"
    assert payload["level"] == "INFO"
    assert payload["dialect"] == "plain"
    assert "lineno" not in payload


def test_setup_logging_writes_jsonl_file(tmp_path):
    cfg = LoggingConfig(console=False, file=True, filename="run.jsonl")

    logger = setup_logging(cfg, tmp_path)
    log_event(logger, "articles_filtered", total=3, matches=1)
    for handler in logger.handlers:
        handler.flush()

    lines = (tmp_path / "run.jsonl").read_text(encoding="utf-8").splitlines()
    payload = json.loads(lines[-1])
    assert payload["message"] == "articles_filtered"
    assert payload["total"] == 3
    assert payload["matches"] == 1


def test_setup_logging_without_output_dir_skips_file(tmp_path):
    cfg = LoggingConfig(console=False, file=True)

    logger = setup_logging(cfg, None)

    assert logger.handlers == []


def test_log_event_ignores_missing_logger():
    log_event(None, "nothing")


def test_truncate_text():
    assert truncate_text("short", max_chars=10) == "short"
    assert truncate_text("x" * 12, max_chars=10) == "x" * 10 + "...(truncated)"
