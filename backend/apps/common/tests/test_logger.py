import logging

import pytest

from apps.common import AppLogger, get_logger


def test_format_without_context_is_message():
    assert AppLogger.format("hello", {}) == "hello"


def test_format_appends_key_values():
    line = AppLogger.format("Product fetched", {"code": "PROD001", "variants": 2, "category": None})
    assert line == "Product fetched | code=PROD001 variants=2 category=None"


def test_bind_returns_child_with_merged_context(caplog):
    parent = get_logger("logtest.bind", component="catalog")
    child = parent.bind(layer="service")
    with caplog.at_level(logging.INFO, logger="logtest.bind"):
        parent.info("parent")
        child.info("child")
    messages = [r.getMessage() for r in caplog.records if r.name == "logtest.bind"]
    assert messages == ["parent | component=catalog", "child | component=catalog layer=service"]


def test_log_lines_include_bound_context(caplog):
    log = get_logger("logtest.lines", component="catalog")
    with caplog.at_level(logging.INFO, logger="logtest.lines"):
        log.info("Listed products", total=3)
    assert caplog.records[-1].getMessage() == "Listed products | component=catalog total=3"


def test_disabled_level_is_skipped(caplog):
    log = get_logger("logtest.quiet")
    with caplog.at_level(logging.WARNING, logger="logtest.quiet"):
        log.debug("invisible")
    assert not [r for r in caplog.records if r.name == "logtest.quiet"]


def test_exception_attaches_traceback(caplog):
    log = get_logger("logtest.errors")
    with caplog.at_level(logging.ERROR, logger="logtest.errors"):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            log.exception("Storage call failed", operation="get_product")
    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.exc_info is not None
    assert "operation=get_product" in record.getMessage()


@pytest.mark.parametrize("value,expected", [("x", "x"), (1.5, "1.5"), (True, "True"), ([1], "[1]")])
def test_stringify_values(value, expected):
    assert AppLogger._stringify(value) == expected
