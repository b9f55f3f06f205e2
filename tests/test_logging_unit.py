"""Unit tests for structured logging."""

import json
import logging
from io import StringIO

from feedsift.logging_config import (
    StructuredFormatter,
    create_execution_logger,
    setup_structured_logging,
)


class TestLoggingUnit:
    """Unit tests for the structured logging helpers."""

    def test_formatter_emits_json_with_context(self):
        record = logging.LogRecord(
            name="feedsift.feed_parser",
            level=logging.INFO,
            pathname=__file__,
            lineno=10,
            msg="Parsed feed: %d items found",
            args=(3,),
            exc_info=None,
        )
        record.execution_id = "exec_1"
        record.component = "feed_parser"
        record.items_count = 3

        entry = json.loads(StructuredFormatter().format(record))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "feedsift.feed_parser"
        assert entry["message"] == "Parsed feed: 3 items found"
        assert entry["execution_id"] == "exec_1"
        assert entry["component"] == "feed_parser"
        assert entry["items_count"] == 3
        assert "timestamp" in entry

    def test_execution_logger_attaches_context(self):
        stream = StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(StructuredFormatter())
        logger = create_execution_logger("feed_fetcher", "exec_42")
        logger.logger.addHandler(handler)
        logger.logger.setLevel(logging.INFO)

        try:
            logger.info("Downloading feed content", feed_url="https://e.com/rss")
        finally:
            logger.logger.removeHandler(handler)
            logger.logger.setLevel(logging.NOTSET)

        entry = json.loads(stream.getvalue().strip())
        assert entry["execution_id"] == "exec_42"
        assert entry["component"] == "feed_fetcher"
        assert entry["feed_url"] == "https://e.com/rss"

    def test_generated_execution_id(self):
        logger = create_execution_logger("feed_parser")

        assert logger.execution_id.startswith("exec_")
        assert logger.logger.name == "feedsift.feed_parser"

    def test_setup_structured_logging(self):
        root_logger = logging.getLogger()
        original_level = root_logger.level
        original_handlers = root_logger.handlers[:]

        try:
            setup_structured_logging("debug")

            assert root_logger.level == logging.DEBUG
            assert len(root_logger.handlers) == 1
            assert isinstance(root_logger.handlers[0].formatter, StructuredFormatter)
            assert logging.getLogger("feedsift.feed_parser").level == logging.DEBUG
        finally:
            root_logger.handlers[:] = original_handlers
            root_logger.setLevel(original_level)
            for name in ("feedsift", "feedsift.feed_parser", "feedsift.feed_fetcher"):
                logging.getLogger(name).setLevel(logging.NOTSET)
