"""
Logging Configuration Tests
"""

import logging
from datetime import datetime

import pytest
import pytz

from crypto_list.core.logging_config import TimezoneFormatter, setup_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    api = logging.getLogger("api")
    levels = (root.level, api.level)
    yield
    for logger in (root, api):
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
    root.setLevel(levels[0])
    api.setLevel(levels[1])


def test_setup_logging_creates_log_files(tmp_path, restore_logging):
    logs_dir = tmp_path / "logs"

    setup_logging(logs_dir=str(logs_dir), level="INFO")
    logging.getLogger("api").debug("GET https://feed.example.com/")
    logging.getLogger("crypto_list").error("boom")

    assert (logs_dir / "app.log").exists()
    assert "boom" in (logs_dir / "error.log").read_text(encoding="utf-8")
    assert "GET https://feed.example.com/" in (logs_dir / "api.log").read_text(encoding="utf-8")


def test_setup_logging_is_repeatable(tmp_path, restore_logging):
    setup_logging(logs_dir=str(tmp_path), level="INFO")
    setup_logging(logs_dir=str(tmp_path), level="INFO")

    assert len(logging.getLogger().handlers) == 3
    assert len(logging.getLogger("api").handlers) == 1


def test_timezone_formatter_uses_configured_zone():
    formatter = TimezoneFormatter("%(asctime)s", tz=pytz.timezone("Asia/Seoul"))
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    record.created = datetime(2024, 1, 1, 0, 0, tzinfo=pytz.utc).timestamp()

    assert formatter.format(record) == "2024-01-01 09:00:00 KST"
