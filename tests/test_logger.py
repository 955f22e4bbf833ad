# File: tests/test_logger.py
import logging

from news_scout.logger import LOGGER_NAME, init_logging


def test_init_logging_replaces_handlers_and_writes_file(tmp_path):
    log_file = tmp_path / "scout.log"
    try:
        lg = init_logging(level="DEBUG", log_file=log_file, log_format="%(levelname)s %(message)s")
        lg.debug("crawl started")

        assert lg is logging.getLogger(LOGGER_NAME)
        assert len(lg.handlers) == 2
        assert not lg.propagate
        assert "DEBUG crawl started" in log_file.read_text(encoding="utf-8")

        lg = init_logging(level="WARNING")
        assert len(lg.handlers) == 1
        assert lg.level == logging.WARNING
    finally:
        init_logging()
