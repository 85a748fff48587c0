import logging

import pytest

from catmap.logging_config import setup_logging


@pytest.fixture
def catmap_logger():
    logger = logging.getLogger("catmap")
    pil_level = logging.getLogger("PIL").level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    logging.getLogger("PIL").setLevel(pil_level)


class TestSetupLogging:
    def test_returns_package_logger(self, catmap_logger):
        assert setup_logging() is catmap_logger
        assert catmap_logger.level == logging.INFO
        assert not catmap_logger.propagate

    def test_repeated_setup_replaces_handlers(self, catmap_logger):
        setup_logging()
        first = list(catmap_logger.handlers)
        setup_logging(logging.DEBUG)
        assert len(catmap_logger.handlers) == 1
        assert catmap_logger.handlers[0] not in first
        assert catmap_logger.handlers[0].level == logging.DEBUG

    def test_file_handler_writes_log(self, catmap_logger, tmp_path):
        log_file = tmp_path / "catmap.log"
        setup_logging(logging.DEBUG, str(log_file))
        assert len(catmap_logger.handlers) == 2
        logging.getLogger("catmap.services.period_service").info("period = 6")
        for handler in catmap_logger.handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "catmap.services.period_service - INFO - period = 6" in text

    def test_pil_debug_noise_capped(self, catmap_logger):
        setup_logging(logging.DEBUG)
        assert logging.getLogger("PIL").level == logging.INFO

    def test_pil_follows_quieter_level(self, catmap_logger):
        setup_logging(logging.WARNING)
        assert logging.getLogger("PIL").level == logging.WARNING
