import logging

import pytest

from deskcalc.controller.evaluator import evaluate
from deskcalc.logging_config import setup_logging


@pytest.fixture
def package_logger():
    yield
    logger = logging.getLogger("deskcalc")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_console_only_by_default(package_logger):
    logger = setup_logging(level=logging.WARNING)
    assert logger.name == "deskcalc"
    assert logger.level == logging.WARNING
    assert [type(h) for h in logger.handlers] == [logging.StreamHandler]


def test_file_handler_receives_package_records(package_logger, tmp_path):
    log_file = tmp_path / "deskcalc.log"
    logger = setup_logging(level=logging.INFO, log_file=str(log_file))

    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].baseFilename == str(log_file)

    evaluate("5÷0")
    file_handlers[0].flush()
    assert "deskcalc.controller.evaluator - INFO - " in log_file.read_text(encoding="utf-8")


def test_repeated_setup_does_not_stack_handlers(package_logger, tmp_path):
    setup_logging(log_file=str(tmp_path / "a.log"))
    logger = setup_logging()
    assert len(logger.handlers) == 1
