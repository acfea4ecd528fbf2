from __future__ import annotations

import logging

import pytest

from climatechart.logging_config import setup_logging


def test_setup_logging_configures_package_logger(tmp_path):
    log_file = tmp_path / "chart.log"

    logger = setup_logging(level="debug", log_file=str(log_file))
    logging.getLogger("climatechart.model.series").debug("per-frame detail")
    for handler in logger.handlers:
        handler.flush()

    assert logger.name == "climatechart"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert "per-frame detail" in log_file.read_text(encoding="utf-8")

    for handler in logger.handlers:
        handler.close()


def test_setup_logging_does_not_duplicate_handlers():
    setup_logging()
    logger = setup_logging(logging.WARNING)

    assert len(logger.handlers) == 1
    assert logging.getLogger("pyqtgraph").level == logging.WARNING


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        setup_logging(level="loud")
