"""
Logging Configuration
Sets up the 'climatechart' logger for the chart application.
"""
import logging
import sys
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'

# Third-party loggers that are too chatty at the application's level
QUIET_LOGGERS = ("pyqtgraph",)


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        return resolved
    return level


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger of the 'climatechart' namespace.

    Args:
        level: Logging level, as a number or a name (e.g. logging.DEBUG, "debug").
            DEBUG also shows the per-frame diagnostics of the draw loop.
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    level = _resolve_level(level)

    logger = logging.getLogger("climatechart")
    logger.setLevel(level)

    # Avoid duplicate output when the window is recreated in the same process
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logger.info(f"Logging initialized at level {logging.getLevelName(level)}.")
    return logger
