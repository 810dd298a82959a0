"""
Logging configuration for the portfolio scraper.

Log records go to stderr so that report or JSON output on stdout stays
clean. The package logger's level can be preset with PORTFOLIO_LOG_LEVEL.
"""

import logging
import os
import sys
from typing import Optional

PACKAGE_LOGGER = "portfolio_scraper"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level_from_env(default: int = logging.INFO) -> int:
    name = os.getenv("PORTFOLIO_LOG_LEVEL", "").strip().upper()
    level = logging.getLevelName(name) if name else default
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else default


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logger(
    name: str = PACKAGE_LOGGER,
    level: Optional[int] = None,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure and return the package logger.

    Args:
        name: Logger name
        level: Logging level; defaults to PORTFOLIO_LOG_LEVEL or INFO
        log_file: Optional file path that also receives every record

    Returns:
        Configured logger instance
    """
    if level is None:
        level = _level_from_env()

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Repeat calls (the CLI's --verbose) only retune existing handlers
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        if log_file and not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
            _attach(logger, logging.FileHandler(log_file, encoding="utf-8"), level)
        return logger

    _attach(logger, logging.StreamHandler(sys.stderr), level)
    if log_file:
        _attach(logger, logging.FileHandler(log_file, encoding="utf-8"), level)

    return logger


logger = setup_logger()


def get_module_logger(module_name: str) -> logging.Logger:
    """Child logger such as ``portfolio_scraper.fetcher``; records propagate to the package handlers."""
    return logging.getLogger(f"{PACKAGE_LOGGER}.{module_name}")
