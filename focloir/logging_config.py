"""Logging configuration for the focloir dictionary tool"""

import logging
import sys


def setup_logging(level: str = "INFO", log_file: str | None = None) -> logging.Logger:
    """Setup logging configuration

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file to write logs to

    Returns:
        Configured logger instance
    """
    # Namespaced parent logger that module loggers propagate to
    logger = logging.getLogger("focloir")
    logger.setLevel(getattr(logging, level.upper()))

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    # Concise console output on INFO+, detailed when DEBUG
    if level.upper() == "DEBUG":
        console_fmt = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        console_fmt = logging.Formatter(fmt="%(levelname)s - %(message)s")

    # stderr keeps stdout clean for rendered output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_fmt)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "focloir") -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)
