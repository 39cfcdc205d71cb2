"""Logging configuration for the NIM game."""

import logging
import sys


def setup_logging(level: str = "WARNING", format_style: str = "simple") -> None:
    """
    Set up logging configuration for the whole application.
    Log records go to stderr so they never mix with the board printed on stdout.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_style: Format style - "simple", "plain" or "detailed"
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    formats = {
        "simple": "%(name)s - %(levelname)s - %(message)s",
        "plain": "%(levelname)s: %(message)s",
        "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
    }
    log_format = formats.get(format_style, formats["simple"])

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Logger name (typically __name__ from the calling module)
    """
    return logging.getLogger(name)


def get_game_logger(module_name: str) -> logging.Logger:
    """
    Get a logger with the 'nim_game.' prefix stripped, e.g. 'core.engine'.
    """
    if module_name.startswith('nim_game.'):
        module_name = module_name[len('nim_game.'):]
    return logging.getLogger(module_name)
