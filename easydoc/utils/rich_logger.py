"""
Rich logging for easydoc.

The library only logs through ``logging.getLogger(__name__)``; applications
call ``setup_logging`` to get colored console output.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def _level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def _rich_handler(console: Optional[Console] = None) -> RichHandler:
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=True,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def setup_logging(level: str = "INFO", use_rich: bool = True, console: Optional[Console] = None) -> logging.Logger:
    """
    Setup logging for the application.

    Args:
        level: Log level
        use_rich: Whether to use rich logging
        console: Console to write to, stderr by default

    Returns:
        The configured root logger
    """
    root_logger = logging.getLogger()
    if use_rich:
        root_logger.setLevel(_level(level))
        root_logger.handlers.clear()
        root_logger.addHandler(_rich_handler(console))
    else:
        logging.basicConfig(
            level=_level(level),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S',
            force=True,
        )
    logging.getLogger(__name__).debug(f"Logging initialized at {level} level (rich={use_rich})")
    return root_logger


def create_logger(name: str, level: str = "INFO", console: Optional[Console] = None) -> logging.Logger:
    """
    Create a logger with rich formatting.

    Args:
        name: Logger name
        level: Log level
        console: Console to write to, stderr by default

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(_level(level))
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(_rich_handler(console))
    return logger
