"""Utilities for easydoc."""

from .rich_logger import create_logger, setup_logging

__all__ = ["create_logger", "setup_logging"]
