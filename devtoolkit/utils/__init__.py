"""Logging and configuration helpers."""

from .config import ConfigManager, DEFAULT_CONFIG
from .logging import setup_logging

__all__ = ["ConfigManager", "DEFAULT_CONFIG", "setup_logging"]
