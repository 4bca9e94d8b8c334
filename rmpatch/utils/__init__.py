"""Shared utilities."""

from .logger import configure_logging, get_home_dir, get_logger

__all__ = ["configure_logging", "get_home_dir", "get_logger"]
