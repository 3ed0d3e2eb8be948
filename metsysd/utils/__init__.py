"""Utility helpers shared by the api and cli layers."""

from .logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
