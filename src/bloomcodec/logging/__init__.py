"""Logging configuration and helpers for bloomcodec."""

from __future__ import annotations

from .config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
