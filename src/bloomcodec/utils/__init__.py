"""Utility functions for bloomcodec.

This module provides encoded size calculations.
"""

from __future__ import annotations

from .sizing import encoded_bits, encoded_size, max_catalog_length, payload_size, text_size

__all__ = [
    "encoded_size",
    "encoded_bits",
    "payload_size",
    "text_size",
    "max_catalog_length",
]
