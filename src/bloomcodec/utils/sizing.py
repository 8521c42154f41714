"""Encoded size calculation utilities.

This module provides functions to calculate the size of an encoded checklist
without actually encoding one.
"""

from __future__ import annotations

from ..codec.versions import REGISTRY, VersionRegistry
from ..exceptions import CatalogLengthExceeded
from ..models.status import MAX_CATALOG_LENGTH


def _check_length(catalog_length: int) -> None:
    if not 0 <= catalog_length <= MAX_CATALOG_LENGTH:
        raise CatalogLengthExceeded(catalog_length, MAX_CATALOG_LENGTH)


def payload_size(catalog_length: int, registry: VersionRegistry = REGISTRY) -> int:
    """Calculate the packed payload size in bytes, excluding the version byte.

    Raises:
        CatalogLengthExceeded: If catalog_length is outside 0-256

    Example:
        >>> payload_size(174)
        44
    """
    _check_length(catalog_length)
    return registry.current.payload_bytes(catalog_length)


def encoded_size(catalog_length: int, registry: VersionRegistry = REGISTRY) -> int:
    """Calculate the full blob size in bytes, including the version byte.

    Raises:
        CatalogLengthExceeded: If catalog_length is outside 0-256

    Example:
        >>> encoded_size(6)
        3
    """
    return 1 + payload_size(catalog_length, registry)


def encoded_bits(catalog_length: int, registry: VersionRegistry = REGISTRY) -> int:
    """Calculate the number of meaningful bits in a blob (version byte + statuses).

    Raises:
        CatalogLengthExceeded: If catalog_length is outside 0-256

    Example:
        >>> encoded_bits(6)
        20
    """
    _check_length(catalog_length)
    return 8 + catalog_length * registry.current.bits_per_status


def text_size(catalog_length: int, registry: VersionRegistry = REGISTRY) -> int:
    """Calculate the length of the unpadded URL-safe text form.

    Example:
        >>> text_size(174)
        60
    """
    size = encoded_size(catalog_length, registry)
    return (size * 8 + 5) // 6


def max_catalog_length() -> int:
    """Return the hard ceiling on catalog length imposed by the format."""
    return MAX_CATALOG_LENGTH
