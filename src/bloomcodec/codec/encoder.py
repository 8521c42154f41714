"""Compact binary encoder for status vectors.

This module provides the encode() function that packs one status per catalog
entry behind a single schema version byte.
"""

from __future__ import annotations

from typing import Sequence

from ..exceptions import CatalogLengthExceeded, EncodeError
from ..models.status import MAX_CATALOG_LENGTH, Status
from .bitpack import BitPacker
from .versions import REGISTRY, VersionRegistry


def encode(vector: Sequence[Status | int], registry: VersionRegistry = REGISTRY) -> bytes:
    """Encode a status vector to compact binary format.

    The output is the current schema version byte followed by the packed
    statuses. Entry ``i`` is written ``i``-th, so with 2-bit statuses entry
    ``4k`` lands in the two least significant bits of payload byte ``k`` and
    entry ``4k+3`` in the two most significant. Unused high bits of the final
    byte are zero.

    Args:
        vector: One status per catalog entry, in catalog order
        registry: Version registry whose current rule is used for packing

    Returns:
        Version byte + packed payload

    Raises:
        CatalogLengthExceeded: If the vector has more than 256 entries
        EncodeError: If an entry is not a valid status

    Example:
        >>> encode([Status.COLLECTED, Status.UNCOLLECTED, Status.GROWING, Status.SEEDLING])
        b'\\x01c'
    """
    if len(vector) > MAX_CATALOG_LENGTH:
        raise CatalogLengthExceeded(len(vector), MAX_CATALOG_LENGTH)

    rule = registry.current

    packer = BitPacker()
    for index, value in enumerate(vector):
        try:
            status = Status(value)
        except ValueError as err:
            raise EncodeError(f"Entry {index}: {value!r} is not a valid status") from err

        if status >= rule.status_count:
            raise EncodeError(
                f"Entry {index}: {status.name} is not representable in schema version {rule.version}"
            )

        packer.write_uint(int(status), rule.bits_per_status)

    return bytes([rule.version]) + packer.to_bytes()
