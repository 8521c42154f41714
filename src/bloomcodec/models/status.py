"""Per-entry collection status and its transition function.

The numeric value of every status is part of the wire format and of the
emoji legend; it must never change once shipped.
"""

from __future__ import annotations

import enum

# Bits used to store one status in the packed payload.
STATUS_BITS = 2

# One byte of index space: the catalog can never exceed 256 entries.
MAX_CATALOG_LENGTH = 256


class Status(enum.IntEnum):
    """Progress of a single catalog entry."""

    UNCOLLECTED = 0
    SEEDLING = 1
    GROWING = 2
    COLLECTED = 3


STATUS_EMOJI: dict[Status, str] = {
    Status.UNCOLLECTED: "❌",  # cross mark
    Status.SEEDLING: "\U0001f33f",  # herb
    Status.GROWING: "\U0001f95a",  # egg
    Status.COLLECTED: "✅",  # check mark
}


def advance(current: Status) -> Status:
    """Return the status that follows ``current`` in the collection cycle.

    UNCOLLECTED -> SEEDLING -> GROWING -> COLLECTED -> UNCOLLECTED

    Example:
        >>> advance(Status.GROWING)
        <Status.COLLECTED: 3>
        >>> advance(Status.COLLECTED)
        <Status.UNCOLLECTED: 0>
    """
    return Status((Status(current) + 1) % len(Status))
