"""A single session's status vector.

Checklist owns the status vector for one user session. Every mutation goes
through the status cycle for one entry and immediately re-encodes the whole
vector, so ``encoded`` and ``text`` always reflect the latest state and can
be handed to whatever stores or shares the checklist.
"""

from __future__ import annotations

from collections import Counter

from .codec.decoder import decode
from .codec.encoder import encode
from .codec.text import decode_text, to_text
from .codec.versions import REGISTRY, VersionRegistry
from .exceptions import CatalogLengthExceeded
from .models.status import MAX_CATALOG_LENGTH, Status, advance


class Checklist:
    """Status vector for one session, kept encoded after every change.

    Example:
        >>> checklist = Checklist.blank(4)
        >>> checklist.advance(0)
        <Status.SEEDLING: 1>
        >>> checklist.text
        'AQE'
    """

    def __init__(self, statuses: list[Status], registry: VersionRegistry = REGISTRY) -> None:
        """Initialize from an existing status vector.

        Raises:
            CatalogLengthExceeded: If there are more than 256 entries
        """
        if len(statuses) > MAX_CATALOG_LENGTH:
            raise CatalogLengthExceeded(len(statuses), MAX_CATALOG_LENGTH)

        self._statuses = [Status(status) for status in statuses]
        self._registry = registry
        self._encoded = encode(self._statuses, registry)

    @classmethod
    def blank(cls, catalog_length: int, registry: VersionRegistry = REGISTRY) -> Checklist:
        """Create a checklist with every entry UNCOLLECTED."""
        if not 0 <= catalog_length <= MAX_CATALOG_LENGTH:
            raise CatalogLengthExceeded(catalog_length, MAX_CATALOG_LENGTH)
        return cls([Status.UNCOLLECTED] * catalog_length, registry)

    @classmethod
    def from_bytes(
        cls, blob: bytes, catalog_length: int, registry: VersionRegistry = REGISTRY
    ) -> Checklist:
        """Restore a checklist from a blob; corrupt blobs give a blank checklist."""
        return cls(decode(blob, catalog_length, registry), registry)

    @classmethod
    def from_text(
        cls, text: str, catalog_length: int, registry: VersionRegistry = REGISTRY
    ) -> Checklist:
        """Restore a checklist from its text form; corrupt text gives a blank checklist."""
        return cls(decode_text(text, catalog_length, registry), registry)

    def __len__(self) -> int:
        return len(self._statuses)

    def __getitem__(self, index: int) -> Status:
        return self._statuses[index]

    def __repr__(self) -> str:
        return f"Checklist({len(self)} entries, text={self.text!r})"

    @property
    def statuses(self) -> tuple[Status, ...]:
        """Snapshot of the current vector."""
        return tuple(self._statuses)

    @property
    def encoded(self) -> bytes:
        """Blob for the current vector."""
        return self._encoded

    @property
    def text(self) -> str:
        """URL-safe text for the current vector."""
        return to_text(self._encoded)

    def advance(self, index: int) -> Status:
        """Move entry ``index`` to the next status in the cycle and re-encode.

        Returns:
            The entry's new status

        Raises:
            IndexError: If index is outside the vector
        """
        new_status = advance(self._statuses[index])
        self.set(index, new_status)
        return new_status

    def set(self, index: int, status: Status) -> None:
        """Set entry ``index`` to ``status`` and re-encode.

        Raises:
            IndexError: If index is outside the vector
            ValueError: If status is not a valid status
        """
        if not -len(self._statuses) <= index < len(self._statuses):
            raise IndexError(f"Entry index {index} out of range for {len(self)} entries")
        self._statuses[index] = Status(status)
        self._encoded = encode(self._statuses, self._registry)

    def counts(self) -> dict[Status, int]:
        """Number of entries in each status, including zero counts."""
        tally = Counter(self._statuses)
        return {status: tally.get(status, 0) for status in Status}

    def progress(self) -> float:
        """Fraction of entries that are COLLECTED (0.0 for an empty checklist)."""
        if not self._statuses:
            return 0.0
        return self.counts()[Status.COLLECTED] / len(self._statuses)
