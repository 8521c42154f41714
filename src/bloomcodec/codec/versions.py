"""Schema versions and the append-only version registry.

Every encoded blob starts with a single version byte. The byte selects the
unpacking rule used to read the rest of the blob. Rules are only ever added:
once a version has shipped, its rule is kept and never reinterpreted, so
blobs shared or stored by any earlier release stay decodable.

A new version is needed only when the packing bit width changes, when the
numeric status assignment changes, or when existing catalog entries are
reordered or removed. Appending entries to the catalog does not need one.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from ..exceptions import SchemaError
from ..logging import get_logger
from ..models.status import MAX_CATALOG_LENGTH, STATUS_BITS, Status

logger = get_logger(__name__)


@dataclass(frozen=True)
class SchemaVersion:
    """Unpacking rule for one schema version.

    Attributes:
        version: Value of the leading version byte (0-255)
        bits_per_status: Width of one packed status in bits
        status_count: Number of distinct statuses the rule can carry

    Example:
        >>> rule = SchemaVersion(version=1, bits_per_status=2, status_count=4)
        >>> rule.payload_bytes(6)
        2
        >>> rule.max_entries(2)
        8
    """

    version: int
    bits_per_status: int
    status_count: int

    def __post_init__(self) -> None:
        """Validate the rule's parameters."""
        if not 0 <= self.version <= 255:
            raise SchemaError(f"version must be 0-255, got {self.version}")
        if not 1 <= self.bits_per_status <= 8:
            raise SchemaError(f"bits_per_status must be 1-8, got {self.bits_per_status}")
        if self.status_count < 2:
            raise SchemaError(f"status_count must be at least 2, got {self.status_count}")
        if math.ceil(math.log2(self.status_count)) > self.bits_per_status:
            raise SchemaError(
                f"{self.status_count} statuses do not fit in {self.bits_per_status} bits"
            )

    def payload_bytes(self, num_entries: int) -> int:
        """Number of packed bytes needed for ``num_entries`` statuses."""
        return (num_entries * self.bits_per_status + 7) // 8

    def max_entries(self, payload_len: int) -> int:
        """Largest entry count a payload of ``payload_len`` bytes can hold.

        The last byte may be partly padding, so the true encoded count is
        anywhere in ``(max_entries(payload_len - 1), max_entries(payload_len)]``.
        Padding decodes as status 0, which is UNCOLLECTED.
        """
        return min(payload_len * 8 // self.bits_per_status, MAX_CATALOG_LENGTH)

    def accepts_payload(self, payload_len: int) -> bool:
        """Whether some legal entry count packs to exactly ``payload_len`` bytes."""
        return payload_len <= self.payload_bytes(MAX_CATALOG_LENGTH)


class VersionRegistry:
    """Append-only lookup of unpacking rules by version byte.

    Example:
        >>> registry = VersionRegistry()
        >>> registry.register(SchemaVersion(version=1, bits_per_status=2, status_count=4))
        >>> registry.current.version
        1
    """

    def __init__(self, rules: Iterable[SchemaVersion] = ()) -> None:
        """Initialize a registry holding ``rules``.

        Initial rules are added without log events, so module-level registries
        stay silent at import time.

        Raises:
            SchemaError: If two rules share a version with different layouts
        """
        self._rules: dict[int, SchemaVersion] = {}
        for rule in rules:
            self._add(rule)

    def register(self, rule: SchemaVersion) -> None:
        """Add the rule for a new version.

        Re-registering an identical rule is a no-op.

        Raises:
            SchemaError: If the version is already registered with a different rule
        """
        if not self._add(rule):
            return

        logger.debug(
            "schema_version_registered",
            version=rule.version,
            bits_per_status=rule.bits_per_status,
            status_count=rule.status_count,
        )

    def _add(self, rule: SchemaVersion) -> bool:
        """Store ``rule``; return False if the identical rule was already present."""
        existing = self._rules.get(rule.version)
        if existing is not None:
            if existing != rule:
                raise SchemaError(
                    f"Schema version {rule.version} is already registered as {existing}; "
                    f"shipped versions cannot be reinterpreted"
                )
            return False

        self._rules[rule.version] = rule
        return True

    def get(self, version: int) -> SchemaVersion | None:
        """Return the rule for ``version``, or None if it is unknown."""
        return self._rules.get(version)

    def versions(self) -> list[int]:
        """Return all registered version numbers in ascending order."""
        return sorted(self._rules)

    @property
    def current(self) -> SchemaVersion:
        """The latest registered rule; every encode uses it.

        Raises:
            SchemaError: If no version has been registered
        """
        if not self._rules:
            raise SchemaError("No schema versions registered")
        return self._rules[max(self._rules)]

    def __contains__(self, version: object) -> bool:
        return version in self._rules

    def __len__(self) -> int:
        return len(self._rules)


# Version 1: one 2-bit status per catalog entry, four entries per byte.
V1 = SchemaVersion(version=1, bits_per_status=STATUS_BITS, status_count=len(Status))

REGISTRY = VersionRegistry([V1])

SCHEMA_VERSION = REGISTRY.current.version
