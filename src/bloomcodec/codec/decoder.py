"""Compact binary decoder for status vectors.

decode() is the forgiving entry point used when loading a shared or stored
checklist: any corrupt input degrades to a blank checklist instead of an
error. decode_strict() exposes the raw decoded entries and raises
CorruptEncoding, for tooling that needs to know what went wrong.
"""

from __future__ import annotations

from ..exceptions import CatalogLengthExceeded, CorruptEncoding
from ..logging import get_logger
from ..models.status import MAX_CATALOG_LENGTH, Status
from .bitpack import BitUnpacker
from .versions import REGISTRY, VersionRegistry

logger = get_logger(__name__)


def decode_strict(
    blob: bytes, registry: VersionRegistry = REGISTRY
) -> tuple[int, list[Status]]:
    """Decode a blob without reconciling it against a catalog.

    The entry count is not stored in the blob; every slot of the payload is
    returned, so trailing padding shows up as UNCOLLECTED entries.

    Args:
        blob: Version byte + packed payload
        registry: Version registry used to look up the unpacking rule

    Returns:
        Tuple of (schema version, decoded statuses)

    Raises:
        CorruptEncoding: If the blob is empty, has an unknown version, has a
            payload no rule can produce, or contains an undefined status

    Example:
        >>> decode_strict(b"\\x01c")
        (1, [<Status.COLLECTED: 3>, <Status.UNCOLLECTED: 0>, <Status.GROWING: 2>, <Status.SEEDLING: 1>])
    """
    if not blob:
        raise CorruptEncoding("Cannot decode empty data")

    version = blob[0]
    rule = registry.get(version)
    if rule is None:
        raise CorruptEncoding(
            f"Unknown schema version: {version}. Known versions: {registry.versions()}"
        )

    payload = blob[1:]
    if not rule.accepts_payload(len(payload)):
        raise CorruptEncoding(
            f"Payload of {len(payload)} bytes is too long for schema version {version} "
            f"(max {rule.payload_bytes(MAX_CATALOG_LENGTH)} bytes)"
        )

    unpacker = BitUnpacker(payload)
    statuses: list[Status] = []
    for index in range(rule.max_entries(len(payload))):
        try:
            ordinal = unpacker.read_uint(rule.bits_per_status)
        except IndexError as err:
            raise CorruptEncoding(f"Truncated data while decoding entry {index}: {err}") from err

        if ordinal >= rule.status_count:
            raise CorruptEncoding(
                f"Entry {index}: invalid status {ordinal} "
                f"(schema version {version} has {rule.status_count} statuses)"
            )
        try:
            statuses.append(Status(ordinal))
        except ValueError as err:
            raise CorruptEncoding(f"Entry {index}: unknown status {ordinal}") from err

    return version, statuses


def decode(
    blob: bytes, catalog_length: int, registry: VersionRegistry = REGISTRY
) -> list[Status]:
    """Decode a blob into a status vector for the current catalog.

    The result always has exactly ``catalog_length`` entries:

    - entries present in the blob are copied over;
    - entries the catalog gained since the blob was written are UNCOLLECTED;
    - blob entries beyond the current catalog are dropped.

    Corrupt input never raises. It is logged and yields an all-UNCOLLECTED
    vector, so a stale or hand-edited value starts the checklist over.

    Args:
        blob: Version byte + packed payload
        catalog_length: Number of entries in the current catalog (0-256)
        registry: Version registry used to look up the unpacking rule

    Returns:
        List of ``catalog_length`` statuses

    Raises:
        CatalogLengthExceeded: If catalog_length is outside 0-256

    Example:
        >>> decode(b"\\x01c", 6)[4:]
        [<Status.UNCOLLECTED: 0>, <Status.UNCOLLECTED: 0>]
    """
    if not 0 <= catalog_length <= MAX_CATALOG_LENGTH:
        raise CatalogLengthExceeded(catalog_length, MAX_CATALOG_LENGTH)

    try:
        _, decoded = decode_strict(blob, registry)
    except CorruptEncoding as err:
        logger.warning(
            "corrupt_encoding_reset",
            reason=str(err),
            blob_length=len(blob),
            catalog_length=catalog_length,
        )
        return [Status.UNCOLLECTED] * catalog_length

    if len(decoded) > catalog_length:
        # Only padding should ever be cut here; the catalog is append-only.
        dropped = sum(status is not Status.UNCOLLECTED for status in decoded[catalog_length:])
        if dropped:
            logger.info("decoded_entries_dropped", catalog_length=catalog_length, dropped=dropped)
        return decoded[:catalog_length]

    return decoded + [Status.UNCOLLECTED] * (catalog_length - len(decoded))
