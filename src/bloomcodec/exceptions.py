"""Exception hierarchy for bloomcodec.

All exceptions inherit from BloomcodecError for easy catching of any
bloomcodec-specific error.
"""

from __future__ import annotations


class BloomcodecError(Exception):
    """Base exception for all bloomcodec errors."""

    pass


class SchemaError(BloomcodecError):
    """Raised when a schema version or catalog definition is invalid.

    Examples:
        - Registering a version number that is already taken
        - A bit width too small for the status cardinality
        - Duplicate catalog keys
    """

    pass


class CatalogOrderError(SchemaError):
    """Raised when a catalog reorders or drops entries from an earlier release.

    Catalogs may only grow by appending; every existing index is permanent.
    """

    pass


class EncodeError(BloomcodecError):
    """Raised when a status vector cannot be encoded.

    Examples:
        - A value that is not a known status
    """

    pass


class CatalogLengthExceeded(EncodeError):
    """Raised when a vector or catalog is longer than the format allows (256)."""

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f"Catalog length {length} exceeds the format limit of {limit} entries")
        self.length = length
        self.limit = limit


class DecodeError(BloomcodecError):
    """Raised when binary or text data cannot be decoded."""

    pass


class CorruptEncoding(DecodeError):
    """Raised when an encoded value is malformed.

    Examples:
        - Empty input
        - Unknown schema version byte
        - Payload length that no packing rule can produce
        - Characters outside the text alphabet

    decode() and decode_text() recover from this internally; only the strict
    variants let it reach the caller.
    """

    pass
