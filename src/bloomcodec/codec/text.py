"""Text representation of encoded blobs.

Blobs are carried in URLs and small storage slots as URL-safe base64 with
the ``=`` padding stripped. The mapping is stateless and reversible; it adds
nothing to the blob itself.
"""

from __future__ import annotations

import base64
import binascii
import re
from typing import Sequence

from ..exceptions import CatalogLengthExceeded, CorruptEncoding
from ..logging import get_logger
from ..models.status import MAX_CATALOG_LENGTH, Status
from .decoder import decode
from .encoder import encode
from .versions import REGISTRY, VersionRegistry

logger = get_logger(__name__)

_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


def to_text(blob: bytes) -> str:
    """Map a blob to URL-safe text.

    Example:
        >>> to_text(b"\\x01c")
        'AWM'
    """
    return base64.urlsafe_b64encode(blob).decode("ascii").rstrip("=")


def from_text(text: str) -> bytes:
    """Map URL-safe text back to a blob.

    Surrounding whitespace is ignored; missing ``=`` padding is restored.

    Raises:
        CorruptEncoding: If the text has characters outside the alphabet or
            a length no blob can produce
    """
    text = text.strip()
    if not _ALPHABET.fullmatch(text):
        raise CorruptEncoding("Text contains characters outside the URL-safe base64 alphabet")
    if len(text) % 4 == 1:
        raise CorruptEncoding(f"Text length {len(text)} is not a valid base64 length")

    padded = text + "=" * (-len(text) % 4)
    try:
        return base64.urlsafe_b64decode(padded)
    except (binascii.Error, ValueError) as err:
        raise CorruptEncoding(f"Invalid base64 text: {err}") from err


def encode_text(vector: Sequence[Status | int], registry: VersionRegistry = REGISTRY) -> str:
    """Encode a status vector straight to its text form.

    Raises:
        CatalogLengthExceeded: If the vector has more than 256 entries
        EncodeError: If an entry is not a valid status
    """
    return to_text(encode(vector, registry))


def decode_text(
    text: str, catalog_length: int, registry: VersionRegistry = REGISTRY
) -> list[Status]:
    """Decode text into a status vector for the current catalog.

    Like decode(), this never raises for bad input: text outside the alphabet
    yields an all-UNCOLLECTED vector of ``catalog_length`` entries.

    Raises:
        CatalogLengthExceeded: If catalog_length is outside 0-256
    """
    if not 0 <= catalog_length <= MAX_CATALOG_LENGTH:
        raise CatalogLengthExceeded(catalog_length, MAX_CATALOG_LENGTH)

    try:
        blob = from_text(text)
    except CorruptEncoding as err:
        logger.warning(
            "corrupt_encoding_reset",
            reason=str(err),
            text_length=len(text),
            catalog_length=catalog_length,
        )
        return [Status.UNCOLLECTED] * catalog_length

    return decode(blob, catalog_length, registry)
