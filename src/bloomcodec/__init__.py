"""bloomcodec: Compact Checklist Codec

Packs a collection checklist (one of four statuses per catalog entry) into
the smallest practical byte blob and a URL-safe text form, and keeps every
previously shared or stored value decodable as the catalog grows.

Key Features:
- 2 bits per entry behind a single schema version byte
- Append-only version registry: old blobs stay decodable forever
- Catalog growth tolerance: new entries decode as UNCOLLECTED
- Corrupt input degrades to a blank checklist, never an exception

Quick Start:
    >>> from bloomcodec import Status, advance, encode, decode
    >>>
    >>> vector = [Status.COLLECTED, Status.UNCOLLECTED, Status.GROWING, Status.SEEDLING]
    >>> blob = encode(vector)
    >>> decode(blob, catalog_length=6)[:4] == vector
    True
    >>> advance(Status.COLLECTED)
    <Status.UNCOLLECTED: 0>
"""

from __future__ import annotations

__version__ = "0.1.0"

from .checklist import Checklist
from .codec import (
    REGISTRY,
    SCHEMA_VERSION,
    SchemaVersion,
    VersionRegistry,
    decode,
    decode_strict,
    decode_text,
    encode,
    encode_text,
    from_text,
    to_text,
)
from .config import CodecConfig
from .exceptions import (
    BloomcodecError,
    CatalogLengthExceeded,
    CatalogOrderError,
    CorruptEncoding,
    DecodeError,
    EncodeError,
    SchemaError,
)
from .logging import configure_logging, get_logger
from .models import (
    MAX_CATALOG_LENGTH,
    STATUS_EMOJI,
    Catalog,
    CollectionView,
    Decor,
    DecorType,
    PikminColor,
    RoadsideStickerColor,
    Status,
    advance,
)
from .utils import encoded_bits, encoded_size, payload_size, text_size

__all__ = [
    # Status model
    "Status",
    "advance",
    "STATUS_EMOJI",
    "MAX_CATALOG_LENGTH",
    # Core API
    "encode",
    "decode",
    "decode_strict",
    "encode_text",
    "decode_text",
    "to_text",
    "from_text",
    # Versions
    "SchemaVersion",
    "VersionRegistry",
    "REGISTRY",
    "SCHEMA_VERSION",
    # Session
    "Checklist",
    # Catalog
    "Catalog",
    "Decor",
    "DecorType",
    "CollectionView",
    "PikminColor",
    "RoadsideStickerColor",
    # Exceptions
    "BloomcodecError",
    "SchemaError",
    "CatalogOrderError",
    "EncodeError",
    "CatalogLengthExceeded",
    "DecodeError",
    "CorruptEncoding",
    # Sizing
    "encoded_size",
    "encoded_bits",
    "payload_size",
    "text_size",
    # Configuration
    "CodecConfig",
    "configure_logging",
    "get_logger",
    # Version
    "__version__",
]
