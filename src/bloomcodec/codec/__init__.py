"""Compact state codec for bloomcodec.

This module packs a checklist's per-entry statuses into a versioned byte
blob and its URL-safe text form, and decodes blobs written by any earlier
schema version.
"""

from __future__ import annotations

from .decoder import decode, decode_strict
from .encoder import encode
from .text import decode_text, encode_text, from_text, to_text
from .versions import REGISTRY, SCHEMA_VERSION, SchemaVersion, VersionRegistry

__all__ = [
    "encode",
    "decode",
    "decode_strict",
    "encode_text",
    "decode_text",
    "to_text",
    "from_text",
    "SchemaVersion",
    "VersionRegistry",
    "REGISTRY",
    "SCHEMA_VERSION",
]
