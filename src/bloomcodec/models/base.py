"""Base record class for catalog metadata.

Catalog records are immutable value objects keyed by a stable string
identifier; this module holds the shared Pydantic configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CatalogRecord(BaseModel):
    """Base class for immutable catalog records.

    Example:
        >>> class Sticker(CatalogRecord):
        ...     key: str
        >>> Sticker(key="alpha-a").key
        'alpha-a'
    """

    model_config = ConfigDict(
        # Records never change once the catalog is built
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
        # Reject empty identifiers and stray whitespace
        str_strip_whitespace=True,
        str_min_length=1,
    )
