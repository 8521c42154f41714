"""Status model and catalog records for bloomcodec."""

from __future__ import annotations

from .base import CatalogRecord
from .catalog import (
    ALL_COLORS,
    ALL_VIEWS,
    Catalog,
    CollectionView,
    Decor,
    DecorType,
    PikminColor,
    RoadsideStickerColor,
)
from .status import MAX_CATALOG_LENGTH, STATUS_BITS, STATUS_EMOJI, Status, advance

__all__ = [
    "CatalogRecord",
    "Catalog",
    "CollectionView",
    "Decor",
    "DecorType",
    "PikminColor",
    "RoadsideStickerColor",
    "ALL_COLORS",
    "ALL_VIEWS",
    "Status",
    "advance",
    "STATUS_BITS",
    "STATUS_EMOJI",
    "MAX_CATALOG_LENGTH",
]
