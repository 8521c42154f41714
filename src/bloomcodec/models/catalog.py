"""The ordered, append-only catalog of trackable Decor entries.

A catalog entry's position is its index in every encoded status vector. New
entries may only be appended; reordering or removing an entry that has
shipped would silently shift every stored checklist, so the catalog checks
this at load time against the key list of an earlier release.
"""

from __future__ import annotations

import enum
from typing import Iterable, Iterator, Optional, Sequence

from pydantic import Field, model_validator

from ..exceptions import CatalogLengthExceeded, CatalogOrderError, SchemaError
from ..logging import get_logger
from .base import CatalogRecord
from .status import MAX_CATALOG_LENGTH

logger = get_logger(__name__)


class PikminColor(str, enum.Enum):
    """Pikmin colors a Decor can be collected in."""

    RED = "red"
    YELLOW = "yellow"
    BLUE = "blue"
    WHITE = "white"
    PURPLE = "purple"
    GREY = "grey"
    PINK = "pink"


class DecorType(str, enum.Enum):
    """How a Decor is obtained."""

    LOCATION = "location"
    SPECIAL = "special"
    ROADSIDE = "roadside"


class RoadsideStickerColor(str, enum.Enum):
    """Sticker color on a roadside Decor."""

    GREEN = "green"
    BLUE = "blue"
    ORANGE = "orange"


class CollectionView(str, enum.Enum):
    """Checklist views; each entry lists the views it appears in."""

    SIMPLE = "simple"
    MITCHELL = "mitchell"
    EXHAUSTIVE = "exhaustive"


ALL_COLORS: tuple[PikminColor, ...] = tuple(PikminColor)
ALL_VIEWS: tuple[CollectionView, ...] = tuple(CollectionView)


class Decor(CatalogRecord):
    """One trackable catalog entry.

    Attributes:
        key: Stable identifier, never reused for a different entry
        type: How the Decor is obtained
        title: Display title
        description: Optional longer description
        icon: Icon name, when it differs from the key
        colors: Colors the Decor exists in
        views: Collection views that show this entry
        roadside_color: Sticker color; set only on ROADSIDE entries
    """

    key: str = Field(pattern=r"^[a-z0-9][a-z0-9-]*$")
    type: DecorType
    title: str
    description: Optional[str] = None
    icon: Optional[str] = None
    colors: tuple[PikminColor, ...] = ALL_COLORS
    views: tuple[CollectionView, ...] = ALL_VIEWS
    roadside_color: Optional[RoadsideStickerColor] = None

    @model_validator(mode="after")
    def check_roadside_color(self) -> Decor:
        """Only roadside entries carry a sticker color."""
        if self.roadside_color is not None and self.type is not DecorType.ROADSIDE:
            raise ValueError(
                f"roadside_color is only valid on roadside entries, not {self.type.value}"
            )
        return self

    @property
    def icon_name(self) -> str:
        """Icon to display; falls back to the key."""
        return self.icon or self.key


class Catalog(Sequence[Decor]):
    """Immutable ordered list of Decor entries.

    Example:
        >>> catalog = Catalog([
        ...     Decor(key="restaurant", type=DecorType.LOCATION, title="Restaurant"),
        ...     Decor(key="cafe", type=DecorType.LOCATION, title="Cafe"),
        ... ])
        >>> len(catalog), catalog.index_of("cafe")
        (2, 1)
    """

    def __init__(self, decors: Iterable[Decor]) -> None:
        """Build a catalog and check its load-time invariants.

        Raises:
            SchemaError: If two entries share a key
            CatalogLengthExceeded: If there are more than 256 entries
        """
        self._decors: tuple[Decor, ...] = tuple(decors)

        if len(self._decors) > MAX_CATALOG_LENGTH:
            raise CatalogLengthExceeded(len(self._decors), MAX_CATALOG_LENGTH)

        self._index: dict[str, int] = {}
        for index, decor in enumerate(self._decors):
            if decor.key in self._index:
                raise SchemaError(
                    f"Duplicate catalog key {decor.key!r} at indices "
                    f"{self._index[decor.key]} and {index}"
                )
            self._index[decor.key] = index

    def __len__(self) -> int:
        return len(self._decors)

    def __getitem__(self, index):  # type: ignore[override]
        return self._decors[index]

    def __iter__(self) -> Iterator[Decor]:
        return iter(self._decors)

    def __repr__(self) -> str:
        return f"Catalog({len(self)} entries)"

    def keys(self) -> list[str]:
        """Return entry keys in index order."""
        return [decor.key for decor in self._decors]

    def index_of(self, key: str) -> int:
        """Return the index of the entry with ``key``.

        Raises:
            KeyError: If no entry has that key
        """
        try:
            return self._index[key]
        except KeyError:
            raise KeyError(f"No catalog entry with key {key!r}") from None

    def for_view(self, view: CollectionView) -> list[tuple[int, Decor]]:
        """Return ``(index, decor)`` pairs for entries shown in ``view``."""
        return [(index, decor) for index, decor in enumerate(self._decors) if view in decor.views]

    def extend(self, *decors: Decor) -> Catalog:
        """Return a new catalog with ``decors`` appended."""
        return Catalog(self._decors + decors)

    def assert_appends_to(self, previous_keys: Sequence[str]) -> None:
        """Check that this catalog only appends to an earlier release.

        Args:
            previous_keys: Entry keys of an earlier release, in index order

        Raises:
            CatalogOrderError: If an earlier entry moved or disappeared
        """
        if len(previous_keys) > len(self._decors):
            raise CatalogOrderError(
                f"Catalog shrank from {len(previous_keys)} to {len(self._decors)} entries"
            )

        for index, key in enumerate(previous_keys):
            current = self._decors[index].key
            if current != key:
                raise CatalogOrderError(
                    f"Catalog index {index} changed from {key!r} to {current!r}; "
                    f"entries may only be appended"
                )

        logger.debug(
            "catalog_append_only_verified",
            previous_length=len(previous_keys),
            current_length=len(self._decors),
        )
