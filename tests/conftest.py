"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from bloomcodec import (
    Catalog,
    CollectionView,
    Decor,
    DecorType,
    PikminColor,
    RoadsideStickerColor,
    Status,
)


@pytest.fixture
def sample_vector() -> list[Status]:
    """Four-entry vector whose packed byte is 0b01_10_00_11."""
    return [Status.COLLECTED, Status.UNCOLLECTED, Status.GROWING, Status.SEEDLING]


@pytest.fixture
def sample_catalog() -> Catalog:
    """Small catalog mixing location, special and roadside entries."""
    return Catalog(
        [
            Decor(key="restaurant", type=DecorType.LOCATION, title="Restaurant"),
            Decor(
                key="restaurant-shiny",
                type=DecorType.SPECIAL,
                title="Restaurant (Shiny)",
                colors=(PikminColor.BLUE, PikminColor.YELLOW, PikminColor.RED),
                views=(CollectionView.MITCHELL, CollectionView.EXHAUSTIVE),
            ),
            Decor(key="cafe", type=DecorType.LOCATION, title="Cafe"),
            Decor(
                key="weather-2",
                type=DecorType.LOCATION,
                title="Rainy Day",
                icon="weather",
                colors=(PikminColor.BLUE,),
                views=(CollectionView.MITCHELL,),
            ),
            Decor(
                key="alpha-green",
                type=DecorType.ROADSIDE,
                title="Roadside Decor Pikmin with GREEN sticker",
                views=(CollectionView.EXHAUSTIVE, CollectionView.MITCHELL),
                roadside_color=RoadsideStickerColor.GREEN,
            ),
            Decor(key="special-mario", type=DecorType.SPECIAL, title="Mario Cap"),
        ]
    )
