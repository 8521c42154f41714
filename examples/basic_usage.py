#!/usr/bin/env python3
"""Basic usage example for bloomcodec.

This example demonstrates:
1. Building a small append-only catalog
2. Tapping entries through the status cycle
3. Sharing the checklist as URL-safe text
4. Reopening it after the catalog has grown
"""

from __future__ import annotations

from bloomcodec import (
    STATUS_EMOJI,
    Catalog,
    Checklist,
    Decor,
    DecorType,
    encoded_size,
    text_size,
)


def build_catalog() -> Catalog:
    """First release of the catalog."""
    return Catalog(
        [
            Decor(key="restaurant", type=DecorType.LOCATION, title="Restaurant"),
            Decor(key="cafe", type=DecorType.LOCATION, title="Cafe"),
            Decor(key="sweetshop", type=DecorType.LOCATION, title="Sweetshop (Macaron)"),
            Decor(key="movie-theater", type=DecorType.LOCATION, title="Movie Theater"),
            Decor(key="pharmacy", type=DecorType.LOCATION, title="Pharmacy"),
        ]
    )


def show(catalog: Catalog, checklist: Checklist) -> None:
    """Print one line per catalog entry."""
    for index, decor in enumerate(catalog):
        print(f"   {STATUS_EMOJI[checklist[index]]}  {decor.title}")


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("bloomcodec Basic Usage Example")
    print("=" * 60)
    print()

    catalog = build_catalog()
    checklist = Checklist.blank(len(catalog))

    print("1. Tapping entries...")
    for _ in range(3):
        checklist.advance(catalog.index_of("cafe"))
    checklist.advance(catalog.index_of("pharmacy"))
    show(catalog, checklist)
    print()

    print("2. Sharing...")
    print(f"   Text: {checklist.text}")
    print(f"   Blob: {checklist.encoded.hex()} ({encoded_size(len(catalog))} bytes)")
    print()

    print("3. Next release appends two entries...")
    grown = catalog.extend(
        Decor(key="zoo", type=DecorType.LOCATION, title="Zoo"),
        Decor(key="special-mario", type=DecorType.SPECIAL, title="Mario Cap"),
    )
    grown.assert_appends_to(catalog.keys())
    reopened = Checklist.from_text(checklist.text, len(grown))
    show(grown, reopened)
    print()

    print(f"A full 256-entry checklist needs {text_size(256)} characters.")


if __name__ == "__main__":
    main()
