"""Encoded value inspection CLI commands."""

from __future__ import annotations

from collections import Counter
from typing import Optional

from ..codec.decoder import decode_strict
from ..codec.text import from_text
from ..models.status import Status
from ..utils.sizing import encoded_bits, encoded_size, payload_size, text_size


def inspect_text(text: str, catalog_length: Optional[int] = None) -> None:
    """Print a breakdown of a shared or stored text value.

    Args:
        text: URL-safe text form of a blob
        catalog_length: Current catalog length to reconcile against; if None,
            every slot in the payload is reported

    Raises:
        CorruptEncoding: If the text or blob is malformed
    """
    blob = from_text(text)
    version, slots = decode_strict(blob)

    print("|" * 7, "bloomcodec: Compact Checklist Codec", "|" * 7)
    print(f"Schema version{'.' * 28}{version}")
    print(f"Blob size{'.' * 33}{len(blob)} bytes")
    print(f"Encoded slots{'.' * 29}{len(slots)}")

    statuses = slots
    if catalog_length is not None:
        statuses = slots[:catalog_length] + [Status.UNCOLLECTED] * (catalog_length - len(slots))
        print(f"Catalog length{'.' * 28}{catalog_length}")
        if len(slots) > catalog_length:
            print(f"        slots beyond catalog{'.' * 14}{len(slots) - catalog_length}")
        elif catalog_length > len(slots):
            print(f"        entries added since encoding{'.' * 10}{catalog_length - len(slots)}")
    print()

    print(f"{'-' * 27} Totals {'-' * 27}")
    tally = Counter(statuses)
    for status in Status:
        label = status.name.lower()
        dots = "." * max(1, 42 - len(label))
        print(f"        {label}{dots}{tally.get(status, 0)}")
    print()

    if statuses:
        collected = tally.get(Status.COLLECTED, 0)
        print(f"Collected: {collected}/{len(statuses)} ({collected / len(statuses):.0%})")
        print()


def print_size(catalog_length: int) -> None:
    """Print the encoded sizes for a catalog of ``catalog_length`` entries.

    Raises:
        CatalogLengthExceeded: If catalog_length is outside 0-256
    """
    padding_bits = encoded_size(catalog_length) * 8 - encoded_bits(catalog_length)

    print(f"{'=' * 19} {catalog_length} entries {'=' * 19}")
    print(f"        version byte{'.' * 26}8 bits")
    print(f"        statuses{'.' * 30}{encoded_bits(catalog_length) - 8} bits")
    print(f"        padding to full byte{'.' * 18}{padding_bits} bits")
    print(f"Payload: {payload_size(catalog_length)} bytes")
    print(f"Blob: {encoded_size(catalog_length)} bytes")
    print(f"Text: {text_size(catalog_length)} characters")
