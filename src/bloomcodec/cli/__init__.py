"""Command line tools for bloomcodec."""

from __future__ import annotations
