"""Mixins for objects carrying a text identifier or an integer index."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Identified:
    """An object with a text identifier."""

    id: str = ""


@dataclass
class Indexed:
    """An object indexed by a natural integer within some container."""

    index: int = 0