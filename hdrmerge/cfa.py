"""Colour filter array description of a raw sensor."""

from __future__ import annotations

from typing import Callable

XTRANS = 9


class CFAPattern:
    """Maps a position of the active area to the colour index of its filter."""

    def __init__(
        self, filters: int = 0, fcol: Callable[[int, int], int] | None = None
    ) -> None:
        self.filters = filters & 0xFFFFFFFF
        self._xtrans: list[list[int]] = []
        if self.filters == XTRANS:
            if fcol is None:
                raise ValueError("an X-Trans pattern needs a colour function")
            self._xtrans = [[fcol(row, col) for col in range(6)] for row in range(6)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CFAPattern):
            return NotImplemented
        return self.filters == other.filters

    def __hash__(self) -> int:
        return hash(self.filters)

    def __call__(self, x: int, y: int) -> int:
        """Colour index at ``(x, y)``, relative to the active area."""
        if self.filters == XTRANS:
            return self._xtrans[y % 6][x % 6]
        shift = (((y << 1) & 14) | (x & 1)) << 1
        return (self.filters >> shift) & 3

    def can_align(self) -> bool:
        """Whether all four bytes of the filter word are equal."""
        data = self.filters.to_bytes(4, "little")
        return data[0] == data[1] == data[2] == data[3]

    def rows(self) -> int:
        if self.filters == XTRANS:
            return 6
        if (self.filters & 255) == ((self.filters >> 8) & 255):
            return 2
        return 8

    def columns(self) -> int:
        return 6 if self.filters == XTRANS else 2