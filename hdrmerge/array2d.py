"""A two-dimensional grid of values with an optional displacement."""

from __future__ import annotations

import copy as _copy
from collections.abc import Iterator
from typing import Any


class Array2D:
    """Row-major 2-D storage addressed either by flat index or by ``(x, y)``.

    Coordinates passed as ``(x, y)`` are shifted by the current displacement,
    so that after ``displace(dx, dy)`` the first stored element is found at
    ``(dx, dy)``.
    """

    def __init__(self, width: int = 0, height: int = 0, fill: Any = 0) -> None:
        self._fill = fill
        self.resize(width, height)

    def resize(self, width: int, height: int) -> None:
        """Reallocate the storage, filling it and clearing the displacement."""
        if width < 0 or height < 0:
            raise ValueError(f"invalid size {width}x{height}")
        self._width = width
        self._height = height
        self._dx = 0
        self._dy = 0
        self._data = [self._fill] * (width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def dx(self) -> int:
        return self._dx

    @property
    def dy(self) -> int:
        return self._dy

    def copy(self) -> Array2D:
        """Return an independent copy that keeps size and displacement."""
        clone = _copy.copy(self)
        clone._data = list(self._data)
        return clone

    def __len__(self) -> int:
        return self._width * self._height

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def _index(self, key: int | tuple[int, int]) -> int:
        if isinstance(key, tuple):
            x, y = key
            col = x - self._dx
            row = y - self._dy
            if not (0 <= col < self._width and 0 <= row < self._height):
                raise IndexError(f"position ({x}, {y}) outside the array")
            return row * self._width + col
        if not 0 <= key < len(self._data):
            raise IndexError(f"index {key} outside the array")
        return key

    def __getitem__(self, key: int | tuple[int, int]) -> Any:
        return self._data[self._index(key)]

    def __setitem__(self, key: int | tuple[int, int], value: Any) -> None:
        self._data[self._index(key)] = value

    def contains(self, x: int, y: int) -> bool:
        """Whether the displaced position ``(x, y)`` lies inside the array."""
        return (
            self._dx <= x < self._width + self._dx
            and self._dy <= y < self._height + self._dy
        )

    def displace(self, dx: int, dy: int) -> None:
        """Add ``(dx, dy)`` to the current displacement."""
        self._dx += dx
        self._dy += dy

    def fill_borders(self, value: Any) -> None:
        """Overwrite the rows and columns uncovered by a positive displacement."""
        width = self._width
        if self._dy > 0:
            rows = min(self._dy, self._height)
            self._data[: rows * width] = [value] * (rows * width)
        if self._dx > 0:
            cols = min(self._dx, width)
            for start in range(0, width * self._height, width):
                self._data[start : start + cols] = [value] * cols

    def _window(self, x: int, y: int, radius: int) -> tuple[range, range]:
        ymin = max(-y, -radius)
        ymax = min(self._height - y, radius + 1)
        xmin = max(-x, -radius)
        xmax = min(self._width - x, radius + 1)
        return range(ymin, ymax), range(xmin, xmax)

    def trace_circle(self, x: int, y: int, radius: int) -> Iterator[tuple[int, int]]:
        """Yield ``(col, row)`` of every cell within ``radius`` of ``(x, y)``."""
        rows, cols = self._window(x, y, radius)
        r2 = radius * radius
        for row in rows:
            for col in cols:
                if row * row + col * col <= r2:
                    yield x + col, y + row

    def trace_square(self, x: int, y: int, radius: int) -> Iterator[tuple[int, int]]:
        """Yield ``(col, row)`` of every cell in the square around ``(x, y)``."""
        rows, cols = self._window(x, y, radius)
        for row in rows:
            for col in cols:
                yield x + col, y + row