"""Bit-per-pixel images used for median threshold bitmap alignment."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

_UINT16 = 0xFFFF


class Bitmap:
    """A ``width`` x ``height`` grid of bits stored row by row.

    Bit ``y * width + x`` of an integer holds the value at ``(x, y)``.
    """

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self.resize(width, height)

    def resize(self, width: int, height: int) -> None:
        """Change the size and clear every bit."""
        if width < 0 or height < 0:
            raise ValueError(f"invalid size {width}x{height}")
        self._width = width
        self._height = height
        self._num_bits = width * height
        self._bits = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def _all_ones(self) -> int:
        return (1 << self._num_bits) - 1

    def _check_same_size(self, other: Bitmap) -> None:
        if (self._width, self._height) != (other._width, other._height):
            raise ValueError(
                f"bitmap sizes differ: {self._width}x{self._height} "
                f"and {other._width}x{other._height}"
            )

    def _position(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"position ({x}, {y}) outside the bitmap")
        return y * self._width + x

    def get(self, x: int, y: int) -> bool:
        return bool(self._bits >> self._position(x, y) & 1)

    def set(self, x: int, y: int, value: bool = True) -> None:
        bit = 1 << self._position(x, y)
        if value:
            self._bits |= bit
        else:
            self._bits &= ~bit

    def reset(self) -> None:
        """Clear every bit."""
        self._bits = 0

    def shift(self, src: Bitmap, dx: int, dy: int) -> None:
        """Become a copy of ``src`` moved by ``(dx, dy)``, filling with zeros."""
        self._check_same_size(src)
        pos = -dy * self._width - dx
        moved = src._bits >> pos if pos >= 0 else src._bits << -pos
        self._bits = moved & self._all_ones
        self._apply_row_mask(dx)

    def _apply_row_mask(self, dx: int) -> None:
        width = self._width
        if 0 < dx <= width:
            start, stop = 0, dx
        elif -width <= dx < 0:
            start, stop = width + dx, width
        else:
            return
        row_mask = ((1 << (stop - start)) - 1) << start
        clear = 0
        for offset in range(0, self._num_bits, width):
            clear |= row_mask << offset
        self._bits &= ~clear

    def bitwise_xor(self, other: Bitmap) -> None:
        self._check_same_size(other)
        self._bits ^= other._bits

    def bitwise_and(self, other: Bitmap) -> None:
        self._check_same_size(other)
        self._bits &= other._bits

    def _from_predicate(self, pixels: Iterable[int], predicate) -> None:
        values = list(pixels)
        if len(values) != self._num_bits:
            raise ValueError(
                f"expected {self._num_bits} pixels, got {len(values)}"
            )
        text = "".join("1" if predicate(p) else "0" for p in reversed(values))
        self._bits = int(text, 2) if text else 0

    def mtb(self, pixels: Iterable[int], threshold: int) -> None:
        """Set each bit whose pixel is above ``threshold``."""
        self._from_predicate(pixels, lambda p: p > threshold)

    def exclusion(self, pixels: Iterable[int], threshold: int, tolerance: int) -> None:
        """Set each bit whose pixel lies outside ``threshold`` +/- ``tolerance``.

        The bounds wrap around as 16-bit unsigned values.
        """
        low = (threshold - tolerance) & _UINT16
        high = (threshold + tolerance) & _UINT16
        self._from_predicate(pixels, lambda p: p <= low or p > high)

    def count(self) -> int:
        """Number of set bits."""
        return self._bits.bit_count()

    def _rows(self) -> Iterable[str]:
        for y in range(self._height):
            yield "".join(
                "1" if self._bits >> (y * self._width + x) & 1 else "0"
                for x in range(self._width)
            )

    def dump_info(self) -> str:
        """Render the bitmap as lines of ``0`` and ``1``."""
        return "".join(row + "\n" for row in self._rows())

    def dump_file(self, file_name: str) -> None:
        """Write the bitmap as a plain PBM image to ``file_name + ".pbm"``."""
        lines = [f"P1\n# Foo\n{self._width} {self._height}\n"]
        for start in range(0, self._num_bits, 32):
            stop = min(start + 32, self._num_bits)
            lines.append(
                "".join(f" {self._bits >> i & 1}" for i in range(start, stop)) + "\n"
            )
        Path(file_name + ".pbm").write_text("".join(lines))