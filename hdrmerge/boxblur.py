"""Approximate Gaussian blur by three successive box blurs."""

from __future__ import annotations

import math

import numpy as np

from hdrmerge.array2d import Array2D


def _box_blur_rows(values: np.ndarray, radius: int) -> np.ndarray:
    """Average each row over a window of ``2 * radius + 1``, clamping at edges."""
    if radius == 0:
        return values.copy()
    width = values.shape[1]
    padded = np.pad(values, ((0, 0), (radius, radius)), mode="edge")
    sums = np.cumsum(padded, axis=1)
    sums = np.concatenate([np.zeros((values.shape[0], 1)), sums], axis=1)
    span = 2 * radius + 1
    return (sums[:, span : span + width] - sums[:, :width]) / span


class BoxBlur(Array2D):
    """A floating point copy of an image that can be blurred in place."""

    def __init__(self, source: Array2D) -> None:
        super().__init__(source.width, source.height, 0.0)
        self._data = [float(v) for v in source]
        self.displace(source.dx, source.dy)

    def blur(self, radius: int) -> None:
        """Blur with an approximate Gaussian of the given radius."""
        if radius < 0:
            raise ValueError(f"negative blur radius {radius}")
        box_radius = math.floor(radius * 0.39 + 0.5)
        if len(self) == 0:
            return
        values = np.asarray(self._data, dtype=np.float64).reshape(
            self.height, self.width
        )
        for _ in range(3):
            values = _box_blur_rows(values, box_radius)
            values = _box_blur_rows(values.T, box_radius).T
        self._data = values.ravel().tolist()