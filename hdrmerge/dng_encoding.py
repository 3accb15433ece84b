"""Sample encoding and tiling for floating point DNG raw data.

Floating point samples are stored in 16-bit half, 24-bit or 32-bit single
precision. Each tile row is split into byte planes, most significant first,
and delta encoded (the floating point predictor of the DNG format) before
the whole tile is compressed with deflate.
"""

from __future__ import annotations

import math
import zlib
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

BYTES_PER_TILE = 512 * 1024
CELL_SIZE = 16
PREDICTOR_FACTOR = 2
_SUPPORTED_BYTES = (2, 3, 4)


def _check_bytes_per_sample(bytes_per_sample: int) -> None:
    if bytes_per_sample not in _SUPPORTED_BYTES:
        raise ValueError(f"unsupported bytes per sample: {bytes_per_sample}")


def float_to_half(bits: int) -> int:
    """Convert the bit pattern of a 32-bit float to a 16-bit half float."""
    bits &= 0xFFFFFFFF
    sign = (bits >> 16) & 0x8000
    exponent = ((bits >> 23) & 0xFF) - (127 - 15)
    mantissa = bits & 0x007FFFFF
    if exponent <= 0:
        if exponent < -10:
            return sign
        mantissa = (mantissa | 0x00800000) >> (1 - exponent)
        if mantissa & 0x00001000:
            mantissa += 0x00002000
        return (sign | (mantissa >> 13)) & 0xFFFF
    if exponent == 0xFF - (127 - 15):
        if mantissa == 0:
            return sign | 0x7C00
        return (sign | 0x7C00 | (mantissa >> 13)) & 0xFFFF
    if mantissa & 0x00001000:
        mantissa += 0x00002000
        if mantissa & 0x00800000:
            mantissa = 0
            exponent += 1
    if exponent > 30:
        return sign | 0x7C00
    return (sign | (exponent << 10) | (mantissa >> 13)) & 0xFFFF


def float_to_fp24(bits: int) -> bytes:
    """Convert the bit pattern of a 32-bit float to three FP24 bytes."""
    bits &= 0xFFFFFFFF
    exponent = ((bits >> 23) & 0xFF) - 128
    mantissa = bits & 0x007FFFFF
    if exponent == 127:
        if mantissa != 0x007FFFFF and (mantissa >> 7) == 0xFFFF:
            mantissa &= 0x003FFFFF
    elif exponent > 63:
        exponent = 63
        mantissa = 0x007FFFFF
    elif exponent <= -64:
        if exponent >= -79:
            mantissa = (mantissa | 0x00800000) >> (-63 - exponent)
        else:
            mantissa = 0
        exponent = -64
    return bytes(
        (
            (((bits >> 24) & 0x80) | (exponent + 64)) & 0xFF,
            (mantissa >> 15) & 0xFF,
            (mantissa >> 7) & 0xFF,
        )
    )


def compress_floats(values: Iterable[float], bytes_per_sample: int) -> bytes:
    """Encode float samples with the given width.

    Half and single precision samples are little endian; FP24 samples keep
    their natural order, sign and exponent first.
    """
    _check_bytes_per_sample(bytes_per_sample)
    floats = np.asarray(list(values), dtype=np.float32)
    if bytes_per_sample == 4:
        return floats.astype("<f4").tobytes()
    patterns = floats.view(np.uint32).tolist()
    if bytes_per_sample == 2:
        halves = np.array([float_to_half(p) for p in patterns], dtype="<u2")
        return halves.tobytes()
    return b"".join(float_to_fp24(p) for p in patterns)


def encode_fp_delta_row(
    src: bytes,
    tile_width: int,
    real_tile_width: int,
    bytes_per_sample: int,
    factor: int,
) -> bytes:
    """Split a row of samples into byte planes and delta encode them.

    ``tile_width`` samples are taken from ``src``; the row is padded with
    zeros to ``real_tile_width`` samples per plane.
    """
    _check_bytes_per_sample(bytes_per_sample)
    if tile_width < 0 or tile_width > real_tile_width:
        raise ValueError(
            f"row of {tile_width} samples does not fit a tile of {real_tile_width}"
        )
    if factor < 1:
        raise ValueError(f"invalid predictor factor {factor}")
    needed = tile_width * bytes_per_sample
    if len(src) < needed:
        raise ValueError(f"expected at least {needed} bytes, got {len(src)}")
    samples = np.frombuffer(bytes(src[:needed]), dtype=np.uint8).reshape(
        tile_width, bytes_per_sample
    )
    if bytes_per_sample != 3:
        samples = samples[:, ::-1]
    planes = np.zeros((bytes_per_sample, real_tile_width), dtype=np.uint8)
    planes[:, :tile_width] = samples.T
    flat = planes.ravel()
    encoded = flat.copy()
    if factor < flat.size:
        encoded[factor:] = flat[factor:] - flat[:-factor]
    return encoded.tobytes()


@dataclass(frozen=True)
class TileLayout:
    """How an image is divided into tiles."""

    tile_width: int
    tile_length: int
    tiles_across: int
    tiles_down: int

    @property
    def tile_count(self) -> int:
        return self.tiles_across * self.tiles_down


def _ceil_div(a: int, b: int) -> int:
    return (a + b - 1) // b


def _round_up(value: int, step: int) -> int:
    return _ceil_div(value, step) * step


def calculate_tiles(width: int, height: int, bits_per_sample: int) -> TileLayout:
    """Choose tiles of about 512 KiB whose sides are multiples of 16."""
    if width <= 0 or height <= 0:
        raise ValueError(f"invalid image size {width}x{height}")
    bytes_per_sample = bits_per_sample >> 3
    _check_bytes_per_sample(bytes_per_sample)
    samples_per_tile = BYTES_PER_TILE // bytes_per_sample
    tile_side = math.floor(math.sqrt(samples_per_tile) + 0.5)
    tile_width = min(width, tile_side)
    tiles_across = _ceil_div(width, tile_width)
    tile_width = _round_up(_ceil_div(width, tiles_across), CELL_SIZE)
    tile_length = min(samples_per_tile // tile_width, height)
    tiles_down = _ceil_div(height, tile_length)
    tile_length = _round_up(_ceil_div(height, tiles_down), CELL_SIZE)
    return TileLayout(tile_width, tile_length, tiles_across, tiles_down)


def encode_tile(
    rows: Iterable[Sequence[float]],
    tile_width: int,
    tile_length: int,
    bytes_per_sample: int,
) -> bytes:
    """Encode and deflate one tile from its rows of float samples.

    Rows may be shorter than ``tile_width`` and fewer than ``tile_length``;
    the missing part of the tile is filled with zeros.
    """
    _check_bytes_per_sample(bytes_per_sample)
    row_bytes = tile_width * bytes_per_sample
    buffer = bytearray(row_bytes * tile_length)
    for index, row in enumerate(rows):
        if index >= tile_length:
            raise ValueError(f"more than {tile_length} rows for one tile")
        values = list(row)
        if len(values) > tile_width:
            raise ValueError(
                f"row of {len(values)} samples wider than the tile ({tile_width})"
            )
        samples = compress_floats(values, bytes_per_sample)
        encoded = encode_fp_delta_row(
            samples, len(values), tile_width, bytes_per_sample, PREDICTOR_FACTOR
        )
        start = index * row_bytes
        buffer[start : start + row_bytes] = encoded
    return zlib.compress(bytes(buffer))