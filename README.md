# hdrmerge

Building blocks for merging several raw exposures of the same scene into a
single floating-point HDR DNG image: pixel grids, alignment bitmaps, mask
blurring and editing, colour filter array lookups, DNG sample encoding and
output file naming.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `hdrmerge.array2d.Array2D` – a row-major 2D grid addressed by flat index
  or by `(x, y)`, with a displacement (`displace`, `contains`,
  `fill_borders`) and the generators `trace_circle` and `trace_square`,
  which yield the `(col, row)` positions around a point that fall inside
  the grid.
- `hdrmerge.bitmap.Bitmap` – a bit-per-pixel image for median threshold
  bitmap alignment: `mtb`, `exclusion`, `shift`, `bitwise_xor`,
  `bitwise_and`, `count`, `get`/`set`, plus `dump_info` (text of `0` and
  `1`) and `dump_file` (a plain PBM file at `file_name + ".pbm"`).
- `hdrmerge.boxblur.BoxBlur` – a float copy of an `Array2D` whose `blur`
  applies three horizontal and vertical box blurs of radius
  `round(radius * 0.39)`, approximating a Gaussian.
- `hdrmerge.editable_mask` – `EditableMask`, an abstract layer mask with
  brush strokes (`start_action`, `edit_pixels`), `undo` and `redo`, each
  returning the touched area as a `Rect`. Subclasses supply
  `is_layer_valid_at`.
- `hdrmerge.cfa.CFAPattern` – colour index lookups from a filter word,
  including the 6x6 X-Trans layout (filter value 9), with `can_align`,
  `rows` and `columns`.
- `hdrmerge.dng_encoding` – `float_to_half`, `float_to_fp24`,
  `compress_floats`, the floating-point predictor `encode_fp_delta_row`,
  `calculate_tiles` (returning a `TileLayout`) and `encode_tile`, which
  encodes and deflates one tile.
- `hdrmerge.filenames` – `replace_arguments` and `build_output_file_name`
  for `%` tokens, `FileNameManipulator`, and `DateInterval`.
- `hdrmerge.options` – the `LoadOptions` and `SaveOptions` dataclasses with
  their defaults (for example 16 bits per sample and a feather radius of 3).
- `hdrmerge.log` – `Logger` (messages at or above a minimum priority,
  default 2, written to an optional stream), `Priority`, `get_logger`, the
  `Timer` context manager and `measure_time`.

## Examples

```python
from hdrmerge.dng_encoding import calculate_tiles

print(calculate_tiles(6000, 4000, 16))
# TileLayout(tile_width=512, tile_length=512, tiles_across=12, tiles_down=8)
```

```python
from hdrmerge.filenames import build_output_file_name, replace_arguments

names = ["/photos/IMG_1003.CR2", "/photos/IMG_1001.CR2"]
print(build_output_file_name(names))
print(replace_arguments("%iF[0]_%in[-1]%%.png", "", names))  # IMG_1001_1003%.png
```

Input names are sorted before indexing, and negative indices count from
the end. The directory tokens `%id[n]` and `%od` resolve to the canonical
directory of an existing file and to an empty string when the file does
not exist, so with the made-up paths above the first line prints
`/IMG_1001-1003.dng`.

### File name tokens

| Token    | Meaning                                              |
|----------|------------------------------------------------------|
| `%if[n]` | base file name of input image n (sorted; -1 is last) |
| `%iF[n]` | the same without the extension                       |
| `%id[n]` | directory of input image n                           |
| `%in[n]` | trailing digits of input image n's name              |
| `%of`    | base file name of the output file                    |
| `%od`    | directory of the output file                         |
| `%%`     | a single `%`                                         |

`%of` and `%od` are only expanded when an output file name is given.

## What this package does not do

It has no command-line program and no graphical interface. It does not
read raw camera files, build or align an exposure stack, compute response
functions or compose the merged image. It encodes and deflates DNG tiles
but does not assemble a complete DNG file: it writes no TIFF directories,
metadata, thumbnails or previews.