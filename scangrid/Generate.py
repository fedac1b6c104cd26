from __future__ import annotations

from typing import Optional, Sequence

from scangrid.Compositor import build_composite, validate_source_set
from scangrid.DataModel import GenerateResult, GridConfig, ProgressFn
from scangrid.Debug import sentinel_columns
from scangrid.Errors import CoverageError
from scangrid.MaskBuilder import build_mask
from scangrid.RasterIO import load_source_set, output_paths, write_png


# -----------------------------
# Public API
# -----------------------------

def generate(
    images: Sequence[str],
    output_directory: str,
    bar_width: int,
    *,
    config: Optional[GridConfig] = None,
    progress: ProgressFn = None,
) -> GenerateResult:
    """
    Build the interleaved composite and its slit mask from image files and
    write them to <output_directory>/output.png and <output_directory>/mask.png.

    Steps run in order and any failure aborts the rest:
    load all -> validate -> composite -> mask -> write composite -> write mask.
    Raises NoImagesError, DecodeError, BarWidthMismatchError,
    SizeMismatchError or WriteError, and CoverageError when
    config.check_coverage finds unfilled composite columns.
    """
    if config is None:
        config = GridConfig()

    rasters = load_source_set(list(images), progress)
    layout = validate_source_set(rasters, bar_width)

    out_img = build_composite(rasters, layout, progress)
    if config.check_coverage:
        unfilled = sentinel_columns(out_img)
        if unfilled:
            raise CoverageError(unfilled)

    mask_img = build_mask(layout, progress)

    output_path, mask_path = output_paths(output_directory, config)
    write_png(out_img, output_path)
    if progress:
        progress("write", 1, 2)
    write_png(mask_img, mask_path)
    if progress:
        progress("write", 2, 2)

    return GenerateResult(output_path=output_path, mask_path=mask_path, layout=layout)
