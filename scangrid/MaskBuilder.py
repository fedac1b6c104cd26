from __future__ import annotations

from PIL import Image

from scangrid.DataModel import MASK_OPAQUE, MASK_SLIT, BarLayout, ProgressFn


def build_mask(layout: BarLayout, progress: ProgressFn = None) -> Image.Image:
    """
    Opaque black overlay with layout.slit_count white slits of bar_width
    columns, slit i starting at x = img_count * bar_width * i.

    Slits running past the right edge are clipped; slits starting past it
    are skipped.
    """
    mask = Image.new("RGBA", (layout.mask_width, layout.height), MASK_OPAQUE)

    total = layout.slit_count
    for i in range(total):
        box = layout.slit_box(i)
        if box is not None:
            mask.paste(MASK_SLIT, box)
        if progress:
            progress("mask", i + 1, total)

    return mask
