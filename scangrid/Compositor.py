from __future__ import annotations

from typing import Sequence

from PIL import Image

from scangrid.DataModel import SENTINEL, BarLayout, ProgressFn
from scangrid.Errors import BarWidthMismatchError, NoImagesError, SizeMismatchError


# -----------------------------
# Validation
# -----------------------------

def validate_source_set(images: Sequence[Image.Image], bar_width: int) -> BarLayout:
    """
    Check that the images can be interleaved with bars of bar_width pixels.

    Checks run in a fixed order and the first failure wins:
      1. at least one image,
      2. bar_width divides the width of the first (reference) image,
      3. every other image has the reference width and height.
    """
    if not images:
        raise NoImagesError()

    width, height = images[0].size
    if bar_width < 1 or width % bar_width != 0:
        raise BarWidthMismatchError(width, bar_width)

    for i, im in enumerate(images[1:], start=1):
        if im.size != (width, height):
            raise SizeMismatchError(i, (width, height), im.size)

    return BarLayout(width=width, height=height, bar_width=bar_width, img_count=len(images))


# -----------------------------
# Interleaving
# -----------------------------

def build_composite(
    images: Sequence[Image.Image],
    layout: BarLayout,
    progress: ProgressFn = None,
) -> Image.Image:
    """
    Interleave vertical bars: bar b is copied from images[b % img_count],
    at the same x offset in source and destination.
    """
    out = Image.new("RGBA", layout.size, SENTINEL)

    total = layout.bar_count
    for bar in range(total):
        box = layout.bar_box(bar)
        src = images[layout.source_index(bar)]
        out.paste(src.crop(box), box[:2])
        if progress:
            progress("composite", bar + 1, total)

    return out


def composite(images: Sequence[Image.Image], bar_width: int, progress: ProgressFn = None) -> Image.Image:
    layout = validate_source_set(images, bar_width)
    return build_composite(images, layout, progress)
