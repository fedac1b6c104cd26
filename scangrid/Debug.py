from typing import List, Optional

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from scangrid.DataModel import RGBA, SENTINEL, BarLayout


def sentinel_columns(image: Image.Image, sentinel: RGBA = SENTINEL) -> List[int]:
    """
    Return the x of every column made only of sentinel pixels.

    The composite canvas starts out sentinel-filled, so any such column is a
    bar that was never copied. A source image that itself holds a full
    sentinel-coloured column will also show up here.
    """
    a = np.asarray(image.convert("RGBA"), dtype=np.uint8)
    hit = np.all(a == np.array(sentinel, dtype=np.uint8), axis=2)
    return [int(x) for x in np.flatnonzero(hit.all(axis=0))]


def save_bar_debug_image(
    composite: Image.Image,
    layout: BarLayout,
    out_path: str = "bars_debug.png",
    max_labels: Optional[int] = None,
):
    """
    Save a copy of the composite with bar boundaries and source indices drawn on top.

    Parameters
    ----------
    composite:
        Interleaved image produced by build_composite.
    layout:
        The BarLayout it was built with.
    out_path:
        Output PNG filename.
    max_labels:
        Label only the first N bars (default: all).
    """
    img = composite.copy().convert("RGBA")
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()

    colors = ["yellow", "lime", "cyan", "magenta", "orange", "red", "white"]

    if max_labels is None:
        max_labels = layout.bar_count

    for bar in range(layout.bar_count):
        x1, y1, x2, y2 = layout.bar_box(bar)
        src = layout.source_index(bar)
        color = colors[src % len(colors)]

        draw.line([(x1, 0), (x1, y2 - 1)], fill=color, width=1)

        if bar < max_labels:
            draw.text((x1 + 1, 2), str(src), fill=color, font=font)

    img.save(out_path, format="PNG")
    return img
