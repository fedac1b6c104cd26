from __future__ import annotations

import os
import tempfile
from typing import List, Sequence, Tuple

from PIL import Image, UnidentifiedImageError

from scangrid.DataModel import GridConfig, ProgressFn
from scangrid.Errors import DecodeError, WriteError


# -----------------------------
# Loading
# -----------------------------

def load_raster(path: str) -> Image.Image:
    """
    Decode a file into an RGBA raster.

    The format is detected from the file content, so a PNG saved as "x.jpg"
    still loads. Anything Pillow can decode is accepted.
    """
    try:
        with Image.open(path) as im:
            im.load()
            img = im.convert("RGBA")
    except FileNotFoundError as exc:
        raise DecodeError(path, "file not found") from exc
    except UnidentifiedImageError as exc:
        raise DecodeError(path, "not a recognized image format") from exc
    except Image.DecompressionBombError as exc:
        raise DecodeError(path, str(exc)) from exc
    except (OSError, SyntaxError, ValueError) as exc:
        raise DecodeError(path, str(exc)) from exc

    if img.width <= 0 or img.height <= 0:
        raise DecodeError(path, "image is empty")
    return img


def load_source_set(paths: Sequence[str], progress: ProgressFn = None) -> List[Image.Image]:
    images: List[Image.Image] = []
    total = len(paths)
    for i, p in enumerate(paths, start=1):
        images.append(load_raster(p))
        if progress:
            progress("load", i, total)
    return images


# -----------------------------
# Writing
# -----------------------------

def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def output_paths(output_directory: str, config: GridConfig = GridConfig()) -> Tuple[str, str]:
    out_dir = os.fspath(output_directory)
    return (
        os.path.join(out_dir, config.composite_name),
        os.path.join(out_dir, config.mask_name),
    )


def write_png(img: Image.Image, path: str) -> None:
    """
    Encode img as an 8-bit RGBA PNG and write it to path.

    The data goes to a temporary file next to the target first and is then
    renamed over it, so a failed encode never leaves a truncated PNG behind.
    """
    path = os.fspath(path)
    out_dir = os.path.dirname(path) or "."
    if not os.path.isdir(out_dir):
        raise WriteError(path, f"directory {out_dir} does not exist")

    try:
        fd, tmp_path = tempfile.mkstemp(prefix=".scangrid-", suffix=".png", dir=out_dir)
    except OSError as exc:
        raise WriteError(path, exc.strerror or str(exc)) from exc

    try:
        with os.fdopen(fd, "wb") as f:
            img.convert("RGBA").save(f, format="PNG")
        os.chmod(tmp_path, 0o666 & ~_current_umask())
        os.replace(tmp_path, path)
    except (OSError, ValueError) as exc:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise WriteError(path, str(exc)) from exc
