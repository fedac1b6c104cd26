from pathlib import Path

import numpy as np
import pytest
from PIL import Image

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)


def solid(color, size=(100, 50)) -> Image.Image:
    return Image.new("RGBA", size, color)


def noise(seed: int, size=(60, 8)) -> Image.Image:
    rng = np.random.default_rng(seed)
    w, h = size
    a = rng.integers(0, 256, size=(h, w, 4), dtype=np.uint8)
    a[..., 3] = 255
    return Image.fromarray(a)


def pixels(img: Image.Image) -> np.ndarray:
    return np.asarray(img.convert("RGBA"))


@pytest.fixture
def write_image(tmp_path: Path):
    """Save an image under tmp_path/inputs and return its path as str."""
    in_dir = tmp_path / "inputs"
    in_dir.mkdir()

    def _write(name: str, img: Image.Image, fmt: str = "PNG") -> str:
        p = in_dir / name
        if fmt == "JPEG":
            img = img.convert("RGB")
        img.save(p, format=fmt)
        return str(p)

    return _write


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    d = tmp_path / "out"
    d.mkdir()
    return d
