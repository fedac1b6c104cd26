"""
scangrid_example.py — build a scanimation directly from code (no CLI args)

Produces in ./export/ :
  frame1.png .. frame4.png   (synthetic frames: a square walking left to right)
  output.png                 (interleaved composite)
  mask.png                   (slit mask)
  bars_debug.png             (composite with bar boundaries / source indices)
"""

from pathlib import Path

from PIL import Image, ImageDraw

from scangrid.Compositor import composite, validate_source_set
from scangrid.Debug import save_bar_debug_image
from scangrid.Generate import generate


# ----------------------------
# Paths
# ----------------------------
EXPORT_PATH = Path("export")
EXPORT_PATH.mkdir(exist_ok=True)


# ----------------------------
# Input frames
# ----------------------------
W, H = 400, 200
BAR_WIDTH = 4

paths = []
for i in range(4):
    im = Image.new("RGBA", (W, H), (255, 255, 255, 255))
    draw = ImageDraw.Draw(im)
    x = 60 + i * 70
    draw.rectangle([x, 60, x + 80, 140], fill=(20, 20, 160, 255))
    p = EXPORT_PATH / f"frame{i + 1}.png"
    im.save(p)
    paths.append(str(p))


def progress(stage: str, done: int, total: int):
    """Progress callback."""
    if done == total:
        print(f"  {stage}: {done}/{total}")


# ----------------------------
# Run
# ----------------------------
result = generate(paths, str(EXPORT_PATH), BAR_WIDTH, progress=progress)
print(f"✅ Saved: {result.output_path}")
print(f"✅ Saved: {result.mask_path}")

frames = [Image.open(p).convert("RGBA") for p in paths]
layout = validate_source_set(frames, BAR_WIDTH)
save_bar_debug_image(composite(frames, BAR_WIDTH), layout, str(EXPORT_PATH / "bars_debug.png"), max_labels=20)
print(f"✅ Saved: {EXPORT_PATH / 'bars_debug.png'}")
