from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple

Box = Tuple[int, int, int, int]
Size = Tuple[int, int]
RGBA = Tuple[int, int, int, int]

# Pre-fill colour of the composite canvas; surviving columns mean a bar was missed.
SENTINEL: RGBA = (255, 0, 255, 255)
MASK_OPAQUE: RGBA = (0, 0, 0, 255)
MASK_SLIT: RGBA = (255, 255, 255, 255)


# -----------------------------
# Data model
# -----------------------------

@dataclass(frozen=True)
class BarLayout:
    """Geometry shared by the composite and the mask of one generation."""
    width: int
    height: int
    bar_width: int
    img_count: int

    @property
    def size(self) -> Size:
        return (self.width, self.height)

    @property
    def bar_count(self) -> int:
        return self.width // self.bar_width

    @property
    def mask_width(self) -> int:
        return self.width * 1

    @property
    def slit_count(self) -> int:
        # Kept as the original arithmetic: bar_count / bar_width, not bar_count / img_count.
        return (self.bar_count // self.bar_width) * 1

    def source_index(self, bar: int) -> int:
        return bar % self.img_count

    def bar_box(self, bar: int) -> Box:
        x = bar * self.bar_width
        return (x, 0, x + self.bar_width, self.height)

    def slit_box(self, i: int) -> Optional[Box]:
        """Box of slit i on the mask, clipped to the mask width (None if fully outside)."""
        x1 = self.img_count * self.bar_width * i
        if x1 >= self.mask_width:
            return None
        x2 = min(x1 + self.bar_width, self.mask_width)
        return (x1, 0, x2, self.height)


@dataclass(frozen=True)
class GridConfig:
    composite_name: str = "output.png"
    mask_name: str = "mask.png"

    # scan the composite for sentinel columns after building it
    check_coverage: bool = False


@dataclass
class GenerateResult:
    output_path: str
    mask_path: str
    layout: BarLayout


@dataclass
class ImageSelection:
    """Ordered list of image paths picked in a front-end, owned by that front-end."""
    items: List[str] = field(default_factory=list)
    min_images: int = 2

    def add(self, paths: Iterable[str]) -> None:
        self.items.extend(str(p) for p in paths)

    def clear(self) -> None:
        self.items = []

    def is_ready(self) -> bool:
        return len(self.items) >= self.min_images

    @property
    def paths(self) -> List[str]:
        return list(self.items)

    def __len__(self) -> int:
        return len(self.items)


ProgressFn = Optional[Callable[[str, int, int], None]]  # (stage, done, total)
