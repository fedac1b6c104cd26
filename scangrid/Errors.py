from typing import List, Optional

from scangrid.DataModel import Size


class ScangridError(Exception):
    """Base class for every failure raised by generate()."""


class NoImagesError(ScangridError, ValueError):
    def __init__(self, message: str = "No images given"):
        super().__init__(message)


class DecodeError(ScangridError, ValueError):
    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = str(path)
        msg = f"Error opening image {self.path}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class BarWidthMismatchError(ScangridError, ValueError):
    def __init__(self, width: int, bar_width: int):
        self.width = width
        self.bar_width = bar_width
        if bar_width < 1:
            msg = f"Bar width must be a positive integer (got {bar_width})"
        else:
            msg = f"Bar width must be a divider of images' width ({bar_width} does not divide {width})"
        super().__init__(msg)


class SizeMismatchError(ScangridError, ValueError):
    def __init__(self, index: int, expected: Size, actual: Size):
        self.index = index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Images must be of the same size: image {index} is "
            f"{actual[0]}x{actual[1]}, expected {expected[0]}x{expected[1]}"
        )


class WriteError(ScangridError, OSError):
    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = str(path)
        msg = f"Error creating output image {self.path}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)

    def __str__(self) -> str:
        return self.args[0]


class CoverageError(ScangridError, AssertionError):
    """Raised by the optional coverage check when composite columns are left at the sentinel colour."""

    def __init__(self, columns: List[int]):
        self.columns = list(columns)
        super().__init__(f"composite has unfilled columns: {self.columns[:10]}")
