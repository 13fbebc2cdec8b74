"""Layout calculation functions."""

from dataclasses import dataclass

from blessed import Terminal


@dataclass(frozen=True)
class Rect:
    """A screen region in terminal cells."""

    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_terminal(cls, term: Terminal) -> "Rect":
        """Full-screen rect for the terminal, with a safe fallback size."""
        try:
            return cls(0, 0, term.width, term.height)
        except Exception:
            return cls(0, 0, 80, 24)

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def right(self) -> int:
        return self.x + self.width

    def inner(self, margin: int = 1) -> "Rect":
        """Rect shrunk by ``margin`` cells on every side (never negative)."""
        return Rect(
            self.x + margin,
            self.y + margin,
            max(0, self.width - 2 * margin),
            max(0, self.height - 2 * margin),
        )


@dataclass(frozen=True)
class Ratio:
    """Percentage split between two regions.

    Ratios summing to more than 100 are normalized so they sum to exactly
    100; smaller sums are kept as given.
    """

    first: int = 50
    second: int = 50

    def __post_init__(self) -> None:
        if self.first < 0 or self.second < 0:
            raise ValueError(f"Ratio parts cannot be negative: {self.first}/{self.second}")
        total = self.first + self.second
        if total <= 100:
            return

        # Integer ceil/floor so the parts always sum to exactly 100
        first = -(-self.first * 100 // total)
        second = self.second * 100 // total
        object.__setattr__(self, "first", first)
        object.__setattr__(self, "second", second)


def _split_length(length: int, ratio: Ratio) -> tuple[int, int]:
    first = length * ratio.first // 100
    second = min(length - first, length * ratio.second // 100)
    return first, second


def v_split(rect: Rect, ratio: Ratio = Ratio()) -> tuple[Rect, Rect]:
    """
    Split a rect into left and right columns.

    Args:
        rect: Region to split
        ratio: Percentage of the width given to each column

    Returns:
        (left, right) rects
    """
    left_w, right_w = _split_length(rect.width, ratio)
    return (
        Rect(rect.x, rect.y, left_w, rect.height),
        Rect(rect.x + left_w, rect.y, right_w, rect.height),
    )


def h_split(rect: Rect, ratio: Ratio = Ratio()) -> tuple[Rect, Rect]:
    """
    Split a rect into top and bottom rows.

    Args:
        rect: Region to split
        ratio: Percentage of the height given to each row

    Returns:
        (top, bottom) rects
    """
    top_h, bottom_h = _split_length(rect.height, ratio)
    return (
        Rect(rect.x, rect.y, rect.width, top_h),
        Rect(rect.x, rect.y + top_h, rect.width, bottom_h),
    )


def centered_rect(size: Rect) -> Rect:
    """Rect half the width and half the height of ``size``, centered in it."""
    width = size.width // 2
    height = size.height // 2
    return Rect(size.x + width // 2, size.y + height // 2, width, height)
