"""
Bounded selection state for list-style widgets.

Tracks which item of an ordered collection is highlighted and keeps that
index inside the collection's valid range. Pure state: no rendering, no I/O.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sized


class StateError(Exception):
    """Base exception for selection state operations."""

    pass


class OutOfBoundsError(StateError):
    """Raised when a selection falls outside the current boundary."""

    def __init__(self, bounds: Optional["Boundary"], actual: int):
        self.bounds = bounds
        self.actual = actual
        range_text = str(bounds) if bounds is not None else "<empty>"
        super().__init__(
            "Out of Bounds Error: state selection not within boundary range "
            f"{range_text} (is: {actual})"
        )


@dataclass(frozen=True)
class Boundary:
    """Inclusive (lower, upper) index range of a backing collection."""

    lower: int
    upper: int

    def __post_init__(self) -> None:
        if self.lower < 0 or self.lower > self.upper:
            raise ValueError(f"Invalid boundary: {self.lower}..{self.upper}")

    def __str__(self) -> str:
        return f"{self.lower}..{self.upper}"

    @classmethod
    def from_length(cls, length: int) -> Optional["Boundary"]:
        """Boundary for a collection of ``length`` items, or None when empty."""
        if length < 0:
            raise ValueError(f"Collection length cannot be negative: {length}")
        if length == 0:
            return None
        return cls(0, length - 1)

    @classmethod
    def from_sequence(cls, items: Sized) -> Optional["Boundary"]:
        return cls.from_length(len(items))

    def contains(self, index: int) -> bool:
        return self.lower <= index <= self.upper


class WrapPolicy(Enum):
    """What stepping does when it runs into an edge."""

    WRAP = "wrap"  # jump to the opposite edge
    CLAMP = "clamp"  # stay pinned at the edge


class BoundedSelection:
    """
    A selection index constrained to a boundary.

    The selection is either None (nothing highlighted) or an index within
    ``boundary``. A boundary of None means the backing collection is empty,
    in which case every selection operation is disabled.
    """

    def __init__(
        self,
        boundary: Optional[Boundary],
        wrap: WrapPolicy = WrapPolicy.WRAP,
    ):
        self._boundary = boundary
        self._wrap = wrap
        self._selected: Optional[int] = None

    @classmethod
    def with_selection(
        cls,
        boundary: Optional[Boundary],
        wrap: WrapPolicy,
        initial: int,
    ) -> "BoundedSelection":
        """
        Create a selection with a bounds-checked starting index.

        Raises:
            OutOfBoundsError: If ``initial`` is outside ``boundary``
        """
        state = cls(boundary, wrap)
        state.select(initial)
        return state

    def __repr__(self) -> str:
        return (
            f"BoundedSelection(boundary={self._boundary!r}, "
            f"wrap={self._wrap.name}, selected={self._selected!r})"
        )

    @property
    def boundary(self) -> Optional[Boundary]:
        return self._boundary

    @property
    def wrap(self) -> WrapPolicy:
        return self._wrap

    @property
    def selected(self) -> Optional[int]:
        """Currently selected index, or None when nothing is selected."""
        return self._selected

    def is_selected(self, index: int) -> bool:
        return self._selected is not None and self._selected == index

    def select(self, index: int) -> None:
        """
        Select ``index`` if it lies within the boundary.

        Raises:
            OutOfBoundsError: If ``index`` is outside the boundary, or there
                is no boundary because the collection is empty
        """
        if self._boundary is None or not self._boundary.contains(index):
            raise OutOfBoundsError(self._boundary, index)
        self._selected = index

    def deselect(self) -> None:
        self._selected = None

    def first(self) -> None:
        if self._boundary is not None:
            self._selected = self._boundary.lower

    def last(self) -> None:
        if self._boundary is not None:
            self._selected = self._boundary.upper

    def next(self) -> None:
        self.next_n(1)

    def prev(self) -> None:
        self.prev_n(1)

    def next_n(self, n: int) -> None:
        """Step forwards ``n`` items, wrapping or clamping at the upper edge."""
        if n < 0:
            raise ValueError(f"Step count cannot be negative: {n}")
        bounds = self._boundary
        if bounds is None:
            return

        current = self._selected
        if current is None:
            self._selected = bounds.lower
        elif current == bounds.upper:
            if self._wrap is WrapPolicy.WRAP:
                self._selected = bounds.lower
            else:
                self._selected = bounds.upper
        else:
            self._selected = min(bounds.upper, current + n)

    def prev_n(self, n: int) -> None:
        """Step backwards ``n`` items, wrapping or clamping at the lower edge."""
        if n < 0:
            raise ValueError(f"Step count cannot be negative: {n}")
        bounds = self._boundary
        if bounds is None:
            return

        current = self._selected
        if current is None:
            self._selected = bounds.lower
        elif current == bounds.lower:
            if self._wrap is WrapPolicy.WRAP:
                self._selected = bounds.upper
            else:
                self._selected = bounds.lower
        else:
            self._selected = max(bounds.lower, current - n)

    def update_boundary(self, boundary: Optional[Boundary]) -> None:
        """
        Replace the boundary without re-validating the selection.

        Follow up with a corrective call if the old selection may no longer
        fit, or use update_boundary_from_collection_length instead.
        """
        self._boundary = boundary

    def update_boundary_from_collection_length(self, length: int) -> None:
        """
        Resync the boundary to a collection of ``length`` items.

        An existing selection is clamped into the new range, so shrinking the
        collection never leaves it past the end and growing it leaves the
        selection where it was. An empty collection clears both boundary and
        selection.
        """
        self._boundary = Boundary.from_length(length)
        if self._boundary is None:
            self._selected = None
            return

        if self._selected is not None:
            if self._selected < self._boundary.lower:
                self._selected = self._boundary.lower
            elif self._selected > self._boundary.upper:
                self._selected = self._boundary.upper

    def update_boundary_from_sequence(self, items: Sized) -> None:
        self.update_boundary_from_collection_length(len(items))

    def update_upper_and_select(self, upper: int) -> None:
        """
        Move the upper boundary and select it.

        Used when an item is appended and focus should follow it.
        """
        lower = self._boundary.lower if self._boundary is not None else 0
        # Boundary validation rejects upper < lower before anything changes
        self._boundary = Boundary(lower, upper)
        self.select(upper)
