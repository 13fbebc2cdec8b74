"""Tests for the bounded selection state machine."""

import pytest

from tui_bounded.state import (
    Boundary,
    BoundedSelection,
    OutOfBoundsError,
    StateError,
    WrapPolicy,
)


@pytest.fixture
def wrapping() -> BoundedSelection:
    """Selection over 0..10 that wraps at the edges."""
    return BoundedSelection(Boundary(0, 10), WrapPolicy.WRAP)


@pytest.fixture
def clamping() -> BoundedSelection:
    """Selection over 0..10 that stays pinned at the edges."""
    return BoundedSelection(Boundary(0, 10), WrapPolicy.CLAMP)


class TestBoundary:
    """Test boundary construction."""

    def test_from_sequence(self):
        """A collection of n items spans 0..n-1."""
        assert Boundary.from_sequence([1, 2, 3, 4, 5, 6]) == Boundary(0, 5)

    def test_from_length_single_item(self):
        assert Boundary.from_length(1) == Boundary(0, 0)

    def test_empty_collection_has_no_boundary(self):
        """Length zero is the explicit 'no valid range' case, not -1."""
        assert Boundary.from_length(0) is None
        assert Boundary.from_sequence([]) is None

    def test_negative_length_rejected(self):
        with pytest.raises(ValueError):
            Boundary.from_length(-1)

    def test_inverted_boundary_rejected(self):
        with pytest.raises(ValueError):
            Boundary(5, 2)

    def test_contains_is_inclusive(self):
        boundary = Boundary(2, 4)
        assert boundary.contains(2)
        assert boundary.contains(4)
        assert not boundary.contains(1)
        assert not boundary.contains(5)

    def test_str(self):
        assert str(Boundary(0, 10)) == "0..10"


class TestSelect:
    """Test explicit, bounds-checked selection."""

    def test_starts_unselected(self, wrapping):
        assert wrapping.selected is None

    def test_selection_within_bounds(self, wrapping):
        wrapping.select(5)
        assert wrapping.selected == 5

    def test_selection_on_edge(self, wrapping):
        wrapping.select(10)
        assert wrapping.selected == 10

    def test_selection_out_of_bounds(self, wrapping):
        """Out-of-range selection fails with the boundary and the index."""
        with pytest.raises(OutOfBoundsError) as exc_info:
            wrapping.select(11)

        assert exc_info.value.bounds == Boundary(0, 10)
        assert exc_info.value.actual == 11
        assert "0..10" in str(exc_info.value)
        assert "(is: 11)" in str(exc_info.value)
        assert wrapping.selected is None

    def test_selection_below_lower(self):
        state = BoundedSelection(Boundary(3, 8))
        with pytest.raises(OutOfBoundsError):
            state.select(2)

    def test_failed_select_keeps_previous_selection(self, wrapping):
        wrapping.select(4)
        with pytest.raises(StateError):
            wrapping.select(42)
        assert wrapping.selected == 4

    def test_with_selection(self):
        state = BoundedSelection.with_selection(Boundary(0, 10), WrapPolicy.WRAP, 3)
        assert state.selected == 3
        assert state.wrap is WrapPolicy.WRAP

    def test_with_selection_out_of_bounds(self):
        with pytest.raises(OutOfBoundsError) as exc_info:
            BoundedSelection.with_selection(Boundary(0, 10), WrapPolicy.CLAMP, 20)
        assert exc_info.value.actual == 20

    def test_deselect(self, wrapping):
        wrapping.select(2)
        wrapping.deselect()
        assert wrapping.selected is None

    def test_is_selected(self, wrapping):
        wrapping.select(2)
        assert wrapping.is_selected(2)
        assert not wrapping.is_selected(3)


class TestStepping:
    """Test next/prev with wrap and clamp policies."""

    def test_wrap_enabled_should_wrap(self, wrapping):
        wrapping.last()
        assert wrapping.selected == 10

        wrapping.next()
        assert wrapping.selected == 0

        wrapping.prev()
        assert wrapping.selected == 10

    def test_wrap_disabled_should_stay(self, clamping):
        clamping.last()
        assert clamping.selected == 10

        clamping.next()
        clamping.next()
        clamping.next()
        assert clamping.selected == 10

    def test_clamp_at_lower_edge(self, clamping):
        clamping.first()
        clamping.prev()
        assert clamping.selected == 0

    def test_regular_steps(self, wrapping):
        wrapping.select(5)
        wrapping.next()
        assert wrapping.selected == 6
        wrapping.prev()
        wrapping.prev()
        assert wrapping.selected == 4

    def test_next_n_saturates_at_upper(self, wrapping):
        """Large steps stop at the edge instead of wrapping past it."""
        wrapping.select(7)
        wrapping.next_n(10**12)
        assert wrapping.selected == 10

    def test_prev_n_saturates_at_lower(self, wrapping):
        wrapping.select(3)
        wrapping.prev_n(10**12)
        assert wrapping.selected == 0

    def test_step_from_edge_wraps_regardless_of_n(self, wrapping):
        wrapping.last()
        wrapping.next_n(5)
        assert wrapping.selected == 0

    def test_prev_n_respects_nonzero_lower(self):
        state = BoundedSelection(Boundary(4, 9), WrapPolicy.CLAMP)
        state.select(6)
        state.prev_n(100)
        assert state.selected == 4

    def test_step_when_unselected_selects_lower(self):
        """Stepping from nothing lands on the first valid index."""
        state = BoundedSelection(Boundary(3, 9))
        state.next()
        assert state.selected == 3

        state.deselect()
        state.prev()
        assert state.selected == 3

    def test_negative_step_rejected(self, wrapping):
        with pytest.raises(ValueError):
            wrapping.next_n(-1)
        with pytest.raises(ValueError):
            wrapping.prev_n(-1)

    def test_first_and_last(self, clamping):
        clamping.last()
        assert clamping.selected == 10
        clamping.first()
        assert clamping.selected == 0

    def test_selection_stays_in_bounds(self):
        """Any mix of navigation keeps the selection inside the boundary."""
        state = BoundedSelection(Boundary(2, 6), WrapPolicy.WRAP)
        moves = [
            state.next,
            lambda: state.next_n(3),
            state.prev,
            lambda: state.prev_n(4),
            state.last,
            state.next,
            state.first,
            state.prev,
        ]
        for _ in range(5):
            for move in moves:
                move()
                assert 2 <= state.selected <= 6


class TestBoundaryUpdates:
    """Test resynchronizing the boundary after the collection changes."""

    def test_shrink_clamps_selection(self):
        state = BoundedSelection(Boundary(0, 5))
        state.select(5)

        state.update_boundary_from_collection_length(4)

        assert state.boundary == Boundary(0, 3)
        assert state.selected == 3

    def test_grow_preserves_selection(self):
        state = BoundedSelection(Boundary(0, 5))
        state.select(3)

        state.update_boundary_from_collection_length(10)

        assert state.boundary == Boundary(0, 9)
        assert state.selected == 3

    def test_update_bounds_from_sequence(self):
        items = [1, 2, 3, 4, 5, 6]
        state = BoundedSelection(Boundary.from_sequence(items))
        state.last()
        assert state.selected == 5

        items.extend([7, 8, 9, 10])
        state.update_boundary_from_sequence(items)
        assert state.selected == 5

        state.last()
        assert state.selected == 9

    def test_unselected_stays_unselected(self):
        state = BoundedSelection(Boundary(0, 5))
        state.update_boundary_from_collection_length(2)
        assert state.selected is None

    def test_empty_collection_disables_selection(self):
        state = BoundedSelection(Boundary(0, 5))
        state.select(2)

        state.update_boundary_from_collection_length(0)

        assert state.boundary is None
        assert state.selected is None

        state.next()
        state.prev_n(3)
        state.first()
        state.last()
        assert state.selected is None

        with pytest.raises(OutOfBoundsError) as exc_info:
            state.select(0)
        assert exc_info.value.bounds is None
        assert "<empty>" in str(exc_info.value)

    def test_refill_after_empty(self):
        state = BoundedSelection(None, WrapPolicy.CLAMP)
        state.update_boundary_from_collection_length(3)
        state.last()
        assert state.selected == 2

    def test_update_boundary_does_not_revalidate(self):
        state = BoundedSelection(Boundary(0, 10))
        state.select(8)
        state.update_boundary(Boundary(0, 4))
        assert state.boundary == Boundary(0, 4)
        assert state.selected == 8

    def test_update_upper_and_select(self):
        state = BoundedSelection(Boundary(0, 10))
        assert state.selected is None

        state.update_upper_and_select(20)

        assert state.boundary == Boundary(0, 20)
        assert state.selected == 20

    def test_update_upper_keeps_lower(self):
        state = BoundedSelection(Boundary(2, 5))
        state.update_upper_and_select(7)
        assert state.boundary == Boundary(2, 7)
        assert state.selected == 7

    def test_update_upper_from_empty(self):
        state = BoundedSelection(None)
        state.update_upper_and_select(0)
        assert state.boundary == Boundary(0, 0)
        assert state.selected == 0

    def test_update_upper_below_lower_changes_nothing(self):
        state = BoundedSelection(Boundary(3, 5))
        state.select(4)
        with pytest.raises(ValueError):
            state.update_upper_and_select(1)
        assert state.boundary == Boundary(3, 5)
        assert state.selected == 4
