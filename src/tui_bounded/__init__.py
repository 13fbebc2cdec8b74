"""tui-bounded - bounded, wrap-aware list selection for terminal UIs."""

__version__ = "0.1.0"

from .state import (
    Boundary,
    BoundedSelection,
    OutOfBoundsError,
    StateError,
    WrapPolicy,
)

__all__ = [
    "Boundary",
    "BoundedSelection",
    "OutOfBoundsError",
    "StateError",
    "WrapPolicy",
]
