"""Input event helpers for blessed UI."""

from .utils import parse_key

__all__ = ["parse_key"]
