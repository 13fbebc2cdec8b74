"""Components for blessed UI."""

from .list_view import ListView
from .panels import HelpModal, KeyHelp, SelectionDetails, selection_summary

__all__ = ["ListView", "HelpModal", "KeyHelp", "SelectionDetails", "selection_summary"]
