"""
Presentation module.

Pure filter/sort transforms and a headless list view model driven by store
change events.
"""

from .filters import FilterType, SortType, filter_and_sort, filter_prospects, sort_prospects
from .view_model import ProspectListViewModel, ProspectRow, RowAction, RowActionKind

__all__ = [
    "FilterType",
    "SortType",
    "filter_and_sort",
    "filter_prospects",
    "sort_prospects",
    "ProspectListViewModel",
    "ProspectRow",
    "RowAction",
    "RowActionKind",
]
