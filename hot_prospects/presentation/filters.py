"""Pure filter and sort transforms over prospect snapshots."""

from enum import Enum
from typing import Iterable

from ..models import Prospect, ProspectCollection


class FilterType(str, Enum):
    """Which prospects a list shows."""
    NONE = "none"
    CONTACTED = "contacted"
    UNCONTACTED = "uncontacted"

    @property
    def title(self) -> str:
        return _TITLES[self]


class SortType(str, Enum):
    """List ordering."""
    RECENT = "recent"    # Insertion order
    NAME = "name"        # Name, descending

    @property
    def label(self) -> str:
        return _SORT_LABELS[self]


_TITLES = {
    FilterType.NONE: "Everyone",
    FilterType.CONTACTED: "Contacted people",
    FilterType.UNCONTACTED: "Uncontacted people",
}

_SORT_LABELS = {
    SortType.RECENT: "Most Recent",
    SortType.NAME: "Name",
}


def filter_prospects(prospects: Iterable[Prospect], filter_type: FilterType) -> ProspectCollection:
    """Keep prospects matching the filter, preserving their order."""
    if filter_type == FilterType.CONTACTED:
        return tuple(p for p in prospects if p.is_contacted)
    if filter_type == FilterType.UNCONTACTED:
        return tuple(p for p in prospects if not p.is_contacted)
    return tuple(prospects)


def sort_prospects(prospects: Iterable[Prospect], sort_type: SortType) -> ProspectCollection:
    """
    Order prospects for display.

    RECENT keeps insertion order. NAME sorts by name descending; the sort is
    stable, so prospects sharing a name keep their insertion order.
    """
    if sort_type == SortType.NAME:
        return tuple(sorted(prospects, key=lambda p: p.name, reverse=True))
    return tuple(prospects)


def filter_and_sort(
    prospects: Iterable[Prospect],
    filter_type: FilterType,
    sort_type: SortType = SortType.RECENT
) -> ProspectCollection:
    """Apply the filter, then the sort."""
    return sort_prospects(filter_prospects(prospects, filter_type), sort_type)
