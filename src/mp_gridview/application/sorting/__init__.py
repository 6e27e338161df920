"""Application sorting – sort state, direction toggling and sort-link building."""
from mp_gridview.application.sorting.sort_state import (
    Ordering,
    SortAttributeDefinition,
    SortDirection,
    SortState,
    humanize,
)
from mp_gridview.application.sorting.link_builder import SortLink, SortLinkBuilder

__all__ = [
    "Ordering",
    "SortAttributeDefinition",
    "SortDirection",
    "SortLink",
    "SortLinkBuilder",
    "SortState",
    "humanize",
]
