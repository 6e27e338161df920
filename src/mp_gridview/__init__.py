"""
mp_gridview – server-side pagination and sort-link toolkit for grid views.

Import path convention::

    from mp_gridview.application.pagination import PageState, PaginationLinkBuilder
    from mp_gridview.application.sorting import SortState, SortLinkBuilder
    from mp_gridview.widgets import LinkPager, LinkSorter
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
