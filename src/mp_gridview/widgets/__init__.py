"""Widgets – HTML rendering of pagers and sorters."""
from mp_gridview.widgets.html import AttributeMap, a, tag, void_tag
from mp_gridview.widgets.link_pager import LinkPager
from mp_gridview.widgets.link_sorter import LinkSorter

__all__ = ["AttributeMap", "LinkPager", "LinkSorter", "a", "tag", "void_tag"]
