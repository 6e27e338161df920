"""Widgets – LinkSorter."""
from __future__ import annotations

from typing import Mapping, Sequence

from markupsafe import Markup

from mp_gridview.application.pagination import PageState
from mp_gridview.application.routing import QueryParams
from mp_gridview.application.sorting import SortLink, SortLinkBuilder, SortState
from mp_gridview.widgets.html import AttributeMap, AttributeValue, a, lines, tag


class LinkSorter:
    """Render one sort link per attribute inside a ``<ul>``.

    When ``attributes`` is not given every registered attribute of the sort
    state gets a link, in registration order.
    """

    def __init__(
        self,
        builder: SortLinkBuilder,
        *,
        attributes: Sequence[str] | None = None,
        options: Mapping[str, AttributeValue] | None = None,
        link_attributes: Mapping[str, AttributeValue] | None = None,
    ) -> None:
        self.builder = builder
        self.attributes = list(attributes) if attributes else None
        self.options = AttributeMap({"class": "sorter"} if options is None else options)
        self.link_attributes = AttributeMap(link_attributes)

    def render(
        self,
        sort_state: SortState,
        page_state: PageState,
        passthrough: QueryParams | None = None,
    ) -> Markup:
        """Render the sorter; every link keeps the page and page size of *page_state*."""
        names = self.attributes or list(sort_state.attributes)
        links = [
            self.builder.build_sort_link(name, sort_state, passthrough, page_state=page_state)
            for name in names
        ]
        items = lines(tag("li", self.render_link(link)) for link in links)
        return tag("ul", Markup("\n") + items + Markup("\n"), self.options)

    def render_link(self, link: SortLink) -> Markup:
        attributes = self.link_attributes.merge({"data-sort": link.sort_param})
        if link.css_class is not None:
            attributes = attributes.with_class(link.css_class)
        return a(link.label, link.url, attributes)


__all__ = ["LinkSorter"]
