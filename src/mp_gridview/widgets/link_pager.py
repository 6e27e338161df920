"""Widgets – LinkPager."""
from __future__ import annotations

from typing import Mapping

from markupsafe import Markup

from mp_gridview.application.pagination import ButtonKind, PageButton, PageState, PaginationLinkBuilder
from mp_gridview.application.routing import QueryParams
from mp_gridview.widgets.html import AttributeMap, AttributeValue, a, lines, tag, void_tag


class LinkPager:
    """Render the buttons of a :class:`PaginationLinkBuilder` as Bootstrap markup.

    Usage::

        pager = LinkPager(PaginationLinkBuilder(router, route="user/index"))
        html = pager.render(page_state, passthrough={"status": "active"})
    """

    def __init__(
        self,
        builder: PaginationLinkBuilder,
        *,
        nav_attributes: Mapping[str, AttributeValue] | None = None,
        ul_attributes: Mapping[str, AttributeValue] | None = None,
        link_attributes: Mapping[str, AttributeValue] | None = None,
        page_css_class: str = "page-item",
        first_page_css_class: str = "page-item",
        prev_page_css_class: str = "page-item",
        next_page_css_class: str = "page-item",
        last_page_css_class: str = "page-item",
        active_page_css_class: str = "active",
        disabled_page_css_class: str = "disabled",
        page_attribute: str | None = "data-page",
    ) -> None:
        self.builder = builder
        self.nav_attributes = AttributeMap(
            {"aria-label": "Pagination"} if nav_attributes is None else nav_attributes
        )
        self.ul_attributes = AttributeMap(
            {"class": "pagination justify-content-center mt-4"} if ul_attributes is None else ul_attributes
        )
        self.link_attributes = AttributeMap(
            {"class": "page-link"} if link_attributes is None else link_attributes
        )
        self.page_css_class = page_css_class
        self.edge_css_classes: dict[ButtonKind, str] = {
            "first": first_page_css_class,
            "prev": prev_page_css_class,
            "next": next_page_css_class,
            "last": last_page_css_class,
        }
        self.active_page_css_class = active_page_css_class
        self.disabled_page_css_class = disabled_page_css_class
        self.page_attribute = page_attribute

    def render(
        self,
        page_state: PageState,
        passthrough: QueryParams | None = None,
        max_button_count: int | None = None,
    ) -> Markup:
        buttons = self.builder.build_page_buttons(page_state, max_button_count, passthrough)
        if not buttons:
            return Markup("")

        items = lines(self.render_button(button) for button in buttons)
        ul = tag("ul", Markup("\n") + items + Markup("\n"), self.ul_attributes)
        return tag("nav", Markup("\n") + ul + Markup("\n"), self.nav_attributes)

    def item_css_class(self, kind: ButtonKind) -> str:
        """CSS class of the <li> for a button kind; empty edge classes fall back to ``page_css_class``."""
        return self.edge_css_classes.get(kind) or self.page_css_class

    def render_button(self, button: PageButton) -> Markup:
        item_attributes = AttributeMap({"class": self.item_css_class(button.kind)})
        link_attributes = self.link_attributes
        if self.page_attribute:
            link_attributes = link_attributes.merge({self.page_attribute: button.page})

        if button.active:
            item_attributes = item_attributes.with_class(self.active_page_css_class)
        if button.disabled:
            item_attributes = item_attributes.with_class(self.disabled_page_css_class)
            link_attributes = link_attributes.merge({"aria-disabled": "true", "tabindex": "-1"})

        return tag("li", a(button.label, button.url, link_attributes), item_attributes)

    def render_link_tags(
        self,
        page_state: PageState,
        passthrough: QueryParams | None = None,
    ) -> Markup:
        """``<link rel=... href=...>`` tags for the document head."""
        links = self.builder.build_rel_links(page_state, passthrough)
        return lines(void_tag("link", {"rel": rel, "href": href}) for rel, href in links.items())


__all__ = ["LinkPager"]
