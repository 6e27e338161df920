"""Application pagination – PageButton, PaginationLinkBuilder."""
from __future__ import annotations

import dataclasses
from typing import Literal

from mp_gridview.application.pagination.page_state import PageState
from mp_gridview.application.routing import QueryParams, UrlGenerator, UrlMatcher, resolve_route
from mp_gridview.observability.logging import get_logger

ButtonKind = Literal["first", "prev", "page", "next", "last"]

REL_SELF = "self"
REL_FIRST = "first"
REL_PREV = "prev"
REL_NEXT = "next"
REL_LAST = "last"

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class PageButton:
    """Everything a pager needs to render one button."""

    kind: ButtonKind
    label: str
    page: int
    url: str
    disabled: bool = False
    active: bool = False


class PaginationLinkBuilder:
    """Compute the visible page window and the URLs behind each page button.

    The builder holds presentation options only; the page numbers always come
    from the :class:`PageState` passed to each call.

    Example::

        builder = PaginationLinkBuilder(router, route="user/index")
        buttons = builder.build_page_buttons(PageState(current_page=3, total_count=95))
    """

    def __init__(
        self,
        url_generator: UrlGenerator,
        url_matcher: UrlMatcher | None = None,
        *,
        route: str | None = None,
        max_button_count: int = 10,
        first_page_label: str = "",
        prev_page_label: str = "Previous",
        next_page_label: str = "Next Page",
        last_page_label: str = "",
        hide_on_single_page: bool = True,
        disable_current_page_button: bool = False,
        absolute: bool = False,
    ) -> None:
        self._url_generator = url_generator
        self._url_matcher = url_matcher
        self._route = route
        self.max_button_count = max_button_count
        self.first_page_label = first_page_label
        self.prev_page_label = prev_page_label
        self.next_page_label = next_page_label
        self.last_page_label = last_page_label
        self.hide_on_single_page = hide_on_single_page
        self.disable_current_page_button = disable_current_page_button
        self.absolute = absolute

    def page_range(self, page_state: PageState, max_button_count: int | None = None) -> tuple[int, int]:
        """Return the first and last page number of the visible window.

        The window is centred on the current page and shifted back inside
        ``[1, total_pages]`` when it would overflow either end.  With no pages
        at all the result is ``(1, 0)``, an empty range.
        """
        count = self.max_button_count if max_button_count is None else max_button_count
        total_pages = page_state.total_pages

        begin_page = max(1, page_state.current_page - count // 2)
        end_page = begin_page + count - 1
        if end_page > total_pages:
            end_page = total_pages
            begin_page = max(1, end_page - count + 1)
        return begin_page, end_page

    def create_url(
        self,
        page_state: PageState,
        page: int,
        passthrough: QueryParams | None = None,
    ) -> str:
        """Build the URL of *page*, keeping page size and pass-through params."""
        params: dict[str, str | int] = dict(page_state.page_params(page))
        if passthrough:
            params.update(passthrough)

        route = resolve_route(self._route, self._url_matcher)
        if route is None:
            _log.warning("pagination.no_route", page=page)
            return ""
        if self.absolute:
            return self._url_generator.generate_absolute(route, params)
        return self._url_generator.generate(route, params)

    def build_page_buttons(
        self,
        page_state: PageState,
        max_button_count: int | None = None,
        passthrough: QueryParams | None = None,
    ) -> list[PageButton]:
        """Return first/prev, the numbered window and next/last, in render order.

        Edge buttons whose label is empty are left out.  Nothing is returned
        when ``hide_on_single_page`` is set and there are fewer than two pages.
        """
        current_page = page_state.current_page
        total_pages = page_state.total_pages

        if total_pages < 2 and self.hide_on_single_page:
            return []

        def button(
            kind: ButtonKind, label: str, page: int, *, disabled: bool = False, active: bool = False
        ) -> PageButton:
            return PageButton(
                kind=kind,
                label=label,
                page=page,
                url=self.create_url(page_state, page, passthrough),
                disabled=disabled,
                active=active,
            )

        buttons: list[PageButton] = []
        if self.first_page_label:
            buttons.append(button("first", self.first_page_label, 1, disabled=current_page == 1))
        if self.prev_page_label:
            buttons.append(
                button("prev", self.prev_page_label, max(current_page - 1, 1), disabled=current_page == 1)
            )

        begin_page, end_page = self.page_range(page_state, max_button_count)
        for page in range(begin_page, end_page + 1):
            buttons.append(
                button(
                    "page",
                    str(page),
                    page,
                    disabled=self.disable_current_page_button and page == current_page,
                    active=page == current_page,
                )
            )

        # with no results the edge buttons point at page 1 and stay disabled
        last_page = max(total_pages, 1)
        if self.next_page_label:
            buttons.append(
                button(
                    "next",
                    self.next_page_label,
                    min(last_page, current_page + 1),
                    disabled=current_page >= total_pages,
                )
            )
        if self.last_page_label:
            buttons.append(button("last", self.last_page_label, last_page, disabled=total_pages == 0))

        _log.debug(
            "pagination.buttons_built",
            current_page=current_page,
            total_pages=total_pages,
            window=(begin_page, end_page),
        )
        return buttons

    def build_rel_links(
        self,
        page_state: PageState,
        passthrough: QueryParams | None = None,
    ) -> dict[str, str]:
        """Return ``rel -> url`` for the self/first/last/prev/next links."""
        current_page = page_state.current_page
        total_pages = page_state.total_pages

        links = {REL_SELF: self.create_url(page_state, current_page, passthrough)}
        if total_pages > 0:
            links[REL_FIRST] = self.create_url(page_state, 1, passthrough)
            links[REL_LAST] = self.create_url(page_state, total_pages, passthrough)
        if current_page > 1:
            links[REL_PREV] = self.create_url(page_state, current_page - 1, passthrough)
        if current_page < total_pages:
            links[REL_NEXT] = self.create_url(page_state, current_page + 1, passthrough)
        return links


__all__ = ["ButtonKind", "PageButton", "PaginationLinkBuilder"]
