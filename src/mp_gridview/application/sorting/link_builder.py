"""Application sorting – SortLink, SortLinkBuilder."""
from __future__ import annotations

import dataclasses

from mp_gridview.application.pagination import PageState
from mp_gridview.application.routing import QueryParams, UrlGenerator, UrlMatcher, resolve_route
from mp_gridview.application.sorting.sort_state import Ordering, SortDirection, SortState
from mp_gridview.observability.logging import get_logger

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class SortLink:
    """A rendered sort link: where it points and how it should look now."""

    attribute: str
    label: str
    url: str
    sort_param: str
    active_direction: SortDirection | None = None

    @property
    def css_class(self) -> str | None:
        if self.active_direction is None:
            return None
        return self.active_direction.css_class


class SortLinkBuilder:
    """Compute what clicking a column's sort link should do.

    Clicking toggles the attribute's direction (unset -> its default
    direction, ASC <-> DESC).  With multi-sort the clicked attribute moves to
    the front and the other active orderings keep their relative order.  The
    current :class:`SortState` is never modified; the new ordering only exists
    in the generated URL.
    """

    def __init__(
        self,
        url_generator: UrlGenerator,
        url_matcher: UrlMatcher | None = None,
        *,
        route: str | None = None,
        absolute: bool = False,
    ) -> None:
        self._url_generator = url_generator
        self._url_matcher = url_matcher
        self._route = route
        self.absolute = absolute

    def next_orderings(self, attribute: str, sort_state: SortState) -> list[Ordering]:
        """Orderings that become active once *attribute*'s link is followed.

        Raises:
            ConfigurationError: *attribute* is not registered on *sort_state*.
        """
        definition = sort_state.definition(attribute)

        current = sort_state.direction_of(attribute)
        if current is None:
            direction = definition.default_direction
        else:
            direction = current.opposite()

        clicked = Ordering(attribute, direction)
        if not sort_state.multi_sort:
            return [clicked]
        return [clicked] + [o for o in sort_state.orderings if o.attribute != attribute]

    def sort_param_for(self, attribute: str, sort_state: SortState) -> str:
        return sort_state.format_param(self.next_orderings(attribute, sort_state))

    def create_url(
        self,
        attribute: str,
        sort_state: SortState,
        page_state: PageState | None = None,
        passthrough: QueryParams | None = None,
    ) -> str:
        return self._url(sort_state, self.sort_param_for(attribute, sort_state), page_state, passthrough)

    def build_sort_link(
        self,
        attribute: str,
        sort_state: SortState,
        passthrough: QueryParams | None = None,
        *,
        page_state: PageState | None = None,
        label: str | None = None,
    ) -> SortLink:
        """Describe the sort link for *attribute*.

        ``active_direction`` is the direction applied *now*, for styling an
        indicator; the URL carries the direction applied after the click.
        """
        sort_param = self.sort_param_for(attribute, sort_state)
        link = SortLink(
            attribute=attribute,
            label=label or sort_state.label_for(attribute),
            url=self._url(sort_state, sort_param, page_state, passthrough),
            sort_param=sort_param,
            active_direction=sort_state.direction_of(attribute),
        )
        _log.debug("sort.link_built", attribute=attribute, sort=sort_param)
        return link

    def _url(
        self,
        sort_state: SortState,
        sort_param: str,
        page_state: PageState | None,
        passthrough: QueryParams | None,
    ) -> str:
        params: dict[str, str | int] = {}
        if page_state is not None:
            params.update(page_state.page_params())
        if passthrough:
            params.update(passthrough)
        params[sort_state.sort_param] = sort_param

        route = resolve_route(self._route, self._url_matcher)
        if route is None:
            _log.warning("sort.no_route", sort=sort_param)
            return ""
        if self.absolute:
            return self._url_generator.generate_absolute(route, params)
        return self._url_generator.generate(route, params)


__all__ = ["SortLink", "SortLinkBuilder"]
