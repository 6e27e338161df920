"""Config settings – GridViewSettings."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar, Mapping

from mp_gridview.application.pagination import PageState, PaginationLinkBuilder
from mp_gridview.application.routing import UrlGenerator, UrlMatcher
from mp_gridview.application.sorting import SortState
from mp_gridview.application.sorting.sort_state import AttributesInput
from mp_gridview.config.settings.base import Settings
from mp_gridview.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class GridViewSettings(Settings):
    """Site-wide defaults for pagination and sorting.

    Loaded from ``GRIDVIEW_*`` environment variables by
    :class:`~mp_gridview.config.settings.loaders.EnvSettingsLoader`.  The
    parameter names are part of the URL contract, so they are validated up
    front rather than when the first link is rendered.
    """

    _prefix: ClassVar[str] = "GRIDVIEW"
    _query_params: ClassVar[tuple[str, ...]] = ("page_param", "page_size_param", "sort_param")

    page_param: str = "page"
    page_size_param: str = "pagesize"
    sort_param: str = "sort"
    sort_separator: str = ","
    default_page_size: int = 10
    max_button_count: int = 10
    multi_sort: bool = False
    hide_on_single_page: bool = True

    def _validate(self) -> None:
        for name in ("default_page_size", "max_button_count"):
            value = getattr(self, name)
            if value < 1:
                raise InvalidSettingValueError(name, value, "must be >= 1")
        if not self.sort_separator:
            raise InvalidSettingValueError("sort_separator", self.sort_separator, "must not be empty")
        if self.sort_separator == "-":
            raise InvalidSettingValueError("sort_separator", self.sort_separator, "clashes with the descending prefix")

    def page_state(self, query: Mapping[str, Any] | None = None, *, total_count: int = 0) -> PageState:
        """A :class:`PageState` read from *query* using the configured names."""
        return PageState.from_request(
            query or {},
            page_size=self.default_page_size,
            total_count=total_count,
            page_param=self.page_param,
            page_size_param=self.page_size_param,
        )

    def sort_state(self, attributes: AttributesInput, query: Mapping[str, Any] | None = None) -> SortState:
        return SortState.from_request(
            query or {},
            attributes,
            multi_sort=self.multi_sort,
            separator=self.sort_separator,
            sort_param=self.sort_param,
        )

    def pagination_builder(
        self,
        url_generator: UrlGenerator,
        url_matcher: UrlMatcher | None = None,
        **options: Any,
    ) -> PaginationLinkBuilder:
        options.setdefault("max_button_count", self.max_button_count)
        options.setdefault("hide_on_single_page", self.hide_on_single_page)
        return PaginationLinkBuilder(url_generator, url_matcher, **options)


__all__ = ["GridViewSettings"]
