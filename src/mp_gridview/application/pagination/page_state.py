"""Application pagination – PageState."""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Mapping

from mp_gridview.kernel.errors import ValidationError


@dataclasses.dataclass(frozen=True)
class PageState:
    """Current page, page size and total item count of one rendered list.

    Instances are immutable.  The ``with_*`` methods validate their input and
    return a new state, so a state handed to a link builder never changes
    underneath it.
    """

    current_page: int = 1
    page_size: int = 10
    total_count: int = 0
    page_param: str = "page"
    page_size_param: str = "pagesize"

    def __post_init__(self) -> None:
        if self.current_page < 1:
            raise ValidationError.for_field("current_page", self.current_page, "must be >= 1")
        if self.page_size < 1:
            raise ValidationError.for_field("page_size", self.page_size, "must be >= 1")
        # Counts come from external sources; a negative one is treated as empty.
        if self.total_count < 0:
            object.__setattr__(self, "total_count", 0)

    @classmethod
    def from_request(
        cls,
        query: Mapping[str, Any],
        *,
        page_size: int = 10,
        total_count: int = 0,
        page_param: str = "page",
        page_size_param: str = "pagesize",
    ) -> "PageState":
        """Build a state from request query parameters.

        Missing parameters fall back to page 1 and *page_size*.  Values that
        are not integers raise :class:`ValidationError`.
        """
        return cls(
            current_page=_as_int(query, page_param, 1),
            page_size=_as_int(query, page_size_param, page_size),
            total_count=total_count,
            page_param=page_param,
            page_size_param=page_size_param,
        )

    def with_current_page(self, value: int) -> "PageState":
        return dataclasses.replace(self, current_page=value)

    def with_page_size(self, value: int) -> "PageState":
        return dataclasses.replace(self, page_size=value)

    def with_total_count(self, value: int) -> "PageState":
        return dataclasses.replace(self, total_count=value)

    def with_params(
        self,
        *,
        page_param: str | None = None,
        page_size_param: str | None = None,
    ) -> "PageState":
        """Rename the query parameters carrying page number and page size."""
        return dataclasses.replace(
            self,
            page_param=page_param or self.page_param,
            page_size_param=page_size_param or self.page_size_param,
        )

    @property
    def offset(self) -> int:
        """OFFSET of the first item on the current page."""
        return self.page_size * (self.current_page - 1)

    @property
    def limit(self) -> int:
        return self.page_size

    @property
    def total_pages(self) -> int:
        if self.total_count == 0:
            return 0
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    def page_params(self, page: int | None = None) -> dict[str, int]:
        """Query parameters pointing at *page* (the current page by default)."""
        return {
            self.page_param: self.current_page if page is None else page,
            self.page_size_param: self.page_size,
        }


def _as_int(query: Mapping[str, Any], key: str, default: int) -> int:
    raw = query.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise ValidationError.for_field(key, raw, "must be an integer") from exc


__all__ = ["PageState"]
