"""Application routing – URL generation ports."""
from mp_gridview.application.routing.protocol import (
    QueryParams,
    UrlGenerator,
    UrlMatcher,
    resolve_route,
)

__all__ = ["QueryParams", "UrlGenerator", "UrlMatcher", "resolve_route"]
