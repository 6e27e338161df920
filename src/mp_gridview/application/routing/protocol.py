"""Application routing – UrlGenerator / UrlMatcher protocols.

The router itself lives outside this library.  Link builders only need to
turn a route name plus a parameter map into a URL, and to ask which route
served the current request when none was configured explicitly.
"""
from __future__ import annotations

from typing import Mapping, Protocol, Union, runtime_checkable

QueryParams = Mapping[str, Union[str, int]]


@runtime_checkable
class UrlGenerator(Protocol):
    """Build URLs for named routes."""

    def generate(self, route: str, params: QueryParams) -> str: ...

    def generate_absolute(self, route: str, params: QueryParams) -> str: ...


@runtime_checkable
class UrlMatcher(Protocol):
    """Expose the route matched for the request being rendered."""

    def current_route(self) -> str | None: ...


def resolve_route(route: str | None, matcher: UrlMatcher | None) -> str | None:
    """Return *route* when set, else the matcher's current route (if any)."""
    if route is not None:
        return route
    if matcher is None:
        return None
    return matcher.current_route()


__all__ = ["QueryParams", "UrlGenerator", "UrlMatcher", "resolve_route"]
