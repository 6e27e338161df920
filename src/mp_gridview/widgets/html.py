"""Widgets – AttributeMap and minimal tag helpers.

Only what the pager and sorter widgets need: attribute merging, attribute
rendering and a handful of tags.  Text content and attribute values are
escaped with :mod:`markupsafe`; pass :class:`markupsafe.Markup` to emit
trusted HTML as-is.
"""
from __future__ import annotations

from typing import Any, Iterable, Iterator, Mapping, Sequence, Union

from markupsafe import Markup, escape

AttributeValue = Union[str, int, bool, None, Sequence[str]]

_CLASS = "class"


def _class_names(value: Any) -> list[str]:
    if value is None or value is False:
        return []
    if isinstance(value, str):
        return value.split()
    return [name for item in value for name in str(item).split()]


class AttributeMap(Mapping[str, AttributeValue]):
    """Ordered HTML attributes with a fixed merge rule.

    Merging lets later values override earlier ones key by key, except for
    ``class``: class names accumulate in order, without duplicates.
    """

    def __init__(self, attributes: Mapping[str, AttributeValue] | None = None, /, **kwargs: AttributeValue) -> None:
        self._data: dict[str, AttributeValue] = {}
        for source in (attributes or {}, kwargs):
            for key, value in source.items():
                self._set(key, value)

    def _set(self, key: str, value: AttributeValue) -> None:
        if key == _CLASS:
            names = list(self._data.get(_CLASS) or [])  # type: ignore[arg-type]
            for name in _class_names(value):
                if name not in names:
                    names.append(name)
            self._data[_CLASS] = names
        else:
            self._data[key] = value

    def __getitem__(self, key: str) -> AttributeValue:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"AttributeMap({self._data!r})"

    def merge(self, *others: Mapping[str, AttributeValue] | None) -> "AttributeMap":
        merged = AttributeMap(self)
        for other in others:
            for key, value in (other or {}).items():
                merged._set(key, value)
        return merged

    def with_class(self, *names: str) -> "AttributeMap":
        return self.merge({_CLASS: [n for n in names if n]})

    def render(self) -> Markup:
        """Render as ``' key="value" ...'`` (leading space, empty when nothing to render)."""
        parts: list[str] = []
        for key, value in self._data.items():
            if value is None or value is False:
                continue
            if value is True:
                parts.append(f" {escape(key)}")
                continue
            if key == _CLASS:
                if not value:
                    continue
                value = " ".join(value)  # type: ignore[arg-type]
            elif not isinstance(value, (str, int)):
                value = " ".join(str(v) for v in value)
            parts.append(f' {escape(key)}="{escape(value)}"')
        return Markup("".join(parts))


def tag(name: str, content: Any = "", attributes: Mapping[str, AttributeValue] | None = None) -> Markup:
    attrs = AttributeMap(attributes).render()
    return Markup(f"<{name}{attrs}>{escape(content)}</{name}>")


def void_tag(name: str, attributes: Mapping[str, AttributeValue] | None = None) -> Markup:
    return Markup(f"<{name}{AttributeMap(attributes).render()}>")


def a(label: Any, href: str, attributes: Mapping[str, AttributeValue] | None = None) -> Markup:
    return tag("a", label, AttributeMap({"href": href}).merge(attributes))


def lines(items: Iterable[Any]) -> Markup:
    """Join already rendered fragments with newlines."""
    return Markup("\n").join(items)


__all__ = ["AttributeMap", "AttributeValue", "a", "lines", "tag", "void_tag"]
