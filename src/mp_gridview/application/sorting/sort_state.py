"""Application sorting – SortDirection, SortAttributeDefinition, Ordering, SortState."""
from __future__ import annotations

import dataclasses
import re
from enum import Enum
from typing import Any, Iterable, Mapping, Sequence, Union

from mp_gridview.config.validation import ConfigurationError
from mp_gridview.observability.logging import get_logger

_log = get_logger(__name__)


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    def opposite(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC

    @property
    def css_class(self) -> str:
        return self.value.lower()

    @classmethod
    def coerce(cls, value: "SortDirection | str") -> "SortDirection":
        """Accept ``SortDirection`` members as well as ``"asc"`` / ``"DESC"`` strings."""
        if isinstance(value, cls):
            return value
        return cls(str(value).upper())


FieldDirections = tuple[tuple[str, SortDirection], ...]
FieldsInput = Union[Mapping[str, Any], Iterable[tuple[str, Any]], None]


def _field_directions(fields: FieldsInput) -> FieldDirections | None:
    if fields is None:
        return None
    pairs = fields.items() if isinstance(fields, Mapping) else fields
    return tuple((name, SortDirection.coerce(direction)) for name, direction in pairs)


@dataclasses.dataclass(frozen=True)
class SortAttributeDefinition:
    """One sortable logical attribute and the physical fields it orders by.

    ``ascending_fields`` / ``descending_fields`` keep their order; a composite
    attribute such as ``name`` may sort by ``first_name`` then ``last_name``.
    """

    name: str
    ascending_fields: FieldDirections | None = None
    descending_fields: FieldDirections | None = None
    default_direction: SortDirection = SortDirection.ASC
    label: str | None = None

    def __post_init__(self) -> None:
        ascending = _field_directions(self.ascending_fields)
        descending = _field_directions(self.descending_fields)
        object.__setattr__(
            self, "ascending_fields", ascending or ((self.name, SortDirection.ASC),)
        )
        object.__setattr__(
            self, "descending_fields", descending or ((self.name, SortDirection.DESC),)
        )
        object.__setattr__(self, "default_direction", SortDirection.coerce(self.default_direction))

    @classmethod
    def of(cls, value: "SortAttributeDefinition | str") -> "SortAttributeDefinition":
        if isinstance(value, cls):
            return value
        return cls(name=str(value))

    def fields_for(self, direction: SortDirection) -> FieldDirections:
        if direction is SortDirection.DESC:
            return self.descending_fields  # type: ignore[return-value]
        return self.ascending_fields  # type: ignore[return-value]


@dataclasses.dataclass(frozen=True)
class Ordering:
    """An active ``(attribute, direction)`` pair."""

    attribute: str
    direction: SortDirection = SortDirection.ASC

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", SortDirection.coerce(self.direction))

    @classmethod
    def parse(cls, token: str) -> "Ordering":
        """Parse ``"-age"`` into ``Ordering("age", DESC)`` and ``"age"`` into ascending."""
        if token.startswith("-"):
            return cls(token[1:], SortDirection.DESC)
        return cls(token, SortDirection.ASC)

    @property
    def token(self) -> str:
        return f"-{self.attribute}" if self.direction is SortDirection.DESC else self.attribute


AttributesInput = Union[
    Mapping[str, SortAttributeDefinition],
    Sequence[Union[SortAttributeDefinition, str]],
]
OrderingsInput = Union[
    Mapping[str, Union[SortDirection, str]],
    Iterable[Union[Ordering, tuple[str, Union[SortDirection, str]]]],
]


def _definitions(attributes: AttributesInput) -> dict[str, SortAttributeDefinition]:
    if isinstance(attributes, str):
        attributes = [attributes]
    if isinstance(attributes, Mapping):
        result: dict[str, SortAttributeDefinition] = {}
        for name, value in attributes.items():
            definition = SortAttributeDefinition.of(value)
            if definition.name != name:
                raise ConfigurationError(
                    f"Sort attribute registered as '{name}' is named '{definition.name}'",
                    detail={"key": name, "name": definition.name},
                )
            result[name] = definition
        return result
    definitions = [SortAttributeDefinition.of(item) for item in attributes]
    return {d.name: d for d in definitions}


def _orderings(pairs: OrderingsInput) -> list[Ordering]:
    items = pairs.items() if isinstance(pairs, Mapping) else pairs
    result: list[Ordering] = []
    for item in items:
        if isinstance(item, Ordering):
            result.append(item)
        else:
            attribute, direction = item
            result.append(Ordering(attribute, direction))
    return result


_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|[_\-.\s]+")


def humanize(name: str) -> str:
    """``first_name`` / ``firstName`` -> ``First Name``."""
    return " ".join(word.capitalize() for word in _WORD_BOUNDARY.split(name) if word)


@dataclasses.dataclass(frozen=True)
class SortState:
    """Registered sort attributes plus the orderings active for this request.

    Constructing a state directly is a programming act, so its invariants are
    enforced strictly: every ordering must name a registered attribute, names
    are unique and single-sort states hold at most one ordering.  Untrusted
    request input goes through :meth:`with_param` / :meth:`with_orderings`
    instead, which drop whatever does not fit.
    """

    attributes: AttributesInput = dataclasses.field(default_factory=dict, hash=False)
    orderings: tuple[Ordering, ...] = ()
    multi_sort: bool = False
    separator: str = ","
    sort_param: str = "sort"

    def __post_init__(self) -> None:
        if not self.separator or self.separator == "-":
            raise ConfigurationError(
                f"Sort separator {self.separator!r} cannot delimit sort tokens",
                detail={"separator": self.separator},
            )
        object.__setattr__(self, "attributes", _definitions(self.attributes))
        for name in self.attributes:
            self._check_name(name)
        orderings = tuple(_orderings(self.orderings))
        object.__setattr__(self, "orderings", orderings)

        seen: set[str] = set()
        for ordering in orderings:
            if ordering.attribute not in self.attributes:
                raise ConfigurationError(
                    f"Sort attribute '{ordering.attribute}' is not registered",
                    detail={"attribute": ordering.attribute},
                )
            if ordering.attribute in seen:
                raise ConfigurationError(
                    f"Sort attribute '{ordering.attribute}' is ordered more than once",
                    detail={"attribute": ordering.attribute},
                )
            seen.add(ordering.attribute)
        if not self.multi_sort and len(orderings) > 1:
            raise ConfigurationError(
                "Multiple orderings given while multi-sort is disabled",
                detail={"orderings": [o.token for o in orderings]},
            )

    def _check_name(self, name: str) -> None:
        """Reject names that would not survive a trip through the sort parameter."""
        reason = None
        if not name or name != name.strip():
            reason = "must be non-empty without surrounding whitespace"
        elif name.startswith("-"):
            reason = "must not start with '-'"
        elif self.separator in name:
            reason = f"must not contain the separator {self.separator!r}"
        if reason is not None:
            raise ConfigurationError(
                f"Sort attribute name {name!r} {reason}",
                detail={"attribute": name, "separator": self.separator},
            )

    @classmethod
    def from_request(
        cls,
        query: Mapping[str, Any],
        attributes: AttributesInput,
        *,
        multi_sort: bool = False,
        separator: str = ",",
        sort_param: str = "sort",
    ) -> "SortState":
        """Build a state from the sort parameter of a request query."""
        state = cls(attributes=attributes, multi_sort=multi_sort, separator=separator, sort_param=sort_param)
        raw = query.get(sort_param)
        return state.with_param(raw) if isinstance(raw, str) else state

    # -- registration -------------------------------------------------------

    def with_attributes(self, attributes: AttributesInput) -> "SortState":
        """Replace the registered attributes.

        Active orderings are left as they are, except that orderings naming an
        attribute that is no longer registered cannot survive the swap.
        """
        definitions = _definitions(attributes)
        kept = tuple(o for o in self.orderings if o.attribute in definitions)
        return dataclasses.replace(self, attributes=definitions, orderings=kept)

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def definition(self, name: str) -> SortAttributeDefinition:
        try:
            return self.attributes[name]  # type: ignore[index]
        except KeyError:
            raise ConfigurationError(
                f"Sort attribute '{name}' is not registered",
                detail={"attribute": name, "registered": sorted(self.attributes)},
            ) from None

    # -- active orderings ---------------------------------------------------

    def with_orderings(self, pairs: OrderingsInput) -> "SortState":
        """Return a state whose active orderings are taken from *pairs*.

        Unknown attributes and repeated names are dropped silently.  When
        multi-sort is disabled only the first surviving pair is kept.
        """
        kept: list[Ordering] = []
        dropped: list[str] = []
        for ordering in _orderings(pairs):
            if ordering.attribute not in self.attributes:
                dropped.append(ordering.attribute)
                continue
            if any(o.attribute == ordering.attribute for o in kept):
                continue
            kept.append(ordering)
        if dropped:
            _log.debug("sort.orderings_dropped", unknown=dropped)
        if not self.multi_sort:
            kept = kept[:1]
        return dataclasses.replace(self, orderings=tuple(kept))

    def with_param(self, value: str) -> "SortState":
        """Parse a raw sort parameter such as ``"age,-name"``."""
        tokens = [t.strip() for t in value.split(self.separator)]
        return self.with_orderings(Ordering.parse(t) for t in tokens if t and t != "-")

    def with_multi_sort(self, enabled: bool) -> "SortState":
        orderings = self.orderings if enabled else self.orderings[:1]
        return dataclasses.replace(self, orderings=orderings, multi_sort=enabled)

    def direction_of(self, name: str) -> SortDirection | None:
        for ordering in self.orderings:
            if ordering.attribute == name:
                return ordering.direction
        return None

    @property
    def active_orderings(self) -> list[Ordering]:
        return list(self.orderings)

    @property
    def orders(self) -> dict[str, SortDirection]:
        """Active orderings expanded to physical field -> direction.

        A field already ordered by a higher-precedence attribute keeps that
        attribute's direction.
        """
        result: dict[str, SortDirection] = {}
        for ordering in self.orderings:
            for field, direction in self.definition(ordering.attribute).fields_for(ordering.direction):
                result.setdefault(field, direction)
        return result

    # -- presentation -------------------------------------------------------

    def format_param(self, orderings: Iterable[Ordering] | None = None) -> str:
        """Serialise *orderings* (the active ones by default) for the sort parameter."""
        items = self.orderings if orderings is None else orderings
        return self.separator.join(o.token for o in items)

    def label_for(self, name: str) -> str:
        definition = self.attributes.get(name)  # type: ignore[union-attr]
        if definition is not None and definition.label:
            return definition.label
        return humanize(name)


__all__ = [
    "Ordering",
    "SortAttributeDefinition",
    "SortDirection",
    "SortState",
    "humanize",
]
