"""Search, filter and sort over an in-memory item collection.

All functions are pure: they take the full candidate collection and return a
new list without touching their inputs. Nothing here raises for unknown sort
keys or unusable predicates; those simply impose no constraint.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from datetime import datetime
from typing import Any

from inventory.schemas.item import Item, PredicateSet, SortDirection

SEARCH_FIELDS: tuple[str, ...] = ("name", "brand", "category")

# Marker for items that lack the sort field.
_MISSING: tuple[int] = (0,)

SortKey = Callable[[Item], tuple]


def _text_key(field: str) -> SortKey:
    def key(item: Item) -> tuple:
        value = getattr(item, field)
        if value is None:
            return _MISSING
        return (1, value.casefold())

    return key


def _number_key(field: str) -> SortKey:
    def key(item: Item) -> tuple:
        value = getattr(item, field)
        if value is None:
            return _MISSING
        return (1, float(value))

    return key


def _timestamp_key(field: str) -> SortKey:
    def key(item: Item) -> tuple:
        value: datetime | None = getattr(item, field)
        if value is None:
            return _MISSING
        return (1, value.timestamp())

    return key


SORT_KEYS: dict[str, SortKey] = {
    "id": _text_key("id"),
    "name": _text_key("name"),
    "color": _text_key("color"),
    "weight": _text_key("weight"),
    "size": _text_key("size"),
    "brand": _text_key("brand"),
    "category": _text_key("category"),
    "notes": _text_key("notes"),
    "image": _text_key("image"),
    "price_per_piece": _number_key("price_per_piece"),
    "price_per_weight": _number_key("price_per_weight"),
    "created_at": _timestamp_key("created_at"),
}

_CAMEL_TO_FIELD = {
    field.alias: name for name, field in Item.model_fields.items() if field.alias is not None
}


def resolve_sort_key(key: str | None) -> SortKey | None:
    """Map a camelCase or snake_case field name to its sort accessor."""

    if not key:
        return None
    field = _CAMEL_TO_FIELD.get(key, key)
    return SORT_KEYS.get(field)


def _parse_direction(direction: SortDirection | str | None) -> SortDirection:
    try:
        return SortDirection(direction)
    except ValueError:
        return SortDirection.ASCENDING


def search(items: Sequence[Item], query: str | None) -> list[Item]:
    """Case-insensitive substring match on name, brand and category."""

    if query is None or not query.strip():
        return list(items)

    needle = query.casefold()
    matches: list[Item] = []
    for item in items:
        for field in SEARCH_FIELDS:
            value = getattr(item, field)
            if value and needle in value.casefold():
                matches.append(item)
                break
    return matches


def _coerce_predicates(predicates: PredicateSet | Mapping[str, Any] | None) -> PredicateSet:
    if predicates is None:
        return PredicateSet()
    if isinstance(predicates, PredicateSet):
        return predicates
    return PredicateSet.model_validate(dict(predicates))


def _matches(item: Item, predicates: PredicateSet) -> bool:
    if predicates.category is not None and item.category != predicates.category:
        return False
    if predicates.color is not None and item.color != predicates.color:
        return False
    if predicates.brand is not None:
        if not item.brand or predicates.brand.casefold() not in item.brand.casefold():
            return False
    if predicates.min_price is not None and item.price_per_piece < predicates.min_price:
        return False
    if predicates.max_price is not None and item.price_per_piece > predicates.max_price:
        return False
    return True


def filter_items(items: Sequence[Item], predicates: PredicateSet | Mapping[str, Any] | None) -> list[Item]:
    """Keep items satisfying every present predicate.

    ``category`` and ``color`` must match exactly while ``brand`` is a
    case-insensitive substring match. Price bounds apply to
    ``price_per_piece`` and are inclusive.
    """

    applied = _coerce_predicates(predicates)
    return [item for item in items if _matches(item, applied)]


def sort_items(
    items: Sequence[Item],
    key: str | None,
    direction: SortDirection | str = SortDirection.ASCENDING,
) -> list[Item]:
    """Stable sort by a single field; unknown or empty keys keep input order.

    Items missing the field come first in both directions, in input order.
    """

    accessor = resolve_sort_key(key)
    if accessor is None:
        return list(items)

    missing = [item for item in items if accessor(item) == _MISSING]
    present = [item for item in items if accessor(item) != _MISSING]

    # sorted() stays stable with reverse=True, so ties keep input order either way
    descending = _parse_direction(direction) is SortDirection.DESCENDING
    return missing + sorted(present, key=accessor, reverse=descending)


def pipeline(
    items: Sequence[Item],
    query: str | None,
    predicates: PredicateSet | Mapping[str, Any] | None,
    key: str | None = None,
    direction: SortDirection | str = SortDirection.ASCENDING,
) -> list[Item]:
    """Apply search, then filter, then sort."""

    searched = search(items, query)
    filtered = filter_items(searched, predicates)
    return sort_items(filtered, key, direction)


def active_filter_count(predicates: PredicateSet | Mapping[str, Any] | None) -> int:
    """Number of predicates that currently constrain the result."""

    applied = _coerce_predicates(predicates)
    return sum(1 for value in applied.model_dump().values() if value is not None)
