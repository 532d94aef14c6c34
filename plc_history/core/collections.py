"""Generic collection helpers: set difference, structural equality, grouping. No domain coupling."""

from collections.abc import Callable, Hashable, Iterable, Mapping
from dataclasses import fields, is_dataclass
from typing import Any, TypeVar

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


def difference(a: Iterable[T], b: Iterable[T]) -> list[T]:
    """Return the elements of a that are not in b, preserving a's order."""
    excluded = set(b)
    return [value for value in a if value not in excluded]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _dataclass_fields(value: Any) -> dict[str, Any]:
    # Nested values are compared by deep_equal.
    return {f.name: getattr(value, f.name) for f in fields(value)}


def deep_equal(a: Any, b: Any) -> bool:
    """
    Structural equality for JSON-like values.
    Sequences compare pairwise, mappings by key set and values, dataclasses by fields.
    NaN is equal to NaN. Cyclic structures are not supported.
    """
    if a is b:
        return True

    if _is_number(a) and _is_number(b):
        return a == b or (a != a and b != b)

    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        if len(a) != len(b):
            return False
        return all(deep_equal(x, y) for x, y in zip(a, b))

    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if a.keys() != b.keys():
            return False
        return all(deep_equal(a[key], b[key]) for key in a)

    if type(a) is not type(b):
        return False

    if is_dataclass(a) and not isinstance(a, type):
        return deep_equal(_dataclass_fields(a), _dataclass_fields(b))

    return a == b


def group_by(items: Iterable[T], key_fn: Callable[[T, int], K]) -> dict[K, list[T]]:
    """
    Group items by key_fn(item, index).
    Keys keep first-seen order; items keep insertion order within each group.
    """
    groups: dict[K, list[T]] = {}
    for index, item in enumerate(items):
        key = key_fn(item, index)
        bucket = groups.get(key)
        if bucket is not None:
            bucket.append(item)
        else:
            groups[key] = [item]
    return groups
