"""Grouping module – partitions records into buckets keyed by a derived value."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

T = TypeVar("T")

Record = Mapping[str, Any]


def by_field(name: str) -> Callable[[Record], Any]:
    """Return a key function reading *name* from a record (``None`` when absent)."""

    def key_fn(record: Record) -> Any:
        return record.get(name)

    return key_fn


def group_by(items: Iterable[T], key_fn: Callable[[T], Any]) -> dict[str, list[T]]:
    """Group *items* by the string form of ``key_fn(item)``.

    Groups come back in ascending order of their string keys, so ``"10"``
    sorts before ``"2"``. Items keep their input order inside each group.
    A record without the field still gets a group (``"None"``)::

        >>> group_by([{"t": "b"}, {"t": "a"}, {"t": "b"}], by_field("t"))
        {'a': [{'t': 'a'}], 'b': [{'t': 'b'}, {'t': 'b'}]}
    """
    buckets: dict[str, list[T]] = {}
    for item in items:
        buckets.setdefault(str(key_fn(item)), []).append(item)
    return {key: buckets[key] for key in sorted(buckets)}
