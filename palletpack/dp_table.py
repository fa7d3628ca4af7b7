"""Tables that memoise knapsack sub-problems indexed by (item, capacity)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Optional

from palletpack.dp_entry import DPEntry, DrawEntry, LexEntry, SimpleEntry, not_computed_for

EntryFactory = Callable[[], DPEntry]

_UINT_SIZE = 4
_VECTOR_SIZE = 24
_POINTER_SIZE = 8


def _entry_size(factory: Optional[EntryFactory]) -> int:
    """Estimated size in bytes of one entry produced by ``factory``."""
    if factory is None:
        return _POINTER_SIZE
    probe = factory()
    if isinstance(probe, SimpleEntry):
        return _UINT_SIZE
    if isinstance(probe, DrawEntry):
        return 3 * _UINT_SIZE
    if isinstance(probe, LexEntry):
        return 3 * _UINT_SIZE + _VECTOR_SIZE
    return _POINTER_SIZE


def _sentinel(factory: Optional[EntryFactory], table_name: str) -> DPEntry:
    if factory is None:
        raise TypeError(f"Unknown DP entry type in {table_name}.get")
    return not_computed_for(type(factory()))


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 1
    return True


def _bucket_count(size: int) -> int:
    """Estimate of a hash table's bucket count at a load factor of at most one."""
    if size <= 1:
        return 1
    candidate = size
    while not _is_prime(candidate):
        candidate += 1
    return candidate


class DPTable(ABC):
    """Storage for dynamic-programming entries keyed by item index and capacity."""

    @abstractmethod
    def get(self, i: int, w: int) -> DPEntry:
        """Return the entry for (i, w), or the not-computed sentinel."""

    @abstractmethod
    def set(self, i: int, w: int, entry: DPEntry) -> None:
        """Store ``entry`` for (i, w)."""

    @abstractmethod
    def num_entries(self) -> int:
        """Number of entries held by the table."""

    @abstractmethod
    def memory_usage(self) -> int:
        """Estimated memory used by the table, in bytes."""


class VectorDPTable(DPTable):
    """A dense (n + 1) x (max_weight + 1) table for bottom-up solving."""

    def __init__(
        self, n: int, max_weight: int, entry_factory: Optional[EntryFactory]
    ) -> None:
        self._factory = entry_factory
        self._entry_size = _entry_size(entry_factory)
        self._rows: list[list[Optional[DPEntry]]] = [
            [entry_factory() if entry_factory else None for _ in range(max_weight + 1)]
            for _ in range(n + 1)
        ]

    def _check(self, i: int, w: int) -> None:
        if i < 0 or w < 0:
            raise IndexError(f"negative table index ({i}, {w})")

    def get(self, i: int, w: int) -> DPEntry:
        self._check(i, w)
        cell = self._rows[i][w]
        if cell is not None:
            return cell
        return _sentinel(self._factory, "VectorDPTable")

    def set(self, i: int, w: int, entry: DPEntry) -> None:
        self._check(i, w)
        self._rows[i][w] = entry

    def num_entries(self) -> int:
        return sum(len(row) for row in self._rows)

    def memory_usage(self) -> int:
        return self.num_entries() * self._entry_size


class HashMapDPTable(DPTable):
    """A sparse table that stores only the states actually visited."""

    def __init__(self, entry_factory: Optional[EntryFactory]) -> None:
        self._factory = entry_factory
        self._entry_size = _entry_size(entry_factory)
        self._table: dict[tuple[int, int], DPEntry] = {}

    def get(self, i: int, w: int) -> DPEntry:
        entry = self._table.get((i, w))
        if entry is not None:
            return entry
        return _sentinel(self._factory, "HashMapDPTable")

    def set(self, i: int, w: int, entry: DPEntry) -> None:
        self._table[(i, w)] = entry

    def num_entries(self) -> int:
        return len(self._table)

    def memory_usage(self) -> int:
        size = len(self._table)
        entry_mem = size * (self._entry_size + 2 * _UINT_SIZE)
        bucket_mem = _bucket_count(size) * _POINTER_SIZE
        return entry_mem + bucket_mem