"""Entries stored in the dynamic-programming tables of the knapsack solver.

Three kinds exist, one per tie-breaking mode:

* :class:`SimpleEntry` compares by profit only.
* :class:`DrawEntry` breaks profit ties by lower weight, then fewer pallets.
* :class:`LexEntry` also breaks the remaining ties by the lexicographically
  smaller sequence of pallet ids.

For every kind, ``a < b`` means that ``b`` is the better entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from palletpack.models import Pallet

UINT_MAX = 2**32 - 1
"""Profit value that marks an entry as not yet computed."""


@dataclass(frozen=True, slots=True)
class SimpleEntry:
    """A table entry holding only the best profit."""

    profit: int = 0

    @property
    def weight(self) -> int:
        return 0

    @property
    def count(self) -> int:
        return 0

    @property
    def ids(self) -> tuple[str, ...]:
        return ()

    @property
    def is_computed(self) -> bool:
        """False for the not-computed sentinel."""
        return self.profit != UINT_MAX

    def __lt__(self, other: SimpleEntry) -> bool:
        if not isinstance(other, SimpleEntry):
            return NotImplemented
        return self.profit < other.profit

    def include(self, pallet: Pallet) -> SimpleEntry:
        """Return the entry obtained by adding ``pallet`` to this one."""
        return SimpleEntry(self.profit + pallet.profit)


@dataclass(frozen=True, slots=True)
class DrawEntry:
    """A table entry with profit, total weight and pallet count."""

    profit: int = 0
    weight: int = 0
    count: int = 0

    @property
    def ids(self) -> tuple[str, ...]:
        return ()

    @property
    def is_computed(self) -> bool:
        """False for the not-computed sentinel."""
        return self.profit != UINT_MAX

    def _key(self) -> tuple[int, int, int]:
        return (self.profit, -self.weight, -self.count)

    def __lt__(self, other: DrawEntry) -> bool:
        if not isinstance(other, DrawEntry):
            return NotImplemented
        return self._key() < other._key()

    def include(self, pallet: Pallet) -> DrawEntry:
        """Return the entry obtained by adding ``pallet`` to this one."""
        return DrawEntry(
            self.profit + pallet.profit, self.weight + pallet.weight, self.count + 1
        )


@dataclass(frozen=True, slots=True)
class LexEntry:
    """A table entry that also records the ids of the chosen pallets."""

    profit: int = 0
    weight: int = 0
    count: int = 0
    ids: tuple[str, ...] = ()

    @property
    def is_computed(self) -> bool:
        """False for the not-computed sentinel."""
        return self.profit != UINT_MAX

    def __lt__(self, other: LexEntry) -> bool:
        if not isinstance(other, LexEntry):
            return NotImplemented
        if self.profit != other.profit:
            return self.profit < other.profit
        if self.weight != other.weight:
            return self.weight > other.weight
        if self.count != other.count:
            return self.count > other.count
        return self.ids > other.ids

    def include(self, pallet: Pallet) -> LexEntry:
        """Return the entry obtained by adding ``pallet`` to this one."""
        return LexEntry(
            self.profit + pallet.profit,
            self.weight + pallet.weight,
            self.count + 1,
            self.ids + (pallet.id,),
        )


DPEntry = Union[SimpleEntry, DrawEntry, LexEntry]

NOT_COMPUTED_SIMPLE = SimpleEntry(UINT_MAX)
NOT_COMPUTED_DRAW = DrawEntry(UINT_MAX, 0, 0)
NOT_COMPUTED_LEX = LexEntry(UINT_MAX, 0, 0, ())

_NOT_COMPUTED: dict[type, DPEntry] = {
    SimpleEntry: NOT_COMPUTED_SIMPLE,
    DrawEntry: NOT_COMPUTED_DRAW,
    LexEntry: NOT_COMPUTED_LEX,
}


def not_computed_for(entry_type: type) -> DPEntry:
    """Return the not-computed sentinel of the given entry class."""
    try:
        return _NOT_COMPUTED[entry_type]
    except KeyError:
        raise TypeError(f"Unknown DP entry type: {entry_type.__name__}") from None


def _entry_type(draw_condition: bool, lexicographical_order: bool) -> type:
    if not draw_condition:
        return SimpleEntry
    if not lexicographical_order:
        return DrawEntry
    return LexEntry


def make_empty(draw_condition: bool, lexicographical_order: bool) -> DPEntry:
    """Return the zero entry for the given tie-breaking mode."""
    return _entry_type(draw_condition, lexicographical_order)()


def make_not_computed(draw_condition: bool, lexicographical_order: bool) -> DPEntry:
    """Return the not-computed sentinel for the given tie-breaking mode."""
    return not_computed_for(_entry_type(draw_condition, lexicographical_order))