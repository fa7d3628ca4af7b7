"""Dynamic-programming solvers for the 0/1 knapsack problem."""

from __future__ import annotations

import enum
import time
from collections.abc import Iterable, Sequence
from typing import Optional

from palletpack.dp_entry import DPEntry, make_empty
from palletpack.dp_table import DPTable, HashMapDPTable, VectorDPTable
from palletpack.models import Pallet, Solution, Truck

_UINT_SIZE = 4


class TableType(enum.Enum):
    """Storage used by :meth:`DynamicProgramming.solve`."""

    VECTOR = "Vector"
    HASHMAP = "HashMap"


class _TimedOut(Exception):
    """Raised internally when the deadline passes during a search."""


def format_memory(memory: int) -> str:
    """Render a byte count as whole bytes, kilobytes or megabytes."""
    if memory < 1024:
        return f"{memory} B"
    if memory < 1024 * 1024:
        return f"{memory // 1024} KB"
    return f"{memory // (1024 * 1024)} MB"


class DynamicProgramming:
    """Knapsack solver over a table of (item, capacity) sub-problems.

    With ``draw_condition`` set, ties on profit go to the lighter load and
    then to fewer pallets; with ``lexicographical_order`` also set, the
    remaining ties go to the lexicographically smaller sequence of ids.
    """

    def __init__(
        self, draw_condition: bool = False, lexicographical_order: bool = False
    ) -> None:
        self.draw_condition = draw_condition
        self.lexicographical_order = lexicographical_order

    def _empty(self) -> DPEntry:
        return make_empty(self.draw_condition, self.lexicographical_order)

    def _create_table(self, table_type: TableType, n: int, max_weight: int) -> DPTable:
        if table_type is TableType.VECTOR:
            return VectorDPTable(n, max_weight, self._empty)
        return HashMapDPTable(self._empty)

    @staticmethod
    def _check_deadline(deadline: Optional[int]) -> None:
        if deadline is not None and time.monotonic_ns() > deadline:
            raise _TimedOut

    def _lookup(self, dp: DPTable, i: int, w: int) -> DPEntry:
        if i == 0 or w == 0:
            return self._empty()
        return dp.get(i, w)

    def _evaluate(
        self,
        pallets: Sequence[Pallet],
        dp: DPTable,
        i: int,
        w: int,
        deadline: Optional[int],
    ) -> DPEntry:
        """Memoised top-down evaluation of state (i, w) with an explicit stack."""
        self._check_deadline(deadline)
        if i == 0 or w == 0:
            return self._empty()
        if dp.get(i, w).is_computed:
            return dp.get(i, w)

        stack = [(i, w)]
        while stack:
            self._check_deadline(deadline)
            ci, cw = stack[-1]
            if dp.get(ci, cw).is_computed:
                stack.pop()
                continue
            pallet = pallets[ci - 1]
            children = [(ci - 1, cw)]
            if pallet.weight <= cw:
                children.append((ci - 1, cw - pallet.weight))
            pending = [
                (ni, nw)
                for ni, nw in children
                if ni > 0 and nw > 0 and not dp.get(ni, nw).is_computed
            ]
            if pending:
                stack.extend(pending)
                continue
            exclude = self._lookup(dp, ci - 1, cw)
            if pallet.weight <= cw:
                include = self._lookup(dp, ci - 1, cw - pallet.weight).include(pallet)
            else:
                include = self._empty()
            dp.set(ci, cw, include if exclude < include else exclude)
            stack.pop()
        return dp.get(i, w)

    def _get_or_compute(
        self, pallets: Sequence[Pallet], dp: DPTable, i: int, w: int
    ) -> DPEntry:
        entry = dp.get(i, w)
        if entry.is_computed:
            return entry
        if i == 0 or w == 0:
            empty = self._empty()
            dp.set(i, w, empty)
            return empty
        return self._evaluate(pallets, dp, i, w, None)

    def _solve_top_down(
        self, pallets: Sequence[Pallet], dp: DPTable, n: int, max_weight: int, deadline: int
    ) -> tuple[DPEntry, list[Pallet]]:
        result = self._evaluate(pallets, dp, n, max_weight, deadline)

        used: list[Pallet] = []
        i, w = n, max_weight
        while i > 0 and w > 0:
            current = self._get_or_compute(pallets, dp, i, w)
            pallet = pallets[i - 1]
            if pallet.weight <= w:
                base = self._get_or_compute(pallets, dp, i - 1, w - pallet.weight)
                if current == base.include(pallet):
                    used.append(pallet)
                    w -= pallet.weight
                    i -= 1
                    continue
            i -= 1
        used.reverse()
        return result, used

    def _solve_bottom_up(
        self, pallets: Sequence[Pallet], dp: DPTable, n: int, max_weight: int, deadline: int
    ) -> tuple[DPEntry, list[Pallet]]:
        for i, pallet in enumerate(pallets, start=1):
            for w in range(max_weight + 1):
                self._check_deadline(deadline)
                exclude = dp.get(i - 1, w)
                if pallet.weight <= w:
                    include = dp.get(i - 1, w - pallet.weight).include(pallet)
                else:
                    include = self._empty()
                dp.set(i, w, include if exclude < include else exclude)

        used: list[Pallet] = []
        i, w = n, max_weight
        while i > 0 and w > 0:
            current = dp.get(i, w)
            pallet = pallets[i - 1]
            if pallet.weight <= w:
                if current == dp.get(i - 1, w - pallet.weight).include(pallet):
                    used.append(pallet)
                    w -= pallet.weight
                    i -= 1
                    continue
            i -= 1
        used.reverse()
        return dp.get(n, max_weight), used

    def solve(
        self,
        pallets: Iterable[Pallet],
        truck: Truck,
        table_type: TableType = TableType.VECTOR,
        timeout_ms: int = 60000,
    ) -> Solution:
        """Solve and reconstruct the chosen pallets.

        A vector table is filled bottom-up; a hash-map table is filled
        top-down, visiting only reachable states. On timeout the profit is 0
        and no pallets are returned.
        """
        items = list(pallets)
        start = time.monotonic_ns()
        deadline = start + timeout_ms * 1_000_000
        n = len(items)
        max_weight = truck.capacity
        dp = self._create_table(table_type, n, max_weight)
        label = f"[DP ({table_type.value} Table)]"

        try:
            if table_type is TableType.VECTOR:
                result, used = self._solve_bottom_up(items, dp, n, max_weight, deadline)
            else:
                result, used = self._solve_top_down(items, dp, n, max_weight, deadline)
        except _TimedOut:
            return Solution(0, [], f"{label} Timeout after {timeout_ms} ms.")

        duration_us = (time.monotonic_ns() - start) // 1000
        memory_str = format_memory(dp.memory_usage())
        if self.draw_condition:
            lex = "ON" if self.lexicographical_order else "OFF"
            draw_str = f" | Draw condition: ON (Lexicographical: {lex})"
        else:
            draw_str = " | Draw condition: OFF"
        message = (
            f"{label} Execution time: {duration_us} μs | Memory used for "
            f"{dp.num_entries()} entries: {memory_str}{draw_str}"
        )
        return Solution(result.profit, used, message)

    def solve_optimized(
        self, pallets: Iterable[Pallet], truck: Truck, timeout_ms: int = 60000
    ) -> Solution:
        """Compute only the maximum profit using two rolling rows.

        No pallets are reconstructed. On timeout the profit is 0.
        """
        items = list(pallets)
        start = time.monotonic_ns()
        deadline = start + timeout_ms * 1_000_000
        capacity = truck.capacity

        prev = [0] * (capacity + 1)
        curr = [0] * (capacity + 1)
        for pallet in items:
            for w in range(capacity + 1):
                if time.monotonic_ns() > deadline:
                    return Solution(
                        0, [], f"[DP (2 Rolling Rows)] Timeout after {timeout_ms} ms."
                    )
                if pallet.weight <= w:
                    curr[w] = max(pallet.profit + prev[w - pallet.weight], prev[w])
                else:
                    curr[w] = prev[w]
            prev, curr = curr, prev

        duration_us = (time.monotonic_ns() - start) // 1000
        num_entries = 2 * (capacity + 1)
        memory_str = format_memory(num_entries * _UINT_SIZE)
        message = (
            f"[DP (2 Rolling Rows)] Execution time: {duration_us} μs | "
            f"Memory used for {num_entries} entries: {memory_str}"
        )
        return Solution(prev[capacity], [], message)