"""Branch-and-bound solver for the 0/1 knapsack problem."""

from __future__ import annotations

import math
import time
from collections.abc import Iterable, Sequence

from palletpack.models import Pallet, Solution, Truck


def _ratio(pallet: Pallet) -> float:
    return pallet.profit / pallet.weight if pallet.weight else math.inf


def _by_ratio(pallets: Iterable[Pallet]) -> list[Pallet]:
    return sorted(pallets, key=lambda p: -_ratio(p))


def _by_value(pallets: Iterable[Pallet]) -> list[Pallet]:
    return sorted(pallets, key=lambda p: -p.profit)


def estimate_upper_bound(
    pallets: Sequence[Pallet],
    index: int,
    curr_weight: int,
    curr_value: int,
    max_weight: int,
    force_ratio_sort: bool,
) -> float:
    """Fractional-knapsack bound on the value reachable from ``index`` on.

    With ``force_ratio_sort`` the remaining pallets are reordered by
    profit-to-weight ratio first; otherwise their given order is used.
    """
    remaining = pallets[index:]
    if force_ratio_sort:
        remaining = _by_ratio(remaining)

    bound = float(curr_value)
    weight = curr_weight
    for pallet in remaining:
        if weight + pallet.weight <= max_weight:
            weight += pallet.weight
            bound += pallet.profit
        else:
            bound += _ratio(pallet) * (max_weight - weight)
            break
    return bound


def _search(
    pallets: Sequence[Pallet],
    max_weight: int,
    best_value: int,
    best_used: tuple[int, ...],
    deadline: int,
    force_ratio_sort: bool,
) -> tuple[int, tuple[int, ...], bool]:
    """Run the depth-first search; return best value, its indices, timeout flag."""
    n = len(pallets)
    stack: list[tuple[int, int, int, tuple[int, ...]]] = [(0, 0, 0, ())]
    while stack:
        if time.monotonic_ns() > deadline:
            return best_value, best_used, True
        index, weight, value, path = stack.pop()
        if weight > max_weight:
            continue
        if index >= n:
            if value > best_value:
                best_value = value
                best_used = path
            continue

        current = pallets[index]
        if force_ratio_sort and weight + current.weight > max_weight:
            if all(p.weight >= current.weight for p in pallets[index + 1 :]):
                continue

        bound = estimate_upper_bound(
            pallets, index, weight, value, max_weight, force_ratio_sort
        )
        if bound <= best_value:
            continue

        stack.append((index + 1, weight, value, path))
        stack.append(
            (index + 1, weight + current.weight, value + current.profit, path + (index,))
        )
    return best_value, best_used, False


def bb_solve(
    pallets: Iterable[Pallet], truck: Truck, timeout_ms: int = 60000
) -> Solution:
    """Solve with branch and bound, using half the time budget per strategy.

    Pallets are first ordered by value when one heavy pallet dominates the
    total value, otherwise by ratio; if that search times out, the other
    ordering is tried. When both time out the profit is 0.
    """
    items = list(pallets)
    start = time.monotonic_ns()
    half_timeout_ns = (timeout_ms // 2) * 1_000_000
    capacity = truck.capacity

    total_value = 0
    max_value = 0
    max_value_weight = 0
    for pallet in items:
        total_value += pallet.profit
        if pallet.profit > max_value:
            max_value = pallet.profit
            max_value_weight = pallet.weight

    value_first = (
        max_value_weight >= 0.8 * capacity and max_value >= 0.5 * total_value
    )
    sort_method = "value" if value_first else "ratio"
    ordered = _by_value(items) if value_first else _by_ratio(items)

    # Greedy starting solution gives an initial pruning threshold.
    greedy_weight = 0
    greedy_value = 0
    greedy_used: list[int] = []
    for i, pallet in enumerate(ordered):
        if greedy_weight + pallet.weight <= capacity:
            greedy_weight += pallet.weight
            greedy_value += pallet.profit
            greedy_used.append(i)

    best_value = 0
    best_used: tuple[int, ...] = ()
    if greedy_value > best_value:
        best_value = greedy_value
        best_used = tuple(greedy_used)

    best_value, best_used, timed_out = _search(
        ordered, capacity, best_value, best_used, start + half_timeout_ns, value_first
    )
    end = time.monotonic_ns()

    if not timed_out:
        return Solution(
            best_value,
            [ordered[i] for i in best_used],
            f"[BB] Execution time: {(end - start) // 1000} μs (sort: {sort_method})",
        )

    alt_sort_method = "ratio" if value_first else "value"
    ordered = _by_ratio(items) if value_first else _by_value(items)

    retry_start = time.monotonic_ns()
    best_value, best_used, timed_out = _search(
        ordered, capacity, 0, (), retry_start + half_timeout_ns, not value_first
    )
    retry_end = time.monotonic_ns()

    if timed_out:
        return Solution(
            0,
            [],
            f"[BB] Timeout after both sort strategies ({timeout_ms} ms total). "
            f"Initial sort: {sort_method}, alternative sort: {alt_sort_method}.",
        )
    return Solution(
        best_value,
        [ordered[i] for i in best_used],
        f"[BB] Execution time: {(retry_end - retry_start) // 1000} μs "
        f"(used alternative sort: {alt_sort_method}, initial sort: {sort_method})",
    )