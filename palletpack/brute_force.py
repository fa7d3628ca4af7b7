"""Exhaustive and backtracking solvers for the 0/1 knapsack problem."""

from __future__ import annotations

import math
import time
from collections.abc import Iterable, Sequence

from palletpack.models import Pallet, Solution, Truck

# Ranking key of a candidate: higher profit, then lower weight, then fewer
# pallets, then the lexicographically smaller sequence of ids.
_RankKey = tuple[int, float, float, tuple[str, ...]]
_WORST: _RankKey = (0, math.inf, math.inf, ())


def _rank(chosen: Sequence[Pallet]) -> _RankKey:
    return (
        -sum(p.profit for p in chosen),
        sum(p.weight for p in chosen),
        len(chosen),
        tuple(p.id for p in chosen),
    )


def is_lex_smaller(a: Iterable[Pallet], b: Iterable[Pallet]) -> bool:
    """Return True if the ids of ``a``, in order, sort before those of ``b``."""
    return [p.id for p in a] < [p.id for p in b]


def bf_solve(
    pallets: Iterable[Pallet], truck: Truck, timeout_ms: int = 60000
) -> Solution:
    """Try every subset of the pallets and keep the best one that fits.

    Ties on profit go to the lighter load, then to fewer pallets, then to the
    lexicographically smaller id sequence. On timeout the profit is 0 and no
    pallets are returned.
    """
    items = list(pallets)
    start = time.monotonic_ns()
    deadline = start + timeout_ms * 1_000_000
    capacity = truck.capacity

    best_key = _WORST
    best: list[Pallet] = []
    timed_out = False

    for subset in range(1 << len(items)):
        if time.monotonic_ns() > deadline:
            timed_out = True
            break
        chosen = [p for i, p in enumerate(items) if subset >> i & 1]
        key = _rank(chosen)
        if key[1] <= capacity and key < best_key:
            best_key = key
            best = chosen

    duration_us = (time.monotonic_ns() - start) // 1000
    if timed_out:
        return Solution(0, [], f"[BF] Timeout after {timeout_ms} ms.")
    return Solution(-best_key[0], best, f"[BF] Execution time: {duration_us} μs")


def bt_solve(
    pallets: Iterable[Pallet], truck: Truck, timeout_ms: int = 60000
) -> Solution:
    """Depth-first search over include/exclude choices, pruning overweight loads.

    Uses the same tie-breaking as :func:`bf_solve`.
    """
    items = list(pallets)
    n = len(items)
    start = time.monotonic_ns()
    deadline = start + timeout_ms * 1_000_000
    capacity = truck.capacity

    best_key = _WORST
    best_path: tuple[int, ...] = ()
    timed_out = False

    # Each node: (index, weight, chosen indices). Exclude is pushed first so
    # that the include branch is explored first.
    stack: list[tuple[int, int, tuple[int, ...]]] = [(0, 0, ())]
    while stack:
        if time.monotonic_ns() > deadline:
            timed_out = True
            break
        index, weight, path = stack.pop()
        if weight > capacity:
            continue
        if index == n:
            key = _rank([items[i] for i in path])
            if key < best_key:
                best_key = key
                best_path = path
            continue
        stack.append((index + 1, weight, path))
        stack.append((index + 1, weight + items[index].weight, path + (index,)))

    duration_us = (time.monotonic_ns() - start) // 1000
    if timed_out:
        return Solution(0, [], f"[BF (BT)] Timeout after {timeout_ms} ms.")
    return Solution(
        -best_key[0],
        [items[i] for i in best_path],
        f"[BF (BT)] Execution time: {duration_us} μs",
    )