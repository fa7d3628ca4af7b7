"""Greedy approximation for the 0/1 knapsack problem."""

from __future__ import annotations

import math
import time
from collections.abc import Iterable

from palletpack.models import Pallet, Solution, Truck


def _ratio(pallet: Pallet) -> float:
    return pallet.profit / pallet.weight if pallet.weight else math.inf


def _greedy_key(pallet: Pallet) -> tuple[float, int, str]:
    # Best ratio first, then larger profit, then smaller id.
    return (-_ratio(pallet), -pallet.profit, pallet.id)


def approx_solve(
    pallets: Iterable[Pallet], truck: Truck, timeout_ms: int = 60000
) -> Solution:
    """Take pallets in order of profit-to-weight ratio while they still fit.

    No pallet is ever split. On timeout the profit is 0 and the pallets
    picked so far are kept.
    """
    start = time.perf_counter_ns()
    timeout_ns = timeout_ms * 1_000_000

    ordered = sorted(pallets, key=_greedy_key)
    used: list[Pallet] = []
    total_profit = 0
    remaining = truck.capacity

    for pallet in ordered:
        if time.perf_counter_ns() - start > timeout_ns:
            return Solution(
                profit=0,
                pallets=used,
                message=f"[Greedy] Timeout: Algorithm exceeded {timeout_ms} ms.",
            )
        if pallet.weight <= remaining:
            used.append(pallet)
            total_profit += pallet.profit
            remaining -= pallet.weight

    duration_us = (time.perf_counter_ns() - start) // 1000
    return Solution(
        profit=total_profit,
        pallets=used,
        message=f"[Greedy] Execution time: {duration_us} μs",
    )