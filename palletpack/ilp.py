"""Integer linear programming formulation of the 0/1 knapsack problem."""

from __future__ import annotations

import time
from collections.abc import Iterable

import numpy as np
from scipy.optimize import Bounds, LinearConstraint, milp

from palletpack.models import Pallet, Solution, Truck

_STATUS_OPTIMAL = 0
_STATUS_LIMIT_REACHED = 1
_STATUS_OTHER = 4


def solve_ilp(
    pallets: Iterable[Pallet], truck: Truck, timeout_ms: int = 60000
) -> Solution:
    """Solve with a mixed-integer solver: binary choice per pallet.

    Maximises total profit subject to the total weight not exceeding the
    truck capacity. When the solver stops before finding any solution the
    run counts as a timeout and the profit is 0.
    """
    items = list(pallets)
    start = time.perf_counter_ns()

    if items:
        profits = np.array([p.profit for p in items], dtype=float)
        weights = np.array([[p.weight for p in items]], dtype=float)
        result = milp(
            c=-profits,
            integrality=np.ones(len(items)),
            bounds=Bounds(0, 1),
            constraints=LinearConstraint(weights, 0.0, float(truck.capacity)),
            options={"time_limit": timeout_ms / 1000.0},
        )
        status, values = result.status, result.x
    else:
        status, values = _STATUS_OPTIMAL, np.zeros(0)

    if values is None and status in (_STATUS_LIMIT_REACHED, _STATUS_OTHER):
        return Solution(0, [], f"[ILP] Timeout after {timeout_ms} ms.")
    if values is None or status not in (_STATUS_OPTIMAL, _STATUS_LIMIT_REACHED):
        return Solution(0, [], "[ILP] No feasible solution found.")

    used = [pallet for pallet, value in zip(items, values) if value > 0.5]
    profit = sum(pallet.profit for pallet in used)

    duration_us = (time.perf_counter_ns() - start) // 1000
    return Solution(profit, used, f"[ILP] Execution time: {duration_us} μs")