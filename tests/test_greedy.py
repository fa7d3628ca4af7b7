import itertools
import time

from palletpack.greedy import approx_solve
from palletpack.models import Pallet, Truck


def test_prefers_higher_ratio():
    low = Pallet("A", 10, 10)
    high = Pallet("B", 5, 10)
    solution = approx_solve([low, high], Truck(15, 2))
    assert solution.pallets == [high, low]
    assert solution.profit == low.profit + high.profit


def test_does_not_split_last_pallet():
    best_ratio = Pallet("A", 6, 7)
    b = Pallet("B", 5, 5)
    c = Pallet("C", 5, 5)
    solution = approx_solve([b, c, best_ratio], Truck(10, 3))
    assert solution.pallets == [best_ratio]
    assert solution.profit == best_ratio.profit


def test_equal_ratio_prefers_larger_profit():
    small = Pallet("A", 2, 2)
    big = Pallet("B", 4, 4)
    solution = approx_solve([small, big], Truck(4, 2))
    assert solution.pallets == [big]


def test_equal_ratio_and_profit_prefers_smaller_id():
    b = Pallet("b", 3, 3)
    a = Pallet("a", 3, 3)
    solution = approx_solve([b, a], Truck(3, 2))
    assert solution.pallets == [a]


def test_selection_respects_capacity_and_profit_invariants():
    pallets = [Pallet(str(i), 1 + (i * 7) % 13, 1 + (i * 5) % 17) for i in range(30)]
    truck = Truck(40, 30)
    solution = approx_solve(pallets, truck)
    assert solution.total_weight <= truck.capacity
    assert solution.profit == sum(p.profit for p in solution.pallets)
    assert all(p in pallets for p in solution.pallets)


def test_zero_capacity_selects_nothing():
    solution = approx_solve([Pallet("1", 1, 1)], Truck(0, 1))
    assert solution.pallets == []
    assert solution.profit == 0


def test_empty_input():
    solution = approx_solve([], Truck(10, 0))
    assert solution.pallets == []
    assert solution.profit == 0
    assert solution.message.startswith("[Greedy] Execution time: ")


def test_message_reports_execution_time():
    solution = approx_solve([Pallet("1", 1, 1)], Truck(5, 1))
    assert solution.message.startswith("[Greedy] Execution time: ")
    assert solution.message.endswith(" μs")


def test_input_is_not_reordered():
    pallets = [Pallet("A", 10, 10), Pallet("B", 5, 10)]
    snapshot = list(pallets)
    approx_solve(pallets, Truck(15, 2))
    assert pallets == snapshot


def test_timeout_returns_zero(monkeypatch):
    ticks = itertools.chain([0], itertools.repeat(10**9))
    monkeypatch.setattr(time, "perf_counter_ns", lambda: next(ticks))
    solution = approx_solve([Pallet("1", 1, 1), Pallet("2", 1, 1)], Truck(5, 2), 1)
    assert solution.profit == 0
    assert solution.pallets == []
    assert solution.message == "[Greedy] Timeout: Algorithm exceeded 1 ms."