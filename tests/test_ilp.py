import pytest

from palletpack.brute_force import bf_solve
from palletpack.ilp import solve_ilp
from palletpack.models import Pallet, Truck


def _pallets(specs):
    return [Pallet(str(i + 1), w, p) for i, (w, p) in enumerate(specs)]


INSTANCES = [
    ([(5, 10), (4, 40), (6, 30), (3, 50)], 10),
    ([(1, 1), (2, 6), (5, 18), (6, 22), (7, 28)], 11),
    ([(10, 60), (20, 100), (30, 120)], 50),
    ([(12, 4), (2, 2), (1, 1), (1, 2), (4, 10)], 15),
]


@pytest.mark.parametrize("specs, capacity", INSTANCES)
def test_matches_exhaustive_optimum(specs, capacity):
    pallets = _pallets(specs)
    truck = Truck(capacity, len(pallets))
    expected = bf_solve(pallets, truck)
    result = solve_ilp(pallets, truck)
    assert result.profit == expected.profit


@pytest.mark.parametrize("specs, capacity", INSTANCES)
def test_selection_is_consistent(specs, capacity):
    pallets = _pallets(specs)
    result = solve_ilp(pallets, Truck(capacity, len(pallets)))
    assert result.total_weight <= capacity
    assert sum(p.profit for p in result.pallets) == result.profit
    assert all(p in pallets for p in result.pallets)


def test_message_reports_execution_time():
    pallets = _pallets([(2, 3), (3, 4)])
    result = solve_ilp(pallets, Truck(5, 2))
    assert result.message.startswith("[ILP] Execution time: ")
    assert result.message.endswith(" μs")


def test_empty_pallet_list():
    result = solve_ilp([], Truck(10, 0))
    assert result.profit == 0
    assert result.pallets == []


def test_nothing_fits():
    pallets = _pallets([(20, 5), (30, 7)])
    result = solve_ilp(pallets, Truck(10, 2))
    assert result.profit == 0
    assert result.pallets == []


def test_pallet_order_preserved():
    pallets = _pallets([(1, 5), (1, 6), (1, 7)])
    result = solve_ilp(pallets, Truck(3, 3))
    assert [p.id for p in result.pallets] == ["1", "2", "3"]