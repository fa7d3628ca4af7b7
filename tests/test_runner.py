import io
import sys

import pytest

from palletpack.brute_force import bf_solve
from palletpack.datasets import Dataset
from palletpack.menu import BatchState
from palletpack.models import Pallet, Solution, Truck
from palletpack.runner import (
    ALGORITHMS,
    OUTPUT_FILES,
    AlgorithmRunner,
    run_algorithm,
    write_output_file,
)

PALLETS = [Pallet("1", 10, 60), Pallet("2", 20, 100), Pallet("3", 30, 120)]
TRUCK = Truck(50, 3)


def _feed(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))


@pytest.fixture
def project(tmp_path, monkeypatch):
    monkeypatch.setenv("PALLETPACK_HOME", str(tmp_path))
    (tmp_path / "output").mkdir()
    return tmp_path


@pytest.mark.parametrize(
    "name", ["BF", "BT", "BB", "DP-VECTOR", "DP-HASHMAP", "DP-OPTIMIZED", "ILP"]
)
def test_exact_algorithms_agree_with_brute_force(name):
    expected = bf_solve(PALLETS, TRUCK).profit
    result = run_algorithm(name, PALLETS, TRUCK, 60000)
    assert result.profit == expected


def test_classic_instance_optimum():
    assert run_algorithm("BF", PALLETS, TRUCK, 60000).profit == 220


def test_greedy_never_beats_optimum_and_fits():
    result = run_algorithm("GREEDY-APPROX", PALLETS, TRUCK, 60000)
    assert result.profit <= bf_solve(PALLETS, TRUCK).profit
    assert result.total_weight <= TRUCK.capacity


def test_unknown_algorithm_raises():
    with pytest.raises(ValueError):
        run_algorithm("NOPE", PALLETS, TRUCK, 1000)


def test_write_output_file_with_pallets(tmp_path):
    solution = Solution(160, [PALLETS[0], PALLETS[1]], "done")
    path = tmp_path / "out.txt"
    write_output_file(path, solution)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "id, profit, weight"
    assert lines[1] == "1, 60, 10"
    assert "Total Weight: 30" in lines
    assert "Maximum Profit: 160" in lines
    assert lines[-1] == "done"


def test_write_output_file_only_message(tmp_path):
    path = tmp_path / "out.txt"
    write_output_file(path, Solution(0, [], "timeout"))
    assert path.read_text(encoding="utf-8") == "timeout\n"


def test_write_output_file_empty_path():
    with pytest.raises(ValueError):
        write_output_file("", Solution(0, [], "x"))


@pytest.mark.parametrize(
    "text, expected",
    [
        ("3\n", BatchState.SHOW_DATASET),
        ("4\n", BatchState.SELECT_TIMEOUT),
        ("2\n", BatchState.SELECT_DATASET),
        ("1\n", BatchState.RUN_ALGORITHMS),
        ("", BatchState.EXIT),
    ],
)
def test_get_input_mode(monkeypatch, capsys, text, expected):
    _feed(monkeypatch, text)
    assert AlgorithmRunner(Dataset()).get_input_mode() is expected


def test_select_timeout_updates(monkeypatch, capsys):
    _feed(monkeypatch, "1500\n\n")
    runner = AlgorithmRunner(Dataset())
    runner.select_timeout()
    assert runner.timeout_ms == 1500


def test_select_timeout_accepts_plus_sign(monkeypatch, capsys):
    _feed(monkeypatch, " +25 \n\n")
    runner = AlgorithmRunner(Dataset())
    runner.select_timeout()
    assert runner.timeout_ms == 25


@pytest.mark.parametrize("bad", ["abc", "+", "-5", "   ", "12x"])
def test_select_timeout_rejects_invalid(monkeypatch, capsys, bad):
    _feed(monkeypatch, f"{bad}\n\n")
    runner = AlgorithmRunner(Dataset())
    runner.select_timeout()
    assert runner.timeout_ms == 60000
    assert "ERROR: Invalid input" in capsys.readouterr().err


def test_process_input_writes_bf_file(project, monkeypatch, capsys):
    _feed(monkeypatch, "1\n\n")
    runner = AlgorithmRunner(Dataset(list(PALLETS), Truck(50, 3)))
    runner.process_input()
    content = (project / "output" / OUTPUT_FILES["BF"]).read_text(encoding="utf-8")
    expected = bf_solve(PALLETS, TRUCK).profit
    assert f"Maximum Profit: {expected}" in content
    assert "Exiting process input..." in capsys.readouterr().out


def test_process_input_dp_vector_with_tie_breaking(project, monkeypatch, capsys):
    choice = ALGORITHMS.index("DP-VECTOR") + 1
    _feed(monkeypatch, f"{choice}\ny\ny\n\n")
    runner = AlgorithmRunner(Dataset(list(PALLETS), Truck(50, 3)))
    runner.process_input()
    content = (project / "output" / OUTPUT_FILES["DP-VECTOR"]).read_text(encoding="utf-8")
    expected = bf_solve(PALLETS, TRUCK).profit
    assert f"Maximum Profit: {expected}" in content
    assert "Draw condition: ON (Lexicographical: ON)" in content


def test_process_input_dp_hashmap_without_draw(project, monkeypatch, capsys):
    choice = ALGORITHMS.index("DP-HASHMAP") + 1
    _feed(monkeypatch, f"{choice}\nn\n\n")
    runner = AlgorithmRunner(Dataset(list(PALLETS), Truck(50, 3)))
    runner.process_input()
    content = (project / "output" / OUTPUT_FILES["DP-HASHMAP"]).read_text(encoding="utf-8")
    expected = bf_solve(PALLETS, TRUCK).profit
    assert f"Maximum Profit: {expected}" in content
    assert "Draw condition: OFF" in content