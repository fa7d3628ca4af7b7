"""Running the solvers from the interactive menu and saving their results."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Iterable
from pathlib import Path

from palletpack.branch_and_bound import bb_solve
from palletpack.brute_force import bf_solve, bt_solve
from palletpack.datasets import Dataset
from palletpack.dynamic_programming import DynamicProgramming, TableType
from palletpack.fsutils import get_absolute_dir
from palletpack.greedy import approx_solve
from palletpack.ilp import solve_ilp
from palletpack.menu import BatchState, clear_terminal, get_menu_choice
from palletpack.models import Pallet, Solution, Truck
from palletpack.parsing import trim

DEFAULT_TIMEOUT_MS = 60000
_UINT_MAX = 2**32 - 1
_TIMEOUT_PATTERN = re.compile(r"\+?[0-9]+")

OUTPUT_FILES: dict[str, str] = {
    "BF": "bf.txt",
    "BT": "bt.txt",
    "BB": "bb.txt",
    "DP-VECTOR": "dp_vector.txt",
    "DP-HASHMAP": "dp_hashmap.txt",
    "DP-OPTIMIZED": "dp_optimized.txt",
    "GREEDY-APPROX": "greedy_approx.txt",
    "ILP": "ilp.txt",
}
ALGORITHMS: tuple[str, ...] = tuple(OUTPUT_FILES)

_MODE_OPTIONS = ("Run Algorithms", "Select Dataset", "Show Dataset", "Change Timeout")
_MODES = {
    1: BatchState.RUN_ALGORITHMS,
    2: BatchState.SELECT_DATASET,
    3: BatchState.SHOW_DATASET,
    4: BatchState.SELECT_TIMEOUT,
}
_INVALID_TIMEOUT = "ERROR: Invalid input. Please enter a non-negative integer."


def _read_line(prompt: str = "") -> str:
    sys.stdout.write(prompt)
    sys.stdout.flush()
    return sys.stdin.readline().removesuffix("\n")


def _ask_yes(prompt: str) -> bool:
    answer = _read_line(prompt)
    return bool(answer) and answer[0].lower() == "y"


def _seconds(timeout_ms: int) -> str:
    return f"{timeout_ms / 1000.0:g}"


def _run(
    name: str,
    pallets: Iterable[Pallet],
    truck: Truck,
    timeout_ms: int,
    draw_condition: bool = False,
    lexicographical_order: bool = False,
) -> Solution:
    if name == "BF":
        return bf_solve(pallets, truck, timeout_ms)
    if name == "BT":
        return bt_solve(pallets, truck, timeout_ms)
    if name == "BB":
        return bb_solve(pallets, truck, timeout_ms)
    if name in ("DP-VECTOR", "DP-HASHMAP"):
        table = TableType.VECTOR if name == "DP-VECTOR" else TableType.HASHMAP
        solver = DynamicProgramming(draw_condition, lexicographical_order)
        return solver.solve(pallets, truck, table, timeout_ms)
    if name == "DP-OPTIMIZED":
        return DynamicProgramming().solve_optimized(pallets, truck, timeout_ms)
    if name == "GREEDY-APPROX":
        return approx_solve(pallets, truck, timeout_ms)
    if name == "ILP":
        return solve_ilp(pallets, truck, timeout_ms)
    raise ValueError(f"Unknown algorithm: {name}")


def run_algorithm(
    name: str, pallets: Iterable[Pallet], truck: Truck, timeout_ms: int = DEFAULT_TIMEOUT_MS
) -> Solution:
    """Run the algorithm called ``name`` (one of :data:`ALGORITHMS`).

    The dynamic-programming variants run with tie-breaking switched off.
    """
    return _run(name, pallets, truck, timeout_ms)


def write_output_file(path: str | os.PathLike[str], solution: Solution) -> None:
    """Write the selected pallets, total weight, profit and message to ``path``."""
    if not os.fspath(path):
        raise ValueError("Filename is empty.")
    parts: list[str] = []
    if solution.pallets:
        parts.append("id, profit, weight\n")
        parts.extend(f"{p.id}, {p.profit}, {p.weight}\n" for p in solution.pallets)
        parts.append(f"\nTotal Weight: {solution.total_weight}\n")
    if solution.profit > 0:
        parts.append(f"Maximum Profit: {solution.profit}\n\n")
    parts.append(f"{solution.message}\n")
    Path(path).write_text("".join(parts), encoding="utf-8")


class AlgorithmRunner:
    """Menu-driven choice of algorithms and timeout for the loaded dataset."""

    def __init__(self, dataset: Dataset, timeout_ms: int = DEFAULT_TIMEOUT_MS) -> None:
        self.dataset = dataset
        self.timeout_ms = timeout_ms

    def get_input_mode(self) -> BatchState:
        """Show the main menu and return the chosen state."""
        choice = get_menu_choice(
            _MODE_OPTIONS, "Choose an option (empty line to exit): "
        )
        if choice == 1:
            clear_terminal()
        return _MODES.get(choice, BatchState.EXIT)

    def select_timeout(self) -> None:
        """Ask for a new timeout in milliseconds until a valid one is given."""
        clear_terminal()
        while True:
            print(
                f"Current timeout: {self.timeout_ms} ms "
                f"({_seconds(self.timeout_ms)} seconds)"
            )
            line = _read_line("Enter new timeout in milliseconds (empty line to exit): ")
            if not line:
                return
            trimmed = trim(line)
            if not _TIMEOUT_PATTERN.fullmatch(trimmed) or int(trimmed) > _UINT_MAX:
                clear_terminal()
                print(_INVALID_TIMEOUT, file=sys.stderr)
                continue
            self.timeout_ms = int(trimmed)
            clear_terminal()
            print(
                f"Timeout updated to {self.timeout_ms} ms "
                f"({_seconds(self.timeout_ms)} seconds)."
            )
            _read_line("Press Enter to continue...")
            return

    def _dp_options(self, name: str) -> tuple[bool, bool]:
        draw = _ask_yes(f"Enable draw condition for {name}? (y/N): ")
        lex = draw and _ask_yes(
            f"Enable lexicographical tie-breaking for {name}? (y/N): "
        )
        return draw, lex

    def process_input(self) -> None:
        """Run chosen algorithms and save each result under the output directory."""
        clear_terminal()
        while True:
            choice = get_menu_choice(ALGORITHMS, "Choose algorithm (empty line to exit): ")
            if choice == 0:
                print("Exiting process input...")
                return
            name = ALGORITHMS[choice - 1]
            draw = lex = False
            if name in ("DP-VECTOR", "DP-HASHMAP"):
                draw, lex = self._dp_options(name)
            solution = _run(
                name, self.dataset.pallets, self.dataset.truck, self.timeout_ms, draw, lex
            )
            output = get_absolute_dir("/output") + "/" + OUTPUT_FILES[name]
            try:
                write_output_file(output, solution)
            except OSError:
                print(f"ERROR: Could not open output file: {output}", file=sys.stderr)