# palletpack

palletpack chooses which pallets to load onto a truck so that the total
profit is as high as possible without going over the truck's weight capacity.
This is the 0/1 knapsack problem. The package has several solvers for it, so
you can compare their results and running times:

| Menu entry      | Function                                      | Approach                                                |
|-----------------|-----------------------------------------------|---------------------------------------------------------|
| BF              | `brute_force.bf_solve`                        | Tries every subset                                      |
| BT              | `brute_force.bt_solve`                        | Backtracking, pruning overweight loads                  |
| BB              | `branch_and_bound.bb_solve`                   | Branch and bound with a fractional-knapsack upper bound |
| DP-VECTOR       | `DynamicProgramming.solve` (`TableType.VECTOR`)  | Bottom-up dynamic programming over a full table      |
| DP-HASHMAP      | `DynamicProgramming.solve` (`TableType.HASHMAP`) | Top-down dynamic programming with memoisation        |
| DP-OPTIMIZED    | `DynamicProgramming.solve_optimized`          | Two rolling rows; computes the profit only              |
| GREEDY-APPROX   | `greedy.approx_solve`                         | Greedy choice by profit-to-weight ratio (approximation) |
| ILP             | `ilp.solve_ilp`                               | Integer linear programming with SciPy's `milp`          |

Every solver takes a timeout in milliseconds (60000 by default) and returns a
`Solution` with the chosen pallets, the total profit and a message that gives
the execution time or the reason it stopped. When a solver runs out of time
the profit is 0. The greedy solver keeps the pallets it had picked up to that
point; the others return no pallets. The ILP solver counts a run as a timeout
only when the solver stops without any solution; if it reaches the time limit
with a feasible solution, that solution is returned.

## Installation

```
pip install .
```

Python 3.10 or newer is required. NumPy and SciPy are installed with the
package.

## Input files

A dataset is a pair of CSV files that share an identifier `<X>`. Each file
starts with a header line, which is skipped:

- `Pallets_<X>.csv` has one pallet per line: `id,weight,profit`
- `TruckAndPallets_<X>.csv` has a line `capacity,num_pallets`; if there are
  several valid lines, the last one is used

Lines with the wrong number of fields, with non-numeric values, or with values
that are not positive are skipped and a warning is logged.

## Interactive use

```
palletpack
```

The program looks for datasets in the `data/` directory and writes results to
the `output/` directory, both under the project directory. That directory is
taken from the `PALLETPACK_HOME` environment variable, or is the current
working directory when the variable is not set.

The program first asks for a dataset identifier `<X>`. If no pallets are
loaded (for example, you enter an empty line), it exits. Otherwise it shows a
menu:

1. Run Algorithms
2. Select Dataset
3. Show Dataset
4. Change Timeout

An empty line leaves the current menu, and at the main menu it ends the
program. The timeout is entered in milliseconds as a non-negative integer.

Each algorithm run writes its result to a file in `output/`: `bf.txt`,
`bt.txt`, `bb.txt`, `dp_vector.txt`, `dp_hashmap.txt`, `dp_optimized.txt`,
`greedy_approx.txt` or `ilp.txt`. The file lists the chosen pallets
(`id, profit, weight`), their total weight, the maximum profit and the
solver's message. **The `output/` directory is deleted and created again each
time a dataset is loaded.**

For DP-VECTOR and DP-HASHMAP you are asked whether to enable the draw
condition. When it is on, ties in profit are broken in favour of less total
weight and then fewer pallets. You can then also turn on lexicographic
tie-breaking on the sequence of pallet ids. This uses more memory and is meant
for small datasets. BF and BT always break ties in this way.

## Use as a library

```python
from palletpack.models import Pallet, Truck
from palletpack.greedy import approx_solve
from palletpack.brute_force import bf_solve
from palletpack.dynamic_programming import DynamicProgramming, TableType

pallets = [Pallet("1", 10, 60), Pallet("2", 20, 100), Pallet("3", 30, 120)]
truck = Truck(50, 3)

print(bf_solve(pallets, truck, timeout_ms=1000))
print(approx_solve(pallets, truck, timeout_ms=1000))

dp = DynamicProgramming(draw_condition=True, lexicographical_order=False)
print(dp.solve(pallets, truck, TableType.VECTOR, timeout_ms=1000))
```

`palletpack.runner.run_algorithm(name, pallets, truck, timeout_ms)` runs a
solver by its menu name, with the dynamic-programming tie-breaking switched
off. `palletpack.runner.write_output_file(path, solution)` writes a
`Solution` in the same format as the result files.

To read a dataset from disk:

```python
from palletpack.parsing import parse

pallets, truck = parse("data/Pallets_01.csv", "data/TruckAndPallets_01.csv")
```

## Running the tests

```
pip install .[test]
pytest
```