"""Solvers for the pallet-loading 0/1 knapsack problem, with an interactive menu."""

__version__ = "1.0.0"