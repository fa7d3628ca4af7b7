"""Core data types: pallets, trucks and algorithm results."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Pallet:
    """An item of the knapsack problem: an identifier, a weight and a profit."""

    id: str
    weight: int
    profit: int


@dataclass(slots=True)
class Truck:
    """The knapsack: a weight capacity and the number of pallets it carries."""

    capacity: int = 0
    num_pallets: int = 0


@dataclass(slots=True)
class Solution:
    """The outcome of one algorithm run."""

    profit: int
    pallets: list[Pallet] = field(default_factory=list)
    message: str = ""

    @property
    def total_weight(self) -> int:
        """Sum of the weights of the selected pallets."""
        return sum(pallet.weight for pallet in self.pallets)