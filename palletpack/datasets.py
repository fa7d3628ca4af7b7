"""Selecting, loading and showing the pallet and truck dataset."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from palletpack.fsutils import ensure_directory, get_absolute_dir
from palletpack.menu import clear_terminal
from palletpack.models import Pallet, Truck
from palletpack.parsing import parse_pallets, parse_truck, trim


def _read_line(prompt: str = "") -> str:
    sys.stdout.write(prompt)
    sys.stdout.flush()
    return sys.stdin.readline().removesuffix("\n")


@dataclass
class Dataset:
    """The currently loaded pallets and truck, shared by the session."""

    pallets: list[Pallet] = field(default_factory=list)
    truck: Truck = field(default_factory=Truck)
    identifier: str = ""


class DatasetManager:
    """Loads datasets from the data directory and shows the loaded one."""

    def __init__(self, dataset: Dataset) -> None:
        self.dataset = dataset

    def load_dataset(self, identifier: str) -> bool:
        """Load ``Pallets_<id>.csv`` and ``TruckAndPallets_<id>.csv``.

        Returns False if either file cannot be opened.
        """
        pallets_path = get_absolute_dir(f"/data/Pallets_{identifier}.csv")
        truck_path = get_absolute_dir(f"/data/TruckAndPallets_{identifier}.csv")
        try:
            for path in (pallets_path, truck_path):
                with open(path, encoding="utf-8"):
                    pass
        except OSError:
            return False

        self.dataset.pallets[:] = parse_pallets(pallets_path)
        truck = parse_truck(truck_path)
        if truck.capacity > 0:
            self.dataset.truck.capacity = truck.capacity
            self.dataset.truck.num_pallets = truck.num_pallets
        return True

    def select_and_load_dataset(self) -> bool:
        """Ask for a dataset identifier until one loads or the line is empty."""
        clear_terminal()
        while True:
            if self.dataset.identifier:
                print(f"Current dataset: {self.dataset.identifier}")
            print("Files should be in the format:")
            print("Pallets_<X>.csv")
            print("TruckAndPallets_<X>.csv\n")
            identifier = trim(_read_line("<X> (empty line to exit): "))
            if not identifier:
                break

            if not self.load_dataset(identifier):
                clear_terminal()
                print("ERROR: Could not open files.", file=sys.stderr)
                continue

            output_dir = get_absolute_dir("/output")
            try:
                ensure_directory(output_dir)
            except OSError as exc:
                print(f"ERROR: Could not prepare output directory: {exc}", file=sys.stderr)
            if self.dataset.identifier:
                clear_terminal()
                print(f"Dataset updated to: {identifier}")
                _read_line("Press Enter to continue...")
            self.dataset.identifier = identifier
            break
        return True

    def show_dataset(self) -> None:
        """Print the loaded pallets and truck, then wait for Enter."""
        clear_terminal()
        if self.dataset.identifier:
            print(f"Current dataset: {self.dataset.identifier}")
        print("Pallets:")
        for pallet in self.dataset.pallets:
            print(f"id: {pallet.id}, profit: {pallet.profit}, weight: {pallet.weight}")
        truck = self.dataset.truck
        print("\nTruck:")
        print(f"capacity: {truck.capacity}, num_pallets: {truck.num_pallets}")
        _read_line("\nPress Enter to exit...")