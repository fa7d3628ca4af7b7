"""Interactive session: the state loop and the command entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from palletpack.datasets import Dataset, DatasetManager
from palletpack.menu import BatchState
from palletpack.runner import AlgorithmRunner


class BatchStateManager:
    """Drives the session between dataset, algorithm and timeout screens."""

    def __init__(self, dataset: Dataset) -> None:
        self.dataset = dataset
        self.data_manager = DatasetManager(dataset)
        self.runner = AlgorithmRunner(dataset)

    def update_state(self) -> None:
        """Run the session until the user exits or no pallets are loaded."""
        state = BatchState.SELECT_DATASET
        while True:
            if state is BatchState.RUN_ALGORITHMS:
                self.runner.process_input()
            elif state is BatchState.SELECT_DATASET:
                self.data_manager.select_and_load_dataset()
                if not self.dataset.pallets:
                    print("\nNo pallets loaded. Exiting...")
                    return
            elif state is BatchState.SHOW_DATASET:
                self.data_manager.show_dataset()
            elif state is BatchState.SELECT_TIMEOUT:
                self.runner.select_timeout()
            elif state is BatchState.EXIT:
                return
            state = self.runner.get_input_mode()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive pallet packing session."""
    parser = argparse.ArgumentParser(
        prog="palletpack",
        description="Choose pallets for a truck with several knapsack solvers.",
    )
    parser.parse_args(argv)
    BatchStateManager(Dataset()).update_state()
    return 0