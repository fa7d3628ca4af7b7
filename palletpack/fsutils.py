"""Filesystem helpers for the project's data and output directories."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

PROJECT_DIR_ENV = "PALLETPACK_HOME"


def get_absolute_dir(path: str) -> str:
    """Return ``path`` appended to the project directory.

    The project directory is taken from the ``PALLETPACK_HOME`` environment
    variable, or the current working directory when it is unset.
    """
    base = os.environ.get(PROJECT_DIR_ENV) or os.getcwd()
    return base + path


def remove_directory(path: str | os.PathLike[str]) -> None:
    """Remove a directory and everything below it; raise OSError on failure."""
    shutil.rmtree(path)


def ensure_directory(path: str | os.PathLike[str]) -> Path:
    """Create ``path`` as a fresh, empty directory.

    An existing directory is removed first. A path that exists but is not a
    directory raises NotADirectoryError.
    """
    directory = Path(path)
    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        remove_directory(directory)
    directory.mkdir(mode=0o777)
    return directory