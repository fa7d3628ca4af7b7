"""String helpers and readers for the pallet and truck CSV files."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterator

from palletpack.models import Pallet, Truck

logger = logging.getLogger(__name__)

_TRIM_CHARS = " \t\n\r"
_C_SPACE = " \t\n\v\f\r"
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

# Leading part of a string that a C floating-point conversion would accept.
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:"
    r"0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)"
    r"|\d+\.?\d*"
    r"|\.\d+"
    r"|inf"
    r"|nan"
    r")",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"[+-]?\d+")


def split(line: str, delimiter: str) -> list[str]:
    """Split ``line`` on ``delimiter``; a trailing empty field is dropped."""
    parts = line.split(delimiter)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def trim(s: str) -> str:
    """Strip spaces, tabs, carriage returns and newlines from both ends."""
    return s.strip(_TRIM_CHARS)


def is_number(s: str) -> bool:
    """Return True if ``s`` starts with something readable as a number."""
    candidate = trim(s).lstrip(_C_SPACE)
    return _FLOAT_PREFIX.match(candidate) is not None


def _to_int(s: str) -> int:
    """Read the leading integer of ``s`` the way a C ``stoi`` call does."""
    match = _INT_PREFIX.match(s.lstrip(_C_SPACE))
    if match is None:
        raise ValueError(f"no integer in {s!r}")
    value = int(match.group())
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range in {s!r}")
    return value


def _data_lines(path: str | os.PathLike[str]) -> Iterator[str] | None:
    """Yield the lines after the header, or return None for an empty file."""
    with open(path, encoding="utf-8", newline="\n") as handle:
        lines = [line.removesuffix("\n") for line in handle]
    if not lines:
        logger.error("Error: CSV file %s is empty.", path)
        return None
    return iter(lines[1:])


def parse_pallets(path: str | os.PathLike[str]) -> list[Pallet]:
    """Read pallets from a CSV file with an ``id,weight,profit`` layout.

    Malformed rows and rows with non-numeric or non-positive values are
    skipped with a warning.
    """
    lines = _data_lines(path)
    if lines is None:
        return []

    pallets: list[Pallet] = []
    for line in lines:
        row = split(line, ",")
        if len(row) != 3:
            logger.warning("Warning: Skipping malformed line: %s", line)
            continue
        pallet_id, weight, profit = row
        if not all(is_number(field) for field in row):
            logger.warning("Warning: Skipping line with non-integer values %s", line)
            continue
        w = _to_int(weight)
        p = _to_int(profit)
        if w <= 0 or p <= 0:
            logger.warning("Warning: Skipping line with non-positive values %s", line)
            continue
        pallets.append(Pallet(pallet_id, w, p))
    return pallets


def parse_truck(path: str | os.PathLike[str]) -> Truck:
    """Read a truck from a CSV file with a ``capacity,num_pallets`` layout.

    The last valid row wins; invalid rows are skipped with a warning.
    """
    truck = Truck()
    lines = _data_lines(path)
    if lines is None:
        return truck

    for line in lines:
        row = split(line, ",")
        if len(row) != 2:
            logger.warning("Warning: Skipping malformed line: %s", line)
            continue
        capacity, num_pallets = row
        if not (is_number(capacity) and is_number(num_pallets)):
            logger.warning("Warning: Skipping line with non-integer values %s", line)
            continue
        c = _to_int(capacity)
        p = _to_int(num_pallets)
        if c <= 0 or p <= 0:
            logger.warning("Warning: Skipping line with non-positive values %s", line)
            continue
        truck.capacity = c
        truck.num_pallets = p
    return truck


def parse(
    pallets_file: str | os.PathLike[str], truck_file: str | os.PathLike[str]
) -> tuple[list[Pallet], Truck]:
    """Read both dataset files and return the pallets and the truck."""
    return parse_pallets(pallets_file), parse_truck(truck_file)