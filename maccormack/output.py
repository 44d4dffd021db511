"""Plain-text field files: one grid row per line, values in fixed-point notation."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import numpy as np

from maccormack.physics import FIELD_NAMES, PrimitiveState


def _as_grid(array) -> np.ndarray:
    grid = np.asarray(array, dtype=float)
    if grid.ndim != 2:
        raise ValueError("a field must be a two-dimensional array")
    return grid


def format_field(array) -> str:
    """Text of a 2-D field: each value as '%f' followed by a space, one row per line."""
    grid = _as_grid(array)
    return "".join(
        "".join(f"{value:f} " for value in row) + "\n" for row in grid
    )


def write_field(array, path) -> Path:
    """Write a 2-D field to a text file, replacing any existing file."""
    target = Path(path)
    target.write_text(format_field(array), encoding="ascii")
    return target


def read_field(path) -> np.ndarray:
    """Read a field written by write_field back into a (ny, nx) array."""
    rows = [
        [float(token) for token in line.split()]
        for line in Path(path).read_text(encoding="ascii").splitlines()
        if line.strip()
    ]
    if not rows:
        raise ValueError(f"{path} holds no field data")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError(f"{path} has rows of different lengths")
    return np.array(rows, dtype=float)


def write_snapshot(
    state: PrimitiveState,
    directory,
    suffix=None,
    names: Iterable[str] | None = None,
) -> list[Path]:
    """Write the chosen fields of a state as '<name>-<suffix>.txt' files.

    Without a suffix the files are named '<name>.txt'. All fields are written
    when no names are given.
    """
    fields = state.fields()
    chosen = list(FIELD_NAMES if names is None else names)
    unknown = [name for name in chosen if name not in fields]
    if unknown:
        known = ", ".join(FIELD_NAMES)
        raise ValueError(f"unknown field(s) {', '.join(unknown)}; choose from: {known}")
    base = Path(directory)
    written = []
    for name in chosen:
        filename = f"{name}.txt" if suffix is None or suffix == "" else f"{name}-{suffix}.txt"
        written.append(write_field(fields[name], base / filename))
    return written