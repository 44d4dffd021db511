"""Point probes that log one field at one grid cell against time."""

from __future__ import annotations

from pathlib import Path

from maccormack.physics import FIELD_NAMES, PrimitiveState


class TimeSeriesProbe:
    """Appends 'time,value' lines for one field sampled at one cell.

    The first record after creation or reset() replaces the file. Later
    records are appended to it. Without a row or column the probe samples
    the centre cell (ny // 2, nx // 2) of whatever state it is given.
    """

    def __init__(self, path, field: str = "p", row: int | None = None,
                 col: int | None = None) -> None:
        if field not in FIELD_NAMES:
            known = ", ".join(FIELD_NAMES)
            raise ValueError(f"unknown field {field!r}; choose from: {known}")
        if row is not None and row < 0:
            raise IndexError("row must not be negative")
        if col is not None and col < 0:
            raise IndexError("col must not be negative")
        self.path = Path(path)
        self.field = field
        self.row = row
        self.col = col
        self._fresh = True

    def _position(self, state: PrimitiveState) -> tuple[int, int]:
        ny, nx = state.shape
        row = ny // 2 if self.row is None else self.row
        col = nx // 2 if self.col is None else self.col
        if row >= ny or col >= nx:
            raise IndexError(f"cell ({row}, {col}) lies outside a grid of shape {(ny, nx)}")
        return row, col

    def record(self, time: float, state: PrimitiveState) -> float:
        """Write the sampled value at the given time and return that value."""
        row, col = self._position(state)
        value = float(state.fields()[self.field][row, col])
        mode = "w" if self._fresh else "a"
        with self.path.open(mode, encoding="ascii") as handle:
            handle.write(f"{float(time):f},{value:f}\n")
        self._fresh = False
        return value

    def reset(self) -> None:
        """Make the next record start the file afresh."""
        self._fresh = True


def read_time_series(path) -> list[tuple[float, float]]:
    """Read the (time, value) pairs a probe has written."""
    pairs = []
    for number, line in enumerate(Path(path).read_text(encoding="ascii").splitlines(), 1):
        if not line.strip():
            continue
        parts = line.split(",")
        if len(parts) != 2:
            raise ValueError(f"{path}:{number}: expected 'time,value'")
        try:
            pairs.append((float(parts[0]), float(parts[1])))
        except ValueError:
            raise ValueError(f"{path}:{number}: values must be numbers") from None
    return pairs