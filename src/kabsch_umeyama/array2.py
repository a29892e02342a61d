from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np


class LengthMismatchError(ValueError):
    """Raised when point data does not fill the declared rows x cols shape."""


@dataclass(frozen=True, eq=False)
class Array2:
    """Row-major (R, C) point set of float64 values."""

    values: np.ndarray  # (R, C)

    def __post_init__(self) -> None:
        arr = np.array(self.values, dtype=np.float64)
        if arr.ndim != 2:
            raise ValueError(f"Expected a 2-D point set, got shape {arr.shape}")
        arr.setflags(write=False)
        object.__setattr__(self, "values", arr)

    @classmethod
    def from_nested(cls, rows: Sequence[Sequence[float]]) -> Array2:
        rows = [list(r) for r in rows]
        if not rows:
            raise LengthMismatchError("Nested point set has no rows")
        ncols = len(rows[0])
        for i, r in enumerate(rows):
            if len(r) != ncols:
                raise LengthMismatchError(f"Row {i} has {len(r)} values, expected {ncols}")
        return cls(np.asarray(rows, dtype=np.float64).reshape(len(rows), ncols))

    @classmethod
    def from_flat(cls, values: Sequence[float] | np.ndarray, rows: int, cols: int) -> Array2:
        flat = np.asarray(values, dtype=np.float64).reshape(-1)
        if flat.size != rows * cols:
            raise LengthMismatchError(
                f"The lengths do not match: got {flat.size} values for a {rows}x{cols} point set"
            )
        # flat index i -> row i // cols, column i % cols
        return cls(flat.reshape(rows, cols))

    @property
    def nrows(self) -> int:
        return int(self.values.shape[0])

    @property
    def ncols(self) -> int:
        return int(self.values.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return self.nrows, self.ncols

    def to_matrix(self) -> np.ndarray:
        return self.values.copy()

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        if dtype is None:
            return self.values.copy()
        return self.values.astype(dtype)

    def __len__(self) -> int:
        return self.nrows


def as_matrix(points: Array2 | np.ndarray | Sequence[Sequence[float]]) -> np.ndarray:
    """Return a fresh (R, C) float64 copy of *points*."""
    if isinstance(points, Array2):
        return points.to_matrix()
    if not isinstance(points, np.ndarray):
        points = Array2.from_nested(points).values
    arr = np.array(points, dtype=np.float64)
    if arr.ndim != 2:
        raise ValueError(f"Expected an (R, C) point set, got shape {arr.shape}")
    if arr.shape[0] == 0 or arr.shape[1] == 0:
        raise ValueError(f"Point set must have at least one row and one column, got shape {arr.shape}")
    return arr
