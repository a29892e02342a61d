from __future__ import annotations

from pathlib import Path

import numpy as np

TEXT_EXTS = (".txt", ".csv", ".xyz")


def load_points(path: str | Path, *, key: str = "points") -> np.ndarray:
    """Load an (N, C) float64 point set from .npy, .npz (under *key*) or a text table."""

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Point file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".npy":
        arr = np.load(path)
    elif suffix == ".npz":
        z = np.load(path)
        if key not in z:
            raise KeyError(f"NPZ missing key '{key}': {path}")
        arr = z[key]
    elif suffix in TEXT_EXTS:
        delimiter = "," if suffix == ".csv" else None
        arr = np.loadtxt(path, delimiter=delimiter, ndmin=2)
    else:
        raise ValueError(f"Unsupported point file type '{suffix}': {path}")

    arr = np.asarray(arr, dtype=np.float64)
    if arr.ndim == 1:
        arr = arr.reshape(1, -1)
    if arr.ndim != 2:
        raise ValueError(f"Expected (N,C) points in {path}, got shape {arr.shape}")
    return arr


def save_transform(path: str | Path, T: np.ndarray, *, precision: int = 6) -> Path:
    """Write a homogeneous transform as .npy or as a whitespace text matrix."""

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    T = np.asarray(T, dtype=np.float64)
    if path.suffix.lower() == ".npy":
        np.save(path, T)
    else:
        np.savetxt(path, T, fmt=f"%.{precision}g")
    return path
