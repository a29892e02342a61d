from __future__ import annotations

import numpy as np


def _as_transform(T: np.ndarray) -> tuple[np.ndarray, int]:
    T = np.asarray(T, dtype=np.float64)
    if T.ndim != 2 or T.shape[0] != T.shape[1] or T.shape[0] < 2:
        raise ValueError(f"Expected a square homogeneous transform, got shape {T.shape}")
    return T, T.shape[0] - 1


def apply_transform(points: np.ndarray, T: np.ndarray) -> np.ndarray:
    """Map (N, C) points through a (C+1, C+1) homogeneous transform."""
    T, dim = _as_transform(T)
    P = np.asarray(points, dtype=np.float64)
    if P.ndim != 2 or P.shape[1] != dim:
        raise ValueError(f"Expected points of shape (N,{dim}), got {P.shape}")
    return (T[:dim, :dim] @ P.T).T + T[:dim, dim].reshape(1, dim)


def split_transform(T: np.ndarray) -> tuple[float, np.ndarray, np.ndarray]:
    """Split a similarity transform into ``(s, R, t)``."""
    T, dim = _as_transform(T)
    sR = T[:dim, :dim]
    s = float(np.linalg.norm(sR, axis=0).mean())
    if s == 0:
        raise ValueError("Transform has a zero linear block")
    return s, sR / s, T[:dim, dim].copy()


def compose(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Transform applying *b* first, then *a*."""
    a, dim_a = _as_transform(a)
    b, dim_b = _as_transform(b)
    if dim_a != dim_b:
        raise ValueError(f"Cannot compose {a.shape} with {b.shape}")
    return a @ b


def invert(T: np.ndarray) -> np.ndarray:
    """Closed-form inverse of a similarity transform."""
    s, R, t = split_transform(T)
    dim = R.shape[0]
    out = np.eye(dim + 1, dtype=np.float64)
    out[:dim, :dim] = R.T / s
    out[:dim, dim] = -(R.T @ t) / s
    return out


def apply_to_pose(pose: np.ndarray, T: np.ndarray) -> np.ndarray:
    """Apply a similarity to a camera-to-world style pose (rotation unaffected by scale; position scaled)."""
    s, R, t = split_transform(T)
    dim = R.shape[0]
    P = np.asarray(pose, dtype=np.float64).reshape(dim + 1, dim + 1)
    out = np.eye(dim + 1, dtype=np.float64)
    out[:dim, :dim] = R @ P[:dim, :dim]
    out[:dim, dim] = s * (R @ P[:dim, dim]) + t
    return out
