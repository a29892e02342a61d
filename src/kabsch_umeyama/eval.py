from __future__ import annotations

from pathlib import Path

import numpy as np

from .transforms import apply_transform


def rmse(A: np.ndarray, B: np.ndarray) -> float:
    A = np.asarray(A, dtype=np.float64)
    B = np.asarray(B, dtype=np.float64)
    if A.shape != B.shape:
        raise ValueError(f"Expected matching shapes, got {A.shape} and {B.shape}")
    return float(np.sqrt(np.mean(np.sum((A - B) ** 2, axis=1))))


def residuals(src: np.ndarray, dst: np.ndarray, T: np.ndarray) -> np.ndarray:
    """Per-point Euclidean distance between T(src) and dst."""
    aligned = apply_transform(src, T)
    return np.linalg.norm(aligned - np.asarray(dst, dtype=np.float64), axis=1)


def _best_axes(xyz: np.ndarray) -> tuple[int, int]:
    """Pick the pair of axes with the largest spread for a 2-D view."""
    if xyz.shape[1] == 1:
        return 0, 0
    v = np.var(xyz, axis=0)
    best = (0, 1)
    best_score = -1.0
    for i in range(xyz.shape[1]):
        for j in range(i + 1, xyz.shape[1]):
            score = float(v[i] * v[j])
            if score > best_score:
                best, best_score = (i, j), score
    return best


def plot_alignment(
    src: np.ndarray,
    dst: np.ndarray,
    T: np.ndarray,
    *,
    out_path: Path,
    title: str | None = None,
) -> Path:
    """Write a PNG showing dst against the aligned src, with correspondence segments."""
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    from matplotlib.collections import LineCollection

    dst = np.asarray(dst, dtype=np.float64)
    aligned = apply_transform(src, T)
    i, j = _best_axes(dst)
    x_dst = dst[:, i]
    y_dst = dst[:, j] if i != j else np.zeros(dst.shape[0])
    x_al = aligned[:, i]
    y_al = aligned[:, j] if i != j else np.zeros(aligned.shape[0])

    fig, ax = plt.subplots(figsize=(8, 6))
    segs = np.stack([np.stack([x_al, y_al], axis=1), np.stack([x_dst, y_dst], axis=1)], axis=1)
    ax.add_collection(LineCollection(segs, colors="0.6", linewidths=0.8))
    ax.scatter(x_dst, y_dst, s=18, color="0.3", label="dst")
    ax.scatter(x_al, y_al, s=18, color="tab:blue", marker="x", label="aligned src")

    err = rmse(aligned, dst)
    head = title if title is not None else "alignment"
    ax.set_title(f"{head} | RMSE={err:.4g}\n(axes {i},{j}; N={dst.shape[0]})")
    ax.set_aspect("equal", adjustable="datalim")
    ax.grid(True, linestyle="--", linewidth=0.5)
    ax.legend(loc="best")

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return out_path
