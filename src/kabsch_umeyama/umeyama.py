from __future__ import annotations

import numpy as np

from .array2 import Array2, as_matrix

# Singular values at or below this count as zero when ranking the covariance.
RANK_TOL = 1e-5

PointsLike = Array2 | np.ndarray | list


def _solve(
    src: PointsLike, dst: PointsLike, estimate_scale: bool
) -> tuple[float, np.ndarray, np.ndarray] | None:
    src = as_matrix(src)
    dst = as_matrix(dst)
    if src.shape != dst.shape:
        raise ValueError(f"Expected src,dst of matching shape (R,C), got {src.shape} and {dst.shape}")
    num, dim = src.shape

    src_mean = src.mean(axis=0)
    dst_mean = dst.mean(axis=0)
    src -= src_mean
    dst -= dst_mean
    src_demean = src
    dst_demean = dst

    A = (dst_demean.T @ src_demean) / num

    d = np.ones(dim, dtype=np.float64)
    if np.linalg.det(A) < 0:
        d[dim - 1] = -1.0

    try:
        U, S, Vt = np.linalg.svd(A)
    except np.linalg.LinAlgError:
        return None

    rank = int(np.linalg.matrix_rank(A, tol=RANK_TOL))
    if rank == 0:
        return None
    if rank == dim - 1:
        if np.linalg.det(U) * np.linalg.det(Vt) > 0:
            M = U @ Vt
        else:
            d_flip = d.copy()
            d_flip[dim - 1] = -1.0
            M = U @ np.diag(d_flip) @ Vt
    else:
        M = U @ np.diag(d) @ Vt

    if estimate_scale:
        var_src = float(src_demean.var(axis=0).sum())
        if not var_src > 0:
            return None
        scale = 1.0 / var_src * float(S @ d)
    else:
        scale = 1.0

    t = dst_mean - scale * (M @ src_mean)
    return scale, M, t


def umeyama(
    src: PointsLike, dst: PointsLike, estimate_scale: bool = True
) -> tuple[float, np.ndarray, np.ndarray] | None:
    """Fit the similarity mapping src -> dst:  dst ≈ s R src + t.

    Returns ``(s, R, t)`` with ``R`` a (C, C) rotation and ``t`` a (C,) vector,
    or ``None`` when the cross-covariance carries no usable direction (rank 0)
    or cannot be decomposed. ``s`` is exactly ``1.0`` when *estimate_scale* is
    false.
    """
    return _solve(src, dst, estimate_scale)


def estimate(src: PointsLike, dst: PointsLike, estimate_scale: bool = True) -> np.ndarray | None:
    """Estimate the (C+1, C+1) homogeneous similarity transform mapping src onto dst.

    Row ``i`` of *src* is paired with row ``i`` of *dst*. The top-left (C, C)
    block holds ``s * R``, column ``C`` holds the translation and the last row is
    ``[0, ..., 0, 1]``. ``None`` means the problem is not well-conditioned.
    """
    solved = _solve(src, dst, estimate_scale)
    if solved is None:
        return None
    s, R, t = solved

    dim = R.shape[0]
    T = np.eye(dim + 1, dtype=np.float64)
    T[:dim, :dim] = s * R
    T[:dim, dim] = t
    return T
