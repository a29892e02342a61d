from __future__ import annotations

import numpy as np
import pytest

from kabsch_umeyama.eval import _best_axes, plot_alignment, residuals, rmse
from kabsch_umeyama.umeyama import estimate


def test_rmse():
    A = np.zeros((2, 2))
    B = np.array([[3.0, 4.0], [0.0, 0.0]])
    assert rmse(A, B) == pytest.approx(np.sqrt(12.5))
    with pytest.raises(ValueError):
        rmse(A, np.zeros((3, 2)))


def test_residuals_vanish_for_exact_fit(rng, random_rotation):
    P = rng.normal(size=(10, 3))
    dst = 1.5 * P @ random_rotation(rng, 3).T + 2.0
    T = estimate(P, dst)
    np.testing.assert_allclose(residuals(P, dst, T), 0.0, atol=1e-9)


def test_best_axes():
    xyz = np.zeros((4, 3))
    xyz[:, 0] = [0.0, 1.0, 2.0, 3.0]
    xyz[:, 2] = [0.0, 2.0, 4.0, 8.0]
    assert _best_axes(xyz) == (0, 2)
    assert _best_axes(np.zeros((3, 1))) == (0, 0)


def test_plot_alignment(tmp_path, rng):
    pytest.importorskip("matplotlib")
    P = rng.normal(size=(8, 3))
    dst = P + 1.0
    T = estimate(P, dst)
    out = plot_alignment(P, dst, T, out_path=tmp_path / "plots" / "align.png", title="shift")
    assert out.exists()
    assert out.stat().st_size > 0
