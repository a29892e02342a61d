from __future__ import annotations

import numpy as np
import pytest

from kabsch_umeyama.points_io import load_points, save_transform


def test_load_npy(tmp_path):
    P = np.arange(12, dtype=np.float64).reshape(4, 3)
    np.save(tmp_path / "p.npy", P)
    np.testing.assert_array_equal(load_points(tmp_path / "p.npy"), P)


def test_load_npz_key(tmp_path):
    P = np.ones((3, 2))
    np.savez(tmp_path / "p.npz", points=P, other=P * 2)
    np.testing.assert_array_equal(load_points(tmp_path / "p.npz"), P)
    np.testing.assert_array_equal(load_points(tmp_path / "p.npz", key="other"), P * 2)
    with pytest.raises(KeyError, match="missing"):
        load_points(tmp_path / "p.npz", key="nope")


def test_load_text_tables(tmp_path):
    (tmp_path / "p.csv").write_text("1,2,3\n4,5,6\n", encoding="utf-8")
    (tmp_path / "p.xyz").write_text("1 2 3\n", encoding="utf-8")
    np.testing.assert_array_equal(load_points(tmp_path / "p.csv"), [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    np.testing.assert_array_equal(load_points(tmp_path / "p.xyz"), [[1.0, 2.0, 3.0]])


def test_load_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_points(tmp_path / "missing.npy")
    (tmp_path / "p.ply").write_text("", encoding="utf-8")
    with pytest.raises(ValueError, match="Unsupported"):
        load_points(tmp_path / "p.ply")


def test_save_transform(tmp_path):
    T = np.eye(3)
    T[0, 2] = 0.125
    out_npy = save_transform(tmp_path / "out" / "t.npy", T)
    np.testing.assert_array_equal(np.load(out_npy), T)
    out_txt = save_transform(tmp_path / "t.txt", T, precision=4)
    np.testing.assert_allclose(np.loadtxt(out_txt), T)
