from __future__ import annotations

from pathlib import Path

import pytest

from kabsch_umeyama.config import AlignConfig, load_config


def test_load_config_resolves_relative_paths(tmp_path):
    cfg_path = tmp_path / "align.yaml"
    cfg_path.write_text(
        "src: a.npy\ndst: /data/b.npz\ndst_key: centers\nestimate_scale: false\noutput: out/t.txt\n",
        encoding="utf-8",
    )
    cfg = load_config(cfg_path)
    assert cfg.src == tmp_path / "a.npy"
    assert cfg.dst == Path("/data/b.npz")
    assert cfg.dst_key == "centers"
    assert cfg.src_key == "points"
    assert cfg.estimate_scale is False
    assert cfg.output == tmp_path / "out" / "t.txt"
    assert cfg.plot is None


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_load_config_unknown_key(tmp_path):
    cfg_path = tmp_path / "align.yaml"
    cfg_path.write_text("src: a.npy\ndst: b.npy\nrank_tol: 0.1\n", encoding="utf-8")
    with pytest.raises(TypeError):
        load_config(cfg_path)


def test_config_validates_precision():
    with pytest.raises(ValueError):
        AlignConfig(src="a.npy", dst="b.npy", precision=0)
    cfg = AlignConfig(src="a.npy", dst="b.npy")
    assert isinstance(cfg.src, Path)
    assert cfg.estimate_scale is True
