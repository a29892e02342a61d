from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np

from .config import AlignConfig, load_config
from .eval import plot_alignment, residuals
from .points_io import load_points, save_transform
from .transforms import split_transform
from .umeyama import estimate


def _build_config(args: argparse.Namespace) -> AlignConfig:
    raw: dict[str, object] = {}
    if args.config is not None:
        cfg = load_config(args.config)
        raw.update(vars(cfg))

    overrides = {
        "src": args.src,
        "dst": args.dst,
        "output": args.output,
        "plot": args.plot,
        "src_key": args.src_key,
        "dst_key": args.dst_key,
        "estimate_scale": args.scale,
        "precision": args.precision,
    }
    raw.update({k: v for k, v in overrides.items() if v is not None})

    missing = [k for k in ("src", "dst") if raw.get(k) is None]
    if missing:
        raise ValueError(f"Missing required input(s): {', '.join(missing)} (pass on the command line or in --config)")
    return AlignConfig(**raw)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Estimate the similarity transform aligning SRC points onto DST points.")
    ap.add_argument("src", nargs="?", type=Path, default=None)
    ap.add_argument("dst", nargs="?", type=Path, default=None)
    ap.add_argument("--config", type=Path, default=None, help="YAML file with AlignConfig fields")
    ap.add_argument("--scale", action=argparse.BooleanOptionalAction, default=None,
                    help="estimate a uniform scale (default: on)")
    ap.add_argument("--src-key", default=None)
    ap.add_argument("--dst-key", default=None)
    ap.add_argument("-o", "--output", type=Path, default=None, help=".npy or text file for the transform")
    ap.add_argument("--plot", type=Path, default=None, help="PNG path for an alignment plot")
    ap.add_argument("--precision", type=int, default=None)
    args = ap.parse_args(argv)

    try:
        cfg = _build_config(args)
    except (ValueError, TypeError) as e:
        ap.error(str(e))

    src = load_points(cfg.src, key=cfg.src_key)
    dst = load_points(cfg.dst, key=cfg.dst_key)
    print(f"[align] src: {cfg.src} {src.shape}")
    print(f"[align] dst: {cfg.dst} {dst.shape}")
    print(f"[align] estimate_scale: {cfg.estimate_scale}")

    T = estimate(src, dst, cfg.estimate_scale)
    if T is None:
        print("[align] no solution: point correspondences are rank-deficient", file=sys.stderr)
        return 1

    s, _, t = split_transform(T)
    err = residuals(src, dst, T)
    with np.printoptions(precision=cfg.precision, suppress=True):
        print(f"[align] transform:\n{T}")
        print(f"[align] scale: {s:.{cfg.precision}g}  translation: {t}")
    print(f"[align] rmse: {float(np.sqrt(np.mean(err**2))):.{cfg.precision}g}  max: {float(err.max()):.{cfg.precision}g}")

    if cfg.output is not None:
        out = save_transform(cfg.output, T, precision=cfg.precision)
        print(f"[align] wrote: {out}")
    if cfg.plot is not None:
        out_plot = plot_alignment(src, dst, T, out_path=cfg.plot, title=f"{cfg.src.name} -> {cfg.dst.name}")
        print(f"[align] plot: {out_plot}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
