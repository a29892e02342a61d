from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml


@dataclass
class AlignConfig:
    """Typed alignment run configuration loaded from a YAML file."""

    # Paths
    src: Path
    dst: Path
    output: Path | None = None
    plot: Path | None = None

    # NPZ keys
    src_key: str = "points"
    dst_key: str = "points"

    estimate_scale: bool = True
    precision: int = 6

    def __post_init__(self) -> None:
        self.src = Path(self.src)
        self.dst = Path(self.dst)
        if self.output is not None:
            self.output = Path(self.output)
        if self.plot is not None:
            self.plot = Path(self.plot)
        if self.precision < 1:
            raise ValueError(f"precision must be >= 1, got {self.precision}")


def load_config(path: Path) -> AlignConfig:
    """Load a YAML config file into an :class:`AlignConfig`.

    Relative paths in the file are resolved against the config's directory.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    for k in ("src", "dst", "output", "plot"):
        v = raw.get(k)
        if v is not None and not Path(v).is_absolute():
            raw[k] = path.parent / v
    return AlignConfig(**raw)
