"""Engine settings and YAML loading."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from .geometry import CUBIE_GAP, CUBIE_SIZE


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class EngineConfig:
    rotation_speed: float = 3.0  # degrees per tick
    cubie_size: float = CUBIE_SIZE
    cubie_gap: float = CUBIE_GAP
    random_moves: int = 20
    seed: int | None = None
    verbose: bool = False
    check_invariants: bool = True

    def __post_init__(self):
        for name in ("rotation_speed", "cubie_size", "cubie_gap"):
            if not _is_number(getattr(self, name)):
                raise ValueError(f"{name} must be a number")
        if self.rotation_speed <= 0:
            raise ValueError("rotation_speed must be > 0")
        if self.rotation_speed > 90:
            raise ValueError("rotation_speed must be <= 90")
        if self.cubie_size <= 0:
            raise ValueError("cubie_size must be > 0")
        if self.cubie_gap < 0:
            raise ValueError("cubie_gap must be >= 0")
        if not _is_int(self.random_moves) or self.random_moves < 0:
            raise ValueError("random_moves must be a non-negative integer")
        if self.seed is not None and not _is_int(self.seed):
            raise ValueError("seed must be an integer or null")
        for name in ("verbose", "check_invariants"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be true or false")

    @property
    def spacing(self) -> float:
        return self.cubie_size + self.cubie_gap


def config_from_dict(data: dict) -> EngineConfig:
    known = {f.name for f in fields(EngineConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown engine config keys: {', '.join(unknown)}")
    return EngineConfig(**data)


def load_config(path: str | Path) -> EngineConfig:
    """Load YAML config; an empty file gives the defaults."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Engine config must be a mapping, got {type(data).__name__}")
    # Allow the settings to sit under an "engine" key next to other sections.
    if "engine" in data and isinstance(data["engine"], dict):
        data = data["engine"]
    return config_from_dict(data)
