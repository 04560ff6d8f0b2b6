"""Error types and codec helpers for cube state."""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from .cubie import Cubie
from .faces import FACE_AXIS, N_FACES, Color, Face

CubeSnapshot = tuple[tuple[tuple[int, int, int], tuple[int, ...]], ...]


class MoveValidationError(ValueError):
    """Raised when a rotation request is malformed."""


class CubeInvariantError(RuntimeError):
    """Raised when the cube model reaches a state that should be unreachable."""


def snapshot(cubies: Sequence[Cubie]) -> CubeSnapshot:
    """Hashable (position, colors) per cubie, in index order."""
    return tuple((c.position, tuple(int(v) for v in c.colors)) for c in cubies)


def encode_colors(cubies: Sequence[Cubie]) -> np.ndarray:
    """Return color ids with shape (n_cubies, 6)."""
    arr = np.empty((len(cubies), N_FACES), dtype=np.int8)
    for i, cubie in enumerate(cubies):
        arr[i] = [int(v) for v in cubie.colors]
    return arr


def encode_positions(cubies: Sequence[Cubie]) -> np.ndarray:
    return np.array([c.position for c in cubies], dtype=np.int8).reshape(len(cubies), 3)


def encode_visibility(cubies: Sequence[Cubie]) -> np.ndarray:
    return np.array([c.visible for c in cubies], dtype=bool).reshape(len(cubies), N_FACES)


def sticker_counts(cubies: Sequence[Cubie]) -> np.ndarray:
    """Count visible stickers per color id (index 6 counts visible BLACK faces)."""
    colors = encode_colors(cubies)
    visible = encode_visibility(cubies)
    return np.bincount(colors[visible].astype(np.int64), minlength=len(Color))


def cubie_to_json(index: int, cubie: Cubie) -> dict[str, Any]:
    return {
        "index": index,
        "position": list(cubie.position),
        "colors": [Color(c).name for c in cubie.colors],
        "visible": [bool(v) for v in cubie.visible],
    }


def cubies_to_json(cubies: Sequence[Cubie]) -> list[dict[str, Any]]:
    return [cubie_to_json(i, c) for i, c in enumerate(cubies)]


def face_grid(cubies: Sequence[Cubie], face: Face) -> np.ndarray:
    """3x3 color ids of the stickers currently on ``face``, indexed by the two other coordinates."""
    face = Face(face)
    grid = np.full((3, 3), int(Color.BLACK), dtype=np.int8)
    others = [a for a in range(3) if a != FACE_AXIS[face]]
    for cubie in cubies:
        if cubie.visible[face]:
            row = cubie.position[others[0]] + 1
            col = cubie.position[others[1]] + 1
            grid[row, col] = int(cubie.colors[face])
    return grid
