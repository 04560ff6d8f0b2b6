"""Quarter-turn transform of a cube slice: positions and sticker colors."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .cubie import Cubie
from .faces import FACE_AXIS, Axis, Color, Face, face_destination, rotation_matrix
from .moves import Move
from .state_codec import CubeInvariantError


def _build_face_remap(axis: Axis, clockwise: bool) -> tuple[Face, ...]:
    """Destination face for each source face under one quarter turn."""
    remap: list[Face] = []
    for face in Face:
        dest = face_destination(face, axis, clockwise)
        if dest is None:
            raise CubeInvariantError(
                f"No destination face for {face.name} under axis={axis.name} clockwise={clockwise}"
            )
        remap.append(dest)
    if len(set(remap)) != len(remap):
        raise CubeInvariantError(f"Face remap is not a permutation: {remap}")
    return tuple(remap)


FACE_REMAP: dict[tuple[Axis, bool], tuple[Face, ...]] = {
    (axis, cw): _build_face_remap(axis, cw) for axis in Axis for cw in (True, False)
}


def face_cubies(cubies: Sequence[Cubie], face: Face, layer: int) -> list[int]:
    """Indices of cubies in the slice at ``layer`` on ``face``'s axis."""
    axis = FACE_AXIS[Face(face)]
    return [i for i, c in enumerate(cubies) if c.position[axis] == layer]


def slice_center(move: Move) -> np.ndarray:
    center = np.zeros(3, dtype=np.int8)
    center[move.axis] = move.layer
    return center


def rotate_position(position: tuple[int, int, int], move: Move) -> tuple[int, int, int]:
    rot = rotation_matrix(move.axis, move.axis_clockwise)
    center = slice_center(move)
    rel = np.asarray(position, dtype=np.int8) - center
    out = rot @ rel + center
    return tuple(int(round(v)) for v in out)


def remap_colors(colors: Sequence[Color], move: Move) -> tuple[Color, ...]:
    """Each sticker follows the face it is painted on."""
    remap = FACE_REMAP[(move.axis, move.axis_clockwise)]
    new_colors: list[Color | None] = [None] * len(colors)
    for face, color in zip(Face, colors):
        new_colors[remap[face]] = color
    if any(c is None for c in new_colors):
        raise CubeInvariantError(f"Color remap dropped a sticker for {move.label}")
    return tuple(new_colors)


def apply_move(cubies: Sequence[Cubie], move: Move) -> tuple[list[Cubie], list[int]]:
    """Return the post-move cubie list and the indices that moved.

    ``cubies`` is only read; untouched cubies are carried over as the same objects.
    """
    affected = face_cubies(cubies, move.face, move.layer)
    result = list(cubies)
    for idx in affected:
        src = cubies[idx]
        result[idx] = Cubie(position=rotate_position(src.position, move), colors=remap_colors(src.colors, move))
    return result, affected


def apply_moves(cubies: Sequence[Cubie], moves: Sequence[Move]) -> list[Cubie]:
    out = list(cubies)
    for move in moves:
        out, _ = apply_move(out, move)
    return out
