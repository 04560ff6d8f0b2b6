"""Face, axis and color tables plus integer 90-degree rotation helpers."""

from __future__ import annotations

from enum import IntEnum

import numpy as np


class Face(IntEnum):
    RIGHT = 0  # +X
    LEFT = 1  # -X
    TOP = 2  # +Y
    BOTTOM = 3  # -Y
    FRONT = 4  # +Z
    BACK = 5  # -Z


class Axis(IntEnum):
    X = 0
    Y = 1
    Z = 2


class Color(IntEnum):
    RED = 0
    ORANGE = 1
    WHITE = 2
    YELLOW = 3
    GREEN = 4
    BLUE = 5
    BLACK = 6  # inner face, not visible


N_FACES = 6
GRID_VALUES = (-1, 0, 1)
STICKER_COLORS = tuple(c for c in Color if c is not Color.BLACK)

FACE_NORMALS: dict[Face, tuple[int, int, int]] = {
    Face.RIGHT: (1, 0, 0),
    Face.LEFT: (-1, 0, 0),
    Face.TOP: (0, 1, 0),
    Face.BOTTOM: (0, -1, 0),
    Face.FRONT: (0, 0, 1),
    Face.BACK: (0, 0, -1),
}

NORMAL_TO_FACE: dict[tuple[int, int, int], Face] = {n: f for f, n in FACE_NORMALS.items()}

FACE_AXIS: dict[Face, Axis] = {
    Face.RIGHT: Axis.X,
    Face.LEFT: Axis.X,
    Face.TOP: Axis.Y,
    Face.BOTTOM: Axis.Y,
    Face.FRONT: Axis.Z,
    Face.BACK: Axis.Z,
}

# Coordinate on the face axis where the face is exposed.
FACE_OUTER_LAYER: dict[Face, int] = {f: FACE_NORMALS[f][FACE_AXIS[f]] for f in Face}

# Faces whose outward normal points along the negative axis: clockwise seen
# from outside is the opposite sense of the axis formula.
MIRRORED_FACES = frozenset({Face.LEFT, Face.BOTTOM, Face.BACK})

SOLVED_FACE_COLOR: dict[Face, Color] = {
    Face.RIGHT: Color.RED,
    Face.LEFT: Color.ORANGE,
    Face.TOP: Color.WHITE,
    Face.BOTTOM: Color.YELLOW,
    Face.FRONT: Color.GREEN,
    Face.BACK: Color.BLUE,
}


def perceived_clockwise(face: Face, clockwise: bool) -> bool:
    """Map a clockwise flag seen from outside ``face`` to the axis formula sense."""
    return (not clockwise) if face in MIRRORED_FACES else bool(clockwise)


def rotation_matrix(axis: Axis, clockwise: bool) -> np.ndarray:
    """Return the integer matrix for a quarter turn about ``axis``.

    Clockwise is a -90 degree right-hand rotation about the positive axis, so
    X clockwise maps (x, y, z) to (x, z, -y).
    """
    if axis == Axis.X:
        if clockwise:
            return np.array([[1, 0, 0], [0, 0, 1], [0, -1, 0]], dtype=np.int8)
        return np.array([[1, 0, 0], [0, 0, -1], [0, 1, 0]], dtype=np.int8)
    if axis == Axis.Y:
        if clockwise:
            return np.array([[0, 0, -1], [0, 1, 0], [1, 0, 0]], dtype=np.int8)
        return np.array([[0, 0, 1], [0, 1, 0], [-1, 0, 0]], dtype=np.int8)
    if axis == Axis.Z:
        if clockwise:
            return np.array([[0, 1, 0], [-1, 0, 0], [0, 0, 1]], dtype=np.int8)
        return np.array([[0, -1, 0], [1, 0, 0], [0, 0, 1]], dtype=np.int8)
    raise ValueError(f"Unsupported rotation axis: {axis}")


def rotate_vec90(vec: tuple[int, int, int], axis: Axis, clockwise: bool) -> tuple[int, int, int]:
    out = rotation_matrix(axis, clockwise) @ np.asarray(vec, dtype=np.int8)
    return tuple(int(v) for v in out)


def face_destination(face: Face, axis: Axis, clockwise: bool) -> Face | None:
    """Face whose normal equals the rotated normal of ``face``, or None."""
    return NORMAL_TO_FACE.get(rotate_vec90(FACE_NORMALS[face], axis, clockwise))
