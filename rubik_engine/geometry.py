"""Placement transforms handed to the rendering side."""

from __future__ import annotations

import math

import numpy as np

from .faces import Axis, Color
from .moves import Move

CUBIE_SIZE = 0.25
CUBIE_GAP = 0.03

COLOR_RGBA: dict[Color, tuple[float, float, float, float]] = {
    Color.RED: (1.0, 0.0, 0.0, 1.0),
    Color.ORANGE: (1.0, 0.5, 0.0, 1.0),
    Color.WHITE: (1.0, 1.0, 1.0, 1.0),
    Color.YELLOW: (1.0, 1.0, 0.0, 1.0),
    Color.GREEN: (0.0, 1.0, 0.0, 1.0),
    Color.BLUE: (0.0, 0.0, 1.0, 1.0),
    Color.BLACK: (0.0, 0.0, 0.0, 1.0),
}


def translate(offset) -> np.ndarray:
    mat = np.eye(4, dtype=np.float64)
    mat[:3, 3] = np.asarray(offset, dtype=np.float64)
    return mat


def scale(factor: float) -> np.ndarray:
    return np.diag([factor, factor, factor, 1.0]).astype(np.float64)


def axis_rotation(axis: Axis, angle_deg: float) -> np.ndarray:
    """4x4 right-hand rotation about a positive world axis."""
    a = math.radians(angle_deg)
    c = math.cos(a)
    s = math.sin(a)
    mat = np.eye(4, dtype=np.float64)
    if axis == Axis.X:
        mat[:3, :3] = [[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]]
    elif axis == Axis.Y:
        mat[:3, :3] = [[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]]
    else:
        mat[:3, :3] = [[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]]
    return mat


def spacing(cubie_size: float = CUBIE_SIZE, gap: float = CUBIE_GAP) -> float:
    return cubie_size + gap


def placement_transform(position, cubie_size: float = CUBIE_SIZE, gap: float = CUBIE_GAP) -> np.ndarray:
    s = spacing(cubie_size, gap)
    return translate(np.asarray(position, dtype=np.float64) * s) @ scale(cubie_size)


def rotation_center(move: Move, spacing_: float) -> np.ndarray:
    center = np.zeros(3, dtype=np.float64)
    center[move.axis] = move.layer * spacing_
    return center


def signed_angle(move: Move, angle_deg: float) -> float:
    # Clockwise in the axis formula is a negative turn about the positive axis.
    return -angle_deg if move.axis_clockwise else angle_deg


def animated_transform(base: np.ndarray, move: Move, angle_deg: float, spacing_: float) -> np.ndarray:
    """Rotate a placement transform part way around the moving slice's center."""
    center = rotation_center(move, spacing_)
    rot = axis_rotation(move.axis, signed_angle(move, angle_deg))
    return translate(center) @ rot @ translate(-center) @ base
