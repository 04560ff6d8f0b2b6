"""Solved-state and invariant checks for the cubie model."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .cubie import Cubie
from .faces import GRID_VALUES, STICKER_COLORS, Color, Face
from .state_codec import CubeInvariantError, encode_colors, encode_positions, encode_visibility, sticker_counts

STICKERS_PER_COLOR = 9
NUM_CUBIES = 27


def is_solved(cubies: Sequence[Cubie]) -> bool:
    """True iff each outer face shows a single color.

    Does not assume the centers sit in their home spots, so a cube turned as
    a whole through middle slices still counts as solved.
    """
    colors = encode_colors(cubies)
    visible = encode_visibility(cubies)
    seen: set[int] = set()
    for face in Face:
        face_colors = colors[visible[:, face], face]
        if face_colors.size != STICKERS_PER_COLOR:
            return False
        first = int(face_colors[0])
        if first == Color.BLACK or not np.all(face_colors == first):
            return False
        seen.add(first)
    return len(seen) == len(STICKER_COLORS)


def validate_cube(cubies: Sequence[Cubie]) -> None:
    """Raise CubeInvariantError unless the cube is a consistent 3x3x3 state."""
    if len(cubies) != NUM_CUBIES:
        raise CubeInvariantError(f"Cube must have {NUM_CUBIES} cubies, got {len(cubies)}")

    positions = {tuple(int(v) for v in p) for p in encode_positions(cubies)}
    expected = {(x, y, z) for x in GRID_VALUES for y in GRID_VALUES for z in GRID_VALUES}
    if positions != expected:
        raise CubeInvariantError("Cubie positions do not cover the 3x3x3 grid exactly once")

    colors = encode_colors(cubies)
    visible = encode_visibility(cubies)
    if np.any(colors[~visible] != int(Color.BLACK)):
        raise CubeInvariantError("A hidden face carries a sticker color")

    counts = sticker_counts(cubies)
    if counts[int(Color.BLACK)] != 0:
        raise CubeInvariantError("A visible face is missing its sticker")
    for color in STICKER_COLORS:
        if counts[int(color)] != STICKERS_PER_COLOR:
            raise CubeInvariantError(
                f"Color {color.name} appears {int(counts[int(color)])} times, expected {STICKERS_PER_COLOR}"
            )
