"""Rotation commands: validation, inverse and random outer-layer moves."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .faces import FACE_AXIS, FACE_OUTER_LAYER, GRID_VALUES, Axis, Face, perceived_clockwise
from .state_codec import MoveValidationError


@dataclass(frozen=True)
class Move:
    """Quarter turn of the slice at ``layer`` on ``face``'s axis.

    ``clockwise`` is judged looking at ``face`` from outside the cube.
    """

    face: Face
    layer: int
    clockwise: bool

    @property
    def axis(self) -> Axis:
        return FACE_AXIS[self.face]

    @property
    def axis_clockwise(self) -> bool:
        """Sense to feed the axis rotation formula."""
        return perceived_clockwise(self.face, self.clockwise)

    def inverse(self) -> Move:
        return Move(self.face, self.layer, not self.clockwise)

    @property
    def label(self) -> str:
        return f"face={self.face.name} layer={self.layer} dir={'CW' if self.clockwise else 'CCW'}"


def _coerce_face(face: Face | int | str) -> Face:
    if isinstance(face, Face):
        return face
    if isinstance(face, str):
        try:
            return Face[face.strip().upper()]
        except KeyError as exc:
            raise MoveValidationError(f"Unknown face name: {face!r}") from exc
    if isinstance(face, (int, np.integer)) and not isinstance(face, bool):
        try:
            return Face(int(face))
        except ValueError as exc:
            raise MoveValidationError(f"Face index must be in range 0..5, got {face}") from exc
    raise MoveValidationError(f"Face must be a Face, index or name, got {type(face).__name__}")


def make_move(face: Face | int | str, layer: int, clockwise: bool) -> Move:
    """Validate raw request arguments and build a Move.

    Every layer in {-1, 0, 1} is accepted for every face, middle slices included.
    """
    face = _coerce_face(face)
    if isinstance(layer, bool) or not isinstance(layer, (int, np.integer)) or int(layer) not in GRID_VALUES:
        raise MoveValidationError(f"Layer must be one of -1, 0, 1, got {layer!r}")
    if not isinstance(clockwise, (bool, np.bool_)):
        raise MoveValidationError(f"clockwise must be a bool, got {type(clockwise).__name__}")
    return Move(face=face, layer=int(layer), clockwise=bool(clockwise))


def outer_move(face: Face, clockwise: bool) -> Move:
    face = _coerce_face(face)
    return Move(face=face, layer=FACE_OUTER_LAYER[face], clockwise=bool(clockwise))


def random_moves(count: int, rng: np.random.Generator) -> list[Move]:
    """Uniform face, that face's outer layer, uniform direction."""
    if isinstance(count, bool) or not isinstance(count, (int, np.integer)) or count < 0:
        raise MoveValidationError("Random move count must be a non-negative integer")

    moves: list[Move] = []
    for _ in range(int(count)):
        face = Face(int(rng.integers(0, len(Face))))
        clockwise = bool(rng.integers(0, 2) == 0)
        moves.append(outer_move(face, clockwise))
    return moves
