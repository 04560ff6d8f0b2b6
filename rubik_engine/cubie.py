"""Single unit sub-cube of the 3x3x3 puzzle."""

from __future__ import annotations

from dataclasses import dataclass

from .faces import FACE_AXIS, FACE_OUTER_LAYER, GRID_VALUES, N_FACES, SOLVED_FACE_COLOR, Color, Face

Position = tuple[int, int, int]


@dataclass(frozen=True)
class Cubie:
    """Position on the grid and one color per face direction.

    Visibility is never stored: a face is visible iff the coordinate on its
    axis equals the face's outer layer at the current position.
    """

    position: Position
    colors: tuple[Color, ...]

    def __post_init__(self):
        if len(self.position) != 3 or any(isinstance(v, bool) or v not in GRID_VALUES for v in self.position):
            raise ValueError(f"Cubie position must lie in {{-1, 0, 1}}^3, got {self.position}")
        if len(self.colors) != N_FACES:
            raise ValueError(f"Cubie needs {N_FACES} colors, got {len(self.colors)}")

    @classmethod
    def solved(cls, position: Position) -> Cubie:
        x, y, z = position
        visible = visibility(position)
        colors = tuple(cls.initial_color(x, y, z, f) if visible[f] else Color.BLACK for f in Face)
        return cls(position=tuple(position), colors=colors)

    @staticmethod
    def initial_color(x: int, y: int, z: int, face: Face) -> Color:
        """Solved color of ``face``; depends on the face alone, position only gates visibility."""
        return SOLVED_FACE_COLOR[Face(face)]

    @property
    def visible(self) -> tuple[bool, ...]:
        return visibility(self.position)

    def stickers(self) -> list[tuple[Face, Color]]:
        return [(f, self.colors[f]) for f in Face if self.visible[f]]

    def color(self, face: Face) -> Color:
        return self.colors[Face(face)]


def visibility(position: Position) -> tuple[bool, ...]:
    return tuple(position[FACE_AXIS[f]] == FACE_OUTER_LAYER[f] for f in Face)


def solved_cubies() -> list[Cubie]:
    """All 27 cubies in solved state, x-major then y then z."""
    return [Cubie.solved((x, y, z)) for x in GRID_VALUES for y in GRID_VALUES for z in GRID_VALUES]
