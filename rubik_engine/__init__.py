"""Rubik 3x3x3 cubie state engine."""

from .config import EngineConfig, load_config
from .cubie import Cubie
from .engine import CubeEngine
from .faces import Axis, Color, Face
from .moves import Move, make_move
from .solved_check import is_solved
from .state_codec import CubeInvariantError, MoveValidationError

__all__ = [
    "Axis",
    "Color",
    "CubeEngine",
    "CubeInvariantError",
    "Cubie",
    "EngineConfig",
    "Face",
    "Move",
    "MoveValidationError",
    "is_solved",
    "load_config",
    "make_move",
]
