"""Tagged animation state: either idle or animating exactly one move."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from .moves import Move

QUARTER_TURN_DEG = 90.0


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Animating:
    move: Move
    angle: float = 0.0

    @property
    def complete(self) -> bool:
        return self.angle >= QUARTER_TURN_DEG

    @property
    def progress(self) -> float:
        return min(self.angle / QUARTER_TURN_DEG, 1.0)

    def advanced(self, step_deg: float) -> Animating:
        return replace(self, angle=self.angle + step_deg)


AnimationState = Union[Idle, Animating]

IDLE = Idle()
