"""Core 3x3x3 cubie engine with a move queue and one animated rotation at a time."""

from __future__ import annotations

import threading
from collections import deque
from datetime import datetime
from typing import Any

import numpy as np

from .animation import IDLE, QUARTER_TURN_DEG, AnimationState, Animating, Idle
from .config import EngineConfig
from .cubie import Cubie, solved_cubies
from .faces import Axis, Face
from .geometry import animated_transform, placement_transform
from .moves import Move, make_move, random_moves
from .rotation import apply_move as rotate_slice
from .rotation import face_cubies
from .solved_check import is_solved, validate_cube
from .state_codec import CubeInvariantError, cubies_to_json


class CubeEngine:
    """Owns the 27 cubies and serializes every rotation through one state machine."""

    def __init__(self, config: EngineConfig | None = None):
        self.config = config or EngineConfig()
        self._lock = threading.RLock()
        self._rng = np.random.default_rng(self.config.seed)

        self._cubies: list[Cubie] = []
        self._transforms: list[np.ndarray] = []
        self._queue: deque[Move] = deque()
        self._state: AnimationState = IDLE
        self.move_count = 0
        self.history: list[Move] = []
        self.initialize()

    def _log(self, message: str) -> None:
        if not self.config.verbose:
            return
        ts = datetime.now().strftime("%H:%M:%S")
        print(f"[{ts}] {message}", flush=True)

    # --- lifecycle ---------------------------------------------------------

    def initialize(self) -> None:
        """Reset to the solved layout; drops any active or queued move."""
        with self._lock:
            self._cubies = solved_cubies()
            self._transforms = [self._placement(c) for c in self._cubies]
            self._queue.clear()
            self._state = IDLE
            self.move_count = 0
            self.history = []
            self._log("cube_reset solved")

    def reset(self) -> None:
        self.initialize()

    def _placement(self, cubie: Cubie) -> np.ndarray:
        return placement_transform(cubie.position, self.config.cubie_size, self.config.cubie_gap)

    # --- commands ----------------------------------------------------------

    def request_rotation(self, face: Face | int | str, layer: int, clockwise: bool) -> bool:
        """Start animating a move right away, bypassing the queue.

        Returns False without queuing anything if a move is already active.
        """
        move = make_move(face, layer, clockwise)
        with self._lock:
            if isinstance(self._state, Animating):
                self._log(f"rotation_rejected busy {move.label}")
                return False
            self._start(move)
            return True

    def apply_move(self, face: Face | int | str, layer: int, clockwise: bool) -> bool:
        """Apply a move instantly with no animation; False while a move is active."""
        move = make_move(face, layer, clockwise)
        with self._lock:
            if isinstance(self._state, Animating):
                self._log(f"rotation_rejected busy {move.label}")
                return False
            self._complete(move)
            return True

    def enqueue(self, face: Face | int | str, layer: int, clockwise: bool) -> Move:
        move = make_move(face, layer, clockwise)
        with self._lock:
            self._queue.append(move)
            self._log(f"move_queued {move.label} pending={len(self._queue)}")
            self._start_next_if_idle()
        return move

    def enqueue_random_moves(self, count: int | None = None) -> list[Move]:
        """Append random outer-layer moves; the first starts at once if idle."""
        if count is None:
            count = self.config.random_moves
        with self._lock:
            moves = random_moves(count, self._rng)
            self._log(f"queueing_random_moves count={len(moves)}")
            for i, move in enumerate(moves, start=1):
                self._queue.append(move)
                self._log(f"move_queued n={i} {move.label}")
            self._start_next_if_idle()
            return moves

    def tick(self) -> None:
        """Advance the active rotation by one step; finish it at 90 degrees."""
        with self._lock:
            if isinstance(self._state, Idle):
                self._start_next_if_idle()
                return

            state = self._state.advanced(self.config.rotation_speed)
            if not state.complete:
                self._state = state
                return

            self._state = IDLE
            self._complete(state.move)
            self._start_next_if_idle()

    def run_until_idle(self, max_ticks: int | None = None) -> int:
        """Tick until no move is active or queued; returns the number of ticks."""
        ticks = 0
        while self.is_animating or self.pending_moves:
            if max_ticks is not None and ticks >= max_ticks:
                break
            self.tick()
            ticks += 1
        return ticks

    # --- state machine internals --------------------------------------------

    def _start(self, move: Move) -> None:
        self._state = Animating(move=move)
        self._log(f"rotation_start {move.label}")

    def _start_next_if_idle(self) -> None:
        if isinstance(self._state, Idle) and self._queue:
            self._start(self._queue.popleft())

    def _complete(self, move: Move) -> None:
        new_cubies, affected = rotate_slice(self._cubies, move)
        if self.config.check_invariants:
            try:
                validate_cube(new_cubies)
            except CubeInvariantError as exc:
                print(f"cube_invariant_error {move.label}: {exc}", flush=True)
                raise

        self._cubies = new_cubies
        for idx in affected:
            self._transforms[idx] = self._placement(new_cubies[idx])
        self.move_count += 1
        self.history.append(move)
        self._log(f"rotation_done {move.label} moved={len(affected)} step={self.move_count}")

    # --- queries -------------------------------------------------------------

    @property
    def cubies(self) -> tuple[Cubie, ...]:
        with self._lock:
            return tuple(self._cubies)

    @property
    def transforms(self) -> list[np.ndarray]:
        """Resting placement transform per cubie."""
        with self._lock:
            return [t.copy() for t in self._transforms]

    def render_transforms(self) -> list[np.ndarray]:
        """Placement transforms with the in-flight slice rotated by the current angle."""
        with self._lock:
            out = [t.copy() for t in self._transforms]
            if isinstance(self._state, Animating):
                move = self._state.move
                angle = min(self._state.angle, QUARTER_TURN_DEG)
                for idx in face_cubies(self._cubies, move.face, move.layer):
                    out[idx] = animated_transform(out[idx], move, angle, self.config.spacing)
            return out

    @property
    def is_animating(self) -> bool:
        with self._lock:
            return isinstance(self._state, Animating)

    @property
    def animation_state(self) -> AnimationState:
        with self._lock:
            return self._state

    @property
    def active_move(self) -> Move | None:
        with self._lock:
            return self._state.move if isinstance(self._state, Animating) else None

    @property
    def rotation_angle(self) -> float:
        with self._lock:
            return self._state.angle if isinstance(self._state, Animating) else 0.0

    @property
    def progress(self) -> float:
        with self._lock:
            return self._state.progress if isinstance(self._state, Animating) else 0.0

    @property
    def rotation_axis(self) -> Axis | None:
        with self._lock:
            return self._state.move.axis if isinstance(self._state, Animating) else None

    @property
    def pending_moves(self) -> tuple[Move, ...]:
        with self._lock:
            return tuple(self._queue)

    def face_cubies(self, face: Face | int | str, layer: int) -> list[int]:
        move = make_move(face, layer, True)
        with self._lock:
            return face_cubies(self._cubies, move.face, move.layer)

    def is_solved(self) -> bool:
        with self._lock:
            return is_solved(self._cubies)

    def state_payload(self) -> dict[str, Any]:
        with self._lock:
            active = self.active_move
            return {
                "cubies": cubies_to_json(self._cubies),
                "animating": active is not None,
                "active_move": None
                if active is None
                else {"face": active.face.name, "layer": active.layer, "clockwise": active.clockwise},
                "progress": self.progress,
                "pending": len(self._queue),
                "step_count": self.move_count,
                "solved": is_solved(self._cubies),
            }
