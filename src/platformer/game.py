"""Game state machine: owns the session and runs one tick per frame."""

from __future__ import annotations

import random
from typing import Optional

from .collisions import TickReport, move_enemies, resolve_collisions
from .logger import get_logger
from .physics import apply_physics, handle_input
from .session import GameState, InputIntent, Player, Session
from .settings import LEVEL_COUNT, STARTING_LIVES
from .spawner import spawn_level

logger = get_logger(__name__)

KEY_LEFT = "ArrowLeft"
KEY_RIGHT = "ArrowRight"
KEY_JUMP = "Space"


class Game:
    def __init__(self, seed=None):
        rng = random.Random(seed) if seed is not None else None
        self.session = Session(rng=rng)
        self.intent = InputIntent()
        self._jump_held = False

    @property
    def state(self) -> GameState:
        return self.session.state

    @property
    def progress(self) -> float:
        return self.session.level / LEVEL_COUNT

    def _set_state(self, state: GameState) -> None:
        s = self.session
        if state is not s.state:
            logger.info("state %s -> %s (level %d, score %d, lives %d)",
                        s.state.value, state.value, s.level, s.score, s.lives)
        s.state = state

    # ----- user actions -----

    def start(self) -> None:
        """Start (or restart) a run from level 1, whatever the current state."""
        s = self.session
        s.player = Player.spawn()
        s.level = 1
        s.score = 0
        s.lives = STARTING_LIVES
        s.jump_count = 0
        s.ticks = 0
        spawn_level(s)
        self.intent = InputIntent()
        self._jump_held = False
        self._set_state(GameState.PLAYING)

    def toggle_pause(self) -> None:
        if self.session.state is GameState.PLAYING:
            self._set_state(GameState.PAUSED)
        elif self.session.state is GameState.PAUSED:
            self._set_state(GameState.PLAYING)

    def reset(self) -> None:
        self._set_state(GameState.START)

    # ----- keyboard -----

    def key_down(self, code: str) -> None:
        if code == KEY_LEFT:
            self.intent.left, self.intent.right = True, False
        elif code == KEY_RIGHT:
            self.intent.left, self.intent.right = False, True
        elif code == KEY_JUMP:
            # Auto-repeat sends key-downs without key-ups in between
            if not self._jump_held:
                self.intent.jump_requested = True
            self._jump_held = True

    def key_up(self, code: str) -> None:
        if code in (KEY_LEFT, KEY_RIGHT):
            self.intent.left = self.intent.right = False
        elif code == KEY_JUMP:
            self._jump_held = False

    # ----- frame -----

    def tick(self, intent: Optional[InputIntent] = None) -> Optional[TickReport]:
        """Run one simulation step; a no-op outside the playing state.

        Order: input, player integration, enemy drift, then collisions against
        the positions after this tick's movement.
        """
        if intent is None:
            intent = self.intent
        # A jump is one press, never carried over to a later tick
        jump_requested = intent.jump_requested
        intent.jump_requested = False

        s = self.session
        if s.state is not GameState.PLAYING:
            return None

        s.ticks += 1
        handle_input(s, InputIntent(intent.left, intent.right, jump_requested))
        apply_physics(s)
        move_enemies(s)

        report = resolve_collisions(s)
        if report.outcome is not None:
            self._set_state(report.outcome)
        return report
