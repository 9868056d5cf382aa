"""Plain data for one game session.

Everything the simulation reads or writes lives on a :class:`Session`; the
physics, spawner and collision modules only ever receive it as an argument.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .settings import (
    ENEMY_SIZE, PLAYER_SIZE, PLAYER_START, POWERUP_SIZE, STARTING_LIVES,
)


class GameState(str, Enum):
    START = "start"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "gameOver"
    WIN = "win"


@dataclass
class Player:
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    size = PLAYER_SIZE

    @classmethod
    def spawn(cls) -> "Player":
        x, y = PLAYER_START
        return cls(float(x), float(y))

    @property
    def box(self) -> Tuple[float, float, float, float]:
        return self.x, self.y, self.size, self.size


@dataclass
class Enemy:
    x: float
    y: float
    size = ENEMY_SIZE

    @property
    def box(self) -> Tuple[float, float, float, float]:
        return self.x, self.y, self.size, self.size


@dataclass
class PowerUp:
    x: float
    y: float
    size = POWERUP_SIZE

    @property
    def box(self) -> Tuple[float, float, float, float]:
        return self.x, self.y, self.size, self.size


@dataclass
class InputIntent:
    """Keyboard intent sampled once per tick."""
    left: bool = False
    right: bool = False
    jump_requested: bool = False


@dataclass
class Session:
    player: Player = field(default_factory=Player.spawn)
    enemies: List[Enemy] = field(default_factory=list)
    powerups: List[PowerUp] = field(default_factory=list)
    level: int = 1
    score: int = 0
    lives: int = STARTING_LIVES
    jump_count: int = 0
    state: GameState = GameState.START
    ticks: int = 0
    # None means the module-level random source
    rng: Optional[random.Random] = None

    def cleared(self) -> bool:
        return not self.enemies and not self.powerups
