"""Enemy and power-up generation for a level."""

import random

from .logger import get_logger
from .session import Enemy, PowerUp, Session
from .settings import (
    ENEMY_SIZE, ENEMY_SPACING, HEIGHT, LEVEL_COUNT, POWERUP_SIZE,
    POWERUP_SPACING, WIDTH,
)

logger = get_logger(__name__)


def _check_level(level):
    if not 1 <= level <= LEVEL_COUNT:
        raise ValueError(f"level must be in 1..{LEVEL_COUNT}, got {level}")


def generate_enemies(level):
    """2 enemies per level, on the ground, queued off the right edge."""
    _check_level(level)
    return [
        Enemy(float(WIDTH + i * ENEMY_SPACING), float(HEIGHT - ENEMY_SIZE))
        for i in range(level * 2)
    ]


def generate_powerups(level, rng=None):
    """One power-up per level at a random height, queued off the right edge."""
    _check_level(level)
    rnd = rng if rng is not None else random
    return [
        PowerUp(float(WIDTH + i * POWERUP_SPACING), rnd.uniform(0, HEIGHT - POWERUP_SIZE))
        for i in range(level)
    ]


def spawn_level(session: Session) -> None:
    # Replaces both collections, nothing carries over from the previous level
    session.enemies = generate_enemies(session.level)
    session.powerups = generate_powerups(session.level, session.rng)
    logger.debug("level %d spawned: %d enemies, %d power-ups",
                 session.level, len(session.enemies), len(session.powerups))
