"""Entity drift, player/entity collisions and end-of-level checks."""

from dataclasses import dataclass
from typing import Optional

from .logger import get_logger
from .session import GameState, Session
from .settings import ENEMY_SPEED, LEVEL_COUNT, POWERUP_REWARD
from .spawner import spawn_level

logger = get_logger(__name__)


@dataclass
class TickReport:
    enemies_hit: int = 0
    powerups_collected: int = 0
    level_cleared: bool = False
    outcome: Optional[GameState] = None


def overlaps(a, b):
    """Strict overlap of two (x, y, w, h) boxes; touching edges do not count."""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def _hits(player, entity):
    return overlaps(player.box, entity.box)


def move_enemies(session: Session) -> None:
    for enemy in session.enemies:
        enemy.x -= ENEMY_SPEED


def resolve_collisions(session: Session) -> TickReport:
    """Apply every hit and pickup of this tick, then check loss and level-clear.

    A loss or a win is only reported through ``outcome``; the caller owns the
    state transition.

    Collided entities are marked first and the lists rebuilt without them, so
    adjacent hits in the same tick are all processed exactly once.
    """
    report = TickReport()
    player = session.player

    hit = {i for i, enemy in enumerate(session.enemies) if _hits(player, enemy)}
    if hit:
        session.enemies = [e for i, e in enumerate(session.enemies) if i not in hit]
        session.lives = max(0, session.lives - len(hit))
        report.enemies_hit = len(hit)
        logger.debug("tick %d: %d enemy hit(s), lives=%d", session.ticks, len(hit), session.lives)

    caught = {i for i, powerup in enumerate(session.powerups) if _hits(player, powerup)}
    if caught:
        session.powerups = [p for i, p in enumerate(session.powerups) if i not in caught]
        session.score += POWERUP_REWARD * len(caught)
        report.powerups_collected = len(caught)
        logger.debug("tick %d: %d power-up(s), score=%d", session.ticks, len(caught), session.score)

    if session.lives <= 0:
        report.outcome = GameState.GAME_OVER
        return report

    if session.cleared():
        report.level_cleared = True
        if session.level < LEVEL_COUNT:
            session.level += 1
            spawn_level(session)
            logger.info("level %d cleared, entering level %d", session.level - 1, session.level)
        else:
            report.outcome = GameState.WIN

    return report
