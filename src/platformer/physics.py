from dataclasses import replace

from .session import InputIntent, Player, Session
from .settings import (
    GRAVITY, HEIGHT, JUMP_VELOCITY, MAX_JUMPS, PLAYER_SIZE, PLAYER_SPEED, WIDTH,
)

GROUND_Y = HEIGHT - PLAYER_SIZE
RIGHT_WALL_X = WIDTH - PLAYER_SIZE


def integrate(player):
    """Advance the player one tick.

    Returns ``(next_player, landed)``; ``landed`` is True when the ground
    clamp fired this tick. The input player is left untouched.
    """
    vy = player.vy + GRAVITY
    x = player.x + player.vx
    y = player.y + vy

    landed = False
    if y > GROUND_Y:
        y = GROUND_Y
        vy = 0.0
        landed = True

    # Walls stop the player but keep vx; only releasing the key zeroes it
    if x < 0:
        x = 0.0
    elif x > RIGHT_WALL_X:
        x = float(RIGHT_WALL_X)

    return replace(player, x=x, y=y, vy=vy), landed


def apply_physics(session: Session) -> bool:
    player, landed = integrate(session.player)
    session.player = player
    if landed:
        session.jump_count = 0
    return landed


def try_jump(session: Session) -> bool:
    """Jump gate: at most MAX_JUMPS impulses between two landings."""
    if session.jump_count >= MAX_JUMPS:
        return False
    session.player.vy = JUMP_VELOCITY
    session.jump_count += 1
    return True


def handle_input(session: Session, intent: InputIntent) -> None:
    player: Player = session.player
    player.vx = 0
    if intent.left:
        player.vx = -PLAYER_SPEED
    if intent.right:
        player.vx = PLAYER_SPEED
    if intent.jump_requested:
        try_jump(session)
