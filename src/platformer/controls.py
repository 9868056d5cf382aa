"""Translate pygame keyboard events into game key codes and actions."""

import pygame

from .game import KEY_JUMP, KEY_LEFT, KEY_RIGHT

KEY_CODES = {
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_SPACE: KEY_JUMP,
}

ACTION_START = "start"
ACTION_PAUSE = "pause"
ACTION_RESET = "reset"

SHORTCUTS = {
    pygame.K_RETURN: ACTION_START,
    pygame.K_ESCAPE: ACTION_PAUSE,
    pygame.K_p: ACTION_PAUSE,
    pygame.K_r: ACTION_RESET,
}


def dispatch_key(game, event):
    """Feed a KEYDOWN/KEYUP event to the game. Returns the shortcut action, if any."""
    code = KEY_CODES.get(event.key)
    if event.type == pygame.KEYDOWN:
        if code is not None:
            game.key_down(code)
            return None
        return SHORTCUTS.get(event.key)
    if event.type == pygame.KEYUP and code is not None:
        game.key_up(code)
    return None
