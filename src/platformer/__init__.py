"""Single-screen double-jump platformer built on pygame."""

from .game import Game
from .session import Enemy, GameState, InputIntent, Player, PowerUp, Session

__version__ = "1.0.0"

__all__ = ["Game", "GameState", "Session", "Player", "Enemy", "PowerUp", "InputIntent"]
