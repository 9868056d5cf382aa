import os

# Headless pygame for the view and controls tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import random

import pytest

from platformer.game import Game
from platformer.session import Player, Session


@pytest.fixture
def session():
    return Session(rng=random.Random(1234))


@pytest.fixture
def game():
    g = Game(seed=1234)
    g.start()
    return g


@pytest.fixture
def grounded():
    return Player.spawn()
