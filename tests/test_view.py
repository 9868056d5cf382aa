import pygame
import pytest

from platformer.hud import Button, Hud
from platformer.main import perform
from platformer.session import Enemy, GameState, PowerUp
from platformer.settings import HEIGHT, WIDTH
from platformer.sprites import EntityView


def click(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=pos)


@pytest.fixture(autouse=True)
def display():
    pygame.display.init()
    yield
    pygame.display.quit()


@pytest.fixture
def hud():
    return Hud(None, None)


def test_disabled_button_ignores_clicks():
    button = Button((0, 0, 100, 40), "Start", None, "start")
    assert button.was_clicked(click((10, 10)))
    assert not button.was_clicked(click((10, 10), button=3))
    button.enabled = False
    assert not button.was_clicked(click((10, 10)))


def test_start_button_is_disabled_while_playing(hud):
    start = hud.start_button.rect.center
    assert hud.clicked_action(GameState.PLAYING, click(start)) is None
    assert hud.clicked_action(GameState.PAUSED, click(start)) == "start"


def test_pause_button_only_works_while_playing(hud):
    pause = hud.pause_button.rect.center
    assert hud.clicked_action(GameState.PLAYING, click(pause)) == "pause"
    assert hud.clicked_action(GameState.START, click(pause)) is None


@pytest.mark.parametrize("state, action", [
    (GameState.START, "start"),
    (GameState.PAUSED, "pause"),
    (GameState.GAME_OVER, "reset"),
    (GameState.WIN, "reset"),
    (GameState.PLAYING, None),
])
def test_overlay_buttons(hud, state, action):
    assert hud.clicked_action(state, click((WIDTH // 2, HEIGHT // 2 + 45))) == action


def test_entity_view_follows_the_session(game):
    view = EntityView()
    s = game.session
    s.player.x, s.player.y = 123.6, 400.2
    view.update(s, 0.016)
    assert view.player.rect.topleft == (123, 400)
    assert len(view.enemies) == 2
    assert len(view.powerups) == 1

    s.enemies = [Enemy(10.0, 560.0)]
    s.powerups = [PowerUp(5.0, 6.0), PowerUp(300.0, 20.0), PowerUp(600.0, 40.0)]
    view.update(s, 0.016)
    assert [sp.rect.topleft for sp in view.enemies] == [(10, 560)]
    assert [sp.rect.topleft for sp in view.powerups] == [(5, 6), (300, 20), (600, 40)]


@pytest.mark.parametrize("end_state", [GameState.GAME_OVER, GameState.WIN, GameState.PAUSED])
def test_bottom_start_button_starts_playing(hud, game, end_state):
    game.session.state = end_state
    game.session.score = 40
    perform(game, hud.clicked_action(game.state, click(hud.start_button.rect.center)))
    assert game.state is GameState.PLAYING
    assert game.session.score == 0


@pytest.mark.parametrize("end_state", [GameState.GAME_OVER, GameState.WIN])
def test_play_again_overlay_returns_to_menu(hud, game, end_state):
    game.session.state = end_state
    perform(game, hud.clicked_action(game.state, click((WIDTH // 2, HEIGHT // 2 + 45))))
    assert game.state is GameState.START
