import pygame

from .session import GameState
from .settings import HEIGHT, OVERLAY_COLOR, TEXT_COLOR, WIDTH

OVERLAY_TITLES = {
    GameState.START: "Start Game",
    GameState.PAUSED: "Game Paused",
    GameState.GAME_OVER: "Game Over",
    GameState.WIN: "You Win!",
}


class Button:
    def __init__(self, rect, text, font, action):
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.action = action
        self.hovered = False
        self.enabled = True

    def update_hover(self, mouse_pos):
        self.hovered = self.enabled and self.rect.collidepoint(mouse_pos)

    def was_clicked(self, event):
        # Left-click inside the rect triggers immediately (doesn't depend on hover)
        return (
                self.enabled and
                event.type == pygame.MOUSEBUTTONDOWN and
                event.button == 1 and
                self.rect.collidepoint(event.pos)
        )

    def draw(self, screen):
        if not self.enabled:
            color = (70, 75, 90)
        else:
            color = (120, 160, 255) if self.hovered else (80, 120, 200)
        pygame.draw.rect(screen, color, self.rect, border_radius=8)
        label = self.font.render(self.text, True, (255, 255, 255))
        screen.blit(label, label.get_rect(center=self.rect.center))


def draw_centered_text(screen, font, text, y, color=TEXT_COLOR):
    surf = font.render(text, True, color)
    screen.blit(surf, (WIDTH // 2 - surf.get_width() // 2, y))


class Hud:
    """Status row, level progress bar, control buttons and state overlays."""

    def __init__(self, font, big):
        self.font = font
        self.big = big
        row = HEIGHT + 60
        self.start_button = Button((WIDTH // 2 - 170, row, 160, 40), "Start", font, "start")
        self.pause_button = Button((WIDTH // 2 + 10, row, 160, 40), "Pause", font, "pause")
        center = (WIDTH // 2 - 100, HEIGHT // 2 + 20, 200, 50)
        self.overlay_buttons = {
            GameState.START: Button(center, "Play", font, "start"),
            GameState.PAUSED: Button(center, "Resume", font, "pause"),
            GameState.GAME_OVER: Button(center, "Play Again", font, "reset"),
            GameState.WIN: Button(center, "Play Again", font, "reset"),
        }

    def buttons(self, state):
        self.start_button.enabled = state is not GameState.PLAYING
        self.pause_button.enabled = state is GameState.PLAYING
        active = [self.start_button, self.pause_button]
        if state in self.overlay_buttons:
            active.append(self.overlay_buttons[state])
        return active

    def clicked_action(self, state, event):
        for button in self.buttons(state):
            if button.was_clicked(event):
                return button.action
        return None

    def draw(self, screen, game):
        s = game.session
        y = HEIGHT + 12
        lives = self.font.render(f"Lives: {s.lives}", True, TEXT_COLOR)
        score = self.font.render(f"Score: {s.score}", True, TEXT_COLOR)
        level = self.font.render(f"Level: {s.level}", True, TEXT_COLOR)
        screen.blit(lives, (16, y))
        screen.blit(score, (WIDTH // 2 - score.get_width() // 2, y))
        screen.blit(level, (WIDTH - level.get_width() - 16, y))

        bar = pygame.Rect(16, y + 28, WIDTH - 32, 10)
        pygame.draw.rect(screen, (60, 65, 80), bar, border_radius=5)
        filled = bar.copy()
        filled.width = int(bar.width * game.progress)
        pygame.draw.rect(screen, (80, 180, 120), filled, border_radius=5)

        mouse_pos = pygame.mouse.get_pos()
        for button in self.buttons(s.state):
            button.update_hover(mouse_pos)
        self.start_button.draw(screen)
        self.pause_button.draw(screen)

        if s.state in OVERLAY_TITLES:
            self._draw_overlay(screen, s)

    def _draw_overlay(self, screen, session):
        overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
        overlay.fill(OVERLAY_COLOR)
        screen.blit(overlay, (0, 0))
        draw_centered_text(screen, self.big, OVERLAY_TITLES[session.state], HEIGHT // 2 - 90)
        if session.state in (GameState.GAME_OVER, GameState.WIN):
            draw_centered_text(screen, self.font, f"Score: {session.score}", HEIGHT // 2 - 35)
        self.overlay_buttons[session.state].draw(screen)
