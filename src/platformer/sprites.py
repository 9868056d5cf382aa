import pygame

from .settings import (
    ENEMY_COLOR, ENEMY_SIZE, PLAYER_COLOR, PLAYER_SIZE, POWERUP_COLOR,
    POWERUP_SIZE,
)


def _player_image():
    surf = pygame.Surface((PLAYER_SIZE, PLAYER_SIZE), pygame.SRCALPHA)
    pygame.draw.rect(surf, PLAYER_COLOR, surf.get_rect(), border_radius=8)
    # eyes
    pygame.draw.rect(surf, (255, 255, 255), (12, 12, 8, 10))
    pygame.draw.rect(surf, (255, 255, 255), (30, 12, 8, 10))
    return surf


def _enemy_image():
    surf = pygame.Surface((ENEMY_SIZE, ENEMY_SIZE), pygame.SRCALPHA)
    pygame.draw.ellipse(surf, ENEMY_COLOR, (0, 0, ENEMY_SIZE, ENEMY_SIZE - 6))
    pygame.draw.rect(surf, (60, 35, 20), (4, ENEMY_SIZE - 10, ENEMY_SIZE - 8, 10), border_radius=4)
    return surf


def _powerup_frames(count=4):
    # Pulsing coin, one square frame per step
    frames = []
    for i in range(count):
        surf = pygame.Surface((POWERUP_SIZE, POWERUP_SIZE), pygame.SRCALPHA)
        c = POWERUP_SIZE // 2
        pygame.draw.circle(surf, POWERUP_COLOR, (c, c), c - i % 2)
        pygame.draw.circle(surf, (255, 240, 170), (c, c), c // 2 + i, 2)
        frames.append(surf)
    return frames


class EntitySprite(pygame.sprite.Sprite):
    """View of one simulation entity; the rect follows the entity's x/y."""

    def __init__(self, image):
        super().__init__()
        self.image = image
        self.rect = self.image.get_rect()

    def sync(self, entity):
        self.rect.topleft = (int(entity.x), int(entity.y))


class PowerUpSprite(EntitySprite):
    def __init__(self, frames):
        super().__init__(frames[0])
        self.frames = frames
        self.index = 0
        self.anim_speed = 8  # frames per second

    def update(self, dt):
        self.index = (self.index + self.anim_speed * dt) % len(self.frames)
        self.image = self.frames[int(self.index)]


class EntityView:
    """Draws the player, enemies and power-ups of a session."""

    def __init__(self):
        self.player = EntitySprite(_player_image())
        self.enemy_image = _enemy_image()
        self.powerup_frames = _powerup_frames()
        self.enemies = pygame.sprite.Group()
        self.powerups = pygame.sprite.Group()

    def _fit(self, group, count, factory):
        # Entities have no identity beyond list position, so only counts matter
        sprites = group.sprites()
        for sprite in sprites[count:]:
            sprite.kill()
        for _ in range(count - len(sprites)):
            group.add(factory())
        return group.sprites()

    def update(self, session, dt):
        self.player.sync(session.player)
        enemies = self._fit(self.enemies, len(session.enemies),
                            lambda: EntitySprite(self.enemy_image))
        for sprite, enemy in zip(enemies, session.enemies):
            sprite.sync(enemy)
        powerups = self._fit(self.powerups, len(session.powerups),
                             lambda: PowerUpSprite(self.powerup_frames))
        for sprite, powerup in zip(powerups, session.powerups):
            sprite.sync(powerup)
        self.powerups.update(dt)

    def draw(self, surf):
        self.powerups.draw(surf)
        self.enemies.draw(surf)
        surf.blit(self.player.image, self.player.rect)
