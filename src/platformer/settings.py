WIDTH, HEIGHT = 800, 600
TITLE = "Super Mario-inspired Platformer"
FPS = 60

# Space under the arena for the HUD row, progress bar and buttons
HUD_HEIGHT = 110

PLAYER_SIZE = 50
ENEMY_SIZE = 40
POWERUP_SIZE = 30

GRAVITY = 0.5
JUMP_VELOCITY = -10
# Horizontal speed the player uses while an arrow key is held
PLAYER_SPEED = 5
ENEMY_SPEED = 2
# Jumps allowed between two ground contacts
MAX_JUMPS = 2

PLAYER_START = (50, HEIGHT - PLAYER_SIZE)
ENEMY_SPACING = 200
POWERUP_SPACING = 300

LEVEL_COUNT = 3
STARTING_LIVES = 3
POWERUP_REWARD = 10

# Colours (entities are drawn as flat shapes, there are no image assets)
BG_COLOR = (25, 30, 45)
ARENA_BORDER = (200, 205, 215)
PLAYER_COLOR = (215, 50, 45)
ENEMY_COLOR = (140, 85, 40)
POWERUP_COLOR = (255, 215, 0)
TEXT_COLOR = (240, 240, 240)
OVERLAY_COLOR = (0, 0, 0, 180)
