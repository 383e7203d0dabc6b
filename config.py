import os

# Grid world (cells)
GRID_WIDTH = 32
GRID_HEIGHT = 24
CELL_SCALE = 20          # pixels per cell
TICK_DELAY = 5           # rendered frames per logical step
FOOD_START = (5, 16)

# Snake start state
SNAKE_START = (5, 5)
SNAKE_START_LENGTH = 5
SNAKE_START_DIRECTION = "RIGHT"
GROWTH_RATE = 3

GAME_WIDTH = GRID_WIDTH * CELL_SCALE
GAME_HEIGHT = GRID_HEIGHT * CELL_SCALE
FPS = 60
WINDOW_TITLE = "Snake"

WHITE = (255,255,255)
BLACK = (0,0,0)
RED = (230,41,55)
ORANGE = (255,161,0)
YELLOW = (253,249,0)
GREY = (130,130,130)

SCORE_DIGITS = 3
HUD_FONT_SIZE = 28
HUD_PADDING = 6

# Arrow keys by default, WASD as a second layout. Values are pygame key names.
KEY_BINDINGS = {
    "UP": ("up", "w"),
    "DOWN": ("down", "s"),
    "LEFT": ("left", "a"),
    "RIGHT": ("right", "d"),
}
RESET_KEY = "r"
PAUSE_KEY = "p"
MUTE_KEY = "m"
DEBUG_KEY = "f3"

# Audio
SAMPLE_RATE = 44100
EAT_TONE = (660, 0.08)    # (Hz, seconds)
DIE_TONE = (220, 0.30)
START_TONE = (880, 0.12)
SFX_VOLUME = 0.25

LOG_LEVEL = os.environ.get("SNAKE_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
