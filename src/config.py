from pathlib import Path

# Paths
BASE_DIR = Path(__file__).resolve().parents[1]
ASSETS_DIR = BASE_DIR / "assets"
SOUNDS_DIR = ASSETS_DIR / "sounds"
SAVE_DIR = BASE_DIR / "save"
HIGH_SCORE_FILE = SAVE_DIR / "high_score.json"

# Display
WIDTH = 800
HEIGHT = 500
HUD_HEIGHT = 60  # strip above the track for score/coins
FPS = 60
VSYNC = True
WINDOW_TITLE = "VG Dash"
MUTE = False

# Track geometry
LANE_COUNT = 3
LANE_WIDTH = WIDTH / LANE_COUNT
START_LANE = 1
TRACK_BASELINE = 20  # pixels between window bottom and the running surface
LANE_VIEW_DEPTH = HEIGHT  # far edge of the visible track

# Character
CHARACTER_WIDTH = 60
CHARACTER_HEIGHT = 100
CHARACTER_SLIDE_HEIGHT = 50

# Jump physics (per physics step)
GRAVITY = 1.5
JUMP_FORCE = 20.0
PHYSICS_STEP_MS = 30.0
MAX_FRAME_MS = 250.0  # longer frames are clamped (window drag, breakpoint)

# Speed and score
SPEED_INITIAL = 5.0
SPEED_GROWTH_RATE = 0.001  # added every active tick
SCORE_RATE = 0.01  # points per elapsed millisecond

# Spawning (independent per-tick trials)
OBSTACLE_SPAWN_CHANCE = 0.02
COIN_SPAWN_CHANCE = 0.03
TRAIN_CHANCE = 0.5
COIN_VALUE = 1

# Obstacle shapes: kind -> (width, height, elevation of hitbox floor)
BARRIER_SIZE = (60, 60, 0)
TRAIN_SIZE = (60, 100, CHARACTER_SLIDE_HEIGHT)

# Pruning: entities are dropped once they fall this far behind the player
OBSTACLE_PRUNE_DEPTH = -100
COIN_PRUNE_DEPTH = -50

# Near field: depth window where entities can touch the character
NEAR_FIELD_DEPTH = 100
COIN_JUMP_CEILING = 150  # no pickup at or above this vertical position

# Input
INTENT_QUEUE_SIZE = 32

# Sounds: event name -> (file, volume)
SOUND_FILES = {
    "jump": ("jump.wav", 0.5),
    "coin": ("coin.wav", 0.4),
    "crash": ("crash.wav", 0.7),
}

# Colors (r, g, b) in 0..1 for GL
BACKGROUND_COLOR = (0.11, 0.12, 0.16)
TRACK_COLOR = (0.20, 0.22, 0.28)
LANE_DIVIDER_COLOR = (0.32, 0.34, 0.42)
CHARACTER_COLOR = (1.0, 0.42, 0.42)
CHARACTER_HEAD_COLOR = (0.31, 0.80, 0.77)
BARRIER_COLOR = (0.55, 0.57, 0.65)
TRAIN_COLOR = (0.31, 0.80, 0.77)
COIN_COLOR = (1.0, 0.90, 0.43)
BUTTON_COLOR = (0.25, 0.27, 0.33, 0.5)
OVERLAY_COLOR = (0.0, 0.0, 0.0, 0.7)

# On-screen touch buttons: direction -> (center_x, center_y from top, radius)
TOUCH_BUTTON_RADIUS = 32
TOUCH_BUTTONS = {
    "left": (16 + TOUCH_BUTTON_RADIUS, HUD_HEIGHT + HEIGHT - 16 - TOUCH_BUTTON_RADIUS, TOUCH_BUTTON_RADIUS),
    "right": (24 + 3 * TOUCH_BUTTON_RADIUS, HUD_HEIGHT + HEIGHT - 16 - TOUCH_BUTTON_RADIUS, TOUCH_BUTTON_RADIUS),
    "down": (WIDTH - 24 - 3 * TOUCH_BUTTON_RADIUS, HUD_HEIGHT + HEIGHT - 16 - TOUCH_BUTTON_RADIUS, TOUCH_BUTTON_RADIUS),
    "up": (WIDTH - 16 - TOUCH_BUTTON_RADIUS, HUD_HEIGHT + HEIGHT - 16 - TOUCH_BUTTON_RADIUS, TOUCH_BUTTON_RADIUS),
}
