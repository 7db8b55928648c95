# --- DISPLAY SETTINGS ---
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
FPS = 60

# Largest frame delta handed to the physics step (seconds).
# Longer frames (window drag, breakpoints) are slowed down instead of integrated.
MAX_DT = 0.033

# --- PHYSICS DEFAULTS ---
GRAVITY = 500           # px/s^2, +y is down
AIR_FRICTION = 0.02     # fraction of velocity lost per second
BOUNCE_DAMPING = 0.85   # 1.0 = perfectly elastic
MIN_VELOCITY = 50       # px/s floor so the ball never settles
ROTATION_SPEED = 0.5    # rad/s

# --- PARAMETER RANGES (min, max, step) ---
GRAVITY_RANGE = (0, 1000, 50)
AIR_FRICTION_RANGE = (0.0, 0.1, 0.005)
BOUNCE_DAMPING_RANGE = (0.5, 1.0, 0.01)
ROTATION_SPEED_RANGE = (-2.0, 2.0, 0.1)

# --- COLORS ---
BG_COLOR = (15, 23, 42)
HEXAGON_COLOR = (16, 185, 129)
VERTEX_COLOR = (16, 185, 129)
BALL_COLOR = (96, 165, 250)
TEXT_COLOR = (220, 220, 220)
PAUSED_COLOR = (255, 215, 0)

# --- DEBUG ---
# Report every containment fallback through debug_console
DEBUG_CONTAINMENT = False
