# --- ARENA ---
# Screen coordinates: origin top-left, y grows downwards.

HEXAGON_CENTER = (400, 300)
HEXAGON_RADIUS = 200    # center to vertex

# --- BALL SPAWN ---
BALL_START_POS = (400, 200)
BALL_START_VEL = (200, 0)
BALL_RADIUS = 10
BALL_MASS = 1

# Reset picks vx in [-RESET_SPEED_X, RESET_SPEED_X], vy in [-RESET_SPEED_Y, RESET_SPEED_Y]
RESET_SPEED_X = 200
RESET_SPEED_Y = 100

# Click-to-place picks both components in [-CLICK_SPEED, CLICK_SPEED]
CLICK_SPEED = 200
