# Transition timing (seconds). Matches the usual platform animator default.
DEFAULT_DURATION = 0.3
# Fallback tick length when a host emits a tick without dt.
DEFAULT_TICK = 1 / 60

# Current index sentinel while no drawables are set.
NO_INDEX = -1

# Demo window
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Swappable Image"
# Surface stacking: secondary draws over primary while it slides in.
PRIMARY_LAYER = 0
SECONDARY_LAYER = 1
LABEL_FONT_SIZE = 32
HUD_FONT_SIZE = 12
