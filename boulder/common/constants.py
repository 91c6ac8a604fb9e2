"""Board geometry and timing constants shared by every level."""

LEVELS_HIGH = 22
LEVELS_WIDTH = 44

# Main loop ticks per unit of level time.
INTER_TIME = 60
# The environment advances once every REFRESH_PERIOD + 1 main ticks.
REFRESH_PERIOD = INTER_TIME // 5
# Time units without a move before the hero starts fidgeting.
IDLE_THRESHOLD = 5
# Refresh cycles the board stays frozen after the door has been passed.
LEVEL_COMPLETE_CYCLES = 10

DEFAULT_VIEW_WIDTH = 40
DEFAULT_VIEW_HEIGHT = 21
