"""
Configuration for the 2/3-player Reversi engine and its board UI
"""

# Board dimensions
MIN_BOARD_SIZE = 4
DEFAULT_BOARD_SIZE = 8
BOARD_SIZE_CHOICES = (6, 8, 10)   # sizes offered on the setup screen

# 3-player seed gets its fourth disc only from this size up
FOURTH_SEED_MIN_SIZE = 8

# Seats
DEFAULT_MODE = 2
MODE_CHOICES = (2, 3)

# Display names, keyed by player id value
PLAYER_NAMES = {
    1: "Player 1 (Black)",
    2: "Player 2 (White)",
    3: "Player 3 (Red)",
}
