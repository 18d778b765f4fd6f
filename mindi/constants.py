"""Game constants for Mindi."""

# Table
SUPPORTED_TABLE_SIZES = (4, 6, 8)
CARDS_PER_PLAYER = 9
PRIMARY_SEAT = 0  # Seat 0 is the interactive (human) seat

# Ten-rank cards ("Mindis") available per deck configuration
TENS_SINGLE_DECK = 4
TENS_DOUBLE_DECK = 8

# Pacing defaults in seconds (see config.Settings)
BOT_MOVE_DELAY = 1.0
TRICK_RESOLUTION_DELAY = 1.5
GAME_OVER_DELAY = 0.5
