"""Move sources for Mindi seats.

Available sources:
- InteractiveSource: Waits for a person to pick (the primary seat)
- GreedyBot: Plays its highest-value legal card (every other seat)
"""

from mindi.bots.base_bot import BaseBot, InteractiveSource, MoveSource
from mindi.bots.greedy_bot import GreedyBot
from mindi.constants import PRIMARY_SEAT


def seat_sources(table_size: int) -> list[MoveSource]:
    """Default seating: the primary seat is interactive, the rest are bots."""
    return [
        InteractiveSource(seat) if seat == PRIMARY_SEAT else GreedyBot(seat)
        for seat in range(table_size)
    ]


__all__ = ["BaseBot", "GreedyBot", "InteractiveSource", "MoveSource", "seat_sources"]
