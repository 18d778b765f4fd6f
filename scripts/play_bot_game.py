#!/usr/bin/env python3
"""
CLI script to watch bots play Mindi.

Every seat, the primary one included, is driven by the greedy bot. The
match runs through the same MatchHandler the server uses, with the
configured pacing delays (or none with --fast).
"""

import asyncio
import random
import sys
import time
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mindi.api.match_handler import MatchHandler
from mindi.api.responses import ServerMessage
from mindi.bots import GreedyBot, MoveSource
from mindi.config import Settings
from mindi.constants import SUPPORTED_TABLE_SIZES
from mindi.models.enums import Command


def all_bots(table_size: int) -> list[MoveSource]:
    """Seat a greedy bot everywhere."""
    return [GreedyBot(seat) for seat in range(table_size)]


class BotGameSimulator:
    """Simulates a match between bot players."""

    def __init__(self, num_players: int = 4, fast: bool = False, seed: int | None = None):
        """
        Initialize simulator.

        Args:
            num_players: Number of players (4, 6 or 8)
            fast: Skip pacing delays
            seed: Optional seed for a reproducible deal
        """
        if num_players not in SUPPORTED_TABLE_SIZES:
            raise ValueError("Must have 4, 6 or 8 players")

        self.num_players = num_players
        self.rng = random.Random(seed) if seed is not None else None
        settings = Settings()
        if fast:
            settings = settings.model_copy(
                update={"bot_move_delay": 0, "trick_resolution_delay": 0, "game_over_delay": 0}
            )
        self.handler = MatchHandler(settings, sources_factory=all_bots)
        self.handler.add_listener(self.on_message)
        self.printed_lines = 0

    async def on_message(self, message: ServerMessage) -> None:
        """Print new log lines as the match progresses."""
        lines, self.printed_lines = self.handler.log_since(self.printed_lines)
        for line in lines:
            print(f"  › {line}")

        if message.command == Command.PICKED:
            content = message.content
            print(f"    P{content['player_id']}: {content['card_id']}")
        elif message.command == Command.END_GAME:
            print(f"\n  Final tens: A {message.content['team_a']} - B {message.content['team_b']}")

    async def play_game(self) -> None:
        """Play a complete match."""
        start_time = time.time()

        print(f"\n{'='*60}")
        print(f"Mindi with {self.num_players} bots")
        print(f"{'='*60}\n")

        await self.handler.start_match(self.num_players, rng=self.rng)
        await self.handler.wait_idle()

        match = self.handler.require_match()
        elapsed_time = time.time() - start_time

        print(f"\n{'='*60}")
        print("GAME OVER")
        print(f"{'='*60}\n")

        trump = match.trump
        print(f"Trump: {trump.suit.icon} ({'revealed' if trump.revealed else 'never revealed'})")
        print(f"Tricks played: {len(match.completed_tricks)}")
        print(f"Cards left in hands: {sum(len(hand) for hand in match.hands)}")
        print(f"\nMatch duration: {elapsed_time:.1f} seconds")
        print(f"{'='*60}\n")


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Watch bots play Mindi")
    parser.add_argument(
        "--players",
        type=int,
        default=4,
        help="Number of players (4, 6 or 8)",
    )
    parser.add_argument("--fast", action="store_true", help="Skip pacing delays")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the deal")

    args = parser.parse_args()

    if args.players not in SUPPORTED_TABLE_SIZES:
        print("Error: Must have 4, 6 or 8 players")
        sys.exit(1)

    simulator = BotGameSimulator(num_players=args.players, fast=args.fast, seed=args.seed)
    asyncio.run(simulator.play_game())


if __name__ == "__main__":
    main()
