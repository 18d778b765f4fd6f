"""Deck model for building, shuffling and dealing cards."""

import random

from mindi.constants import (
    CARDS_PER_PLAYER,
    SUPPORTED_TABLE_SIZES,
    TENS_DOUBLE_DECK,
    TENS_SINGLE_DECK,
)
from mindi.models.card import Card, sort_key
from mindi.models.enums import Rank, Suit
from mindi.models.errors import InvalidTableSizeError

SIX_PLAYER_RANKS = (Rank.EIGHT, Rank.NINE, Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE)
STANDARD_RANKS = tuple(Rank)

# Dropped from the second deck at a 6-player table (56 -> 54 cards)
SIX_PLAYER_OMITTED = frozenset({(Suit.SPADES, Rank.EIGHT), (Suit.CLUBS, Rank.EIGHT)})


def validate_table_size(table_size: int) -> int:
    """Return table_size if supported, raise InvalidTableSizeError otherwise."""
    if isinstance(table_size, bool) or table_size not in SUPPORTED_TABLE_SIZES:
        raise InvalidTableSizeError(table_size)
    return table_size


def deck_count(table_size: int) -> int:
    """Number of physical decks used at this table."""
    return 1 if validate_table_size(table_size) == 4 else 2  # noqa: PLR2004


def total_tens(table_size: int) -> int:
    """Number of ten-rank cards in play at this table."""
    return TENS_SINGLE_DECK if deck_count(table_size) == 1 else TENS_DOUBLE_DECK


class Deck:
    """
    Represents the deck for one table.

    Composition depends on the table size:
    - 4 players: one deck, 6 through Ace (36 cards)
    - 6 players: two decks, 8 through Ace, minus the second 8♠ and 8♣ (54 cards)
    - 8 players: two decks, 6 through Ace (72 cards)

    Every configuration deals exactly 9 cards per player.
    """

    def __init__(self, table_size: int, rng: random.Random | None = None) -> None:
        """Initialize an empty deck for a table size."""
        self.table_size = validate_table_size(table_size)
        self.rng = rng or random.Random()  # noqa: S311
        self.cards: list[Card] = []

    @property
    def ranks(self) -> tuple[Rank, ...]:
        """Ranks in use at this table."""
        return SIX_PLAYER_RANKS if self.table_size == 6 else STANDARD_RANKS  # noqa: PLR2004

    def fill(self) -> None:
        """Fill the deck in suit, rank, copy order."""
        self.cards = []
        for deck_index in range(deck_count(self.table_size)):
            for suit in Suit:
                for rank in self.ranks:
                    if (
                        self.table_size == 6  # noqa: PLR2004
                        and deck_index == 1
                        and (suit, rank) in SIX_PLAYER_OMITTED
                    ):
                        continue
                    self.cards.append(Card(suit, rank, deck_index))

    def shuffle(self) -> None:
        """Fill and shuffle the deck."""
        self.fill()
        self.rng.shuffle(self.cards)

    def deal(self) -> list[list[Card]]:
        """
        Deal the whole deck to the table.

        Each seat gets a contiguous chunk of the shuffled deck, in seat order,
        sorted by suit and then by ascending value.

        Returns:
            List of hands, indexed by seat
        """
        if not self.cards:
            self.shuffle()

        hands: list[list[Card]] = []
        for seat in range(self.table_size):
            chunk = self.cards[seat * CARDS_PER_PLAYER : (seat + 1) * CARDS_PER_PLAYER]
            hands.append(sorted(chunk, key=sort_key))

        return hands

    def count_tens(self) -> int:
        """Count ten-rank cards currently in the deck."""
        return sum(1 for card in self.cards if card.is_ten())

    def __len__(self) -> int:
        """Return number of cards in the deck."""
        return len(self.cards)

    def __str__(self) -> str:
        """Return string representation."""
        return f"Deck({self.table_size} players, {len(self.cards)} cards)"
