"""Shared pytest fixtures."""

from collections.abc import Callable

import pytest

from mindi.models.card import Card
from mindi.models.enums import Suit
from mindi.models.match import Match
from mindi.models.trump import TrumpState


@pytest.fixture
def anyio_backend():
    """Configure anyio to use asyncio backend."""
    return "asyncio"


def parse_card(text: str) -> Card:
    """Build a card from short text like ``10S`` or ``AH-1`` (deck copy defaults to 0)."""
    return Card.from_id(text if "-" in text else f"{text}-0")


@pytest.fixture
def make_match() -> Callable[..., Match]:
    """Factory for matches with hand-picked hands and a hidden trump."""

    def _make(
        hands: list[list[str]], trump: Suit = Suit.HEARTS, revealed: bool = False
    ) -> Match:
        match = Match(
            match_id="test-match",
            table_size=len(hands),
            hands=[[parse_card(text) for text in hand] for hand in hands],
            trump=TrumpState(trump, revealed),
        )
        match.open()
        return match

    return _make


@pytest.fixture
def card() -> Callable[[str], Card]:
    """Parse short card text such as ``10S`` or ``AH-1``."""
    return parse_card
