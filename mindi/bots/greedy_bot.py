"""Greedy bot: always plays its strongest legal card."""

from mindi.bots.base_bot import BaseBot
from mindi.models.card import Card
from mindi.models.trick import Trick


class GreedyBot(BaseBot):
    """Bot that plays the highest-value legal card.

    No look-ahead, partner signalling or trump conservation. Ties go to the
    card that comes first in hand order.
    """

    def pick_card(self, valid_cards: list[Card], _trick: Trick) -> Card:
        """Play the highest-value legal card."""
        return max(valid_cards, key=lambda card: card.value)
