"""Move sources: who decides what a seat plays."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from mindi.models.card import Card
from mindi.models.trick import Trick, get_valid_cards


class MoveSource(ABC):
    """Decides moves for one seat.

    Interactive sources wait for external input; policy-driven sources pick
    a card themselves. Both feed the same Match.play_card entry point.
    """

    is_interactive: bool = False

    def __init__(self, player_id: int) -> None:
        """Initialize the source for a seat.

        Args:
            player_id: Seat this source plays for

        """
        self.player_id = player_id

    @abstractmethod
    def choose_card(self, hand: Sequence[Card], trick: Trick) -> Card | None:
        """Choose a card to play into the current trick.

        Args:
            hand: Seat's remaining cards
            trick: Trick in progress

        Returns:
            Card to play, or None when the move comes from outside

        """

    def __str__(self) -> str:
        """Return string representation."""
        return f"{self.__class__.__name__} (seat {self.player_id})"


class InteractiveSource(MoveSource):
    """A seat driven by a person through the presentation layer."""

    is_interactive = True

    def choose_card(self, _hand: Sequence[Card], _trick: Trick) -> Card | None:
        """Interactive seats never pick on their own."""
        return None


class BaseBot(MoveSource):
    """Abstract base class for bot strategies.

    Bots only ever choose among legal cards, computed with the same
    follow-suit rule the engine enforces.
    """

    def choose_card(self, hand: Sequence[Card], trick: Trick) -> Card:
        """Pick a legal card."""
        valid_cards = get_valid_cards(hand, trick)
        if not valid_cards:
            msg = "No cards to play"
            raise ValueError(msg)
        return self.pick_card(valid_cards, trick)

    @abstractmethod
    def pick_card(self, valid_cards: list[Card], trick: Trick) -> Card:
        """Pick one of the legal cards.

        Args:
            valid_cards: Non-empty list of legal cards, in hand order
            trick: Trick in progress

        Returns:
            Card to play

        """
