"""Tests for the Card model and trick-winner resolution."""

import pytest

from mindi.models.card import Card, determine_winner, sort_key
from mindi.models.enums import Rank, Suit


def card(text: str) -> Card:
    return Card.from_id(text if "-" in text else f"{text}-0")


class TestCardModel:
    """Tests for card identity and values."""

    def test_face_card_values(self):
        """Court cards and aces map onto 11-14."""
        assert card("JS").value == 11
        assert card("QS").value == 12
        assert card("KS").value == 13
        assert card("AS").value == 14
        assert card("10S").value == 10
        assert card("6S").value == 6

    def test_id_includes_deck_copy(self):
        """Identity distinguishes duplicate decks."""
        first = Card(Suit.SPADES, Rank.TEN, 0)
        second = Card(Suit.SPADES, Rank.TEN, 1)
        assert first.id == "10S-0"
        assert second.id == "10S-1"
        assert first != second

    def test_from_id_round_trip(self):
        """Parsing an id yields the same card."""
        queen = Card(Suit.CLUBS, Rank.QUEEN, 1)
        assert Card.from_id(queen.id) == queen

    def test_from_id_is_case_insensitive(self):
        """Lower-case ids are accepted."""
        assert Card.from_id("ah-0") == Card(Suit.HEARTS, Rank.ACE, 0)

    @pytest.mark.parametrize("bad_id", ["", "10S", "1S-0", "10X-0", "AS-x", "S-0"])
    def test_from_id_rejects_garbage(self, bad_id):
        """Malformed ids raise ValueError."""
        with pytest.raises(ValueError, match="Invalid card id"):
            Card.from_id(bad_id)

    def test_is_ten(self):
        """Only rank-10 cards are Mindis."""
        assert card("10D").is_ten()
        assert not card("JD").is_ten()

    def test_cards_are_immutable(self):
        """Cards cannot be changed after creation."""
        with pytest.raises(AttributeError):
            card("AS").rank = Rank.KING  # type: ignore[misc]

    def test_str_uses_suit_symbol(self):
        """String form is rank plus suit symbol."""
        assert str(card("10H")) == "10♥"
        assert str(card("KC")) == "K♣"

    def test_sort_key_orders_by_suit_then_value(self):
        """Hands sort by suit letter, then ascending value."""
        cards = [card("AS"), card("6S"), card("KC"), card("10H"), card("7C")]
        assert [c.id for c in sorted(cards, key=sort_key)] == [
            "7C-0",
            "KC-0",
            "10H-0",
            "6S-0",
            "AS-0",
        ]


class TestTrickWinner:
    """Tests for determine_winner."""

    def test_empty_trick_has_no_winner(self):
        """An empty trick resolves to None."""
        assert determine_winner([], Suit.HEARTS) is None

    def test_higher_lead_suit_card_wins(self):
        """Among lead-suit cards, highest value wins."""
        plays = [(0, card("10S")), (1, card("AS")), (2, card("KS")), (3, card("6S"))]
        assert determine_winner(plays, None) == 1

    def test_any_trump_beats_non_trump(self):
        """A six of trump beats an ace of the lead suit."""
        plays = [(0, card("10S")), (1, card("AS")), (2, card("6H")), (3, card("KS"))]
        assert determine_winner(plays, Suit.HEARTS) == 2

    def test_higher_trump_beats_lower_trump(self):
        """Between trumps, higher value wins."""
        plays = [(0, card("10S")), (1, card("6H")), (2, card("QH")), (3, card("7H"))]
        assert determine_winner(plays, Suit.HEARTS) == 2

    def test_off_suit_never_wins_without_trump(self):
        """With no effective trump, off-suit cards cannot win."""
        plays = [(0, card("6S")), (1, card("AH")), (2, card("AD")), (3, card("AC"))]
        assert determine_winner(plays, None) == 0

    def test_hidden_trump_does_not_count(self):
        """A trump suit card wins nothing when no trump is in effect."""
        plays = [(0, card("6S")), (1, card("AH"))]
        assert determine_winner(plays, None) == 0
        assert determine_winner(plays, Suit.HEARTS) == 1

    def test_only_higher_trump_beats_trump(self):
        """Once a trump is winning, lead-suit and off-suit cards cannot take the trick."""
        plays = [(0, card("9D")), (1, card("7C")), (2, card("AD")), (3, card("AS"))]
        assert determine_winner(plays, Suit.CLUBS) == 1

    def test_trump_lead_stays_trump(self):
        """When trump is led, only a higher trump wins."""
        plays = [(0, card("8H")), (1, card("AS")), (2, card("9H")), (3, card("KH"))]
        assert determine_winner(plays, Suit.HEARTS) == 3

    def test_duplicate_cards_keep_earlier_winner(self):
        """Equal cards from two decks: the earlier one keeps the trick."""
        plays = [
            (0, card("AS-0")),
            (1, card("AS-1")),
            (2, card("7S")),
            (3, card("8S")),
        ]
        assert determine_winner(plays, None) == 0

    def test_resolution_is_deterministic(self):
        """Same trick and trump always give the same winner."""
        plays = [(0, card("10S")), (1, card("AS")), (2, card("6H")), (3, card("KS"))]
        assert {determine_winner(plays, Suit.HEARTS) for _ in range(20)} == {2}
