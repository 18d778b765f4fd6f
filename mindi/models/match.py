"""Match aggregate: the only stateful, mutating part of the engine."""

import logging
import random
import uuid
from typing import Any

from mindi.constants import PRIMARY_SEAT
from mindi.models.captures import CapturedTens, MatchResult
from mindi.models.card import Card
from mindi.models.deck import Deck, validate_table_size
from mindi.models.enums import ErrorCode, GamePhase, Team
from mindi.models.errors import ActionAfterTerminationError, IllegalMoveError
from mindi.models.match_event import MatchEvent, MatchEventType
from mindi.models.snapshot import (
    CapturedTensInfo,
    CardInfo,
    MatchSnapshot,
    ResultInfo,
    TableCard,
    TrumpInfo,
)
from mindi.models.trick import CompletedTrick, PlayedCard, Trick, get_valid_cards
from mindi.models.trump import TrumpState

logger = logging.getLogger(__name__)


def _actor(player_id: int) -> str:
    """Name a seat the way the log does."""
    return "You" if player_id == PRIMARY_SEAT else f"Player {player_id}"


class Match:
    """Represents a single Mindi match.

    A match is dealt once; tricks are played until every ten has been
    captured, at which point the match ends even if hands are not empty.

    Lifecycle: SETUP -> PLAY -> TRICK_END -> PLAY ... -> GAME_OVER.

    Attributes:
        id: Unique match identifier
        table_size: Number of seats (4, 6 or 8)
        phase: Current phase
        turn: Seat expected to play next

    """

    def __init__(
        self,
        match_id: str,
        table_size: int,
        hands: list[list[Card]],
        trump: TrumpState,
    ) -> None:
        """Initialize a dealt match in SETUP. Use Match.start() to create one."""
        self.id = match_id
        self.table_size = validate_table_size(table_size)
        if len(hands) != table_size:
            msg = f"Expected {table_size} hands, got {len(hands)}"
            raise ValueError(msg)

        self.phase = GamePhase.SETUP
        self.turn = PRIMARY_SEAT
        self._hands = [list(hand) for hand in hands]
        self._deck: tuple[Card, ...] = tuple(card for hand in hands for card in hand)
        self._trump = trump
        self._trick = Trick(number=1, table_size=table_size)
        self._captured = CapturedTens(table_size)
        self._completed: list[CompletedTrick] = []
        self._events: list[MatchEvent] = []
        self._result: MatchResult | None = None

    @classmethod
    def start(
        cls, table_size: int, *, match_id: str | None = None, rng: random.Random | None = None
    ) -> "Match":
        """Build, shuffle and deal a deck, hide a random trump and open play.

        Args:
            table_size: Number of seats, one of 4, 6, 8
            match_id: Optional identifier (random if omitted)
            rng: Optional random source for reproducible deals

        Raises:
            InvalidTableSizeError: Before any deck is built, for unsupported sizes

        """
        validate_table_size(table_size)
        deck = Deck(table_size, rng)
        deck.shuffle()
        match = cls(
            match_id=match_id or uuid.uuid4().hex,
            table_size=table_size,
            hands=deck.deal(),
            trump=TrumpState.choose(rng),
        )
        match.open()
        return match

    def open(self) -> None:
        """Move a freshly dealt match from SETUP to PLAY."""
        if self.phase != GamePhase.SETUP:
            msg = f"Match {self.id} already opened"
            raise RuntimeError(msg)
        self.turn = PRIMARY_SEAT
        self.phase = GamePhase.PLAY
        self._record(
            MatchEventType.MATCH_STARTED,
            f"Game Started! {self.table_size} Players. Trump Hidden.",
            data={"table_size": self.table_size},
        )
        logger.info("Match %s started with %d players", self.id, self.table_size)

    # Read-only views

    @property
    def trump(self) -> TrumpState:
        """Copy of the trump state."""
        return TrumpState(self._trump.suit, self._trump.revealed)

    @property
    def trick(self) -> Trick:
        """Copy of the trick in progress."""
        return Trick(self._trick.number, self.table_size, list(self._trick.plays))

    @property
    def hands(self) -> list[list[Card]]:
        """Copies of every hand."""
        return [list(hand) for hand in self._hands]

    def hand(self, player_id: int) -> list[Card]:
        """Copy of one seat's hand."""
        self._check_player(player_id)
        return list(self._hands[player_id])

    @property
    def deck(self) -> tuple[Card, ...]:
        """Every card dealt in this match."""
        return self._deck

    @property
    def captured(self) -> CapturedTens:
        """Copy of the captured tens."""
        captured = self._captured
        return CapturedTens(self.table_size, list(captured.team_a), list(captured.team_b))

    @property
    def completed_tricks(self) -> list[CompletedTrick]:
        """Resolved tricks, oldest first."""
        return list(self._completed)

    @property
    def result(self) -> MatchResult | None:
        """Final outcome once the match is over."""
        return self._result

    @property
    def events(self) -> list[MatchEvent]:
        """Every recorded event, oldest first."""
        return list(self._events)

    @property
    def log_lines(self) -> list[str]:
        """Human-readable log-line stream."""
        return [event.message for event in self._events if event.is_displayed]

    def is_over(self) -> bool:
        """Check if the match has ended."""
        return self.phase == GamePhase.GAME_OVER

    def valid_cards(self, player_id: int) -> list[Card]:
        """Cards a seat may legally play into the current trick."""
        self._check_player(player_id)
        return get_valid_cards(self._hands[player_id], self._trick)

    # Mutations

    def play_card(self, player_id: int, card_id: str) -> MatchSnapshot:
        """Play a card for a seat.

        Args:
            player_id: Seat playing the card
            card_id: Identity of the card, e.g. ``10S-0``

        Returns:
            Snapshot after the play, from the primary seat's point of view

        Raises:
            ActionAfterTerminationError: The match is over
            IllegalMoveError: Wrong phase, wrong turn, unknown card, card not
                in hand, or a follow-suit violation. Nothing is mutated.

        """
        self._check_can_play(player_id)
        hand = self._hands[player_id]
        card = self._find_in_hand(player_id, card_id)

        if card not in get_valid_cards(hand, self._trick):
            lead = self._trick.lead_suit
            if player_id == PRIMARY_SEAT:
                self._record(
                    MatchEventType.ILLEGAL_MOVE,
                    "You must follow the suit!",
                    player_id=player_id,
                    data={"card_id": card.id},
                )
            logger.info("Player %d must follow %s, tried %s", player_id, lead, card)
            msg = f"Player {player_id} must follow the lead suit"
            raise IllegalMoveError(msg, ErrorCode.MUST_FOLLOW_SUIT)

        if self._trump.triggers_reveal(hand, self._trick):
            self._trump.reveal()
            self._record(
                MatchEventType.TRUMP_REVEALED,
                f"{_actor(player_id)} revealed the Trump: "
                f"{self._trump.suit.icon} {self._trump.suit.value}!",
                player_id=player_id,
                data={"suit": self._trump.suit.value},
            )
            logger.info(
                "Match %s: trump %s revealed by player %d",
                self.id,
                self._trump.suit.value,
                player_id,
            )

        hand.remove(card)
        self._trick.add_card(player_id, card)
        self._record(
            MatchEventType.CARD_PLAYED,
            f"{_actor(player_id)} played {card}",
            player_id=player_id,
            data={"card_id": card.id},
        )
        logger.debug("Match %s: player %d played %s", self.id, player_id, card)

        if self._trick.is_complete():
            self.phase = GamePhase.TRICK_END
        else:
            self.turn = (player_id + 1) % self.table_size

        return self.snapshot()

    def resolve_trick(self) -> MatchSnapshot:
        """Resolve the filled trick, award its tens and either continue or end.

        Raises:
            ActionAfterTerminationError: The match is over
            IllegalMoveError: No filled trick is waiting to be resolved

        """
        if self.phase == GamePhase.GAME_OVER:
            raise ActionAfterTerminationError
        if self.phase != GamePhase.TRICK_END:
            msg = "No completed trick to resolve"
            raise IllegalMoveError(msg, ErrorCode.NO_COMPLETED_TRICK)

        trick = self._trick
        winner_id = trick.determine_winner(self._trump.effective_suit)
        if winner_id is None:
            msg = "Cannot resolve an empty trick"
            raise RuntimeError(msg)

        tens = trick.tens()
        team = Team.for_player(winner_id)
        self._captured.add(team, tens)
        self._completed.append(
            CompletedTrick(
                number=trick.number,
                plays=tuple(trick.plays),
                winner_id=winner_id,
                captured_tens=tuple(tens),
            )
        )

        message = f"Player {winner_id} wins the trick"
        message += f" and captures {len(tens)} Mindi(s)!" if tens else "."
        self._record(
            MatchEventType.TRICK_WON,
            message,
            player_id=winner_id,
            data={"team": team.value, "tens": [card.id for card in tens]},
            trick_number=trick.number,
        )
        logger.info(
            "Match %s: trick %d won by player %d (team %s, %d tens)",
            self.id,
            trick.number,
            winner_id,
            team.value,
            len(tens),
        )

        self._trick = Trick(number=trick.number + 1, table_size=self.table_size)

        if self._captured.is_complete():
            self._end()
        else:
            self.turn = winner_id
            self.phase = GamePhase.PLAY

        return self.snapshot()

    def _end(self) -> None:
        """Close the match and compute the result."""
        self.phase = GamePhase.GAME_OVER
        self._result = self._captured.result()
        self._record(
            MatchEventType.MATCH_ENDED,
            self._result.announcement,
            data=self._result.to_dict(),
        )
        logger.info(
            "Match %s over after %d tricks: %s (%d-%d)",
            self.id,
            len(self._completed),
            self._result.winner.value if self._result.winner else "draw",
            self._result.team_a,
            self._result.team_b,
        )

    # Validation helpers

    def _check_player(self, player_id: int) -> None:
        if not isinstance(player_id, int) or not 0 <= player_id < self.table_size:
            msg = f"No seat {player_id!r} at a {self.table_size}-player table"
            raise IllegalMoveError(msg, ErrorCode.INVALID_PLAYER)

    def _check_can_play(self, player_id: int) -> None:
        if self.phase == GamePhase.GAME_OVER:
            raise ActionAfterTerminationError
        if self.phase != GamePhase.PLAY:
            msg = f"Cannot play during {self.phase.value}"
            raise IllegalMoveError(msg, ErrorCode.NOT_IN_PLAY_PHASE)
        self._check_player(player_id)
        if player_id != self.turn:
            msg = f"Not player {player_id}'s turn (waiting on player {self.turn})"
            raise IllegalMoveError(msg, ErrorCode.NOT_YOUR_TURN)

    def _find_in_hand(self, player_id: int, card_id: str) -> Card:
        try:
            card = Card.from_id(card_id)
        except (ValueError, TypeError, AttributeError) as e:
            msg = f"Invalid card id: {card_id!r}"
            raise IllegalMoveError(msg, ErrorCode.INVALID_CARD) from e
        if card not in self._hands[player_id]:
            msg = f"Card {card.id} not in player {player_id}'s hand"
            raise IllegalMoveError(msg, ErrorCode.CARD_NOT_IN_HAND)
        return card

    def _record(
        self,
        event_type: MatchEventType,
        message: str,
        *,
        player_id: int | None = None,
        data: dict[str, Any] | None = None,
        trick_number: int | None = None,
    ) -> None:
        self._events.append(
            MatchEvent(
                match_id=self.id,
                event_type=event_type,
                message=message,
                trick_number=trick_number if trick_number is not None else self._trick.number,
                player_id=player_id,
                data=data or {},
            )
        )

    # Snapshots

    def snapshot(self, viewer: int = PRIMARY_SEAT) -> MatchSnapshot:
        """Build a read-only snapshot from one seat's point of view."""
        self._check_player(viewer)
        valid: list[str] = []
        if self.phase == GamePhase.PLAY and self.turn == viewer:
            valid = [card.id for card in self.valid_cards(viewer)]

        result = ResultInfo(**self._result.to_dict()) if self._result else None
        return MatchSnapshot(
            match_id=self.id,
            table_size=self.table_size,
            phase=self.phase,
            turn=self.turn,
            viewer=viewer,
            hand=[CardInfo.from_card(card) for card in self._hands[viewer]],
            hand_sizes=[len(hand) for hand in self._hands],
            valid_cards=valid,
            trick=[_table_card(pc) for pc in self._trick.plays],
            lead_suit=self._trick.lead_suit,
            trump=TrumpInfo(suit=self._trump.effective_suit, revealed=self._trump.revealed),
            captured_tens=CapturedTensInfo(
                team_a=[CardInfo.from_card(card) for card in self._captured.team_a],
                team_b=[CardInfo.from_card(card) for card in self._captured.team_b],
            ),
            tricks_played=len(self._completed),
            result=result,
        )

    def __str__(self) -> str:
        """Return string representation."""
        return (
            f"Match {self.id}: {self.table_size} players, "
            f"Trick {self._trick.number}, Phase: {self.phase.value}"
        )


def _table_card(played: PlayedCard) -> TableCard:
    return TableCard(player_id=played.player_id, card=CardInfo.from_card(played.card))
