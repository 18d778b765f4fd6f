"""Match driver: paces bot moves and trick sweeps around the engine."""

import logging
import random
from collections.abc import Awaitable, Callable
from functools import partial
from typing import Any

from mindi.api.responses import ServerMessage
from mindi.bots import MoveSource, seat_sources
from mindi.config import Settings
from mindi.config import settings as default_settings
from mindi.constants import PRIMARY_SEAT
from mindi.models.deck import validate_table_size
from mindi.models.enums import Command, ErrorCode, GamePhase
from mindi.models.errors import ActionAfterTerminationError, IllegalMoveError
from mindi.models.match import Match
from mindi.models.snapshot import MatchSnapshot
from mindi.services.scheduler import ActionScheduler

logger = logging.getLogger(__name__)

Listener = Callable[[ServerMessage], Awaitable[None]]
SourcesFactory = Callable[[int], list[MoveSource]]


class MatchHandler:
    """Owns one table: the current Match, its seat sources and its timers.

    Human input and bot moves both go through Match.play_card. Bot moves,
    trick resolution and the final announcement are deferred through the
    scheduler; starting a new match cancels whatever the previous one still
    had pending, and every deferred action re-checks that its match is still
    current and not over before touching it.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        scheduler: ActionScheduler | None = None,
        sources_factory: SourcesFactory = seat_sources,
    ) -> None:
        """Initialize the handler.

        Args:
            settings: Pacing settings (module-level settings if omitted)
            scheduler: Scheduler for deferred actions
            sources_factory: Builds the move source for every seat of a table

        """
        self.settings = settings or default_settings
        self.scheduler = scheduler or ActionScheduler()
        self.match: Match | None = None
        self.sources: list[MoveSource] = []
        self._sources_factory = sources_factory
        self._listeners: list[Listener] = []

    def add_listener(self, listener: Listener) -> None:
        """Subscribe to pushed ServerMessages."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        """Unsubscribe a listener."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def require_match(self) -> Match:
        """Get the current match."""
        if self.match is None:
            msg = "No match has been started"
            raise RuntimeError(msg)
        return self.match

    def snapshot(self, viewer: int = PRIMARY_SEAT) -> MatchSnapshot:
        """Snapshot of the current match."""
        return self.require_match().snapshot(viewer)

    def log_since(self, index: int = 0) -> tuple[list[str], int]:
        """Log lines from index onwards, plus the index to resume from."""
        lines = self.require_match().log_lines
        return lines[index:], len(lines)

    async def start_match(
        self, table_size: int, *, rng: random.Random | None = None
    ) -> MatchSnapshot:
        """Start a fresh match, dropping anything the previous one had pending.

        Raises:
            InvalidTableSizeError: Unsupported table size; the current match is kept

        """
        validate_table_size(table_size)

        previous = self.match
        cancelled = self.scheduler.cancel_all()
        if previous is not None:
            logger.info(
                "Replacing match %s (%d pending action(s) cancelled)", previous.id, cancelled
            )

        match = Match.start(table_size, rng=rng)
        self.match = match
        self.sources = self._sources_factory(table_size)

        await self._publish(
            match,
            Command.STARTED,
            {"table_size": table_size, "snapshot": match.snapshot().model_dump(mode="json")},
        )
        self._schedule_next_move(match)
        return match.snapshot()

    async def play_card(self, card_id: str, player_id: int = PRIMARY_SEAT) -> MatchSnapshot:
        """Play a card for an interactive seat.

        Raises:
            ActionAfterTerminationError: The match is over
            IllegalMoveError: The move is rejected; nothing changes

        """
        match = self.require_match()
        if not 0 <= player_id < len(self.sources) or not self.sources[player_id].is_interactive:
            msg = f"Seat {player_id} is not controlled interactively"
            raise IllegalMoveError(msg, ErrorCode.INVALID_PLAYER)
        return await self._submit(match, player_id, card_id)

    async def close(self) -> None:
        """Cancel everything pending and forget the match."""
        self.scheduler.cancel_all()
        self.match = None
        self._listeners.clear()

    async def wait_idle(self) -> None:
        """Wait until no deferred action is pending."""
        await self.scheduler.wait_idle()

    # Flow

    async def _submit(self, match: Match, player_id: int, card_id: str) -> MatchSnapshot:
        was_revealed = match.trump.revealed
        snapshot = match.play_card(player_id, card_id)

        trump = match.trump
        if trump.revealed and not was_revealed:
            await self._publish(
                match,
                Command.TRUMP_REVEALED,
                {"player_id": player_id, "suit": trump.suit.value},
            )
        await self._publish(match, Command.PICKED, {"player_id": player_id, "card_id": card_id})
        if self._is_replaced(match):
            return snapshot

        if match.phase == GamePhase.TRICK_END:
            self.scheduler.schedule(
                self.settings.trick_resolution_delay,
                partial(self._resolve_trick, match),
                name=f"resolve-{match.id}",
            )
        else:
            self._schedule_next_move(match)
        return snapshot

    def _schedule_next_move(self, match: Match) -> None:
        if match.phase != GamePhase.PLAY or self.sources[match.turn].is_interactive:
            return
        self.scheduler.schedule(
            self.settings.bot_move_delay,
            partial(self._bot_move, match),
            name=f"bot-{match.id}-{match.turn}",
        )

    def _is_replaced(self, match: Match) -> bool:
        # A listener may have started a new match while we were publishing
        if match is self.match:
            return False
        logger.debug("Match %s was replaced while publishing", match.id)
        return True

    def _is_stale(self, match: Match, action: str) -> bool:
        if match is not self.match:
            logger.debug("Discarding %s for replaced match %s", action, match.id)
            return True
        if match.is_over():
            logger.debug("Discarding %s for finished match %s", action, match.id)
            return True
        return False

    async def _bot_move(self, match: Match) -> None:
        if self._is_stale(match, "bot move") or match.phase != GamePhase.PLAY:
            return

        seat = match.turn
        source = self.sources[seat]
        card = source.choose_card(match.hand(seat), match.trick)
        if card is None:
            return

        logger.info("Bot %d plays %s in match %s", seat, card, match.id)
        try:
            await self._submit(match, seat, card.id)
        except ActionAfterTerminationError:
            logger.debug("Discarding bot move after termination of match %s", match.id)

    async def _resolve_trick(self, match: Match) -> None:
        if self._is_stale(match, "trick resolution"):
            return
        try:
            match.resolve_trick()
        except ActionAfterTerminationError:
            logger.debug("Discarding trick resolution after termination of match %s", match.id)
            return

        last = match.completed_tricks[-1]
        captured = match.captured
        await self._publish(
            match,
            Command.ANNOUNCE_TRICK_WINNER,
            {
                "trick": last.number,
                "winner_player_id": last.winner_id,
                "captured_tens": [card.id for card in last.captured_tens],
                "team_a": len(captured.team_a),
                "team_b": len(captured.team_b),
            },
        )
        if self._is_replaced(match):
            return

        if match.is_over():
            self.scheduler.schedule(
                self.settings.game_over_delay,
                partial(self._announce_result, match),
                name=f"game-over-{match.id}",
            )
        else:
            self._schedule_next_move(match)

    async def _announce_result(self, match: Match) -> None:
        if match is not self.match or match.result is None:
            return
        await self._publish(match, Command.END_GAME, match.result.to_dict())

    async def _publish(self, match: Match, command: Command, content: dict[str, Any]) -> None:
        message = ServerMessage(command=command, match_id=match.id, content=content)
        for listener in list(self._listeners):
            try:
                await listener(message)
            except Exception:
                logger.exception("Listener failed on %s for match %s", command.value, match.id)
