"""Tests for the session registry."""

import pytest

from mindi.api.match_handler import MatchHandler
from mindi.api.session import SessionManager
from mindi.config import Settings
from mindi.models.enums import ErrorCode, GamePhase
from mindi.models.errors import MatchNotFoundError, MindiError

pytestmark = pytest.mark.anyio


def registry_settings(**overrides) -> Settings:
    values = {
        "bot_move_delay": 0,
        "trick_resolution_delay": 0,
        "game_over_delay": 0,
        "max_sessions": 2,
    }
    values.update(overrides)
    return Settings(**values)


async def finish(handler: MatchHandler) -> None:
    """Play the primary seat's first legal card until the match ends."""
    for _ in range(200):
        await handler.wait_idle()
        snapshot = handler.snapshot()
        if snapshot.phase == GamePhase.GAME_OVER:
            return
        await handler.play_card(snapshot.valid_cards[0])
    raise AssertionError("match did not finish")


class TestSessionLimit:
    """Capacity and reclaiming."""

    async def test_finished_sessions_make_room(self):
        """Once every held match is over, a new session still fits."""
        manager = SessionManager(registry_settings())
        finished = []
        for _ in range(2):
            session_id, handler = await manager.create(4)
            await finish(handler)
            finished.append(session_id)

        session_id, handler = await manager.create(4)

        assert handler.snapshot().phase == GamePhase.PLAY
        assert list(manager.sessions) == [session_id]
        for old in finished:
            with pytest.raises(MatchNotFoundError):
                manager.get(old)

    async def test_live_sessions_are_kept(self):
        """Matches still in play are never reclaimed before their time."""
        manager = SessionManager(registry_settings())
        await manager.create(4)
        await manager.create(6)

        with pytest.raises(MindiError) as exc_info:
            await manager.create(4)

        assert exc_info.value.code == ErrorCode.TOO_MANY_SESSIONS
        assert len(manager.sessions) == 2

    async def test_only_finished_sessions_are_reclaimed(self):
        """A full registry frees finished matches and keeps the live one."""
        manager = SessionManager(registry_settings())
        live_id, _ = await manager.create(4)
        done_id, done = await manager.create(4)
        await finish(done)

        new_id, _ = await manager.create(8)

        assert set(manager.sessions) == {live_id, new_id}
        assert done_id not in manager.sessions

    async def test_idle_sessions_expire(self):
        """Sessions untouched past the TTL are reclaimed even mid-match."""
        manager = SessionManager(registry_settings(session_ttl=0))
        await manager.create(4)
        await manager.create(4)

        session_id, _ = await manager.create(4)

        assert list(manager.sessions) == [session_id]

    async def test_reclaim_leaves_room_untouched_when_not_full(self):
        """Below the limit nothing is reclaimed, finished or not."""
        manager = SessionManager(registry_settings(max_sessions=3))
        done_id, done = await manager.create(4)
        await finish(done)

        await manager.create(4)

        assert done_id in manager.sessions


class TestSessionLookup:
    """Lookup and removal."""

    async def test_unknown_session(self):
        """Unknown ids raise MatchNotFoundError."""
        manager = SessionManager(registry_settings())
        with pytest.raises(MatchNotFoundError) as exc_info:
            manager.get("missing")
        assert exc_info.value.code == ErrorCode.MATCH_NOT_FOUND

    async def test_remove_closes_handler(self):
        """Removing a session drops its match."""
        manager = SessionManager(registry_settings())
        session_id, handler = await manager.create(4)

        await manager.remove(session_id)

        assert handler.match is None
        assert session_id not in manager.sessions
