"""Tests for the deferred action scheduler."""

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from mindi.services.scheduler import ActionScheduler

pytestmark = pytest.mark.anyio


@pytest.fixture
def scheduler():
    return ActionScheduler()


class TestSchedule:
    """Scheduling and running actions."""

    async def test_runs_async_action(self, scheduler):
        """Coroutine actions are awaited."""
        action = AsyncMock()
        scheduler.schedule(0, action, name="async")
        await scheduler.wait_idle()
        action.assert_awaited_once()
        assert scheduler.pending == 0

    async def test_runs_sync_action(self, scheduler):
        """Plain callables are called."""
        action = MagicMock(return_value=None)
        scheduler.schedule(0, action, name="sync")
        await scheduler.wait_idle()
        action.assert_called_once()

    async def test_pending_counts_waiting_actions(self, scheduler):
        """Actions still sleeping are pending."""
        scheduler.schedule(60, AsyncMock())
        scheduler.schedule(60, AsyncMock())
        assert scheduler.pending == 2
        scheduler.cancel_all()
        await scheduler.wait_idle()

    async def test_wait_idle_follows_chained_actions(self, scheduler):
        """Actions scheduled by running actions are waited for too."""
        calls = []

        async def second():
            calls.append("second")

        async def first():
            calls.append("first")
            scheduler.schedule(0, second, name="second")

        scheduler.schedule(0, first, name="first")
        await scheduler.wait_idle()
        assert calls == ["first", "second"]


class TestCancel:
    """Cancelling pending actions."""

    async def test_cancel_all_stops_pending_actions(self, scheduler):
        """Cancelled actions never run."""
        action = AsyncMock()
        scheduler.schedule(60, action)
        scheduler.schedule(60, action)

        assert scheduler.cancel_all() == 2
        await scheduler.wait_idle()

        action.assert_not_awaited()
        assert scheduler.pending == 0

    async def test_cancel_all_with_nothing_pending(self, scheduler):
        """Cancelling an idle scheduler is a no-op."""
        assert scheduler.cancel_all() == 0


class TestFailures:
    """Failing actions are logged, not propagated."""

    async def test_failing_action_is_logged(self, scheduler, caplog):
        """An exception inside an action is logged and the scheduler keeps working."""

        async def boom():
            raise RuntimeError("boom")

        with caplog.at_level(logging.ERROR, logger="mindi.services.scheduler"):
            scheduler.schedule(0, boom, name="boom")
            await scheduler.wait_idle()

        assert "Scheduled action boom failed" in caplog.text

        action = AsyncMock()
        scheduler.schedule(0, action)
        await scheduler.wait_idle()
        action.assert_awaited_once()
