"""Pytest configuration for API tests."""

import pytest

from mindi.config import Settings

# Delays long enough that nothing deferred fires during a request-level test
SLOW = Settings(bot_move_delay=60, trick_resolution_delay=60, game_over_delay=60, max_sessions=3)

INSTANT = Settings(bot_move_delay=0, trick_resolution_delay=0, game_over_delay=0)


@pytest.fixture
def instant_settings():
    """Settings with every pacing delay at zero."""
    return INSTANT


@pytest.fixture
def slow_settings():
    """Settings whose pacing delays never elapse within a test."""
    return SLOW


@pytest.fixture(autouse=True)
def reset_session_manager():
    """Give each test an empty session registry with slow pacing."""
    from mindi.api.session import session_manager

    saved = session_manager.settings
    session_manager.sessions.clear()
    session_manager.settings = SLOW

    yield session_manager

    session_manager.sessions.clear()
    session_manager.settings = saved
