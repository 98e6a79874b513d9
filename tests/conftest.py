"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from strategy_advisor.data import sessions
from strategy_advisor.engine.controller import QuestionFlowController


@pytest.fixture
def controller():
    """A started controller at the goal question."""
    ctl = QuestionFlowController(session_id="test-session")
    ctl.start()
    return ctl


@pytest.fixture(autouse=True)
def clear_session_store():
    """Keep the module-level session store empty between tests."""
    sessions._sessions.clear()
    yield
    sessions._sessions.clear()
