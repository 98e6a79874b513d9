"""In-memory store of strategy selection sessions.

Each session id owns its own QuestionFlowController; nothing is shared
between sessions. State lives only as long as the process.
"""

from __future__ import annotations

from typing import Dict, Optional

from strategy_advisor.engine.controller import QuestionFlowController


_sessions: Dict[str, QuestionFlowController] = {}


def create_session() -> QuestionFlowController:
    """Create a new strategy selection session.

    Returns:
        A started controller with a unique session ID.
    """
    controller = QuestionFlowController()
    controller.start()
    _sessions[controller.session_id] = controller
    return controller


def get_session(session_id: str) -> Optional[QuestionFlowController]:
    """Get an existing session by ID.

    Args:
        session_id: The unique session identifier.

    Returns:
        The controller if found, None otherwise.
    """
    return _sessions.get(session_id)


def clear_session(session_id: str) -> Optional[QuestionFlowController]:
    """Remove a session from the store.

    Args:
        session_id: The session to remove.

    Returns:
        The removed controller, or None if not found.
    """
    return _sessions.pop(session_id, None)


def session_count() -> int:
    return len(_sessions)
