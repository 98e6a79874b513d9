"""Session state management package."""

from strategy_advisor.data.sessions import (
    clear_session,
    create_session,
    get_session,
    session_count,
)

__all__ = [
    "clear_session",
    "create_session",
    "get_session",
    "session_count",
]
