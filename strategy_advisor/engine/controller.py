"""Question flow controller for a single strategy selection session.

The controller owns the session state and routes every transition through
the decision rules; callers only pick from the options of the current step
and re-render from the controller's new position.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
from uuid import uuid4

import structlog

from strategy_advisor.engine import rules
from strategy_advisor.engine.catalog import StrategyId
from strategy_advisor.engine.rules import Advance, Fail, Resolve, Step
from strategy_advisor.exceptions import InvalidTransition

logger = structlog.get_logger(__name__)


@dataclass
class SessionState:
    """State of a strategy selection session."""

    current_step: Step = Step.GOAL
    answers: Dict[Step, str] = field(default_factory=dict)  # in answer order
    reasoning: List[str] = field(default_factory=list)
    resolved_strategy: Optional[StrategyId] = None

    def copy(self) -> "SessionState":
        return SessionState(
            current_step=self.current_step,
            answers=dict(self.answers),
            reasoning=list(self.reasoning),
            resolved_strategy=self.resolved_strategy,
        )


class QuestionFlowController:
    """Drives one operator through the strategy questionnaire."""

    def __init__(self, session_id: Optional[str] = None):
        self.session_id = session_id or uuid4().hex
        self._state = SessionState()
        # One snapshot per accepted answer, for back().
        self._history: List[SessionState] = []

    @property
    def state(self) -> SessionState:
        """A copy of the current session state."""
        return self._state.copy()

    @property
    def current_step(self) -> Step:
        return self._state.current_step

    @property
    def answers(self) -> Dict[Step, str]:
        return dict(self._state.answers)

    @property
    def reasoning(self) -> Tuple[str, ...]:
        return tuple(self._state.reasoning)

    @property
    def resolved_strategy(self) -> Optional[StrategyId]:
        return self._state.resolved_strategy

    @property
    def is_terminal(self) -> bool:
        return self._state.current_step in rules.TERMINAL_STEPS

    def valid_tokens(self) -> Tuple[str, ...]:
        """Answers accepted at the current step (empty at terminals)."""
        if self.is_terminal:
            return ()
        return rules.valid_tokens(self._state.current_step, self._state.answers)

    def start(self) -> None:
        """Put the session at the goal question with nothing answered."""
        self.restart()

    def answer(self, value: str) -> Step:
        """Record ``value`` for the current step and apply the resulting outcome.

        Args:
            value: One of the tokens valid for the current step.

        Returns:
            The new current step.

        Raises:
            InvalidTransition: if the current step is terminal or ``value`` is
                not a valid token here. The state is left unchanged.
        """
        step = self._state.current_step
        if step in rules.TERMINAL_STEPS:
            raise InvalidTransition(
                f"Cannot answer at terminal step {step.value}; restart or go back",
                step=step.value,
                token=value,
            )

        allowed = rules.valid_tokens(step, self._state.answers)
        if value not in allowed:
            raise InvalidTransition(
                f"'{value}' is not a valid answer for step {step.value}",
                step=step.value,
                token=value,
                valid_tokens=allowed,
            )

        snapshot = self._state.copy()
        self._state.answers[step] = value
        try:
            outcome = rules.resolve(step, self._state.answers)
        except InvalidTransition:
            self._state = snapshot
            raise
        self._history.append(snapshot)

        if isinstance(outcome, Advance):
            self._state.current_step = outcome.next_step
        elif isinstance(outcome, Resolve):
            self._state.reasoning.extend(outcome.reasoning)
            self._state.resolved_strategy = outcome.strategy
            self._state.current_step = Step.CONFIRMATION
        elif isinstance(outcome, Fail):
            self._state.reasoning.extend(outcome.reasoning)
            self._state.current_step = Step.ERROR

        logger.debug(
            "strategy_question_answered",
            session_id=self.session_id,
            step=step.value,
            token=value,
            outcome=type(outcome).__name__,
            next_step=self._state.current_step.value,
        )
        return self._state.current_step

    def back(self) -> Step:
        """Return to the step answered most recently, undoing that answer.

        Raises:
            InvalidTransition: at the goal question, where there is nothing
                to go back to, and at terminal steps, where only restart
                (or confirm) is allowed.
        """
        step = self._state.current_step
        if step in rules.TERMINAL_STEPS:
            raise InvalidTransition(
                f"Cannot go back from terminal step {step.value}; restart instead",
                step=step.value,
            )
        if not self._history:
            raise InvalidTransition(
                "Already at the first question", step=self._state.current_step.value
            )
        left = self._state.current_step
        self._state = self._history.pop()
        logger.debug(
            "strategy_question_back",
            session_id=self.session_id,
            from_step=left.value,
            to_step=self._state.current_step.value,
        )
        return self._state.current_step

    def restart(self) -> None:
        self._state = SessionState()
        self._history.clear()
        logger.debug("strategy_selection_restarted", session_id=self.session_id)

    def confirm(self) -> Tuple[StrategyId, Tuple[str, ...]]:
        """Return the resolved strategy and its reasoning.

        Does not change the session, so repeated calls return the same pair.

        Raises:
            InvalidTransition: unless a strategy has been resolved.
        """
        if self._state.current_step is not Step.CONFIRMATION:
            raise InvalidTransition(
                f"No strategy to confirm at step {self._state.current_step.value}",
                step=self._state.current_step.value,
            )
        return self._state.resolved_strategy, tuple(self._state.reasoning)
