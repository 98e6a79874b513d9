"""Strategy recommendation engine (catalog, decision rules, question flow)."""

from strategy_advisor.engine.catalog import (
    StrategyDescriptor,
    StrategyId,
    describe,
    list_strategies,
)
from strategy_advisor.engine.controller import QuestionFlowController, SessionState
from strategy_advisor.engine.questions import Option, Question, get_question
from strategy_advisor.engine.rules import (
    Advance,
    Fail,
    Outcome,
    Resolve,
    Step,
    resolve,
    valid_tokens,
)

__all__ = [
    # Catalog
    "StrategyDescriptor",
    "StrategyId",
    "describe",
    "list_strategies",
    # Rules
    "Advance",
    "Fail",
    "Outcome",
    "Resolve",
    "Step",
    "resolve",
    "valid_tokens",
    # Questions
    "Option",
    "Question",
    "get_question",
    # Controller
    "QuestionFlowController",
    "SessionState",
]
