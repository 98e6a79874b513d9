"""Decision rules for the strategy questionnaire.

Transitions are an explicit table keyed by ``(step, goal context, token)``.
The goal context is the answer recorded for ``Step.GOAL``; it is ``None`` for
the goal question itself. Every key maps to exactly one outcome:

- ``Advance(next_step)``: show another question.
- ``Resolve(strategy, reasoning)``: a strategy was chosen.
- ``Fail(reasoning)``: no strategy fits; reasoning holds the remediation.

Any key outside the table is a caller error and raises InvalidTransition.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple, Union

from strategy_advisor.engine.catalog import StrategyId
from strategy_advisor.exceptions import InvalidTransition


class Step(str, Enum):
    """Positions in the questionnaire."""

    GOAL = "GOAL"
    DETAIL = "DETAIL"
    CHARACTERISTICS = "CHARACTERISTICS"
    ERROR = "ERROR"
    CONFIRMATION = "CONFIRMATION"


ANSWERABLE_STEPS = frozenset({Step.GOAL, Step.DETAIL, Step.CHARACTERISTICS})
TERMINAL_STEPS = frozenset({Step.ERROR, Step.CONFIRMATION})

# Goal tokens
SCHEMAS_DATA = "schemas-data"
SCHEMAS_ONLY = "schemas-only"
ICEBERG_CONVERSION = "iceberg-conversion"
STORAGE_MIGRATION = "storage-migration"
READ_ONLY_TEST = "read-only-test"
SHARED_STORAGE = "shared-storage"
EXTRACT_SCHEMAS = "extract-schemas"


@dataclass(frozen=True)
class Advance:
    next_step: Step


@dataclass(frozen=True)
class Resolve:
    strategy: StrategyId
    reasoning: Tuple[str, ...]


@dataclass(frozen=True)
class Fail:
    reasoning: Tuple[str, ...]


Outcome = Union[Advance, Resolve, Fail]
RuleKey = Tuple[Step, Optional[str], str]

_BETWEEN_CLUSTERS = (
    "You want to move schemas + data between clusters",
    "Clusters can access each other's storage",
)

_CHARACTERISTICS: Dict[str, Outcome] = {
    "mixed": Resolve(
        StrategyId.HYBRID,
        _BETWEEN_CLUSTERS
        + (
            "You have a mix of small and large partitioned tables",
            "Auto-selects best method per table based on partition count",
        ),
    ),
    "small-partitions": Resolve(
        StrategyId.EXPORT_IMPORT,
        _BETWEEN_CLUSTERS
        + (
            "You have mostly tables with < 100 partitions",
            "EXPORT_IMPORT is good for small partitioned tables",
        ),
    ),
    "large-partitions": Resolve(
        StrategyId.SQL,
        _BETWEEN_CLUSTERS
        + (
            "You have mostly tables with > 100 partitions",
            "SQL strategy is better for large partitioned tables",
        ),
    ),
}

RULES: Dict[RuleKey, Outcome] = {
    (Step.GOAL, None, SCHEMAS_DATA): Advance(Step.DETAIL),
    (Step.GOAL, None, SCHEMAS_ONLY): Resolve(
        StrategyId.SCHEMA_ONLY,
        (
            "You want to move schemas only",
            "Handles data separately via distcp",
            "Generates distcp plans for data movement",
        ),
    ),
    (Step.GOAL, None, ICEBERG_CONVERSION): Advance(Step.DETAIL),
    (Step.GOAL, None, STORAGE_MIGRATION): Resolve(
        StrategyId.STORAGE_MIGRATION,
        (
            "You want to move data within the same cluster",
            "Changes storage location (e.g., HDFS→Ozone, HDFS→S3)",
            "Can use SQL or DISTCP for data movement",
        ),
    ),
    (Step.GOAL, None, READ_ONLY_TEST): Resolve(
        StrategyId.LINKED,
        (
            "You want to test new cluster with old data (read-only)",
            "Creates read-only access to existing data",
            "Automatically sets readOnly=true and noPurge=true",
        ),
    ),
    (Step.GOAL, None, SHARED_STORAGE): Resolve(
        StrategyId.COMMON,
        (
            "Clusters share the same physical storage",
            "Only metadata needs to move",
            "No data movement needed",
        ),
    ),
    (Step.GOAL, None, EXTRACT_SCHEMAS): Resolve(
        StrategyId.DUMP,
        (
            "You want to extract schemas only",
            "No target cluster required",
            "Generates SQL files for later manual execution",
        ),
    ),
    (Step.DETAIL, SCHEMAS_DATA, "yes"): Advance(Step.CHARACTERISTICS),
    (Step.DETAIL, SCHEMAS_DATA, "intermediate"): Resolve(
        StrategyId.SQL,
        (
            "You want to move schemas + data between clusters",
            "Clusters need intermediate storage for data transfer",
            "SQL strategy recommended with intermediateStorage configured",
        ),
    ),
    (Step.DETAIL, SCHEMAS_DATA, "no"): Fail(
        (
            "Setting up intermediate storage that both clusters can access",
            "Using SCHEMA_ONLY strategy + manual data transfer via distcp",
        )
    ),
    (Step.DETAIL, ICEBERG_CONVERSION, "same-cluster"): Resolve(
        StrategyId.STORAGE_MIGRATION,
        (
            "You want to convert to Iceberg format in-place",
            "Same cluster conversion",
            "STORAGE_MIGRATION with SQL recommended",
        ),
    ),
    (Step.DETAIL, ICEBERG_CONVERSION, "different-cluster"): Advance(
        Step.CHARACTERISTICS
    ),
}

# Both contexts share the characteristics table and its reasoning.
RULES.update(
    {
        (Step.CHARACTERISTICS, context, token): outcome
        for context in (SCHEMAS_DATA, ICEBERG_CONVERSION)
        for token, outcome in _CHARACTERISTICS.items()
    }
)


def goal_context(step: Step, answers: Mapping[Step, str]) -> Optional[str]:
    """The goal answer that gives ``step`` its meaning, or None for GOAL."""
    if step is Step.GOAL:
        return None
    return answers.get(Step.GOAL)


def valid_tokens(step: Step, answers: Mapping[Step, str]) -> Tuple[str, ...]:
    """Tokens that may be answered at ``step`` given the recorded answers."""
    context = goal_context(step, answers)
    return tuple(
        token
        for (rule_step, rule_context, token) in RULES
        if rule_step is step and rule_context == context
    )


def resolve(step: Step, answers: Mapping[Step, str]) -> Outcome:
    """Resolve the answer recorded for ``step`` to its outcome.

    Raises:
        InvalidTransition: if ``step`` has no recorded answer, or the
            ``(step, goal context, token)`` combination is not declared.
    """
    token = answers.get(step)
    if token is None:
        raise InvalidTransition(
            f"No answer recorded for step {step.value}", step=step.value
        )

    key = (step, goal_context(step, answers), token)
    try:
        return RULES[key]
    except KeyError:
        raise InvalidTransition(
            f"'{token}' is not a valid answer for step {step.value}",
            step=step.value,
            token=token,
            valid_tokens=valid_tokens(step, answers),
        ) from None
