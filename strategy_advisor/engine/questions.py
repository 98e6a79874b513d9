"""Question text and answer options for each questionnaire position."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

from strategy_advisor.engine.rules import (
    EXTRACT_SCHEMAS,
    ICEBERG_CONVERSION,
    READ_ONLY_TEST,
    SCHEMAS_DATA,
    SCHEMAS_ONLY,
    SHARED_STORAGE,
    STORAGE_MIGRATION,
    Step,
    goal_context,
)


@dataclass(frozen=True)
class Option:
    value: str
    label: str
    description: str = ""


@dataclass(frozen=True)
class Question:
    prompt: str
    options: Tuple[Option, ...]

    def to_dict(self) -> Dict[str, object]:
        return {
            "prompt": self.prompt,
            "options": [
                {"value": o.value, "label": o.label, "description": o.description}
                for o in self.options
            ],
        }


_CHARACTERISTICS_QUESTION = Question(
    prompt="What describes your table characteristics?",
    options=(
        Option(
            "mixed",
            "🔀 Mix of small and large partitioned tables",
            "HYBRID strategy recommended - Auto-selects best method per table",
        ),
        Option(
            "small-partitions",
            "📊 Mostly tables with < 100 partitions",
            "EXPORT_IMPORT strategy recommended - Good for small partitioned tables",
        ),
        Option(
            "large-partitions",
            "📈 Mostly tables with > 100 partitions",
            "SQL strategy recommended - Better for large partitioned tables",
        ),
    ),
)

QUESTIONS: Dict[Tuple[Step, Optional[str]], Question] = {
    (Step.GOAL, None): Question(
        prompt="What is your primary migration goal?",
        options=(
            Option(
                SCHEMAS_DATA,
                "🔄 Move schemas + data between clusters",
                "Migrate both metadata and data to a different cluster",
            ),
            Option(
                SCHEMAS_ONLY,
                "📋 Move schemas only, handle data separately",
                "Migrate metadata only, use distcp for data movement",
            ),
            Option(
                ICEBERG_CONVERSION,
                "🧊 Convert to Iceberg format",
                "Convert existing tables to Iceberg table format",
            ),
            Option(
                STORAGE_MIGRATION,
                "📦 Move data within cluster to new storage",
                "Change storage location within same cluster (HDFS→Ozone, HDFS→S3)",
            ),
            Option(
                READ_ONLY_TEST,
                "🔗 Test new cluster with old data (read-only)",
                "Create read-only access to existing data for testing",
            ),
            Option(
                SHARED_STORAGE,
                "🤝 Clusters share same physical storage",
                "Only metadata needs to move, data is already accessible",
            ),
            Option(
                EXTRACT_SCHEMAS,
                "💾 Extract schemas only (no target yet)",
                "Generate SQL files for later manual execution",
            ),
        ),
    ),
    (Step.DETAIL, SCHEMAS_DATA): Question(
        prompt="Can your clusters access each other's storage?",
        options=(
            Option("yes", "✅ Yes, clusters can access each other's storage"),
            Option(
                "intermediate",
                "❌ No, but we have intermediate storage both can access",
            ),
            Option("no", "🚫 No shared storage access at all"),
        ),
    ),
    (Step.DETAIL, ICEBERG_CONVERSION): Question(
        prompt="Where do you want the Iceberg tables?",
        options=(
            Option(
                "same-cluster",
                "🎯 Same cluster (in-place conversion)",
                "STORAGE_MIGRATION with SQL recommended",
            ),
            Option(
                "different-cluster",
                "🔄 Different cluster (conversion during migration)",
                "SQL strategy with Iceberg conversion recommended",
            ),
        ),
    ),
    (Step.CHARACTERISTICS, SCHEMAS_DATA): _CHARACTERISTICS_QUESTION,
    (Step.CHARACTERISTICS, ICEBERG_CONVERSION): _CHARACTERISTICS_QUESTION,
}

ERROR_TITLE = "❌ Direct data movement not possible"
ERROR_MESSAGE = (
    "Without shared storage access, direct data movement between clusters "
    "is not possible."
)


def get_question(step: Step, answers: Mapping[Step, str]) -> Optional[Question]:
    """Get the question shown at ``step``.

    Args:
        step: The current questionnaire step.
        answers: Answers recorded so far (supplies the goal context).

    Returns:
        The Question, or None for terminal steps.
    """
    return QUESTIONS.get((step, goal_context(step, answers)))


def option_labels(question: Question) -> List[str]:
    return [f"{o.value}: {o.label}" for o in question.options]
