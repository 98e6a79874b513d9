"""Static catalog of migration strategies.

Each strategy id maps to a display descriptor (emoji label, one-line
description, key features and requirements). Lookups of ids outside the
catalog return a placeholder descriptor instead of failing, so the display
layer can always render something.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

import structlog

logger = structlog.get_logger(__name__)


class StrategyId(str, Enum):
    """Identifiers of the strategies the advisor can recommend."""

    SCHEMA_ONLY = "SCHEMA_ONLY"
    STORAGE_MIGRATION = "STORAGE_MIGRATION"
    LINKED = "LINKED"
    COMMON = "COMMON"
    DUMP = "DUMP"
    SQL = "SQL"
    EXPORT_IMPORT = "EXPORT_IMPORT"
    HYBRID = "HYBRID"


@dataclass(frozen=True)
class StrategyDescriptor:
    """Display information for a single strategy."""

    id: str
    label: str
    description: str = ""
    features: Tuple[str, ...] = field(default_factory=tuple)
    requirements: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "label": self.label,
            "description": self.description,
            "features": list(self.features),
            "requirements": list(self.requirements),
        }


UNKNOWN_LABEL = "❓"

_CATALOG: Dict[StrategyId, StrategyDescriptor] = {
    StrategyId.SQL: StrategyDescriptor(
        id=StrategyId.SQL.value,
        label="🔄",
        description="Uses SQL INSERT statements for data movement",
        features=(
            "Supports Iceberg conversion",
            "Better for large partitioned tables",
            "Uses SQL INSERT statements for data movement",
        ),
        requirements=(
            "Target cluster must be accessible",
            "Sufficient processing capacity for SQL operations",
        ),
    ),
    StrategyId.EXPORT_IMPORT: StrategyDescriptor(
        id=StrategyId.EXPORT_IMPORT.value,
        label="📦",
        description="Hive Export/Import mechanism",
        features=(
            "Better for smaller partitioned tables",
            "More robust for complex table structures",
            "Uses Hive EXPORT/IMPORT mechanism",
        ),
        requirements=(
            "Target cluster must be accessible",
            "Sufficient storage for export staging",
        ),
    ),
    StrategyId.HYBRID: StrategyDescriptor(
        id=StrategyId.HYBRID.value,
        label="🔀",
        description="Mix of SQL and EXPORT_IMPORT strategies",
        features=(
            "Auto-selects method per table",
            "Good if you're unsure about partition sizes",
            "Optimizes data movement based on table characteristics",
        ),
        requirements=(
            "Target cluster must be accessible",
            "Works best with mixed workloads",
        ),
    ),
    StrategyId.SCHEMA_ONLY: StrategyDescriptor(
        id=StrategyId.SCHEMA_ONLY.value,
        label="📋",
        description="Metadata migration only",
        features=(
            "Generates distcp plans for data movement",
            "Fastest metadata migration",
            "Allows separate data movement timeline",
        ),
        requirements=(
            "Manual data movement using distcp",
            "Access to both cluster storage systems",
        ),
    ),
    StrategyId.STORAGE_MIGRATION: StrategyDescriptor(
        id=StrategyId.STORAGE_MIGRATION.value,
        label="📦",
        description="In-cluster storage migration",
        features=(
            "Changes storage location within cluster",
            "Supports SQL or DISTCP methods",
            "Can handle HDFS→Ozone, HDFS→S3 migrations",
        ),
        requirements=(
            "Access to both source and target storage",
            "Sufficient capacity in target storage",
        ),
    ),
    StrategyId.LINKED: StrategyDescriptor(
        id=StrategyId.LINKED.value,
        label="🔗",
        description="Read-only testing access",
        features=(
            "Read-only access for testing",
            "No data movement",
            "Automatically sets safety flags",
        ),
        requirements=(
            "Original cluster must remain accessible",
            "Testing/validation purposes only",
        ),
    ),
    StrategyId.COMMON: StrategyDescriptor(
        id=StrategyId.COMMON.value,
        label="🤝",
        description="Shared storage metadata migration",
        features=(
            "No data movement needed",
            "Fast migration",
            "Shared storage access",
        ),
        requirements=(
            "Clusters must share physical storage",
            "Metadata-only migration",
        ),
    ),
    StrategyId.DUMP: StrategyDescriptor(
        id=StrategyId.DUMP.value,
        label="💾",
        description="Schema extraction only",
        features=(
            "Generates SQL files",
            "No target cluster required",
            "Manual execution control",
        ),
        requirements=(
            "Manual SQL execution later",
            "Storage for generated scripts",
        ),
    ),
}


def describe(strategy_id: Optional[Union[StrategyId, str]]) -> StrategyDescriptor:
    """Return the descriptor for a strategy id.

    Args:
        strategy_id: A StrategyId or its string value.

    Returns:
        The catalog descriptor, or a placeholder descriptor (unknown label,
        empty features and requirements) when the id is not in the catalog.
    """
    try:
        return _CATALOG[StrategyId(strategy_id)]
    except ValueError:
        logger.debug("unknown_strategy_id", strategy_id=strategy_id)
        return StrategyDescriptor(
            id="" if strategy_id is None else str(strategy_id),
            label=UNKNOWN_LABEL,
        )


def list_strategies() -> List[StrategyDescriptor]:
    """All descriptors, in StrategyId declaration order."""
    return [_CATALOG[strategy_id] for strategy_id in StrategyId]
