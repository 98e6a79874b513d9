"""MCP resources for the strategy catalog."""

from __future__ import annotations

import json
from functools import lru_cache

from mcp.server.fastmcp import FastMCP

from strategy_advisor.engine.catalog import list_strategies

STRATEGIES_URI = "strategies://catalog"
MIME_TYPE = "application/json"


@lru_cache(maxsize=1)
def strategies_json() -> str:
    """Serialize and cache the strategy catalog."""
    return json.dumps(
        [descriptor.to_dict() for descriptor in list_strategies()],
        ensure_ascii=False,
        indent=2,
    )


def register_resources(mcp: FastMCP) -> None:
    """Register catalog resources with the MCP server."""

    @mcp.resource(
        STRATEGIES_URI,
        name="Migration strategies",
        description="Available migration strategies with their features and requirements",
        mime_type=MIME_TYPE,
    )
    async def strategy_catalog() -> str:
        """Returns every migration strategy the advisor can recommend."""
        return strategies_json()
