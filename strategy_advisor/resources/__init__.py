"""MCP resources package (strategy catalog).

This package contains resource registration and serialization utilities.
"""

from strategy_advisor.resources.strategies import (
    MIME_TYPE,
    STRATEGIES_URI,
    register_resources,
    strategies_json,
)

__all__ = [
    "MIME_TYPE",
    "STRATEGIES_URI",
    "register_resources",
    "strategies_json",
]
