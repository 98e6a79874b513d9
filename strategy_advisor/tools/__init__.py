"""MCP tools package.

This package contains modular tool registration functions for the MCP server.
Each module focuses on a specific domain of functionality.
"""

from strategy_advisor.tools.advisor import register_advisor_tools

__all__ = [
    "register_advisor_tools",
]
