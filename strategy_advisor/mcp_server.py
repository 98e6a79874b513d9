"""Migration strategy advisor MCP server.

This server exposes a guided questionnaire that recommends a metadata/data
migration strategy, plus a read-only resource listing every strategy.
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings

from strategy_advisor import config
from strategy_advisor.resources import register_resources
from strategy_advisor.tools import register_advisor_tools


def _transport_security_settings() -> TransportSecuritySettings:
    allowed_hosts = config.MCP_ALLOWED_HOSTS
    allowed_origins = config.MCP_ALLOWED_ORIGINS
    if not allowed_hosts and not allowed_origins:
        return TransportSecuritySettings(enable_dns_rebinding_protection=False)
    return TransportSecuritySettings(
        enable_dns_rebinding_protection=True,
        allowed_hosts=allowed_hosts,
        allowed_origins=allowed_origins,
    )


def create_mcp_server() -> FastMCP:
    """Create and configure the MCP server with strategy selection tools."""
    mcp = FastMCP(
        name=config.SERVER_NAME,
        stateless_http=True,
        transport_security=_transport_security_settings(),
    )

    register_resources(mcp)
    register_advisor_tools(mcp)

    return mcp
