"""MCP server for browsing archives."""

from zipread.server.mcp_server import create_mcp_server

__all__ = ["create_mcp_server"]
