"""Indexy MCP server - exposes the Indexy Agent API to AI agents over MCP"""

__version__ = "1.0.0"
