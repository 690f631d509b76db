"""
MCP Server Runner

Run this to start the Indexy MCP server for Claude/Cursor integration.
Configure authentication in .env (see .env.example).
"""

from indexy_mcp.main import main

if __name__ == "__main__":
    main()
