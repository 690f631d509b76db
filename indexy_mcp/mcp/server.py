"""
MCP Server for the Indexy Agent API

Exposes index management, public data and profile endpoints as MCP tools,
plus the API documentation as resources. Each tool call becomes exactly one
request to the Indexy API.
"""

import json
from dataclasses import dataclass
from typing import Any, Optional

from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Resource, TextContent, Tool

from ..api import IndexyClient
from .resources import RESOURCES, get_resource
from .tools import TOOLS, route


SERVER_NAME = "indexy-api-mcp-server"
SERVER_VERSION = "1.0.0"


@dataclass(frozen=True)
class ToolOutcome:
    """Result of one tool call: the API payload or an error message"""

    payload: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, payload: Any) -> "ToolOutcome":
        return cls(payload=payload)

    @classmethod
    def failure(cls, message: str) -> "ToolOutcome":
        return cls(error=message)


async def dispatch(client: IndexyClient, name: str, arguments: Optional[dict]) -> ToolOutcome:
    """
    Run a tool call against the API.

    Never raises: any failure (unknown tool, missing argument, HTTP error,
    network error) comes back as ToolOutcome.failure so one bad call can't
    take the server down.
    """
    try:
        call = route(name, arguments)
        payload = await client.request(call.endpoint, call.method, call.body)
    except Exception as e:
        return ToolOutcome.failure(str(e) or type(e).__name__)
    return ToolOutcome.success(payload)


def to_call_tool_result(outcome: ToolOutcome) -> CallToolResult:
    if outcome.ok:
        text = json.dumps(outcome.payload, indent=2, ensure_ascii=False)
        return CallToolResult(content=[TextContent(type="text", text=text)])
    return CallToolResult(
        content=[TextContent(type="text", text=f"Error: {outcome.error}")],
        isError=True,
    )


def create_mcp_server(client: IndexyClient) -> Server:
    """Create and configure the MCP server"""

    server = Server(SERVER_NAME, version=SERVER_VERSION)

    # ==================== RESOURCES ====================

    @server.list_resources()
    async def list_resources() -> list[Resource]:
        return [
            Resource(
                uri=doc.uri,
                name=doc.name,
                description=doc.description,
                mimeType=doc.mime_type,
            )
            for doc in RESOURCES.values()
        ]

    @server.read_resource()
    async def read_resource(uri) -> list[ReadResourceContents]:
        doc = get_resource(uri)
        return [ReadResourceContents(content=doc.text, mime_type=doc.mime_type)]

    # ==================== TOOLS ====================

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return [tool.to_tool() for tool in TOOLS.values()]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict) -> CallToolResult:
        """Handle tool calls"""
        outcome = await dispatch(client, name, arguments)
        return to_call_tool_result(outcome)

    return server


async def run_mcp_server(client: IndexyClient):
    """Run the MCP server over stdio"""
    server = create_mcp_server(client)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
