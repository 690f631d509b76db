from .server import create_mcp_server, dispatch, run_mcp_server, to_call_tool_result

__all__ = ["create_mcp_server", "dispatch", "run_mcp_server", "to_call_tool_result"]
