"""Exceptions raised by the Indexy MCP server"""


class IndexyError(Exception):
    """Base class for all Indexy MCP errors"""


class ConfigError(IndexyError):
    """Fatal startup configuration problem - the server must not start"""


class WalletError(ConfigError):
    """Wallet private key or keystore could not be loaded"""


class IndexyAPIError(IndexyError):
    """Remote API answered with a non-success status"""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API request failed ({status_code}): {body}")


class IndexyRequestError(IndexyError):
    """Request never got an answer (connection refused, timeout, ...)"""


class IndexyResponseError(IndexyError):
    """Remote API answered 2xx but the body is not JSON"""


class UnknownToolError(IndexyError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class ToolArgumentError(IndexyError):
    """A tool argument needed to build the request is missing"""
