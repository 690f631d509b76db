"""
Tool Registry

Each tool maps its arguments onto one Indexy API call. Routing is a pure
function of the arguments so it can be tested without any HTTP.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional
from urllib.parse import urlencode

from mcp.types import Tool

from ..errors import ToolArgumentError, UnknownToolError


class ToolName(str, Enum):
    CREATE_INDEX = "create_index"
    UPDATE_INDEX = "update_index"
    LIST_MY_INDEXES = "list_my_indexes"
    GET_INDEX = "get_index"
    GET_PUBLIC_INDEXES = "get_public_indexes"
    GET_PUBLIC_INDEX = "get_public_index"
    GET_KPIS_COINS = "get_kpis_coins"
    GET_MINDSHARE_COINS = "get_mindshare_coins"
    GET_PROFILE = "get_profile"
    UPDATE_PROFILE = "update_profile"


def format_value(value: Any) -> str:
    """Render a query/path value the way the API expects (true/false, 5 not 5.0)"""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class ApiCall:
    """One outbound request: method, path, query params and JSON body"""

    method: str
    path: str
    query: dict = field(default_factory=dict)
    body: Optional[dict] = None

    @property
    def endpoint(self) -> str:
        if not self.query:
            return self.path
        params = [(key, format_value(value)) for key, value in self.query.items()]
        return f"{self.path}?{urlencode(params)}"


@dataclass(frozen=True)
class ToolDescriptor:
    name: ToolName
    description: str
    input_schema: dict
    route: Callable[[dict], ApiCall]

    def to_tool(self) -> Tool:
        return Tool(
            name=self.name.value,
            description=self.description,
            inputSchema=self.input_schema,
        )


# ==================== ARGUMENT MAPPING ====================

def _path_id(arguments: dict, key: str = "indexId") -> str:
    value = arguments.get(key)
    if value is None or value == "":
        raise ToolArgumentError(f"Missing required argument: {key}")
    return format_value(value)


def _default(arguments: dict, key: str, default: Any) -> Any:
    value = arguments.get(key)
    return default if value is None else value


def _route_create_index(arguments: dict) -> ApiCall:
    return ApiCall("POST", "/beta/indexes/agent", body=dict(arguments))


def _route_update_index(arguments: dict) -> ApiCall:
    index_id = _path_id(arguments)
    body = {key: value for key, value in arguments.items() if key != "indexId"}
    return ApiCall("PATCH", f"/beta/indexes/agent/{index_id}", body=body)


def _route_list_my_indexes(arguments: dict) -> ApiCall:
    return ApiCall(
        "GET",
        "/beta/indexes/agent",
        query={
            "page": _default(arguments, "page", 1),
            "limit": _default(arguments, "limit", 10),
        },
    )


def _route_get_index(arguments: dict) -> ApiCall:
    return ApiCall("GET", f"/beta/indexes/agent/{_path_id(arguments)}")


def _route_get_public_indexes(arguments: dict) -> ApiCall:
    query = {}
    if arguments.get("featured") is not None:
        query["featured"] = arguments["featured"]
    if arguments.get("weights_type"):
        query["weights_type"] = arguments["weights_type"]
    if arguments.get("creator_id"):
        query["creator_id"] = arguments["creator_id"]
    query["limit"] = _default(arguments, "limit", 20)
    query["offset"] = _default(arguments, "offset", 0)
    return ApiCall("GET", "/beta/indexes", query=query)


def _route_get_public_index(arguments: dict) -> ApiCall:
    return ApiCall("GET", f"/beta/indexes/{_path_id(arguments)}")


def _route_get_kpis_coins(arguments: dict) -> ApiCall:
    query = {}
    for key in ("kpi_id", "coin_id", "time_range"):
        if arguments.get(key):
            query[key] = arguments[key]
    query["limit"] = _default(arguments, "limit", 100)
    query["offset"] = _default(arguments, "offset", 0)
    query["latest_only"] = _default(arguments, "latest_only", True)
    query["group_by_coin"] = _default(arguments, "group_by_coin", False)
    return ApiCall("GET", "/beta/kpis/coins", query=query)


def _route_get_mindshare_coins(arguments: dict) -> ApiCall:
    query = {}
    for key in ("coin_id", "time_range"):
        if arguments.get(key):
            query[key] = arguments[key]
    query["limit"] = _default(arguments, "limit", 100)
    query["offset"] = _default(arguments, "offset", 0)
    query["latest_only"] = _default(arguments, "latest_only", True)
    return ApiCall("GET", "/beta/mindshare/coins", query=query)


def _route_get_profile(arguments: dict) -> ApiCall:
    return ApiCall("GET", "/beta/profile")


def _route_update_profile(arguments: dict) -> ApiCall:
    return ApiCall("PUT", "/beta/profile", body=dict(arguments))


# ==================== SCHEMAS ====================

TIME_RANGES = ["24H", "1W", "1M", "3M", "6M", "1Y", "overall"]


def _asset_schema(network_description: str, weight_description: str) -> dict:
    return {
        "type": "object",
        "properties": {
            "contractAddress": {
                "type": "string",
                "description": "Contract address of the token (e.g., '0x1f9840a85d5af5bf1d1762f925bdaddc4201f984')"
            },
            "network": {
                "type": "string",
                "description": network_description
            },
            "weight": {
                "type": "number",
                "description": weight_description,
                "minimum": 0,
                "maximum": 100
            }
        },
        "required": ["contractAddress", "network", "weight"]
    }


def _index_id_schema(description: str) -> dict:
    return {
        "type": "object",
        "properties": {
            "indexId": {
                "type": "number",
                "description": description
            }
        },
        "required": ["indexId"]
    }


_TOOLS = [
    ToolDescriptor(
        name=ToolName.CREATE_INDEX,
        description="Create a new cryptocurrency index. The index will be marked as 'agentic' automatically.",
        input_schema={
            "type": "object",
            "properties": {
                "name": {
                    "type": "string",
                    "description": "Index name (max 40 characters)",
                    "maxLength": 40
                },
                "description": {
                    "type": "string",
                    "description": "Index description (optional, max 500 characters)",
                    "maxLength": 500
                },
                "weightsType": {
                    "type": "string",
                    "enum": ["market_caps", "custom"],
                    "description": "Weight calculation type",
                    "default": "custom"
                },
                "selectedAssets": {
                    "type": "array",
                    "description": "Array of assets with their contract addresses, networks, and weights (must sum to 100). Tokens are validated via CoinGecko.",
                    "items": _asset_schema(
                        "Network/blockchain (e.g., 'ethereum', 'polygon', 'bsc', 'arbitrum', 'optimism', 'base', 'avalanche', 'solana')",
                        "Weight percentage (0-100, must sum to 100)",
                    ),
                    "minItems": 1,
                    "maxItems": 50
                },
                "methodologyAssetEligibility": {
                    "type": "string",
                    "description": "Describe the asset eligibility criteria for this index (e.g., 'Tokens must have >$100M market cap and be listed on major exchanges')",
                    "maxLength": 2000
                },
                "methodologyWeightCaps": {
                    "type": "string",
                    "description": "Describe the weight caps methodology (e.g., 'No single asset can exceed 30% of the index')",
                    "maxLength": 2000
                },
                "methodologyRebalancingCadence": {
                    "type": "string",
                    "description": "Describe the rebalancing cadence (e.g., 'Rebalanced monthly on the first day of each month')",
                    "maxLength": 2000
                }
            },
            "required": [
                "name",
                "selectedAssets",
                "methodologyAssetEligibility",
                "methodologyWeightCaps",
                "methodologyRebalancingCadence"
            ]
        },
        route=_route_create_index,
    ),
    ToolDescriptor(
        name=ToolName.UPDATE_INDEX,
        description="Update an existing index. You can update metadata only, or provide a complete new asset composition. You can only update indices you own.",
        input_schema={
            "type": "object",
            "properties": {
                "indexId": {
                    "type": "number",
                    "description": "ID of the index to update"
                },
                "name": {
                    "type": "string",
                    "description": "New name (optional)",
                    "maxLength": 40
                },
                "description": {
                    "type": "string",
                    "description": "New description (optional)",
                    "maxLength": 500
                },
                "selectedAssets": {
                    "type": "array",
                    "description": "Complete new asset composition (optional). If provided, REPLACES ALL existing assets. If omitted, only metadata is updated. Weights must sum to 100. System checks DB first before calling CoinGecko API.",
                    "items": _asset_schema(
                        "Network/blockchain where the token exists (e.g., 'ethereum', 'polygon', 'bsc', 'arbitrum', 'optimism', 'base', 'avalanche')",
                        "Weight percentage (must sum to 100 across all assets)",
                    ),
                    "minItems": 1,
                    "maxItems": 50
                },
                "methodologyAssetEligibility": {
                    "type": "string",
                    "description": "Update asset eligibility criteria (optional)",
                    "maxLength": 2000
                },
                "methodologyWeightCaps": {
                    "type": "string",
                    "description": "Update weight caps methodology (optional)",
                    "maxLength": 2000
                },
                "methodologyRebalancingCadence": {
                    "type": "string",
                    "description": "Update rebalancing cadence (optional)",
                    "maxLength": 2000
                }
            },
            "required": ["indexId"]
        },
        route=_route_update_index,
    ),
    ToolDescriptor(
        name=ToolName.LIST_MY_INDEXES,
        description="List all indices created by this agent",
        input_schema={
            "type": "object",
            "properties": {
                "page": {
                    "type": "number",
                    "description": "Page number (default: 1)",
                    "default": 1,
                    "minimum": 1
                },
                "limit": {
                    "type": "number",
                    "description": "Results per page (default: 10, max: 50)",
                    "default": 10,
                    "minimum": 1,
                    "maximum": 50
                }
            }
        },
        route=_route_list_my_indexes,
    ),
    ToolDescriptor(
        name=ToolName.GET_INDEX,
        description="Get details of a specific index you own, including composition",
        input_schema=_index_id_schema("ID of the index to retrieve"),
        route=_route_get_index,
    ),
    ToolDescriptor(
        name=ToolName.GET_PUBLIC_INDEXES,
        description="Get all public indices with optional filtering. This shows indices created by anyone.",
        input_schema={
            "type": "object",
            "properties": {
                "featured": {
                    "type": "boolean",
                    "description": "Filter by featured status (optional)"
                },
                "weights_type": {
                    "type": "string",
                    "enum": ["market_caps", "custom"],
                    "description": "Filter by weights type (optional)"
                },
                "creator_id": {
                    "type": "number",
                    "description": "Filter by creator ID (optional)"
                },
                "limit": {
                    "type": "number",
                    "description": "Results per page (default: 20, max: 100)",
                    "default": 20,
                    "minimum": 1,
                    "maximum": 100
                },
                "offset": {
                    "type": "number",
                    "description": "Pagination offset (default: 0)",
                    "default": 0,
                    "minimum": 0
                }
            }
        },
        route=_route_get_public_indexes,
    ),
    ToolDescriptor(
        name=ToolName.GET_PUBLIC_INDEX,
        description="Get details of any public index by ID (not restricted to your own indices)",
        input_schema=_index_id_schema("ID of the index to retrieve"),
        route=_route_get_public_index,
    ),
    ToolDescriptor(
        name=ToolName.GET_KPIS_COINS,
        description="Get KPI (Key Performance Indicator) data for coins. Includes metrics like volatility, Bitcoin strength, etc.",
        input_schema={
            "type": "object",
            "properties": {
                "kpi_id": {
                    "type": "number",
                    "description": "Filter by specific KPI ID (optional)"
                },
                "coin_id": {
                    "type": "number",
                    "description": "Filter by specific coin ID (optional)"
                },
                "time_range": {
                    "type": "string",
                    "enum": TIME_RANGES,
                    "description": "Time range for the data (optional)"
                },
                "limit": {
                    "type": "number",
                    "description": "Results per page (default: 100)",
                    "default": 100,
                    "minimum": 1,
                    "maximum": 100
                },
                "offset": {
                    "type": "number",
                    "description": "Pagination offset (default: 0)",
                    "default": 0,
                    "minimum": 0
                },
                "latest_only": {
                    "type": "boolean",
                    "description": "Only return latest data (default: true)",
                    "default": True
                },
                "group_by_coin": {
                    "type": "boolean",
                    "description": "Group results by coin (default: false)",
                    "default": False
                }
            }
        },
        route=_route_get_kpis_coins,
    ),
    ToolDescriptor(
        name=ToolName.GET_MINDSHARE_COINS,
        description="Get mindshare (market attention/popularity) data for coins",
        input_schema={
            "type": "object",
            "properties": {
                "coin_id": {
                    "type": "number",
                    "description": "Filter by specific coin ID (optional)"
                },
                "time_range": {
                    "type": "string",
                    "enum": TIME_RANGES,
                    "description": "Time range for the data (optional)"
                },
                "limit": {
                    "type": "number",
                    "description": "Results per page (default: 100)",
                    "default": 100,
                    "minimum": 1,
                    "maximum": 100
                },
                "offset": {
                    "type": "number",
                    "description": "Pagination offset (default: 0)",
                    "default": 0,
                    "minimum": 0
                },
                "latest_only": {
                    "type": "boolean",
                    "description": "Only return latest data (default: true)",
                    "default": True
                }
            }
        },
        route=_route_get_mindshare_coins,
    ),
    ToolDescriptor(
        name=ToolName.GET_PROFILE,
        description="Get your agent's profile information (name, bio, etc.)",
        input_schema={"type": "object", "properties": {}},
        route=_route_get_profile,
    ),
    ToolDescriptor(
        name=ToolName.UPDATE_PROFILE,
        description="Update your agent's profile (name and/or bio). At least one field must be provided.",
        input_schema={
            "type": "object",
            "properties": {
                "name": {
                    "type": "string",
                    "description": "Agent name (1-30 characters, alphanumeric + basic punctuation)",
                    "minLength": 1,
                    "maxLength": 30
                },
                "bio": {
                    "type": "string",
                    "description": "Agent bio (max 250 characters, alphanumeric + basic punctuation)",
                    "maxLength": 250
                }
            }
        },
        route=_route_update_profile,
    ),
]

TOOLS: dict[ToolName, ToolDescriptor] = {tool.name: tool for tool in _TOOLS}


def get_tool(name: str) -> ToolDescriptor:
    try:
        return TOOLS[ToolName(name)]
    except ValueError:
        raise UnknownToolError(name) from None


def route(name: str, arguments: Optional[dict]) -> ApiCall:
    """Resolve a tool call to the API request it makes"""
    return get_tool(name).route(arguments or {})
