"""Tests for tool dispatch, resources and the MCP request handlers"""

import json

import pytest
from mcp import types

from indexy_mcp.mcp import create_mcp_server, dispatch, to_call_tool_result
from indexy_mcp.mcp.resources import RESOURCES, get_resource
from indexy_mcp.mcp.server import ToolOutcome


@pytest.mark.asyncio
async def test_get_index_404_becomes_tool_error(client, handler):
    handler.status_code = 404
    handler.body = '{"error":"not found"}'

    outcome = await dispatch(client, "get_index", {"indexId": 99})
    assert not outcome.ok

    result = to_call_tool_result(outcome)
    assert result.isError is True
    text = result.content[0].text
    assert text.startswith("Error: ")
    assert "404" in text
    assert '{"error":"not found"}' in text


@pytest.mark.asyncio
async def test_success_is_pretty_printed_json(client, handler):
    handler.body = '{"success":true,"user":{"id":123,"username":"MyAgent"}}'

    result = to_call_tool_result(await dispatch(client, "get_profile", {}))

    assert not result.isError
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    assert result.content[0].text == json.dumps(
        {"success": True, "user": {"id": 123, "username": "MyAgent"}}, indent=2
    )


@pytest.mark.asyncio
async def test_update_index_request_shape(client, handler):
    handler.body = '{"success":true}'

    await dispatch(client, "update_index", {"indexId": 42, "name": "X"})

    assert handler.last.method == "PATCH"
    assert handler.last.url.path == "/beta/indexes/agent/42"
    assert handler.last_json() == {"name": "X"}


@pytest.mark.asyncio
async def test_public_indexes_request_shape(client, handler):
    await dispatch(client, "get_public_indexes", {"featured": True, "limit": 5})

    assert handler.last.url.path == "/beta/indexes"
    assert handler.last.url.query == b"featured=true&limit=5&offset=0"


@pytest.mark.asyncio
async def test_unknown_tool_makes_no_request(client, handler):
    outcome = await dispatch(client, "nope", {})

    assert outcome.error == "Unknown tool: nope"
    assert handler.requests == []


@pytest.mark.asyncio
async def test_missing_path_argument_makes_no_request(client, handler):
    outcome = await dispatch(client, "get_index", {})

    assert not outcome.ok
    assert "indexId" in outcome.error
    assert handler.requests == []


def test_empty_success_payload():
    result = to_call_tool_result(ToolOutcome.success({}))
    assert result.content[0].text == "{}"


def test_resources_registry():
    assert list(RESOURCES) == [
        "indexy://docs/overview",
        "indexy://docs/create-index",
        "indexy://docs/update-index",
        "indexy://docs/validation",
        "indexy://docs/public-endpoints",
        "indexy://docs/kpis",
        "indexy://docs/mindshare",
        "indexy://docs/profile",
    ]
    for doc in RESOURCES.values():
        assert doc.mime_type == "text/markdown"
        assert doc.text.startswith("# ")


def test_overview_documents_every_auth_mode():
    text = get_resource("indexy://docs/overview").text
    for name in ("INDEXY_WALLET_PRIVATE_KEY", "INDEXY_WALLET_KEYSTORE_PATH", "INDEXY_API_KEY"):
        assert name in text


def test_unknown_resource():
    with pytest.raises(ValueError, match="Resource not found: indexy://docs/missing"):
        get_resource("indexy://docs/missing")


# ==================== MCP handlers ====================

@pytest.mark.asyncio
async def test_list_tools_handler(client):
    server = create_mcp_server(client)
    handler = server.request_handlers[types.ListToolsRequest]

    result = await handler(types.ListToolsRequest(method="tools/list"))

    names = [tool.name for tool in result.root.tools]
    assert names == [
        "create_index",
        "update_index",
        "list_my_indexes",
        "get_index",
        "get_public_indexes",
        "get_public_index",
        "get_kpis_coins",
        "get_mindshare_coins",
        "get_profile",
        "update_profile",
    ]


@pytest.mark.asyncio
async def test_list_and_read_resource_handlers(client):
    server = create_mcp_server(client)

    listed = await server.request_handlers[types.ListResourcesRequest](
        types.ListResourcesRequest(method="resources/list")
    )
    assert len(listed.root.resources) == 8

    read = await server.request_handlers[types.ReadResourceRequest](
        types.ReadResourceRequest(
            method="resources/read",
            params=types.ReadResourceRequestParams(uri="indexy://docs/kpis"),
        )
    )
    contents = read.root.contents[0]
    assert contents.mimeType == "text/markdown"
    assert contents.text.startswith("# KPIs Reference")


@pytest.mark.asyncio
async def test_call_tool_handler_reports_api_error(client, handler):
    handler.status_code = 404
    handler.body = '{"error":"not found"}'
    server = create_mcp_server(client)

    result = await server.request_handlers[types.CallToolRequest](
        types.CallToolRequest(
            method="tools/call",
            params=types.CallToolRequestParams(name="get_index", arguments={"indexId": 1}),
        )
    )

    assert result.root.isError is True
    assert "404" in result.root.content[0].text


@pytest.mark.asyncio
async def test_call_tool_handler_success(client, handler):
    handler.body = '{"success":true}'
    server = create_mcp_server(client)

    result = await server.request_handlers[types.CallToolRequest](
        types.CallToolRequest(
            method="tools/call",
            params=types.CallToolRequestParams(name="get_profile", arguments={}),
        )
    )

    assert not result.root.isError
    assert json.loads(result.root.content[0].text) == {"success": True}
