"""MCP JSON-RPC endpoint."""

import json

from fastapi import APIRouter, HTTPException, Request, Response
from fastapi.responses import JSONResponse

from ..mcp import McpServer
from ..mcp.server import make_error
from ..models.jsonrpc import PARSE_ERROR

router = APIRouter(prefix="/api/mcp", tags=["MCP"])

# MCP server (set by main.py)
mcp_server: McpServer = None


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


def get_mcp_server() -> McpServer:
    """Return the configured MCP server."""
    if mcp_server is None:
        raise HTTPException(status_code=500, detail="MCP server not initialized")
    return mcp_server


@router.post("")
async def handle_jsonrpc(request: Request):
    """Handle one JSON-RPC request or notification."""
    server = get_mcp_server()

    try:
        body = json.loads(await request.body(), parse_constant=_reject_constant)
    except ValueError:
        return JSONResponse(make_error(None, PARSE_ERROR, "Parse error"))

    response = await server.handle(body)
    if response is None:
        return Response(status_code=204)
    return JSONResponse(response)


@router.get("")
async def mcp_health():
    """Liveness payload for MCP clients probing the endpoint."""
    return {"status": "healthy", "server": get_mcp_server().server_name}
