"""
MCP server: JSON-RPC 2.0 dispatch for initialize, tools/list and tools/call.

Requests are handled one envelope at a time with no session state.
Notifications get no JSON-RPC body; everything else gets exactly one
response object.
"""

import math
from typing import Any, Dict, Optional

from pydantic import ValidationError

from ..errors import InvalidTranscriptError
from ..models.conversation import SaveConversationArguments
from ..models.jsonrpc import (
    JSONRPC_VERSION,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    INVALID_PARAMS,
    INTERNAL_ERROR,
    JsonRpcError,
    JsonRpcRequest,
    McpMethod,
)
from ..services.persistence import ConversationPersistence
from ..services.transcript import normalize_transcript
from ..utils.logger import get_app_logger
from .tools import SAVE_CONVERSATION, TOOLS

PROTOCOL_VERSION = "2024-11-05"


def make_result(request_id: Any, result: Any) -> Dict[str, Any]:
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "result": result}


def make_error(request_id: Any, code: int, message: str) -> Dict[str, Any]:
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "error": {"code": code, "message": message}}


def is_notification(body: Any) -> bool:
    """A notification has a method and no id key at all."""
    return isinstance(body, dict) and "method" in body and "id" not in body


def echo_id(body: Any) -> Any:
    """Return the request id if it is a usable JSON-RPC id, else None."""
    if not isinstance(body, dict):
        return None
    request_id = body.get("id")
    if isinstance(request_id, bool):
        return None
    if isinstance(request_id, float) and not math.isfinite(request_id):
        return None
    if isinstance(request_id, (str, int, float)):
        return request_id
    return None


def _describe_validation_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error.get("loc", ()))
    message = error.get("msg", "invalid value")
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    if location:
        return f"Invalid arguments: {location}: {message}"
    return f"Invalid arguments: {message}"


class McpServer:
    """Dispatches JSON-RPC envelopes to MCP method handlers."""

    def __init__(
        self,
        persistence: ConversationPersistence,
        server_name: str = "omniconvo",
        server_version: str = "1.0.0"
    ):
        self.persistence = persistence
        self.server_name = server_name
        self.server_version = server_version
        self.logger = get_app_logger()

    async def handle(self, body: Any) -> Optional[Dict[str, Any]]:
        """
        Handle one decoded request body.

        Args:
            body: Parsed JSON body

        Returns:
            Response object, or None for a notification
        """
        if is_notification(body):
            self.logger.debug(f"Notification received: {body.get('method')}")
            return None

        request_id = echo_id(body)
        try:
            request = self._parse_request(body)
            request_id = request.id
            result = await self._dispatch(request)
            return make_result(request_id, result)
        except JsonRpcError as e:
            self.logger.warning(f"JSON-RPC error {e.code}: {e.message}")
            return make_error(request_id, e.code, e.message)
        except Exception:
            self.logger.exception("Unhandled error while dispatching request")
            return make_error(request_id, INTERNAL_ERROR, "Internal server error")

    def _parse_request(self, body: Any) -> JsonRpcRequest:
        if not isinstance(body, dict):
            raise JsonRpcError(INVALID_REQUEST, "Invalid Request")
        try:
            return JsonRpcRequest.model_validate(body)
        except ValidationError:
            raise JsonRpcError(INVALID_REQUEST, "Invalid Request")

    async def _dispatch(self, request: JsonRpcRequest) -> Any:
        method = request.mcp_method
        if method is McpMethod.INITIALIZE:
            return self.initialize()
        if method is McpMethod.TOOLS_LIST:
            return self.list_tools()
        if method is McpMethod.TOOLS_CALL:
            return await self.call_tool(request.params or {})
        raise JsonRpcError(METHOD_NOT_FOUND, f"Unknown method: {request.method}")

    def initialize(self) -> Dict[str, Any]:
        return {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {"tools": {}},
            "serverInfo": {
                "name": self.server_name,
                "version": self.server_version,
            },
        }

    def list_tools(self) -> Dict[str, Any]:
        return {"tools": TOOLS}

    async def call_tool(self, params: Dict[str, Any]) -> Dict[str, Any]:
        name = params.get("name")
        if not name or not isinstance(name, str):
            raise JsonRpcError(INVALID_PARAMS, "Missing tool name")

        arguments = params.get("arguments")
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, dict):
            raise JsonRpcError(INVALID_PARAMS, "Tool arguments must be an object")

        if name == SAVE_CONVERSATION:
            return await self.save_conversation(arguments)
        raise JsonRpcError(METHOD_NOT_FOUND, f"Unknown tool: {name}")

    async def save_conversation(self, arguments: Dict[str, Any]) -> Dict[str, Any]:
        """Validate arguments, persist the transcript and announce its permalink."""
        try:
            args = SaveConversationArguments.model_validate(arguments)
        except ValidationError as e:
            raise JsonRpcError(INVALID_PARAMS, _describe_validation_error(e))

        try:
            transcript = normalize_transcript(
                text=args.conversation_text,
                turns=args.conversation_history,
                title=args.title,
            )
        except InvalidTranscriptError as e:
            raise JsonRpcError(INVALID_PARAMS, f"Invalid arguments: {e}")

        try:
            permalink = await self.persistence.save_conversation(transcript)
        except Exception:
            self.logger.exception("Failed to save conversation")
            raise JsonRpcError(INTERNAL_ERROR, "Internal server error")

        return {
            "content": [
                {"type": "text", "text": f"Conversation saved: {permalink}"}
            ]
        }
