"""JSON-RPC 2.0 envelope models."""

from enum import Enum
from typing import Any, Dict, Literal, Optional, Union
from pydantic import BaseModel, StrictInt, StrictStr, confloat

JSONRPC_VERSION = "2.0"

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

# ids are echoed back, so they must serialize as JSON numbers
FiniteFloat = confloat(strict=True, allow_inf_nan=False)
RequestId = Optional[Union[StrictInt, FiniteFloat, StrictStr]]


class McpMethod(str, Enum):
    """Methods this server dispatches on."""

    INITIALIZE = "initialize"
    TOOLS_LIST = "tools/list"
    TOOLS_CALL = "tools/call"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, method: str) -> "McpMethod":
        try:
            return cls(method)
        except ValueError:
            return cls.UNKNOWN


class JsonRpcRequest(BaseModel):
    """A JSON-RPC request that carries an id."""

    jsonrpc: Literal["2.0"]
    id: RequestId
    method: StrictStr
    params: Optional[Dict[str, Any]] = None

    @property
    def mcp_method(self) -> McpMethod:
        return McpMethod.parse(self.method)


class JsonRpcError(Exception):
    """A protocol or validation error reported back to the caller."""

    def __init__(self, code: int, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message}
