"""MCP protocol server."""

from .server import McpServer
from .tools import TOOLS, SAVE_CONVERSATION

__all__ = ["McpServer", "TOOLS", "SAVE_CONVERSATION"]
