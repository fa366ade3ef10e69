"""API routers."""

from .mcp import router as mcp_router
from .conversations import router as conversations_router

__all__ = ["mcp_router", "conversations_router"]
