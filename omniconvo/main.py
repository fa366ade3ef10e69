"""FastAPI main application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from .config import settings, load_config
from .api import conversations, mcp as mcp_api
from .mcp import McpServer
from .services import ConversationPersistence, LazyRuntimeInitializer
from .utils.logger import init_app_logger


# Initialize logger
logger = init_app_logger(settings)


def build_mcp_server(runtime: LazyRuntimeInitializer) -> McpServer:
    """Wire the persistence pipeline into an MCP server."""
    return McpServer(
        ConversationPersistence(runtime),
        server_name=settings.server_name,
        server_version=settings.server_version
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    Args:
        app: FastAPI application instance
    """
    logger.info("=" * 70)
    logger.info("Starting OmniConvo...")
    logger.info("=" * 70)

    logger.info(f"  Host: {settings.host}")
    logger.info(f"  Port: {settings.port}")
    logger.info(f"  Base URL: {settings.base_url}")
    logger.info(f"  Database: {settings.database_path}")
    logger.info(f"  Storage: {settings.storage_path}")
    logger.info(f"  Log Level: {settings.log_level}")

    runtime = LazyRuntimeInitializer(lambda: load_config(settings))
    await runtime.ensure_initialized()

    # Set shared instances in API modules
    mcp_api.mcp_server = build_mcp_server(runtime)
    conversations.runtime = runtime

    logger.info(f"✅ OmniConvo started at http://{settings.host}:{settings.port}")

    yield

    logger.info("Shutting down OmniConvo...")
    await runtime.close()
    mcp_api.mcp_server = None
    conversations.runtime = None


# Create FastAPI application
app = FastAPI(
    title="OmniConvo",
    description="Save AI chat conversations and share them by permalink",
    version=settings.server_version,
    lifespan=lifespan
)

# The browser extension posts cross-origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(mcp_api.router)
app.include_router(conversations.router)


@app.get("/")
async def read_root():
    """Service index."""
    return {
        "message": "OmniConvo API",
        "version": settings.server_version,
        "docs": "/docs",
        "mcp": "/api/mcp",
        "health": "/health"
    }


@app.get("/health")
async def health():
    """
    Simple health check endpoint.

    Returns:
        Health status
    """
    return {
        "status": "healthy",
        "server": settings.server_name
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "omniconvo.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_config=None
    )
