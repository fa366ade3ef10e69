"""Shared pytest fixtures."""

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

from omniconvo.api import conversations, mcp as mcp_api
from omniconvo.config import AppConfig, DatabaseConfig, StorageConfig
from omniconvo.mcp import McpServer
from omniconvo.services import ConversationPersistence, LazyRuntimeInitializer


TEST_BASE_URL = "https://omniconvo.test"


@pytest.fixture
def app_config(tmp_path) -> AppConfig:
    """Provide a runtime configuration rooted in tmp_path."""
    return AppConfig(
        database=DatabaseConfig(path=str(tmp_path / "db" / "test.db")),
        storage=StorageConfig(base_path=str(tmp_path / "storage")),
        base_url=TEST_BASE_URL,
        model="Claude",
    )


@pytest.fixture
async def runtime(app_config):
    """Provide an uninitialized runtime over the test configuration."""
    rt = LazyRuntimeInitializer(lambda: app_config)
    yield rt
    await rt.close()


@pytest.fixture
def persistence(runtime) -> ConversationPersistence:
    return ConversationPersistence(runtime)


@pytest.fixture
async def client(runtime, persistence):
    """Create async HTTP client against a test app with fresh storage."""
    mcp_api.mcp_server = McpServer(persistence, server_name="omniconvo-test")
    conversations.runtime = runtime

    # Test app without lifespan
    test_app = FastAPI(title="OmniConvo Test")
    test_app.include_router(mcp_api.router)
    test_app.include_router(conversations.router)

    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    mcp_api.mcp_server = None
    conversations.runtime = None
