"""Conversation read API integration tests."""

from httpx import AsyncClient


async def _save(client: AsyncClient, text: str) -> str:
    """Save a conversation through MCP and return its record id."""
    response = await client.post("/api/mcp", json={
        "jsonrpc": "2.0", "id": 1, "method": "tools/call",
        "params": {"name": "save_conversation", "arguments": {"conversation_text": text}},
    })
    return response.json()["result"]["content"][0]["text"].rsplit("/", 1)[1]


class TestConversationAPI:
    """Tests for conversation API endpoints."""

    class TestListConversations:
        """SUT: list_conversations"""

        async def test_empty(self, client: AsyncClient):
            """Should return empty list when no conversations exist."""
            response = await client.get("/api/conversation")
            assert response.status_code == 200
            assert response.json() == {"conversations": [], "total": 0}

        async def test_after_save(self, client: AsyncClient):
            """Saved conversations should be listed with camelCase fields."""
            record_id = await _save(client, "hello")
            data = (await client.get("/api/conversation")).json()
            assert data["total"] == 1
            item = data["conversations"][0]
            assert item["id"] == record_id
            assert item["model"] == "Claude"
            assert item["sourceHtmlBytes"] == 5
            assert item["views"] == 0
            assert {"scrapedAt", "createdAt", "contentKey"} <= set(item)

        async def test_limit(self, client: AsyncClient):
            """limit should cap the list but not the total."""
            for i in range(3):
                await _save(client, f"c{i}")
            data = (await client.get("/api/conversation", params={"limit": 2})).json()
            assert len(data["conversations"]) == 2
            assert data["total"] == 3

        async def test_limit_validated(self, client: AsyncClient):
            """Out-of-range limits should be rejected."""
            response = await client.get("/api/conversation", params={"limit": 0})
            assert response.status_code == 422

    class TestGetConversation:
        """SUT: get_conversation"""

        async def test_content_and_views(self, client: AsyncClient):
            """Should return the exact transcript and count each view."""
            record_id = await _save(client, "line 1\nline 2")

            first = await client.get(f"/api/conversation/{record_id}")
            assert first.status_code == 200
            assert first.json()["content"] == "line 1\nline 2"
            assert first.json()["conversation"]["views"] == 1

            second = await client.get(f"/api/conversation/{record_id}")
            assert second.json()["conversation"]["views"] == 2

        async def test_not_found(self, client: AsyncClient):
            """Unknown ids should return 404."""
            response = await client.get("/api/conversation/non-existent-id")
            assert response.status_code == 404
