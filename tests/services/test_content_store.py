"""Tests for ContentStore."""

import pytest

from omniconvo.config import StorageConfig
from omniconvo.errors import StorageError
from omniconvo.services.content_store import ContentStore


@pytest.fixture
def store(tmp_path):
    """Provide a ContentStore rooted in tmp_path."""
    s = ContentStore()
    s.initialize(StorageConfig(base_path=str(tmp_path / "storage")))
    return s


class TestContentStore:
    """Tests for file-based content storage."""

    class TestInitialize:
        """SUT: ContentStore.initialize"""

        def test_creates_root(self, tmp_path):
            """Initialization should create the storage root."""
            s = ContentStore()
            s.initialize(StorageConfig(base_path=str(tmp_path / "root")))
            assert (tmp_path / "root").is_dir()
            assert s.is_configured

        def test_second_call_noop(self, tmp_path):
            """A second initialize should keep the first root."""
            s = ContentStore()
            s.initialize(StorageConfig(base_path=str(tmp_path / "a")))
            s.initialize(StorageConfig(base_path=str(tmp_path / "b")))
            assert s.base_path == tmp_path / "a"
            assert not (tmp_path / "b").exists()

    class TestStoreConversation:
        """SUT: ContentStore.store_conversation"""

        async def test_returns_sharded_key(self, store):
            """Key should be derived from the content id with a two-char shard."""
            key = await store.store_conversation("abcdef-123", "hello")
            assert key == "conversations/ab/abcdef-123.md"

        async def test_bytes_identical(self, store, tmp_path):
            """Stored bytes should be exactly the UTF-8 encoding of the content."""
            content = "### Human\nCafé ☕\n\n---\n\n### Assistant\n你好"
            key = await store.store_conversation("c0ffee", content)
            assert (tmp_path / "storage" / key).read_bytes() == content.encode("utf-8")

        async def test_write_once(self, store):
            """Writing the same key twice should fail and keep the first content."""
            key = await store.store_conversation("dup-id", "first")
            with pytest.raises(StorageError):
                await store.store_conversation("dup-id", "second")
            assert await store.read_conversation(key) == "first"

        async def test_no_temp_files_left(self, store, tmp_path):
            """Only the final object should remain after a write."""
            await store.store_conversation("ab12", "hello")
            files = [p.name for p in (tmp_path / "storage" / "conversations" / "ab").iterdir()]
            assert files == ["ab12.md"]

        async def test_uninitialized(self):
            """Writing before initialization should raise StorageError."""
            with pytest.raises(StorageError):
                await ContentStore().store_conversation("x1", "hello")

    class TestReadConversation:
        """SUT: ContentStore.read_conversation"""

        async def test_round_trip(self, store):
            """Reading a stored key should return the same text."""
            key = await store.store_conversation("r1", "line one\nline two")
            assert await store.read_conversation(key) == "line one\nline two"

        async def test_missing(self, store):
            """Missing objects should raise StorageError."""
            with pytest.raises(StorageError):
                await store.read_conversation("conversations/zz/missing.md")

        async def test_rejects_escape(self, store):
            """Keys resolving outside the root should be rejected."""
            with pytest.raises(StorageError):
                await store.read_conversation("../../etc/passwd")

    class TestWriteFailures:
        """Failures partway through store_conversation."""

        async def test_unencodable_content(self, store, tmp_path):
            """Content with lone surrogates should raise StorageError and leave no files."""
            with pytest.raises(StorageError):
                await store.store_conversation("bad0", "hi \ud800")
            assert list((tmp_path / "storage").rglob("*")) == []

        async def test_temp_file_removed_on_failure(self, store, tmp_path, monkeypatch):
            """A failed move into place should not leave the temp file behind."""
            import omniconvo.services.content_store as module

            def fail(src, dst):
                raise OSError("device busy")

            monkeypatch.setattr(module.os, "replace", fail)
            with pytest.raises(StorageError):
                await store.store_conversation("ab99", "hello")
            assert list((tmp_path / "storage" / "conversations" / "ab").iterdir()) == []
