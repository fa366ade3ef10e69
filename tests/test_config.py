"""Tests for configuration loading."""

from omniconvo.config import Settings, load_config


class TestSettings:
    """SUT: Settings"""

    def test_defaults(self):
        """Unset fields should fall back to defaults."""
        s = Settings(_env_file=None)
        assert s.port == 3000
        assert s.conversation_model == "Claude"

    def test_reads_environment(self, monkeypatch):
        """Environment variables should override defaults, case-insensitively."""
        monkeypatch.setenv("BASE_URL", "https://example.org")
        monkeypatch.setenv("storage_path", "/srv/convos")
        s = Settings(_env_file=None)
        assert s.base_url == "https://example.org"
        assert s.storage_path == "/srv/convos"


class TestLoadConfig:
    """SUT: load_config"""

    def test_maps_settings(self):
        """Settings should map onto the structured runtime config."""
        s = Settings(
            _env_file=None,
            database_path="/tmp/x.db",
            storage_path="/tmp/storage",
            base_url="https://example.org/",
            conversation_model="ChatGPT",
        )
        config = load_config(s)
        assert config.database.path == "/tmp/x.db"
        assert config.storage.base_path == "/tmp/storage"
        assert config.base_url == "https://example.org"
        assert config.model == "ChatGPT"
