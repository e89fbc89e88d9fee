"""
Tests for environment-driven settings.
"""

from graphmap.config import Settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        for name in ("DEBUG", "LOG_LEVEL", "STRICT_LINKS", "TYPE_LINKS_CONFIG_PATH"):
            monkeypatch.delenv(f"GRAPHMAP_{name}", raising=False)

        settings = Settings(_env_file=None)

        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.strict_links is True
        assert settings.type_links_config_path is None

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("GRAPHMAP_STRICT_LINKS", "false")
        monkeypatch.setenv("graphmap_type_links_config_path", "/etc/graphmap/links.yaml")

        settings = Settings(_env_file=None)

        assert settings.strict_links is False
        assert settings.type_links_config_path == "/etc/graphmap/links.yaml"

    def test_registry_uses_strict_setting(self, monkeypatch):
        from graphmap import TypeRegistry, config

        monkeypatch.setattr(config.settings, "strict_links", False)

        assert TypeRegistry().strict is False
        assert TypeRegistry(strict=True).strict is True
