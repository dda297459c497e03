"""Tests for settings loading."""

import pytest

from swift_object.config import ObjectSettings, load_settings
from swift_object.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "SWIFT_OBJECT_CACHING",
        "SWIFT_OBJECT_VERIFY_CONTENT",
        "SWIFT_OBJECT_TIMEOUT",
        "SWIFT_OBJECT_INSECURE",
    ):
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:
    """Test YAML and environment settings."""

    def test_defaults(self):
        settings = load_settings()

        assert settings == ObjectSettings()
        assert settings.metadata_prefix == "X-Object-Meta-"
        assert not settings.caching
        assert settings.content_verification

    def test_nested_yaml(self, tmp_path):
        cfg = tmp_path / "swift.yaml"
        cfg.write_text("object:\n  caching: true\n  timeout: 5\n")

        settings = load_settings(cfg)

        assert settings.caching
        assert settings.timeout == 5.0

    def test_flat_yaml(self, tmp_path):
        cfg = tmp_path / "swift.yaml"
        cfg.write_text("content_verification: false\n")

        assert not load_settings(cfg).content_verification

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        cfg = tmp_path / "swift.yaml"
        cfg.write_text("caching: true\n")
        monkeypatch.setenv("SWIFT_OBJECT_CACHING", "false")
        monkeypatch.setenv("SWIFT_OBJECT_INSECURE", "yes")
        monkeypatch.setenv("SWIFT_OBJECT_TIMEOUT", "2.5")

        settings = load_settings(cfg)

        assert not settings.caching
        assert not settings.verify_tls
        assert settings.timeout == 2.5

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_settings(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        cfg = tmp_path / "swift.yaml"
        cfg.write_text("caching: [unclosed\n")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_settings(cfg)

    def test_invalid_value(self, tmp_path):
        cfg = tmp_path / "swift.yaml"
        cfg.write_text("timeout: -1\n")

        with pytest.raises(ConfigError, match="Invalid swift-object settings"):
            load_settings(cfg)
