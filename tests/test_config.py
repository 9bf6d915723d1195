"""Tests for environment-driven configuration."""

import pytest

from config import DEFAULT_CLOUD_NAME, CloudinaryConfig, env_value, load_config

ENV_NAMES = [
    "CLOUDINARY_CLOUD_NAME", "CLOUDINARY_API_KEY", "CLOUDINARY_API_SECRET",
    "ENVIRONMENT", "SENTRY_DSN", "GEMINI_API_KEY",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # set-then-delete so variables loaded from .env files are removed afterwards
    for name in ENV_NAMES:
        for key in (name, f"REACT_APP_{name}"):
            monkeypatch.setenv(key, "placeholder")
            monkeypatch.delenv(key)


class TestEnvValue:
    def test_plain_name_wins(self, monkeypatch):
        monkeypatch.setenv("SENTRY_DSN", "https://plain")
        monkeypatch.setenv("REACT_APP_SENTRY_DSN", "https://react")
        assert env_value("SENTRY_DSN") == "https://plain"

    def test_react_app_fallback(self, monkeypatch):
        monkeypatch.setenv("REACT_APP_CLOUDINARY_API_KEY", "react-key")
        assert env_value("CLOUDINARY_API_KEY") == "react-key"

    def test_blank_counts_as_unset(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "   ")
        assert env_value("ENVIRONMENT", "development") == "development"


class TestLoadConfig:
    def test_defaults(self, tmp_path):
        config = load_config(root=tmp_path, load_files=False)
        assert config.cloudinary.cloud_name == DEFAULT_CLOUD_NAME
        assert config.cloudinary.missing_credentials() == [
            "CLOUDINARY_API_KEY", "CLOUDINARY_API_SECRET"]
        assert config.environment == "development"
        assert config.gemini_api_key is None
        assert config.catalog_path == tmp_path / "assets" / "catalog.json"
        assert config.generated_dir == tmp_path / "generated-assets"

    def test_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CLOUDINARY_CLOUD_NAME", "acme")
        monkeypatch.setenv("REACT_APP_CLOUDINARY_API_KEY", "k")
        monkeypatch.setenv("CLOUDINARY_API_SECRET", "s")
        monkeypatch.setenv("ENVIRONMENT", "production")
        config = load_config(root=tmp_path, load_files=False)
        assert config.cloudinary == CloudinaryConfig(cloud_name="acme", api_key="k", api_secret="s")
        assert config.environment == "production"

    def test_env_files(self, monkeypatch, tmp_path):
        (tmp_path / ".env.local").write_text("CLOUDINARY_API_KEY=local-key\n")
        (tmp_path / ".env").write_text(
            "CLOUDINARY_API_KEY=shared-key\nCLOUDINARY_API_SECRET=shared-secret\nENVIRONMENT=staging\n")
        monkeypatch.setenv("ENVIRONMENT", "ci")

        config = load_config(root=tmp_path)
        assert config.cloudinary.api_key == "local-key"
        assert config.cloudinary.api_secret == "shared-secret"
        assert config.environment == "ci"
