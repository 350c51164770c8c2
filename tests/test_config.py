"""
Tests for environment configuration.
"""

from prompt_architect.constants import DEFAULT_GEMINI_MODEL
from prompt_architect.utils.config import Config


def test_reads_api_key_and_model(monkeypatch):
    monkeypatch.setenv("GOOGLE_AI_API_KEY", "test_google_key")
    monkeypatch.setenv("GOOGLE_AI_MODEL", "gemini-pro")

    app_config = Config()

    assert app_config.google_ai_api_key == "test_google_key"
    assert app_config.google_ai_model == "gemini-pro"
    assert app_config.has_api_key is True


def test_model_defaults_and_missing_key(monkeypatch):
    monkeypatch.setattr("prompt_architect.utils.config.load_dotenv", lambda *args, **kwargs: False)
    monkeypatch.delenv("GOOGLE_AI_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_AI_MODEL", raising=False)

    app_config = Config()

    assert app_config.google_ai_api_key is None
    assert app_config.google_ai_model == DEFAULT_GEMINI_MODEL
    assert app_config.has_api_key is False


def test_log_level_is_uppercased(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert Config().log_level == "DEBUG"


def test_exposes_only_runtime_settings(monkeypatch):
    monkeypatch.setenv("GOOGLE_AI_API_KEY", "test_google_key")

    app_config = Config()

    assert set(vars(app_config)) == {
        "env", "google_ai_api_key", "google_ai_model", "log_level", "log_format",
    }
