"""Tests for learnify.settings."""
import pytest

from learnify.settings import DEFAULT_MODEL, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("GOOGLE_API_KEY", "GEMINI_API_KEY", "CHAT_MODEL", "PLANNER_LANGUAGE", "PLANNER_TEMPERATURE"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = load_settings()
    assert settings.api_key is None
    assert settings.model == DEFAULT_MODEL
    assert settings.language == "id"
    assert settings.temperature is None


def test_environment(monkeypatch) -> None:
    monkeypatch.setenv("GOOGLE_API_KEY", "google-key")
    monkeypatch.setenv("GEMINI_API_KEY", "gemini-key")
    monkeypatch.setenv("CHAT_MODEL", "gemini-2.0-flash")
    monkeypatch.setenv("PLANNER_LANGUAGE", "en")
    monkeypatch.setenv("PLANNER_TEMPERATURE", "0.4")

    settings = load_settings()

    assert settings.api_key == "google-key"
    assert settings.model == "gemini-2.0-flash"
    assert settings.language == "en"
    assert settings.temperature == 0.4


def test_arguments_override_environment(monkeypatch) -> None:
    monkeypatch.setenv("PLANNER_LANGUAGE", "en")
    settings = load_settings(model="custom-model", language="id", temperature=1.0)
    assert settings.model == "custom-model"
    assert settings.language == "id"


def test_invalid_values_rejected() -> None:
    with pytest.raises(ValueError):
        load_settings(language="fr")
    with pytest.raises(ValueError):
        load_settings(temperature=5.0)
