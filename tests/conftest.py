"""
Pytest configuration and fixtures.
"""
import pytest

from src.core import Settings, get_settings, limiter
from src.core.health import get_health_monitor
import src.services.generator.service as generator_module
import src.services.llm_client.client as llm_client_module


@pytest.fixture
def clean_environment(monkeypatch):
    """Provide a clean environment for tests."""
    env_vars = [
        "MEGALLM_API_KEY",
        "MEGALLM_MODEL",
        "MEGALLM_API_URL",
        "PORT",
        "RATE_LIMIT_REQUESTS",
        "RATE_LIMIT_PERIOD_SECONDS",
    ]
    for var in env_vars:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Drop cached settings, clients and health state between tests."""
    get_settings.cache_clear()
    get_health_monitor().reset()
    limiter.reset()
    llm_client_module._llm_client = None
    generator_module._generator = None
    yield
    get_settings.cache_clear()
    get_health_monitor().reset()
    limiter.reset()
    llm_client_module._llm_client = None
    generator_module._generator = None


@pytest.fixture
def anthropic_settings():
    """Settings pointing at the Anthropic Messages API."""
    return Settings(
        megallm_api_key="test-key",
        megallm_model="claude-test",
        megallm_api_url="https://api.anthropic.com/v1/messages",
    )


@pytest.fixture
def openai_settings():
    """Settings pointing at an OpenAI-compatible endpoint."""
    return Settings(
        megallm_api_key="test-key",
        megallm_model="gpt-test",
        megallm_api_url="https://ai.megallm.io/v1/chat/completions",
    )


@pytest.fixture
def unconfigured_settings():
    """Settings with no API key."""
    return Settings(megallm_api_key=None)


@pytest.fixture
def structure_payload():
    """A small but complete stage-1 presentation."""
    return {
        "title": "Renewable Energy",
        "subtitle": "Powering the Future",
        "slides": [
            {
                "type": "title",
                "title": "Renewable Energy",
                "content": ["Why it matters"],
                "notes": "Open with the big picture",
            },
            {
                "type": "chart",
                "title": "Global Capacity",
                "content": ["Solar leads growth"],
                "notes": "Walk through the numbers",
                "chartData": {
                    "type": "bar",
                    "labels": ["Solar", "Wind", "Hydro"],
                    "values": [1200, 900, 1300],
                    "label": "GW installed",
                },
            },
            {
                "type": "quote",
                "title": "Perspective",
                "content": [],
                "notes": "Pause here",
                "quote": {"text": "The stone age did not end for lack of stone.", "author": "Ahmed Zaki Yamani"},
            },
        ],
        "theme": {
            "primaryColor": "#0f766e",
            "secondaryColor": "#facc15",
            "backgroundColor": "#ffffff",
            "textColor": "#111827",
        },
    }


@pytest.fixture
def enhancement_payload():
    """A stage-2 enhancement result covering the first two slides."""
    return {
        "enhancedSlides": [
            {"slideIndex": 0, "enhancedNotes": "Set the scene", "transition": "Let's look at the data"},
            {"slideIndex": 1, "enhancedNotes": "Highlight solar", "transition": "Now a quote"},
        ],
        "keyTakeaways": ["Solar is growing fastest", "Storage is the bottleneck"],
    }
