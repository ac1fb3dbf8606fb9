"""Shared pytest fixtures for chatstream tests."""

import pytest

from chatstream.models.options import CaptureOptions
from chatstream.providers.kinds import ModelIden, ProviderKind


@pytest.fixture
def openai_iden():
    return ModelIden(ProviderKind.OPENAI, "gpt-4o-mini")


@pytest.fixture
def groq_iden():
    return ModelIden(ProviderKind.GROQ, "llama-3.3-70b-versatile")


@pytest.fixture
def xai_iden():
    return ModelIden(ProviderKind.XAI, "grok-3-mini")


@pytest.fixture
def deepseek_iden():
    return ModelIden(ProviderKind.DEEPSEEK, "deepseek-reasoner")


@pytest.fixture
def capture_all():
    return CaptureOptions(
        capture_content=True,
        capture_reasoning_content=True,
        capture_usage=True,
        capture_tools=True,
    )


@pytest.fixture
def capture_none():
    return CaptureOptions()


@pytest.fixture(autouse=True)
def clear_capture_env(monkeypatch):
    """Keep CHATSTREAM_CAPTURE_* from the developer's shell out of tests."""
    for name in (
        "CHATSTREAM_CAPTURE_CONTENT",
        "CHATSTREAM_CAPTURE_REASONING",
        "CHATSTREAM_CAPTURE_USAGE",
        "CHATSTREAM_CAPTURE_TOOLS",
    ):
        monkeypatch.delenv(name, raising=False)


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: exercises the public entry points end to end")
