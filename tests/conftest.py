"""Shared test fixtures and configuration."""
import asyncio
import pytest
from pathlib import Path
from fastapi.testclient import TestClient

from jarvis.main import app
from jarvis.core.config import Settings
from jarvis.core.dependencies import get_provider_chain, get_rate_limiter, get_settings
from jarvis.services.llm.base import LLMProvider
from jarvis.services.llm.chain import ProviderChain
from jarvis.services.menu.repository import MenuRepository
from jarvis.services.menu.in_memory_menu import InMemoryMenuProvider
from jarvis.services.ratelimit.limiter import RateLimiter, RateLimitStore


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


class FakeProvider(LLMProvider):
    """Provider that returns a canned reply or raises, recording every call."""

    def __init__(self, name: str, reply: str = "", error: Exception = None, delay: float = 0.0):
        self.name = name
        self.reply = reply
        self.error = error
        self.delay = delay
        self.calls = []

    async def invoke(self, history, system_prompt):
        self.calls.append((list(history), system_prompt))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def test_menu_path():
    """Return path to test menu YAML file."""
    return Path(__file__).parent / "fixtures" / "test_menu.yaml"


@pytest.fixture
def test_settings(test_menu_path):
    """Settings for testing, isolated from the environment's .env file."""
    return Settings(
        _env_file=None,
        gemini_api_key=None,
        groq_api_key=None,
        cohere_api_key=None,
        claude_api_key=None,
        canteen_name="Test Canteen",
        admin_username="admin",
        admin_password="testpass123",
        menu_file=str(test_menu_path),
        provider_timeout_seconds=1.0,
    )


@pytest.fixture
def test_menu_repository(test_menu_path):
    """Create menu repository with test data."""
    provider = InMemoryMenuProvider(menu_file=str(test_menu_path))
    return MenuRepository(provider)


@pytest.fixture
def fake_clock():
    """Clock starting at t=0 ms."""
    return FakeClock()


@pytest.fixture
def rate_limiter(fake_clock):
    """Rate limiter with its own store and a fake clock."""
    return RateLimiter(store=RateLimitStore(), clock=fake_clock)


@pytest.fixture
def provider_factory():
    """Build fake providers: provider_factory("Gemini", reply="Hi")."""
    return FakeProvider


@pytest.fixture
def gemini_provider():
    """Fake first provider that always answers."""
    return FakeProvider("Gemini", reply="Namaste! Kya order karoge? 😊")


@pytest.fixture
def fake_chain(gemini_provider):
    """Provider chain backed by the fake Gemini provider."""
    return ProviderChain([gemini_provider], timeout_seconds=1.0)


@pytest.fixture
def test_client(test_settings, fake_chain, rate_limiter):
    """Create FastAPI test client with overrides."""
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_provider_chain] = lambda: fake_chain
    app.dependency_overrides[get_rate_limiter] = lambda: rate_limiter

    client = TestClient(app)

    yield client

    # Clear overrides
    app.dependency_overrides.clear()
