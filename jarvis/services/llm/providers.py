"""Concrete LLM providers used by the fallback chain."""
from typing import Optional, Sequence

import httpx
from anthropic import AsyncAnthropic
from google import genai
from google.genai import types
from openai import AsyncOpenAI

from jarvis.core.config import Settings
from jarvis.services.llm.base import ChatMessage, LLMProvider, ProviderError


GROQ_BASE_URL = "https://api.groq.com/openai/v1"
COHERE_CHAT_URL = "https://api.cohere.com/v2/chat"


class GeminiProvider(LLMProvider):
    """Google Gemini via the google-genai SDK."""

    name = "Gemini"

    def __init__(self, api_key: Optional[str], model: str, client: Optional[genai.Client] = None):
        self.api_key = api_key
        self.model = model
        self._client = client

    def _get_client(self) -> genai.Client:
        if self._client is None:
            if not self.api_key:
                raise ProviderError("Gemini API key not configured")
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def invoke(self, history: Sequence[ChatMessage], system_prompt: str) -> str:
        client = self._get_client()

        # Gemini has no system turns and calls the assistant "model"
        contents = [
            types.Content(
                role="model" if message.role == "assistant" else "user",
                parts=[types.Part(text=message.content)],
            )
            for message in history
            if message.role != "system"
        ]
        if not contents:
            raise ProviderError("Gemini needs at least one user message")

        response = await client.aio.models.generate_content(
            model=self.model,
            contents=contents,
            config=types.GenerateContentConfig(system_instruction=system_prompt),
        )
        return response.text or ""


class GroqProvider(LLMProvider):
    """Groq through its OpenAI-compatible chat completions endpoint."""

    name = "Groq"

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 1024,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self.api_key:
                raise ProviderError("Groq API key not configured")
            self._client = AsyncOpenAI(api_key=self.api_key, base_url=GROQ_BASE_URL)
        return self._client

    async def invoke(self, history: Sequence[ChatMessage], system_prompt: str) -> str:
        client = self._get_client()
        completion = await client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system_prompt},
                *({"role": message.role, "content": message.content} for message in history),
            ],
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        if not completion.choices:
            return ""
        return completion.choices[0].message.content or ""


class CohereProvider(LLMProvider):
    """Cohere v2 chat API over plain HTTP."""

    name = "Cohere"

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        timeout: float = 20.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._transport = transport

    async def invoke(self, history: Sequence[ChatMessage], system_prompt: str) -> str:
        if not self.api_key:
            raise ProviderError("Cohere API key not configured")

        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                *({"role": message.role, "content": message.content} for message in history),
            ],
        }
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.post(
                COHERE_CHAT_URL,
                json=payload,
                headers={"Authorization": f"Bearer {self.api_key}"},
            )
            response.raise_for_status()
            data = response.json()

        content = (data.get("message") or {}).get("content")
        if isinstance(content, list):
            return "".join(
                block if isinstance(block, str) else block.get("text", "")
                for block in content
            )
        if isinstance(content, str):
            return content
        raise ProviderError(f"Unexpected Cohere response shape: {type(content).__name__}")


class ClaudeProvider(LLMProvider):
    """Anthropic Claude via the anthropic SDK."""

    name = "Claude"

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        max_tokens: int = 1024,
        client: Optional[AsyncAnthropic] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self._client = client

    def _get_client(self) -> AsyncAnthropic:
        if self._client is None:
            if not self.api_key:
                raise ProviderError("Claude API key not configured")
            self._client = AsyncAnthropic(api_key=self.api_key)
        return self._client

    async def invoke(self, history: Sequence[ChatMessage], system_prompt: str) -> str:
        client = self._get_client()
        response = await client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            system=system_prompt,
            messages=[
                {
                    "role": "user" if message.role == "system" else message.role,
                    "content": message.content,
                }
                for message in history
            ],
        )
        if not response.content:
            return ""
        block = response.content[0]
        return block.text if block.type == "text" else ""


def build_default_providers(config: Settings) -> list[LLMProvider]:
    """Providers in fallback order: Gemini, Groq, Cohere, Claude."""
    return [
        GeminiProvider(api_key=config.gemini_api_key, model=config.gemini_model),
        GroqProvider(
            api_key=config.groq_api_key,
            model=config.groq_model,
            temperature=config.llm_temperature,
            max_tokens=config.llm_max_tokens,
        ),
        CohereProvider(
            api_key=config.cohere_api_key,
            model=config.cohere_model,
            timeout=config.provider_timeout_seconds,
        ),
        ClaudeProvider(
            api_key=config.claude_api_key,
            model=config.claude_model,
            max_tokens=config.llm_max_tokens,
        ),
    ]
