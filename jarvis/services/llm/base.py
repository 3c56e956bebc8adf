"""LLM provider interface."""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Literal, Optional, Sequence
from pydantic import BaseModel, ConfigDict


class ChatMessage(BaseModel):
    """One turn of a conversation."""

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant", "system"]
    content: str
    timestamp: Optional[datetime] = None


class ProviderResult(BaseModel):
    """Reply text and the name of the provider that produced it."""

    response_text: str
    provider_name: str


class ProviderError(Exception):
    """Raised when a provider cannot produce a reply."""


class LLMProvider(ABC):
    """A conversational-AI backend the fallback chain can ask for a reply."""

    name: str

    @abstractmethod
    async def invoke(self, history: Sequence[ChatMessage], system_prompt: str) -> str:
        """
        Get a reply for the conversation.

        Args:
            history: Conversation so far, oldest first
            system_prompt: Instructions for the assistant

        Returns:
            Reply text (may be empty)

        Raises:
            ProviderError: If the provider is not configured or its answer is unusable
        """
        pass
