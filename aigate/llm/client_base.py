from abc import ABC, abstractmethod

from aigate.llm.models import LlmResponse


class BaseLlmClient(ABC):
    """Contract for provider-specific LLM clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
        schema_name: str,
        max_tokens: int,
    ) -> LlmResponse:
        """Return provider response text and token usage."""
