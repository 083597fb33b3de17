import httpx
import openai

from aigate.llm.client_base import BaseLlmClient
from aigate.llm.exceptions import LlmNetworkError, LlmResponseError
from aigate.llm.models import LlmResponse


class OpenAIClientAdapter(BaseLlmClient):
    """LLM client adapter built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

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
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": schema_name,
                        "strict": True,
                        "schema": json_schema,
                    },
                },
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise LlmNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise LlmNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise LlmResponseError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise LlmResponseError("AI returned empty response")

        usage = response.usage
        return LlmResponse(
            text=content,
            model=response.model or model,
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
        )
