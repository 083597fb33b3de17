"""Example LLM client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseLlmClient and register the provider in LlmClientFactory.
"""

import json
from typing import ClassVar

from aigate.llm.client_base import BaseLlmClient
from aigate.llm.models import LlmResponse


class ExampleClientAdapter(BaseLlmClient):
    """Example adapter that returns fixed valid JSON per schema name.

    No network calls and no token usage. Useful for local development and
    tests.
    """

    DEFAULT_RESPONSES: ClassVar[dict[str, object]] = {
        "contract_terms": {
            "maxHours": None,
            "maxBudget": None,
            "budgetCurrency": None,
            "deadline": None,
            "scopeDescription": None,
            "scopeKeywords": [],
            "exclusions": [],
        },
        "insights": {"insights": []},
    }

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
        _ = temperature, system_prompt, user_prompt, json_schema, max_tokens
        return LlmResponse(
            text=json.dumps(self.DEFAULT_RESPONSES.get(schema_name, {})),
            model=model,
        )
