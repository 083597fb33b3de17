"""Tests for LlmClientFactory."""

from unittest.mock import patch

import pytest

from aigate.config.settings import Settings
from aigate.llm.example_client_adapter import ExampleClientAdapter
from aigate.llm.factory import LlmClientFactory


class TestLlmClientFactory:
    def test_creates_example_adapter(self) -> None:
        client = LlmClientFactory.create(Settings(llm_provider="example"))
        assert isinstance(client, ExampleClientAdapter)

    def test_uses_openai_settings(self) -> None:
        settings = Settings(
            llm_provider="openai",
            llm_api_key="openai-key",
            llm_timeout_seconds=42,
        )
        with patch("aigate.llm.factory.OpenAIClientAdapter") as mock_adapter:
            LlmClientFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="openai-key",
            timeout_seconds=42,
            base_url=None,
        )

    def test_uses_provider_default_base_url_for_openrouter(self) -> None:
        settings = Settings(llm_provider="OpenRouter", llm_api_key="k")
        with patch("aigate.llm.factory.OpenAIClientAdapter") as mock_adapter:
            LlmClientFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="k",
            timeout_seconds=30,
            base_url="https://openrouter.ai/api/v1",
        )

    def test_base_url_override_wins(self) -> None:
        settings = Settings(llm_provider="groq", llm_base_url="http://proxy.local/v1")
        with patch("aigate.llm.factory.OpenAIClientAdapter") as mock_adapter:
            LlmClientFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "http://proxy.local/v1"

    def test_openai_compatible_requires_base_url(self) -> None:
        with pytest.raises(ValueError, match="llm_base_url is required"):
            LlmClientFactory.create(Settings(llm_provider="openai_compatible"))

    def test_raises_for_unknown_provider(self) -> None:
        with pytest.raises(ValueError, match="Unknown LLM provider"):
            LlmClientFactory.create(Settings(llm_provider="nope"))
