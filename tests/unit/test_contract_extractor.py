"""Tests for the contract-terms extraction workflow."""

import json
from unittest.mock import MagicMock, patch

import pytest

from aigate.budget.exceptions import BudgetExceededError
from aigate.budget.models import BudgetStatus
from aigate.config.settings import Settings
from aigate.contracts.extractor import (
    ContractTermsExtractor,
    build_contract_terms_extractor,
)
from aigate.llm.exceptions import LlmNetworkError, ResponseValidationError
from aigate.llm.models import LlmResponse
from aigate.redaction.models import KnownNames, RedactionResult, RedactionStats

NAMES = KnownNames(company_name="Acme ApS", employee_names=["Anders Holm"])
STATS = RedactionStats(original_length=900, chunks_kept=4, chunks_total=4, redactions_applied=3)


def _status(allowed: bool = True) -> BudgetStatus:
    return BudgetStatus(
        allowed=allowed,
        daily_used=0.0 if allowed else 500.0,
        monthly_used=0.0,
        daily_limit=500,
        monthly_limit=5000,
    )


def _terms_json(**overrides: object) -> str:
    data: dict[str, object] = {
        "maxHours": 400,
        "maxBudget": 250000,
        "budgetCurrency": "DKK",
        "deadline": "2025-12-31",
        "scopeDescription": "Design work for [COMPANY].",
        "scopeKeywords": ["design"],
        "exclusions": [],
    }
    data.update(overrides)
    return json.dumps(data)


def _make_extractor(
    *,
    allowed: bool = True,
    scanned: bool = False,
    response_text: str | None = None,
) -> tuple[ContractTermsExtractor, MagicMock, MagicMock, MagicMock]:
    gate = MagicMock()
    gate.check_budget.return_value = _status(allowed)
    gate.track_usage.return_value = 0.06

    pipeline = MagicMock()
    pipeline.redact_contract_text.return_value = RedactionResult(
        redacted_text="" if scanned else "[PERSON_1] works for [COMPANY] for 400 hours.",
        is_scanned_pdf=scanned,
        stats=STATS,
    )

    client = MagicMock()
    client.create_chat_completion.return_value = LlmResponse(
        text=response_text if response_text is not None else _terms_json(),
        model="gpt-4o-mini",
        input_tokens=2000,
        output_tokens=500,
    )

    extractor = ContractTermsExtractor(
        budget_gate=gate,
        redaction_pipeline=pipeline,
        client=client,
        model="gpt-4o-mini",
    )
    return extractor, gate, pipeline, client


class TestExtractSuccess:
    def test_returns_validated_terms(self) -> None:
        extractor, _gate, _pipeline, _client = _make_extractor()
        result = extractor.extract("c-1", b"%PDF", NAMES)
        assert result.is_scanned_pdf is False
        assert result.terms is not None
        assert result.terms.max_hours == 400.0
        assert result.terms.budget_currency == "DKK"
        assert result.stats == STATS
        assert result.cost_cents == 0.06

    def test_sends_only_redacted_text(self) -> None:
        extractor, _gate, _pipeline, client = _make_extractor()
        extractor.extract("c-1", b"%PDF", NAMES)
        kwargs = client.create_chat_completion.call_args.kwargs
        assert "[PERSON_1] works for [COMPANY]" in kwargs["user_prompt"]
        assert "Anders" not in kwargs["user_prompt"]
        assert "Acme" not in kwargs["user_prompt"]

    def test_calls_llm_with_model_and_schema(self) -> None:
        extractor, _gate, _pipeline, client = _make_extractor()
        extractor.extract("c-1", b"%PDF", NAMES)
        kwargs = client.create_chat_completion.call_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["temperature"] == 0.0
        assert kwargs["schema_name"] == "contract_terms"
        assert "maxHours" in kwargs["json_schema"]["properties"]

    def test_tracks_usage_after_call(self) -> None:
        extractor, gate, _pipeline, _client = _make_extractor()
        extractor.extract("c-1", b"%PDF", NAMES)
        gate.track_usage.assert_called_once_with(
            "c-1", "extract-terms", "gpt-4o-mini", 2000, 500
        )

    def test_passes_known_names_to_redaction(self) -> None:
        extractor, _gate, pipeline, _client = _make_extractor()
        extractor.extract("c-1", b"%PDF", NAMES)
        pipeline.redact_contract_text.assert_called_once_with(b"%PDF", NAMES)

    def test_accepts_fenced_json(self) -> None:
        extractor, _gate, _pipeline, _client = _make_extractor(
            response_text=f"```json\n{_terms_json(maxHours=None)}\n```"
        )
        result = extractor.extract("c-1", b"%PDF", NAMES)
        assert result.terms is not None
        assert result.terms.max_hours is None


class TestExtractShortCircuits:
    def test_budget_exceeded_raises_before_redaction(self) -> None:
        extractor, gate, pipeline, client = _make_extractor(allowed=False)
        with pytest.raises(BudgetExceededError) as exc_info:
            extractor.extract("c-1", b"%PDF", NAMES)
        assert exc_info.value.status.daily_used == 500.0
        pipeline.redact_contract_text.assert_not_called()
        client.create_chat_completion.assert_not_called()
        gate.track_usage.assert_not_called()

    def test_scanned_pdf_skips_llm(self) -> None:
        extractor, gate, _pipeline, client = _make_extractor(scanned=True)
        result = extractor.extract("c-1", b"%PDF", NAMES)
        assert result.is_scanned_pdf is True
        assert result.terms is None
        assert result.cost_cents == 0.0
        client.create_chat_completion.assert_not_called()
        gate.track_usage.assert_not_called()


class TestExtractErrors:
    def test_provider_error_propagates_without_tracking(self) -> None:
        extractor, gate, _pipeline, client = _make_extractor()
        client.create_chat_completion.side_effect = LlmNetworkError("down")
        with pytest.raises(LlmNetworkError):
            extractor.extract("c-1", b"%PDF", NAMES)
        gate.track_usage.assert_not_called()

    def test_invalid_terms_raise_after_tracking(self) -> None:
        extractor, gate, _pipeline, _client = _make_extractor(
            response_text=_terms_json(maxHours="lots")
        )
        with pytest.raises(ResponseValidationError):
            extractor.extract("c-1", b"%PDF", NAMES)
        gate.track_usage.assert_called_once()


class TestBuildContractTermsExtractor:
    def test_wires_configured_components(self) -> None:
        settings = Settings(llm_provider="example", contract_terms_model="gpt-4.1-mini")
        with patch("aigate.contracts.extractor.BudgetGateFactory") as mock_gate_factory:
            extractor = build_contract_terms_extractor(settings)
        mock_gate_factory.create.assert_called_once_with(settings)
        assert isinstance(extractor, ContractTermsExtractor)
        assert extractor._model == "gpt-4.1-mini"
