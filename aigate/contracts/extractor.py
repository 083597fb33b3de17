"""Contract-terms extraction: budget check -> redact -> LLM -> track -> validate."""

import json

from aigate.budget.exceptions import BudgetExceededError
from aigate.budget.factory import BudgetGateFactory
from aigate.budget.gate import BudgetGate
from aigate.config.settings import Settings
from aigate.contracts.models import ContractExtraction
from aigate.contracts.validator import validate_and_build_terms
from aigate.llm.client_base import BaseLlmClient
from aigate.llm.factory import LlmClientFactory
from aigate.llm.prompt_loader import load_json_schema, load_prompt_template
from aigate.llm.response_parser import parse_json_response
from aigate.logging.logger import Log
from aigate.redaction.factory import RedactionPipelineFactory
from aigate.redaction.models import KnownNames
from aigate.redaction.pipeline import RedactionPipeline

ENDPOINT = "extract-terms"
SYSTEM_PROMPT = "You are a contract analysis assistant. Return only JSON."
MAX_TOKENS = 1024


class ContractTermsExtractor:
    """Extracts commercial terms from a contract without leaking PII."""

    def __init__(
        self,
        *,
        budget_gate: BudgetGate,
        redaction_pipeline: RedactionPipeline,
        client: BaseLlmClient,
        model: str,
    ) -> None:
        self._budget_gate = budget_gate
        self._redaction_pipeline = redaction_pipeline
        self._client = client
        self._model = model
        self._prompt_template = load_prompt_template("contract_terms")
        schema_str = load_json_schema("contract_terms")
        self._json_schema = schema_str
        self._json_schema_dict = json.loads(schema_str)

    def extract(
        self,
        company_id: str,
        document_bytes: bytes,
        known_names: KnownNames,
    ) -> ContractExtraction:
        """Run the full extraction for one contract document.

        Raises:
            BudgetExceededError: if the company has hit a spend cap.
            PdfExtractionError: if the document cannot be read.
            LlmError: if the provider call fails or returns invalid terms.
        """
        status = self._budget_gate.check_budget(company_id)
        if not status.allowed:
            raise BudgetExceededError(company_id, status)

        redaction = self._redaction_pipeline.redact_contract_text(document_bytes, known_names)
        if redaction.is_scanned_pdf:
            Log.info(f"Skipping term extraction for company {company_id}: scanned PDF")
            return ContractExtraction(is_scanned_pdf=True, stats=redaction.stats)

        response = self._client.create_chat_completion(
            model=self._model,
            temperature=0.0,
            system_prompt=SYSTEM_PROMPT,
            user_prompt=self._prompt_template.format(
                json_schema=self._json_schema,
                contract_text=redaction.redacted_text,
            ),
            json_schema=self._json_schema_dict,
            schema_name="contract_terms",
            max_tokens=MAX_TOKENS,
        )
        cost_cents = self._budget_gate.track_usage(
            company_id,
            ENDPOINT,
            self._model,
            response.input_tokens,
            response.output_tokens,
        )

        terms = validate_and_build_terms(parse_json_response(response.text))
        Log.info(f"Extracted contract terms for company {company_id}")
        return ContractExtraction(
            is_scanned_pdf=False,
            stats=redaction.stats,
            terms=terms,
            cost_cents=cost_cents,
        )


def build_contract_terms_extractor(settings: Settings) -> ContractTermsExtractor:
    """Build a ContractTermsExtractor with all required adapters."""
    return ContractTermsExtractor(
        budget_gate=BudgetGateFactory.create(settings),
        redaction_pipeline=RedactionPipelineFactory.create(settings),
        client=LlmClientFactory.create(settings),
        model=settings.contract_terms_model,
    )
