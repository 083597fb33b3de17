"""Insight generation: budget check -> anonymize -> LLM -> track -> restore names."""

import json
from dataclasses import asdict

from aigate.budget.exceptions import BudgetExceededError
from aigate.budget.factory import BudgetGateFactory
from aigate.budget.gate import BudgetGate
from aigate.config.settings import Settings
from aigate.insights.anonymizer import StructuredAnonymizer
from aigate.insights.deanonymizer import Deanonymizer
from aigate.insights.models import GeneratedInsight, InsightDataPackage
from aigate.insights.validator import validate_and_build_insights
from aigate.llm.client_base import BaseLlmClient
from aigate.llm.factory import LlmClientFactory
from aigate.llm.prompt_loader import load_json_schema, load_prompt_template
from aigate.llm.response_parser import parse_json_response
from aigate.logging.logger import Log

ENDPOINT = "generate-insights"
SYSTEM_PROMPT = (
    "You are a friendly, supportive business advisor for a professional "
    "services company. Return only JSON."
)
MAX_TOKENS = 2048


class InsightGenerator:
    """Generates company insights from pseudonymized data only."""

    def __init__(
        self,
        *,
        budget_gate: BudgetGate,
        client: BaseLlmClient,
        model: str,
        anonymizer: StructuredAnonymizer | None = None,
        deanonymizer: Deanonymizer | None = None,
    ) -> None:
        self._budget_gate = budget_gate
        self._client = client
        self._model = model
        self._anonymizer = anonymizer or StructuredAnonymizer()
        self._deanonymizer = deanonymizer or Deanonymizer()
        self._prompt_template = load_prompt_template("insights")
        schema_str = load_json_schema("insights")
        self._json_schema = schema_str
        self._json_schema_dict = json.loads(schema_str)

    def generate(self, company_id: str, data: InsightDataPackage) -> list[GeneratedInsight]:
        """Return insights with real names restored.

        Raises:
            BudgetExceededError: if the company has hit a spend cap.
            LlmError: if the provider call fails or returns invalid insights.
        """
        status = self._budget_gate.check_budget(company_id)
        if not status.allowed:
            raise BudgetExceededError(company_id, status)

        anonymized = self._anonymizer.anonymize(data)
        payload = json.dumps(asdict(anonymized.anonymized_data), indent=2, default=str)

        response = self._client.create_chat_completion(
            model=self._model,
            temperature=0.2,
            system_prompt=SYSTEM_PROMPT,
            user_prompt=self._prompt_template.format(
                json_schema=self._json_schema,
                insight_data=payload,
            ),
            json_schema=self._json_schema_dict,
            schema_name="insights",
            max_tokens=MAX_TOKENS,
        )
        self._budget_gate.track_usage(
            company_id,
            ENDPOINT,
            self._model,
            response.input_tokens,
            response.output_tokens,
        )

        insights = validate_and_build_insights(parse_json_response(response.text))
        Log.info(f"Generated {len(insights)} insights for company {company_id}")
        return self._deanonymizer.deanonymize(insights, anonymized.map)


def build_insight_generator(settings: Settings) -> InsightGenerator:
    """Build an InsightGenerator with all required adapters."""
    return InsightGenerator(
        budget_gate=BudgetGateFactory.create(settings),
        client=LlmClientFactory.create(settings),
        model=settings.insights_model,
    )
