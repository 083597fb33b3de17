from aigate.budget.models import ModelPricing
from aigate.logging.logger import Log

PRICING: dict[str, ModelPricing] = {
    "gpt-4o-mini": ModelPricing(input=0.015, output=0.06),
    "gpt-4o": ModelPricing(input=0.25, output=1.0),
    "gpt-4.1-mini": ModelPricing(input=0.04, output=0.16),
    "gpt-4.1": ModelPricing(input=0.2, output=0.8),
}

DEFAULT_PRICING = ModelPricing(input=0.3, output=1.5)


def pricing_for(model: str) -> ModelPricing:
    """Look up a model's price; unknown models fall back to DEFAULT_PRICING."""
    pricing = PRICING.get(model)
    if pricing is None:
        Log.warning(f"No pricing for model '{model}', using default tier")
        return DEFAULT_PRICING
    return pricing


def compute_cost_cents(model: str, input_tokens: int, output_tokens: int) -> float:
    pricing = pricing_for(model)
    return (
        input_tokens / 1000 * pricing.input
        + output_tokens / 1000 * pricing.output
    )
