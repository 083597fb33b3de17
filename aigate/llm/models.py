from dataclasses import dataclass


@dataclass(frozen=True)
class LlmResponse:
    """Provider response text plus the token counts used for cost tracking."""

    text: str
    model: str
    input_tokens: int = 0
    output_tokens: int = 0
