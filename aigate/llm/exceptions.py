class LlmError(Exception):
    """Raised when an LLM call fails."""


class LlmNetworkError(LlmError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class LlmResponseError(LlmError):
    """Raised when the AI provider returns an unusable response."""


class ResponseValidationError(LlmResponseError):
    """Raised when parsed LLM output fails domain validation."""
